#!/usr/bin/env python3
"""Smoke test for a running Katsuyo server.

Run the server first:
  python -m katsuyo.main

Then run:
  python scripts/smoke_api.py [BASE_URL]
"""

import json
import sys

import httpx

BASE_URL = "http://localhost:8000"


def call(client: httpx.Client, name: str, method: str, path: str, data: dict | None = None) -> bool:
    """Call an endpoint and print the response."""
    print(f"\n{'='*60}")
    print(f"CHECK: {name}")
    print(f"{'='*60}")
    print(f"{method} {path}")
    if data:
        print(f"Request: {json.dumps(data, ensure_ascii=False)}")

    try:
        if method == "GET":
            response = client.get(path)
        else:
            response = client.post(path, json=data)
    except httpx.ConnectError:
        print("❌ Could not connect to server. Is it running?")
        return False

    print(f"\nStatus: {response.status_code}")
    print(f"Response:\n{json.dumps(response.json(), ensure_ascii=False, indent=2)}")
    return response.status_code == 200


def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else BASE_URL

    with httpx.Client(base_url=base_url, timeout=30) as client:
        if not call(client, "Health Check", "GET", "/health"):
            print("\n⚠️  Server not running. Start with: python -m katsuyo.main")
            return

        call(client, "Ichidan", "POST", "/api/verb/conjugate", {"verb": "食べる"})
        call(client, "Godan - Negative", "POST", "/api/verb/conjugate", {"verb": "書く", "negative": True})
        call(client, "Godan - Polite", "POST", "/api/verb/conjugate", {"verb": "話す", "polite": True})
        call(
            client, "する - Negative Polite",
            "POST", "/api/verb/conjugate",
            {"verb": "する", "negative": True, "polite": True},
        )
        call(client, "Rejected - Not Japanese", "POST", "/api/verb/conjugate", {"verb": "taberu"})

    print("\n" + "="*60)
    print("SMOKE CHECK COMPLETE")
    print("="*60)


if __name__ == "__main__":
    main()
