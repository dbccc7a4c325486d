"""
Settings and configuration for Katsuyo.

Values are read once from the environment at import time.
"""

import os
from pathlib import Path


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


PACKAGE_DIR = Path(__file__).parent
PROJECT_DIR = PACKAGE_DIR.parent.parent

# Directory searched for jmdict-eng*.json / jmdict-eng*.json.gz
DATA_DIR = Path(os.environ.get("KATSUYO_DATA_DIR", PROJECT_DIR / "data"))

# Explicit dictionary file (skips the search when set)
_jmdict_path = os.environ.get("KATSUYO_JMDICT_PATH")
JMDICT_PATH = Path(_jmdict_path) if _jmdict_path else None

# Load the word store at startup; without it every verb with a plausible
# ending is accepted and English falls back to generic phrases
LOAD_DICTIONARY = _flag("KATSUYO_LOAD_DICTIONARY", "true")

# Download the latest jmdict-simplified release when no file is found
JMDICT_AUTO_DOWNLOAD = _flag("KATSUYO_JMDICT_DOWNLOAD", "false")

# Server
HOST = os.environ.get("KATSUYO_HOST", "0.0.0.0")
PORT = int(os.environ.get("KATSUYO_PORT", "8000"))
LOG_LEVEL = os.environ.get("KATSUYO_LOG_LEVEL", "INFO").upper()

# Longest verb accepted by the API
MAX_VERB_LENGTH = 50
