"""
Shared fixtures: a miniature jmdict-simplified file and the store built from it.
"""

import gzip
import json

import pytest

from katsuyo.services.jmdict import JMDictionary


def _word(kanji: list[str], kana: list[str], pos: list[str], glosses: list[str], common: bool = True) -> dict:
    return {
        "kanji": [{"text": k, "common": common} for k in kanji],
        "kana": [{"text": k, "common": common} for k in kana],
        "sense": [{
            "partOfSpeech": pos,
            "misc": [],
            "gloss": [{"lang": "eng", "text": g} for g in glosses],
        }],
    }


MINI_JMDICT = {
    "version": "3.5.0",
    "words": [
        _word(["食べる"], ["たべる"], ["v1", "vt"], ["to eat", "to consume"]),
        _word(["書く"], ["かく"], ["v5k", "vt"], ["to write", "to compose"]),
        _word(["話す"], ["はなす"], ["v5s", "vt"], ["to talk", "to speak"]),
        _word(["走る"], ["はしる"], ["v5r", "vi"], ["to run", "to travel (movement of vehicles)"]),
        _word(["遊ぶ"], ["あそぶ"], ["v5b", "vi"], ["to play", "to enjoy oneself"]),
        _word(["歩く"], ["あるく"], ["v5k", "vi"], ["to walk"]),
        _word(["本"], ["ほん"], ["n"], ["book", "volume"]),
        _word(["会う"], ["あう"], ["v5u", "vi"], ["to meet", "to encounter"]),
        _word(["要る"], ["いる"], ["v5r", "vi"], ["(a) to be needed"]),
    ],
}


@pytest.fixture(scope="session")
def jmdict_path(tmp_path_factory):
    """Gzipped miniature dictionary on disk."""
    path = tmp_path_factory.mktemp("data") / "jmdict-eng-3.5.0.json.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        json.dump(MINI_JMDICT, f, ensure_ascii=False)
    return path


@pytest.fixture(scope="session")
def store(jmdict_path):
    """Word store loaded from the miniature dictionary."""
    return JMDictionary(jmdict_path)
