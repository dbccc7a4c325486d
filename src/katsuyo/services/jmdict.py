"""
JMdict-based word store using jmdict-simplified JSON.

Answers "is this word a verb, and what does it mean?" for the conjugation
endpoint. Entries are indexed in memory by kanji and kana forms, so a verb
can be found by its written form (食べる) or its reading (たべる).

The dictionary can be downloaded from the latest jmdict-simplified release
when it is not found locally (see settings.JMDICT_AUTO_DOWNLOAD).
"""

import gzip
import json
import logging
import re
import urllib.request
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Self

import jaconv

from katsuyo import settings

logger = logging.getLogger(__name__)


# GitHub API endpoint for latest release
JMDICT_RELEASES_API = "https://api.github.com/repos/scriptin/jmdict-simplified/releases/latest"
JMDICT_DOWNLOAD_PATTERN = r"jmdict-eng-\d+\.\d+\.\d+\.json\.gz"

# JMdict part-of-speech tag prefixes -> readable labels
_POS_PREFIXES = (
    ("v1", "Ichidan verb"),
    ("v5", "Godan verb"),
    ("vk", "Kuru verb"),
    ("vs-", "Suru verb"),
    ("vz", "Ichidan zuru verb"),
    ("vt", "Transitive verb"),
    ("vi", "Intransitive verb"),
    ("vs", "Noun taking suru"),
    ("adj", "Adjective"),
    ("adv", "Adverb"),
    ("n", "Noun"),
    ("exp", "Expression"),
)


def pos_label(tag: str) -> str:
    """Readable label for a JMdict part-of-speech tag (v5k -> Godan verb)."""
    for prefix, label in _POS_PREFIXES:
        if tag.startswith(prefix):
            return label
    return tag


@dataclass(frozen=True, slots=True)
class WordEntry:
    """Dictionary data the conjugation endpoint needs for a word."""

    word: str
    reading: str
    part_of_speech: str
    definition: str

    @property
    def is_verb(self) -> bool:
        return "verb" in self.part_of_speech.lower()


class JMDictionary:
    """
    Japanese-English word store backed by jmdict-simplified JSON.

    Builds an in-memory index for O(1) lookups by kanji/kana.
    """

    def __init__(self, dict_path: Path | str | None = None, auto_download: bool = False) -> None:
        """
        Initialize the dictionary.

        Args:
            dict_path: Path to jmdict-eng.json or jmdict-eng.json.gz.
                       If None, searches the data directory.
            auto_download: Download the latest release if nothing is found.
        """
        self._index_kanji: dict[str, list[dict]] = {}
        self._index_kana: dict[str, list[dict]] = {}

        self._loaded = False
        self._version: str | None = None

        if dict_path:
            self._load(Path(dict_path))
        else:
            self._find_and_load(auto_download)

    def _find_and_load(self, auto_download: bool) -> None:
        """Find dictionary file in the data directory or download it."""
        data_dir = settings.DATA_DIR

        search_paths = [
            data_dir / "jmdict-eng.json",
            data_dir / "jmdict-eng.json.gz",
        ]

        # Versioned files take priority
        if data_dir.exists():
            for f in sorted(data_dir.glob("jmdict-eng-*.json*")):
                search_paths.insert(0, f)

        for path in search_paths:
            if path.exists():
                self._load(path)
                return

        if not auto_download:
            logger.warning("JMdict not found in %s; continuing without a word store", data_dir)
            return

        logger.info("JMdict not found locally. Downloading latest version...")
        try:
            self._download_latest(data_dir)
        except (OSError, RuntimeError, ValueError) as e:
            logger.warning("Failed to download JMdict: %s", e)

    def _get_latest_release_info(self, pattern: str) -> tuple[str, str] | None:
        """
        Get the latest release download URL and version from GitHub API.

        Returns:
            Tuple of (download_url, version) or None if not found.
        """
        req = urllib.request.Request(
            JMDICT_RELEASES_API,
            headers={"User-Agent": "Katsuyo", "Accept": "application/vnd.github.v3+json"},
        )
        with urllib.request.urlopen(req, timeout=30) as response:
            data = json.loads(response.read().decode())

        version = data.get("tag_name", "unknown")
        for asset in data.get("assets", []):
            name = asset.get("name", "")
            if re.match(pattern, name):
                return asset.get("browser_download_url"), version

        logger.warning("No English dictionary found in release %s", version)
        return None

    def _download_latest(self, data_dir: Path) -> None:
        """Download the latest JMdict from GitHub releases."""
        release_info = self._get_latest_release_info(JMDICT_DOWNLOAD_PATTERN)
        if not release_info:
            raise RuntimeError("Could not find latest release info")

        download_url, version = release_info
        logger.info("Downloading JMdict %s...", version)

        data_dir.mkdir(parents=True, exist_ok=True)
        target_path = data_dir / "jmdict-eng.json.gz"

        req = urllib.request.Request(download_url, headers={"User-Agent": "Katsuyo"})
        with urllib.request.urlopen(req, timeout=300) as response:
            with open(target_path, "wb") as f:
                while chunk := response.read(1024 * 1024):
                    f.write(chunk)

        logger.info("Downloaded to %s", target_path)
        self._load(target_path)
        self._version = version

    def _load(self, path: Path) -> None:
        """Load and index the dictionary."""
        logger.info("Loading JMdict from %s...", path)

        match = re.search(r"jmdict-eng-(\d+\.\d+\.\d+)", path.name)
        if match:
            self._version = match.group(1)

        if path.suffix == ".gz":
            with gzip.open(path, "rt", encoding="utf-8") as f:
                data = json.load(f)
        else:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)

        if "version" in data:
            self._version = data["version"]

        words = data.get("words", [])
        for entry in words:
            for kanji in entry.get("kanji", []):
                text = kanji.get("text", "")
                if text:
                    self._index_kanji.setdefault(text, []).append(entry)
            for kana in entry.get("kana", []):
                text = kana.get("text", "")
                if text:
                    self._index_kana.setdefault(text, []).append(entry)

        self._loaded = True
        logger.info(
            "Loaded %d entries (%d kanji, %d kana)%s",
            len(words), len(self._index_kanji), len(self._index_kana),
            f" (v{self._version})" if self._version else "",
        )

    @classmethod
    @lru_cache(maxsize=1)
    def get_instance(cls) -> Self:
        """Get or create a singleton instance configured from settings."""
        return cls(settings.JMDICT_PATH, auto_download=settings.JMDICT_AUTO_DOWNLOAD)

    def _candidates(self, word: str) -> list[dict]:
        """Entries whose kanji or kana form is the word (katakana tried as hiragana)."""
        entries = self._index_kanji.get(word) or self._index_kana.get(word)
        if not entries:
            hiragana = jaconv.kata2hira(word)
            if hiragana != word:
                entries = self._index_kana.get(hiragana)
        return entries or []

    def _find_best_entry(self, word: str) -> dict | None:
        """Find the best matching entry, preferring common verb entries."""
        entries = self._candidates(word)
        if not entries:
            return None

        is_hiragana_input = all("\u3040" <= c <= "\u309f" for c in word)

        best_entry = None
        best_score = -1
        for entry in entries:
            score = 0
            for kanji in entry.get("kanji", []):
                if kanji.get("text") == word and kanji.get("common"):
                    score += 10
            for kana in entry.get("kana", []):
                if kana.get("common"):
                    score += 5

            senses = entry.get("sense", [])
            if senses:
                if is_hiragana_input and "uk" in senses[0].get("misc", []):
                    score += 15
                if any(pos_label(p).endswith("verb") for p in senses[0].get("partOfSpeech", [])):
                    score += 20

            if score > best_score:
                best_score = score
                best_entry = entry

        return best_entry

    def lookup_word(self, word: str) -> WordEntry | None:
        """
        Look up a word by written form or reading.

        Returns:
            WordEntry with the first sense's part of speech and up to three
            glosses joined by "; ", or None if the word is unknown.
        """
        entry = self._find_best_entry(word)
        if not entry:
            return None

        senses = entry.get("sense", [])
        if not senses:
            return None

        sense = senses[0]
        labels = dict.fromkeys(pos_label(p) for p in sense.get("partOfSpeech", []))
        glosses = [g.get("text", "") for g in sense.get("gloss", []) if g.get("text")]
        kana = entry.get("kana", [])

        return WordEntry(
            word=word,
            reading=kana[0].get("text", "") if kana else "",
            part_of_speech=", ".join(labels),
            definition="; ".join(glosses[:3]),
        )

    @property
    def is_loaded(self) -> bool:
        """Check if dictionary was successfully loaded."""
        return self._loaded

    @property
    def version(self) -> str | None:
        """Get the JMdict version if known."""
        return self._version
