"""Kana tables shared by the verb classifier and the conjugation generator.

Godan verbs change their final mora along one consonant column of the
kana chart (書か, 書き, 書く, 書け, 書こ); these tables map a dictionary-form
ending onto the other vowel rows, and hold the euphonic (音便) endings used
by the te/ta forms.
"""

from enum import IntEnum


class Row(IntEnum):
    """Vowel rows (段) of the kana chart, in table column order."""

    A = 0  # あ段
    I = 1  # い段
    U = 2  # う段
    E = 3  # え段
    O = 4  # お段


# Dictionary-form ending -> [あ段, い段, う段, え段, お段]
_ROW_TABLE: dict[str, tuple[str, str, str, str, str]] = {
    "う": ("わ", "い", "う", "え", "お"),  # 買う -> 買わない
    "く": ("か", "き", "く", "け", "こ"),
    "ぐ": ("が", "ぎ", "ぐ", "げ", "ご"),
    "す": ("さ", "し", "す", "せ", "そ"),
    "つ": ("た", "ち", "つ", "て", "と"),
    "ぬ": ("な", "に", "ぬ", "ね", "の"),
    "ぶ": ("ば", "び", "ぶ", "べ", "ぼ"),
    "む": ("ま", "み", "む", "め", "も"),
    "る": ("ら", "り", "る", "れ", "ろ"),
}

# Endings outside the table fall back to the bare vowel column
_VOWEL_ROW = ("あ", "い", "う", "え", "お")


# Te/Ta form sound changes (音便): final char -> (te, ta)
_TE_TA_FORMS: dict[str, tuple[str, str]] = {
    "う": ("って", "った"),  # gemination
    "つ": ("って", "った"),
    "る": ("って", "った"),
    "く": ("いて", "いた"),
    "ぐ": ("いで", "いだ"),  # rendaku
    "す": ("して", "した"),
    "ぬ": ("んで", "んだ"),  # nasalization
    "ぶ": ("んで", "んだ"),
    "む": ("んで", "んだ"),
}

_DEFAULT_TE_TA = ("て", "た")


# Kana before a final る that mark an ichidan verb (-iru / -eru)
ICHIDAN_PRE_RU = frozenset(
    "いきぎしじちにひびぴみり"
    "えけげせぜてでねへべぺめれ"
)

# Endings accepted as "probably a verb" when the dictionary has no entry
VERB_ENDINGS = frozenset("るうくぐすつぬぶむ")


def shift_row(ending: str, row: Row) -> str:
    """Move a godan ending onto another vowel row.

    Args:
        ending: Final kana of the dictionary form (e.g. く)
        row: Target row

    Returns:
        The kana on the same consonant column (e.g. け for Row.E)
    """
    return _ROW_TABLE.get(ending, _VOWEL_ROW)[row]


def euphonic_te(ending: str) -> str:
    """Te-form suffix replacing a godan ending (書く -> 書いて)."""
    return _TE_TA_FORMS.get(ending, _DEFAULT_TE_TA)[0]


def euphonic_ta(ending: str) -> str:
    """Ta-form suffix replacing a godan ending (書く -> 書いた)."""
    return _TE_TA_FORMS.get(ending, _DEFAULT_TE_TA)[1]


def is_japanese_char(char: str) -> bool:
    """Check if a character is hiragana, katakana or a CJK ideograph."""
    return (
        "\u3040" <= char <= "\u309f"  # Hiragana
        or "\u30a0" <= char <= "\u30ff"  # Katakana
        or "\u4e00" <= char <= "\u9faf"  # Kanji
    )


def contains_japanese(text: str) -> bool:
    """Check if the text has at least one Japanese character."""
    return any(is_japanese_char(c) for c in text)


def has_verb_ending(word: str) -> bool:
    """Check if a word ends in a kana a dictionary-form verb can end in."""
    return bool(word) and word[-1] in VERB_ENDINGS
