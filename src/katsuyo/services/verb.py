"""Japanese verb classification and conjugation chart generation.

Supports:
- Type I (godan/五段) verbs: 書く, 飲む, 話す, etc.
- Type II (ichidan/一段) verbs: 食べる, 起きる, etc.
- Irregular verbs: する/為る, 来る/くる

The chart covers a fixed set of categories (time, aspect, mood, modals,
desire, voice). Each cell pairs a Japanese surface form with an English
phrase from the English conjugator, or a generic phrase when the word
has no usable definition.
"""

from dataclasses import dataclass, field
from enum import StrEnum, auto

from katsuyo.services.english import EnglishConjugator, english_phrase
from katsuyo.services.kana import ICHIDAN_PRE_RU, Row, euphonic_ta, euphonic_te, shift_row
from katsuyo.services.phrases import CATEGORY_FORMS, Category


class VerbClass(StrEnum):
    """Conjugation class of a verb."""

    ICHIDAN = auto()
    GODAN = auto()
    IRREGULAR_SURU = auto()
    IRREGULAR_KURU = auto()

    @property
    def label(self) -> str:
        """Display label used in API responses."""
        return _VERB_CLASS_LABELS[self]

    @property
    def is_irregular(self) -> bool:
        return self in (VerbClass.IRREGULAR_SURU, VerbClass.IRREGULAR_KURU)


_VERB_CLASS_LABELS = {
    VerbClass.ICHIDAN: "ichidan",
    VerbClass.GODAN: "godan",
    VerbClass.IRREGULAR_SURU: "irregular (する)",
    VerbClass.IRREGULAR_KURU: "irregular (来る)",
}

SURU_VERBS = ("する", "為る")
KURU_VERBS = ("来る", "くる")


class Form(StrEnum):
    """Primitive forms every chart cell is built from."""

    DICTIONARY = auto()     # 辞書形
    PAST = auto()           # た形
    TE = auto()             # て形
    CONDITIONAL = auto()    # 仮定形 + ば
    IMPERATIVE = auto()     # 命令形
    VOLITIONAL = auto()     # 意志形
    POTENTIAL = auto()      # 可能形
    CAUSATIVE = auto()      # 使役形
    PASSIVE = auto()        # 受身形 (past)
    MASU_STEM = auto()      # 連用形
    NEGATIVE_STEM = auto()  # 未然形


@dataclass(frozen=True, slots=True)
class ConjugationEntry:
    """A single cell of the conjugation chart."""

    english: str
    japanese: str
    alts: tuple[str, ...] = field(default_factory=tuple)


ConjugationTable = dict[Category, dict[str, ConjugationEntry]]


def classify(verb: str) -> VerbClass:
    """Identify the conjugation class of a dictionary-form verb.

    This is a heuristic based on the kana before る. Kanji-spelled -iru/-eru
    verbs (見る) come out as godan, and kana-spelled godan verbs such as
    かえる or はいる come out as ichidan.

    Examples:
        >>> classify("食べる")
        <VerbClass.ICHIDAN: 'ichidan'>
        >>> classify("書く")
        <VerbClass.GODAN: 'godan'>
    """
    if verb in SURU_VERBS:
        return VerbClass.IRREGULAR_SURU
    if verb in KURU_VERBS:
        return VerbClass.IRREGULAR_KURU

    if not verb.endswith("る"):
        return VerbClass.GODAN

    # Ichidan if preceded by i-dan or e-dan kana
    if len(verb) >= 2 and verb[-2] in ICHIDAN_PRE_RU:
        return VerbClass.ICHIDAN
    return VerbClass.GODAN


def _inflect_ichidan(stem: str, form: Form) -> str:
    match form:
        case Form.PAST:
            return stem + "た"
        case Form.TE:
            return stem + "て"
        case Form.CONDITIONAL:
            return stem + "れば"
        case Form.IMPERATIVE:
            return stem + "ろ"
        case Form.VOLITIONAL:
            return stem + "よう"
        case Form.POTENTIAL:
            return stem + "られる"
        case Form.CAUSATIVE:
            return stem + "させる"
        case Form.PASSIVE:
            return stem + "られた"
        case Form.MASU_STEM:
            return stem
        case Form.NEGATIVE_STEM:
            return stem + "な"
        case _:
            raise ValueError(f"Unhandled form: {form}")


def _inflect_godan(stem: str, tail: str, form: Form) -> str:
    match form:
        case Form.PAST:
            return stem + euphonic_ta(tail)
        case Form.TE:
            return stem + euphonic_te(tail)
        case Form.CONDITIONAL:
            return stem + shift_row(tail, Row.E) + "ば"
        case Form.IMPERATIVE:
            return stem + shift_row(tail, Row.E)
        case Form.VOLITIONAL:
            return stem + shift_row(tail, Row.O) + "う"
        case Form.POTENTIAL:
            return stem + shift_row(tail, Row.E) + "る"
        case Form.CAUSATIVE:
            return stem + shift_row(tail, Row.A) + "せる"
        case Form.PASSIVE:
            return stem + shift_row(tail, Row.A) + "れた"
        case Form.MASU_STEM:
            return stem + shift_row(tail, Row.I)
        case Form.NEGATIVE_STEM:
            # No な here: 書く -> 書か (so the negative reads 書かい)
            return stem + shift_row(tail, Row.A)
        case _:
            raise ValueError(f"Unhandled form: {form}")


def inflect(verb: str, verb_class: VerbClass, form: Form) -> str:
    """Build one primitive form of a regular (ichidan/godan) verb.

    Args:
        verb: Dictionary form of the verb
        verb_class: ICHIDAN or GODAN
        form: Target primitive form

    Returns:
        The conjugated form

    Examples:
        >>> inflect("書く", VerbClass.GODAN, Form.TE)
        '書いて'
    """
    if verb_class.is_irregular:
        raise ValueError(f"Irregular verbs use fixed tables: {verb}")
    if form == Form.DICTIONARY or not verb:
        return verb

    stem, tail = verb[:-1], verb[-1]
    if verb_class == VerbClass.ICHIDAN:
        return _inflect_ichidan(stem, form)
    return _inflect_godan(stem, tail, form)


# =============================================================================
# Chart Generation
# =============================================================================

# Japanese forms of the irregular verbs: (category, form) -> (form, alts)
_SURU_CHART: dict[tuple[Category, str], tuple[str, tuple[str, ...]]] = {
    (Category.TIME, "present"): ("する", ()),
    (Category.TIME, "past"): ("した", ()),
    (Category.TIME, "future"): ("する", ()),
    (Category.ASPECT, "simple"): ("する", ()),
    (Category.ASPECT, "progressive"): ("している", ()),
    (Category.ASPECT, "perfect"): ("したばかり", ()),
    (Category.ASPECT, "perfect_progressive"): ("している", ()),
    (Category.MOOD, "indicative"): ("する", ()),
    (Category.MOOD, "subjunctive"): ("したらいいのに", ()),
    (Category.MOOD, "conditional"): ("すれば", ("したら",)),
    (Category.MOOD, "imperative"): ("しろ", ("せよ",)),
    (Category.MOOD, "volitional"): ("しよう", ()),
    (Category.MODALS, "potential"): ("できる", ()),
    (Category.MODALS, "causative"): ("させる", ()),
    (Category.MODALS, "deontic"): ("しなければならない", ()),
    (Category.DESIRE, "subject"): ("したい", ()),
    (Category.VOICE, "active"): ("する", ()),
    (Category.VOICE, "passive"): ("された", ()),
}

_KURU_CHART: dict[tuple[Category, str], tuple[str, tuple[str, ...]]] = {
    (Category.TIME, "present"): ("来る", ("くる",)),
    (Category.TIME, "past"): ("来た", ("きた",)),
    (Category.TIME, "future"): ("来る", ("くる",)),
    (Category.ASPECT, "simple"): ("来る", ("くる",)),
    (Category.ASPECT, "progressive"): ("来ている", ("きている",)),
    (Category.ASPECT, "perfect"): ("来たばかり", ()),
    (Category.ASPECT, "perfect_progressive"): ("来ている", ()),
    (Category.MOOD, "indicative"): ("来る", ()),
    (Category.MOOD, "subjunctive"): ("来たらいいのに", ()),
    (Category.MOOD, "conditional"): ("来れば", ("来たら",)),
    (Category.MOOD, "imperative"): ("来い", ()),
    (Category.MOOD, "volitional"): ("来よう", ()),
    (Category.MODALS, "potential"): ("来られる", ()),
    (Category.MODALS, "causative"): ("来させる", ()),
    (Category.MODALS, "deontic"): ("来なければならない", ()),
    (Category.DESIRE, "subject"): ("来たい", ()),
    (Category.VOICE, "active"): ("来る", ()),
    (Category.VOICE, "passive"): ("来られた", ()),
}


def _regular_chart(verb: str, verb_class: VerbClass) -> dict[tuple[Category, str], tuple[str, tuple[str, ...]]]:
    def f(form: Form) -> str:
        return inflect(verb, verb_class, form)

    past = f(Form.PAST)
    te_iru = f(Form.TE) + "いる"

    return {
        (Category.TIME, "present"): (verb, ()),
        (Category.TIME, "past"): (past, ()),
        (Category.TIME, "future"): (verb, ()),
        (Category.ASPECT, "simple"): (verb, ()),
        (Category.ASPECT, "progressive"): (te_iru, ()),
        (Category.ASPECT, "perfect"): (past + "ばかり", ()),
        (Category.ASPECT, "perfect_progressive"): (te_iru, ()),
        (Category.MOOD, "indicative"): (verb, ()),
        (Category.MOOD, "subjunctive"): (past + "らいいのに", ()),
        (Category.MOOD, "conditional"): (f(Form.CONDITIONAL), (past + "ら",)),
        (Category.MOOD, "imperative"): (f(Form.IMPERATIVE), ()),
        (Category.MOOD, "volitional"): (f(Form.VOLITIONAL), ()),
        (Category.MODALS, "potential"): (f(Form.POTENTIAL), ()),
        (Category.MODALS, "causative"): (f(Form.CAUSATIVE), ()),
        (Category.MODALS, "deontic"): (f(Form.NEGATIVE_STEM) + "ければならない", ()),
        (Category.DESIRE, "subject"): (f(Form.MASU_STEM) + "たい", ()),
        (Category.VOICE, "active"): (verb, ()),
        (Category.VOICE, "passive"): (f(Form.PASSIVE), ()),
    }


def generate(
    verb: str,
    verb_class: VerbClass,
    english: EnglishConjugator | None = None,
) -> ConjugationTable:
    """Generate the full conjugation chart for a dictionary-form verb.

    Args:
        verb: Dictionary form of the verb
        verb_class: Result of classify()
        english: English conjugator for the verb's definition, if any

    Returns:
        Category -> form name -> ConjugationEntry, covering every form

    Examples:
        >>> generate("食べる", VerbClass.ICHIDAN)[Category.TIME]["past"].japanese
        '食べた'
    """
    match verb_class:
        case VerbClass.IRREGULAR_SURU:
            chart = _SURU_CHART
        case VerbClass.IRREGULAR_KURU:
            chart = _KURU_CHART
        case _:
            chart = _regular_chart(verb, verb_class)

    table: ConjugationTable = {}
    for category, forms in CATEGORY_FORMS.items():
        table[category] = {}
        for form in forms:
            japanese, alts = chart[(category, form)]
            table[category][form] = ConjugationEntry(
                english=english_phrase(english, category, form),
                japanese=japanese,
                alts=alts,
            )
    return table
