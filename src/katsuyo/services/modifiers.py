"""Negative / polite transformation of a generated conjugation chart.

The chart cells do not remember which form produced them, so the form
family is inferred again from the surface string (食べた ends in た, so it
is a past form) and the negative/polite variant is rebuilt from the verb's
stems. The rules are ordered and the first match wins; cells that look
alike get the same treatment even if they came from different categories
(the passive 食べられた is handled as a past form).

Irregular verbs do not go through the stem machinery; する and 来る each
have a literal table of variants per family.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum, auto

from katsuyo.services.english import modify_english
from katsuyo.services.phrases import Category
from katsuyo.services.verb import (
    ConjugationEntry,
    ConjugationTable,
    Form,
    VerbClass,
    inflect,
)


class Family(StrEnum):
    """Form families recognised by surface pattern."""

    PAST = auto()
    PROGRESSIVE = auto()
    CONDITIONAL = auto()
    VOLITIONAL = auto()
    DERIVED_RU = auto()  # potential / causative: verbs ending in る themselves
    PERFECT = auto()
    DEONTIC = auto()
    DESIRE = auto()
    PRESENT = auto()


@dataclass(frozen=True, slots=True)
class Variants:
    """Replacement forms for each combination of toggles.

    A polite variant of None leaves the form as it is.
    """

    negative_polite: str
    negative: str
    polite: str | None

    def pick(self, form: str, negative: bool, polite: bool) -> str:
        if negative and polite:
            return self.negative_polite
        if negative:
            return self.negative
        if polite:
            return form if self.polite is None else self.polite
        return form


# =============================================================================
# Regular Verbs
# =============================================================================


@dataclass(frozen=True, slots=True)
class _Stems:
    masu: str
    negative: str
    te: str

    @classmethod
    def of(cls, verb: str, verb_class: VerbClass) -> "_Stems":
        return cls(
            masu=inflect(verb, verb_class, Form.MASU_STEM),
            negative=inflect(verb, verb_class, Form.NEGATIVE_STEM),
            te=inflect(verb, verb_class, Form.TE),
        )


_Matcher = Callable[[str, str], bool]          # (form, verb) -> matches
_Builder = Callable[[_Stems, str], Variants]   # (stems, form) -> variants

_REGULAR_RULES: tuple[tuple[Family, _Matcher, _Builder], ...] = (
    (
        Family.PAST,
        lambda form, verb: form.endswith(("た", "だ")),
        lambda s, form: Variants(s.masu + "ませんでした", s.negative + "かった", s.masu + "ました"),
    ),
    (
        Family.PROGRESSIVE,
        lambda form, verb: form.endswith("ている"),
        lambda s, form: Variants(s.te + "いません", s.te + "いない", s.te + "います"),
    ),
    (
        Family.CONDITIONAL,
        lambda form, verb: form.endswith("ば"),
        lambda s, form: Variants(s.negative + "ければ", s.negative + "ければ", None),
    ),
    (
        Family.VOLITIONAL,
        lambda form, verb: form.endswith(("よう", "おう")),
        lambda s, form: Variants(s.masu + "ません", s.negative + "い", s.masu + "ましょう"),
    ),
    (
        Family.DERIVED_RU,
        lambda form, verb: form.endswith("られる") or (form.endswith("る") and form != verb),
        lambda s, form: Variants(form[:-1] + "ません", form[:-1] + "ない", form[:-1] + "ます"),
    ),
    (
        Family.PERFECT,
        lambda form, verb: "ばかり" in form,
        lambda s, form: Variants(
            s.negative + "かったばかり", s.negative + "かったばかり", s.masu + "ましたばかり",
        ),
    ),
    (
        Family.DEONTIC,
        lambda form, verb: "ければならない" in form,
        lambda s, form: Variants(
            s.negative + "くてもいいです", s.negative + "くてもいい", s.negative + "ければなりません",
        ),
    ),
    (
        Family.DESIRE,
        lambda form, verb: "たい" in form,
        lambda s, form: Variants(s.masu + "たくないです", s.masu + "たくない", s.masu + "たいです"),
    ),
)

_PRESENT: _Builder = lambda s, form: Variants(s.masu + "ません", s.negative + "い", s.masu + "ます")


def _match_regular(form: str, verb: str) -> tuple[Family, _Builder]:
    for family, matches, build in _REGULAR_RULES:
        if matches(form, verb):
            return family, build
    return Family.PRESENT, _PRESENT


def infer_family(form: str, verb: str) -> Family:
    """Guess which family a regular verb's surface form belongs to.

    Examples:
        >>> infer_family("食べている", "食べる")
        <Family.PROGRESSIVE: 'progressive'>
        >>> infer_family("食べろ", "食べる")
        <Family.PRESENT: 'present'>
    """
    return _match_regular(form, verb)[0]


# =============================================================================
# Irregular Verbs
# =============================================================================

_Predicate = Callable[[str], bool]

_SURU_RULES: tuple[tuple[Family, _Predicate, Variants], ...] = (
    (Family.PAST, lambda f: f.endswith("した"),
     Variants("しませんでした", "しなかった", "しました")),
    (Family.PROGRESSIVE, lambda f: f.endswith("している"),
     Variants("していません", "していない", "しています")),
    (Family.CONDITIONAL, lambda f: f.endswith("すれば"),
     Variants("しなければ", "しなければ", None)),
    (Family.VOLITIONAL, lambda f: f.endswith("しよう"),
     Variants("しません", "しない", "しましょう")),
    (Family.PERFECT, lambda f: "ばかり" in f,
     Variants("しなかったばかり", "しなかったばかり", "しましたばかり")),
    (Family.DESIRE, lambda f: "たい" in f,
     Variants("したくないです", "したくない", "したいです")),
    (Family.DEONTIC, lambda f: "ければならない" in f,
     Variants("しなくてもいいです", "しなくてもいい", "しなければなりません")),
)

_SURU_PRESENT = Variants("しません", "しない", "します")

_KURU_RULES: tuple[tuple[Family, _Predicate, Variants], ...] = (
    (Family.PAST, lambda f: "来た" in f or "きた" in f,
     Variants("来ませんでした", "来なかった", "来ました")),
    (Family.PROGRESSIVE, lambda f: "来ている" in f or "きている" in f,
     Variants("来ていません", "来ていない", "来ています")),
    (Family.CONDITIONAL, lambda f: "来れば" in f,
     Variants("来なければ", "来なければ", None)),
    (Family.VOLITIONAL, lambda f: "来よう" in f,
     Variants("来ません", "来ない", "来ましょう")),
    (Family.PERFECT, lambda f: "ばかり" in f,
     Variants("来なかったばかり", "来なかったばかり", "来ましたばかり")),
    (Family.DESIRE, lambda f: "たい" in f,
     Variants("来たくないです", "来たくない", "来たいです")),
    (Family.DEONTIC, lambda f: "ければならない" in f,
     Variants("来なくてもいいです", "来なくてもいい", "来なければなりません")),
)

_KURU_PRESENT = Variants("来ません", "来ない", "来ます")


def _match_irregular(form: str, verb_class: VerbClass) -> tuple[Family, Variants]:
    if verb_class == VerbClass.IRREGULAR_SURU:
        rules, present = _SURU_RULES, _SURU_PRESENT
    else:
        rules, present = _KURU_RULES, _KURU_PRESENT
    for family, matches, variants in rules:
        if matches(form):
            return family, variants
    return Family.PRESENT, present


def infer_irregular_family(form: str, verb_class: VerbClass) -> Family:
    """Guess which family a form of する or 来る belongs to."""
    return _match_irregular(form, verb_class)[0]


# =============================================================================
# Public API
# =============================================================================


def modify_form(
    form: str,
    verb: str,
    verb_class: VerbClass,
    negative: bool,
    polite: bool,
) -> str:
    """Rewrite one generated form as negative and/or polite.

    Args:
        form: A form taken from the generated chart
        verb: Dictionary form of the verb
        verb_class: Result of classify()
        negative: Apply negation
        polite: Apply the polite (ます) register

    Returns:
        The modified form (unchanged when no toggle is set)

    Examples:
        >>> modify_form("話した", "話す", VerbClass.GODAN, False, True)
        '話しました'
    """
    if not form or not (negative or polite):
        return form

    if verb_class.is_irregular:
        _, variants = _match_irregular(form, verb_class)
        return variants.pick(form, negative, polite)

    _, build = _match_regular(form, verb)
    return build(_Stems.of(verb, verb_class), form).pick(form, negative, polite)


def apply_modifiers(
    table: ConjugationTable,
    verb: str,
    verb_class: VerbClass,
    negative: bool,
    polite: bool,
) -> ConjugationTable:
    """Build a new chart with every cell made negative and/or polite.

    The input chart is left untouched.
    """
    def modify(entry: ConjugationEntry) -> ConjugationEntry:
        return ConjugationEntry(
            english=modify_english(entry.english, negative, polite),
            japanese=modify_form(entry.japanese, verb, verb_class, negative, polite),
            alts=tuple(modify_form(alt, verb, verb_class, negative, polite) for alt in entry.alts),
        )

    modified: ConjugationTable = {}
    for category, forms in table.items():
        modified[Category(category)] = {name: modify(entry) for name, entry in forms.items()}
    return modified
