"""English verb conjugation for the translation column of the chart.

The English side is derived from the first gloss of the dictionary
definition ("to eat; to consume" -> "eat"). Common irregular verbs are
looked up in a table; everything else goes through the regular suffix
rules below. The results are sentence fragments such as "I have eaten".

Negation is deliberately coarse: a first-match substitution over a few
auxiliaries, or a "[Negative]" label when nothing matches.
"""

from dataclasses import dataclass
from typing import Self

from katsuyo.services.phrases import ENGLISH_TEMPLATES, Category, fallback_phrase


@dataclass(frozen=True, slots=True)
class IrregularVerb:
    """All forms of an irregular English verb."""

    base: str
    past: str
    past_participle: str
    present_third: str
    gerund: str


def _irregular(base: str, past: str, past_participle: str, present_third: str, gerund: str) -> tuple[str, IrregularVerb]:
    return base, IrregularVerb(base, past, past_participle, present_third, gerund)


IRREGULAR_VERBS: dict[str, IrregularVerb] = dict([
    _irregular("be", "was/were", "been", "is", "being"),
    _irregular("become", "became", "become", "becomes", "becoming"),
    _irregular("begin", "began", "begun", "begins", "beginning"),
    _irregular("break", "broke", "broken", "breaks", "breaking"),
    _irregular("bring", "brought", "brought", "brings", "bringing"),
    _irregular("build", "built", "built", "builds", "building"),
    _irregular("buy", "bought", "bought", "buys", "buying"),
    _irregular("catch", "caught", "caught", "catches", "catching"),
    _irregular("choose", "chose", "chosen", "chooses", "choosing"),
    _irregular("come", "came", "come", "comes", "coming"),
    _irregular("cost", "cost", "cost", "costs", "costing"),
    _irregular("cut", "cut", "cut", "cuts", "cutting"),
    _irregular("do", "did", "done", "does", "doing"),
    _irregular("draw", "drew", "drawn", "draws", "drawing"),
    _irregular("drink", "drank", "drunk", "drinks", "drinking"),
    _irregular("drive", "drove", "driven", "drives", "driving"),
    _irregular("eat", "ate", "eaten", "eats", "eating"),
    _irregular("fall", "fell", "fallen", "falls", "falling"),
    _irregular("feel", "felt", "felt", "feels", "feeling"),
    _irregular("find", "found", "found", "finds", "finding"),
    _irregular("fly", "flew", "flown", "flies", "flying"),
    _irregular("forget", "forgot", "forgotten", "forgets", "forgetting"),
    _irregular("get", "got", "gotten", "gets", "getting"),
    _irregular("give", "gave", "given", "gives", "giving"),
    _irregular("go", "went", "gone", "goes", "going"),
    _irregular("grow", "grew", "grown", "grows", "growing"),
    _irregular("have", "had", "had", "has", "having"),
    _irregular("hear", "heard", "heard", "hears", "hearing"),
    _irregular("hide", "hid", "hidden", "hides", "hiding"),
    _irregular("hit", "hit", "hit", "hits", "hitting"),
    _irregular("hold", "held", "held", "holds", "holding"),
    _irregular("keep", "kept", "kept", "keeps", "keeping"),
    _irregular("know", "knew", "known", "knows", "knowing"),
    _irregular("leave", "left", "left", "leaves", "leaving"),
    _irregular("lend", "lent", "lent", "lends", "lending"),
    _irregular("let", "let", "let", "lets", "letting"),
    _irregular("lose", "lost", "lost", "loses", "losing"),
    _irregular("make", "made", "made", "makes", "making"),
    _irregular("mean", "meant", "meant", "means", "meaning"),
    _irregular("meet", "met", "met", "meets", "meeting"),
    _irregular("pay", "paid", "paid", "pays", "paying"),
    _irregular("put", "put", "put", "puts", "putting"),
    _irregular("read", "read", "read", "reads", "reading"),
    _irregular("ride", "rode", "ridden", "rides", "riding"),
    _irregular("ring", "rang", "rung", "rings", "ringing"),
    _irregular("rise", "rose", "risen", "rises", "rising"),
    _irregular("run", "ran", "run", "runs", "running"),
    _irregular("say", "said", "said", "says", "saying"),
    _irregular("see", "saw", "seen", "sees", "seeing"),
    _irregular("sell", "sold", "sold", "sells", "selling"),
    _irregular("send", "sent", "sent", "sends", "sending"),
    _irregular("set", "set", "set", "sets", "setting"),
    _irregular("show", "showed", "shown", "shows", "showing"),
    _irregular("shut", "shut", "shut", "shuts", "shutting"),
    _irregular("sing", "sang", "sung", "sings", "singing"),
    _irregular("sit", "sat", "sat", "sits", "sitting"),
    _irregular("sleep", "slept", "slept", "sleeps", "sleeping"),
    _irregular("speak", "spoke", "spoken", "speaks", "speaking"),
    _irregular("spend", "spent", "spent", "spends", "spending"),
    _irregular("stand", "stood", "stood", "stands", "standing"),
    _irregular("swim", "swam", "swum", "swims", "swimming"),
    _irregular("take", "took", "taken", "takes", "taking"),
    _irregular("teach", "taught", "taught", "teaches", "teaching"),
    _irregular("tear", "tore", "torn", "tears", "tearing"),
    _irregular("tell", "told", "told", "tells", "telling"),
    _irregular("think", "thought", "thought", "thinks", "thinking"),
    _irregular("throw", "threw", "thrown", "throws", "throwing"),
    _irregular("understand", "understood", "understood", "understands", "understanding"),
    _irregular("wake", "woke", "woken", "wakes", "waking"),
    _irregular("wear", "wore", "worn", "wears", "wearing"),
    _irregular("win", "won", "won", "wins", "winning"),
    _irregular("write", "wrote", "written", "writes", "writing"),
])


# =============================================================================
# Regular Suffix Rules
# =============================================================================


def _is_vowel(char: str) -> bool:
    return char.lower() in "aeiou"


def _should_double(verb: str) -> bool:
    """Approximate the stressed-final-syllable rule by word length."""
    if len(verb) < 2:
        return False
    if verb[-1] in "wxy":
        return False
    return len(verb) <= 4


def _doubles_final_consonant(verb: str) -> bool:
    """Vowel + consonant ending on a short verb (stop -> stopp-)."""
    return (
        len(verb) >= 2
        and not _is_vowel(verb[-1])
        and _is_vowel(verb[-2])
        and _should_double(verb)
    )


def regular_past(verb: str) -> str:
    """Past tense / past participle of a regular verb (walk -> walked)."""
    if verb.endswith("e"):
        return verb + "d"
    if len(verb) >= 2 and verb.endswith("y") and not _is_vowel(verb[-2]):
        return verb[:-1] + "ied"
    if _doubles_final_consonant(verb):
        return verb + verb[-1] + "ed"
    return verb + "ed"


def regular_present_third(verb: str) -> str:
    """Third person singular present of a regular verb (watch -> watches)."""
    if verb.endswith(("s", "z", "x", "ch", "sh")):
        return verb + "es"
    if len(verb) >= 2 and verb.endswith("y") and not _is_vowel(verb[-2]):
        return verb[:-1] + "ies"
    if len(verb) >= 2 and verb.endswith("o") and not _is_vowel(verb[-2]):
        return verb + "es"
    return verb + "s"


def regular_gerund(verb: str) -> str:
    """Gerund / present participle of a regular verb (make -> making)."""
    if verb.endswith("ie"):
        return verb[:-2] + "ying"
    if verb.endswith("e") and not verb.endswith(("ee", "ye", "oe")):
        return verb[:-1] + "ing"
    if _doubles_final_consonant(verb):
        return verb + verb[-1] + "ing"
    return verb + "ing"


# =============================================================================
# Definition Parsing
# =============================================================================


def extract_base_verb(definition: str) -> str:
    """Pull the English base verb out of a dictionary definition.

    Examples:
        >>> extract_base_verb("to eat; to consume")
        'eat'
        >>> extract_base_verb("to be born")
        'born'

    Returns:
        The lowercased first word of the first gloss, or "" when the gloss
        does not look like a verb (noun phrases starting with a/the).
    """
    if not definition:
        return ""

    gloss = definition.split(";")[0].strip()
    gloss = gloss.removeprefix("to ").strip()

    # Drop parenthetical notes: "to run (of a machine)"
    if "(" in gloss:
        gloss = gloss[:gloss.index("(")].strip()

    gloss = gloss.removeprefix("be ").strip()

    words = gloss.split()
    if not words:
        return ""

    base = words[0].lower()
    if base.startswith("a") or base.startswith("the"):
        return ""
    return base


@dataclass(frozen=True, slots=True)
class EnglishConjugator:
    """English forms of the verb a Japanese word translates to."""

    base_verb: str
    irregular: IrregularVerb | None = None

    @classmethod
    def from_definition(cls, definition: str) -> Self | None:
        """Build a conjugator from a definition, or None if no verb is found."""
        base = extract_base_verb(definition)
        if not base:
            return None
        return cls(base_verb=base, irregular=IRREGULAR_VERBS.get(base))

    @property
    def is_irregular(self) -> bool:
        return self.irregular is not None

    def past_simple(self) -> str:
        if self.irregular:
            return self.irregular.past
        return regular_past(self.base_verb)

    def past_participle(self) -> str:
        if self.irregular:
            return self.irregular.past_participle
        return regular_past(self.base_verb)

    def present_third_person(self) -> str:
        if self.irregular:
            return self.irregular.present_third
        return regular_present_third(self.base_verb)

    def gerund(self) -> str:
        if self.irregular:
            return self.irregular.gerund
        return regular_gerund(self.base_verb)

    def phrase(self, category: Category | str, form: str) -> str:
        """English sentence fragment for a chart cell ("I will eat").

        Returns:
            The phrase, or "" for a (category, form) pair with no template.
        """
        template = ENGLISH_TEMPLATES.get(category, {}).get(form)
        if template is None:
            return ""
        return template.format(
            base=self.base_verb,
            title=self.base_verb.title(),
            past=self.past_simple(),
            participle=self.past_participle(),
            gerund=self.gerund(),
        )


def english_phrase(conjugator: EnglishConjugator | None, category: Category | str, form: str) -> str:
    """English for a chart cell, falling back to generic phrases ("I do")."""
    if conjugator is None:
        return fallback_phrase(category, form)
    return conjugator.phrase(category, form) or fallback_phrase(category, form)


# =============================================================================
# Negation & Politeness
# =============================================================================

# First matching auxiliary wins
_NEGATIONS = (
    (" do", " don't"),
    (" did", " didn't"),
    (" will", " won't"),
    (" am", " am not"),
    (" have", " haven't"),
    (" can", " can't"),
    (" must", " must not"),
)


def _try_negate(english: str) -> str | None:
    lowered = english.lower()
    for pattern, replacement in _NEGATIONS:
        if pattern in lowered:
            return english.replace(pattern, replacement, 1)

    if lowered.startswith("i "):
        subject, rest = english.split(" ", 1)
        return f"{subject} don't {rest}"

    return None


def negate(english: str) -> str:
    """Negate an English phrase by substitution ("I will eat" -> "I won't eat").

    Phrases with no recognisable auxiliary get a "[Negative]" label.
    """
    negated = _try_negate(english)
    if negated is None:
        return f"[Negative] {english}"
    return negated


def modify_english(english: str, negative: bool, polite: bool) -> str:
    """Apply the negative/polite toggles to an English phrase.

    Politeness has no English grammar of its own, so it is shown as a
    "[Polite]" label in front of the phrase.
    """
    if not english:
        return english

    labels: list[str] = []
    if polite:
        labels.append("[Polite]")
    if negative:
        negated = _try_negate(english)
        if negated is None:
            labels.insert(0, "[Negative]")
        else:
            english = negated

    if labels:
        return " ".join(labels) + " " + english
    return english
