"""Conjugation categories and the English phrase tables that go with them."""

from enum import StrEnum


class Category(StrEnum):
    """Groups of conjugated forms shown in the conjugation chart."""

    TIME = "time"
    ASPECT = "aspect"
    MOOD = "mood"
    MODALS = "modals"
    DESIRE = "desire"
    VOICE = "voice"


# Category -> form names, in chart order
CATEGORY_FORMS: dict[Category, tuple[str, ...]] = {
    Category.TIME: ("present", "past", "future"),
    Category.ASPECT: ("simple", "progressive", "perfect", "perfect_progressive"),
    Category.MOOD: ("indicative", "subjunctive", "conditional", "imperative", "volitional"),
    Category.MODALS: ("potential", "causative", "deontic"),
    Category.DESIRE: ("subject",),
    Category.VOICE: ("active", "passive"),
}

# Categories reported under "tenses"; voice is reported on its own
TENSE_CATEGORIES = (
    Category.TIME,
    Category.ASPECT,
    Category.MOOD,
    Category.MODALS,
    Category.DESIRE,
)


# =============================================================================
# English Templates
# =============================================================================
# Placeholders: {base} eat, {title} Eat, {past} ate, {participle} eaten,
# {gerund} eating

ENGLISH_TEMPLATES: dict[Category, dict[str, str]] = {
    Category.TIME: {
        "present": "I {base}",
        "past": "I {past}",
        "future": "I will {base}",
    },
    Category.ASPECT: {
        "simple": "I {base}",
        "progressive": "I am {gerund}",
        "perfect": "I have {participle}",
        "perfect_progressive": "I have been {gerund}",
    },
    Category.MOOD: {
        "indicative": "I {base}",
        "subjunctive": "I wish I {past}",
        "conditional": "If I {base}",
        "imperative": "{title}",
        "volitional": "Let's {base}",
    },
    Category.MODALS: {
        "potential": "I can {base}",
        "causative": "I make you {base}",
        "deontic": "I must {base}",
    },
    Category.DESIRE: {
        "subject": "I want to {base}",
    },
    Category.VOICE: {
        "active": "I {base}",
        "passive": "It is {participle} by me",
    },
}


# =============================================================================
# Fallback Phrases
# =============================================================================
# Used when the word has no usable English definition.

FALLBACK_PHRASES: dict[Category, dict[str, str]] = {
    Category.TIME: {
        "present": "I do",
        "past": "I did",
        "future": "I will do",
    },
    Category.ASPECT: {
        "simple": "I do",
        "progressive": "I am doing",
        "perfect": "I have done",
        "perfect_progressive": "I have been doing",
    },
    Category.MOOD: {
        "indicative": "I do",
        "subjunctive": "I wish I did",
        "conditional": "If I do",
        "imperative": "Do",
        "volitional": "Let's do",
    },
    Category.MODALS: {
        "potential": "I can do",
        "causative": "I make you do",
        "deontic": "I must do",
    },
    Category.DESIRE: {
        "subject": "I want to do",
    },
    Category.VOICE: {
        "active": "I do",
        "passive": "It is done by me",
    },
}

FALLBACK_DEFAULT = "verb"


def fallback_phrase(category: Category | str, form: str) -> str:
    """Generic English phrase for a (category, form) pair."""
    return FALLBACK_PHRASES.get(category, {}).get(form, FALLBACK_DEFAULT)
