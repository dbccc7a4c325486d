"""Conjugation service - validates a verb and builds the chart response.

This is the layer between the API and the conjugation engine:
- rejects empty and non-Japanese input
- asks the word store whether the word is a verb, and for its definition
- classifies, conjugates and applies the negative/polite toggles
"""

import logging

from katsuyo.models import (
    ConjugateResponse,
    ConjugationChart,
    FormResponse,
    TenseGroups,
)
from katsuyo.services.english import EnglishConjugator
from katsuyo.services.jmdict import JMDictionary
from katsuyo.services.kana import contains_japanese, has_verb_ending
from katsuyo.services.modifiers import apply_modifiers
from katsuyo.services.phrases import Category
from katsuyo.services.verb import ConjugationTable, classify, generate

logger = logging.getLogger(__name__)


class VerbRejected(ValueError):
    """The input cannot be conjugated; the message is shown to the user."""


def validate_verb(verb: str, store: JMDictionary | None) -> str:
    """Check that a word can be conjugated and return its definition.

    Words the store does not know are still accepted when they end in a
    kana a dictionary-form verb can end in.

    Args:
        verb: Stripped dictionary form
        store: Word store, or None when no dictionary is loaded

    Returns:
        The English definition, or "" when none is available

    Raises:
        VerbRejected: If the word is not a verb
    """
    if not verb:
        raise VerbRejected("Verb cannot be empty")
    if not contains_japanese(verb):
        raise VerbRejected("Input must be in Japanese")

    if store is None or not store.is_loaded:
        if has_verb_ending(verb):
            return ""
        raise VerbRejected("Failed to validate verb: dictionary not available")

    try:
        entry = store.lookup_word(verb)
    except (KeyError, TypeError, ValueError, OSError) as e:
        logger.warning("Word store lookup failed for %s: %s", verb, e)
        if has_verb_ending(verb):
            return ""
        raise VerbRejected(f"Failed to validate verb: {e}") from e

    if entry is None:
        if has_verb_ending(verb):
            return ""
        raise VerbRejected("Word not found in dictionary or is not a verb")

    if not entry.is_verb:
        raise VerbRejected("Word not found in dictionary or is not a verb")
    return entry.definition


def _form_responses(forms: dict) -> dict[str, FormResponse]:
    return {
        name: FormResponse(english=entry.english, japanese=entry.japanese, alts=list(entry.alts))
        for name, entry in forms.items()
    }


def build_chart(table: ConjugationTable) -> ConjugationChart:
    """Convert an engine table into the API response shape."""
    return ConjugationChart(
        tenses=TenseGroups(
            time=_form_responses(table[Category.TIME]),
            aspect=_form_responses(table[Category.ASPECT]),
            mood=_form_responses(table[Category.MOOD]),
            modals=_form_responses(table[Category.MODALS]),
            desire=_form_responses(table[Category.DESIRE]),
        ),
        voice=_form_responses(table[Category.VOICE]),
    )


def conjugate_request(
    verb: str,
    negative: bool = False,
    polite: bool = False,
    store: JMDictionary | None = None,
) -> ConjugateResponse:
    """Validate and conjugate a verb for the API.

    Validation failures are reported in the response (valid=False) rather
    than raised.

    Examples:
        >>> conjugate_request("書く").conjugations.tenses.time["past"].japanese
        '書いた'
    """
    verb = verb.strip()
    try:
        definition = validate_verb(verb, store)
    except VerbRejected as e:
        return ConjugateResponse(valid=False, error=str(e))

    english = EnglishConjugator.from_definition(definition)
    if definition:
        logger.debug("Verb %s has definition: %s", verb, definition)
        if english:
            logger.debug("Extracted base verb: %s", english.base_verb)
        else:
            logger.debug("No English verb found in definition of %s", verb)
    else:
        logger.debug("Verb %s has no definition", verb)

    verb_class = classify(verb)
    table = generate(verb, verb_class, english)
    if negative or polite:
        table = apply_modifiers(table, verb, verb_class, negative, polite)

    return ConjugateResponse(
        valid=True,
        verb=verb,
        verb_type=verb_class.label,
        conjugations=build_chart(table),
    )
