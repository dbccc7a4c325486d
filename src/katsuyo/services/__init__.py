"""Katsuyo services module."""

from .english import (
    EnglishConjugator,
    IrregularVerb,
    english_phrase,
    extract_base_verb,
    modify_english,
    negate,
)
from .jmdict import JMDictionary, WordEntry
from .modifiers import (
    Family,
    apply_modifiers,
    infer_family,
    infer_irregular_family,
    modify_form,
)
from .phrases import CATEGORY_FORMS, Category, fallback_phrase
from .verb import (
    ConjugationEntry,
    ConjugationTable,
    Form,
    VerbClass,
    classify,
    generate,
    inflect,
)

__all__ = [
    # Verb conjugation
    "VerbClass",
    "Form",
    "ConjugationEntry",
    "ConjugationTable",
    "classify",
    "inflect",
    "generate",
    # Modifiers
    "Family",
    "apply_modifiers",
    "infer_family",
    "infer_irregular_family",
    "modify_form",
    # English
    "EnglishConjugator",
    "IrregularVerb",
    "english_phrase",
    "extract_base_verb",
    "modify_english",
    "negate",
    # Phrase tables
    "Category",
    "CATEGORY_FORMS",
    "fallback_phrase",
    # Word store
    "JMDictionary",
    "WordEntry",
]
