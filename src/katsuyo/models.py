"""Pydantic models for Katsuyo API requests and responses."""

from pydantic import BaseModel, Field

from katsuyo.settings import MAX_VERB_LENGTH


# ============================================================================
# Request Models
# ============================================================================


class ConjugateRequest(BaseModel):
    """Request body for verb conjugation."""
    verb: str = Field("", max_length=MAX_VERB_LENGTH, description="Dictionary form of the verb")
    negative: bool = Field(False, description="Show negative forms")
    polite: bool = Field(False, description="Show polite (ます) forms")


# ============================================================================
# Response Components
# ============================================================================


class FormResponse(BaseModel):
    """Single cell of the conjugation chart."""
    english: str = Field(..., description="English phrase, e.g. 'I will eat'")
    japanese: str = Field(..., description="Conjugated form")
    alts: list[str] = Field(default_factory=list, description="Alternative forms")


class TenseGroups(BaseModel):
    """Tense-like categories of the chart, keyed by form name."""
    time: dict[str, FormResponse] = Field(..., description="present, past, future")
    aspect: dict[str, FormResponse] = Field(..., description="simple, progressive, perfect, perfect_progressive")
    mood: dict[str, FormResponse] = Field(..., description="indicative, subjunctive, conditional, imperative, volitional")
    modals: dict[str, FormResponse] = Field(..., description="potential, causative, deontic")
    desire: dict[str, FormResponse] = Field(..., description="subject")


class ConjugationChart(BaseModel):
    """Full conjugation chart."""
    tenses: TenseGroups
    voice: dict[str, FormResponse] = Field(..., description="active, passive")


# ============================================================================
# Response Models
# ============================================================================


class ConjugateResponse(BaseModel):
    """Response for /api/verb/conjugate."""
    valid: bool = Field(..., description="False when the input was rejected")
    error: str | None = Field(None, description="Why the input was rejected")
    verb: str = Field("", description="Dictionary form that was conjugated")
    verb_type: str = Field("", serialization_alias="verbType", description="ichidan, godan or irregular")
    conjugations: ConjugationChart | None = Field(None, description="Conjugation chart")
