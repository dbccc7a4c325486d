"""Katsuyo FastAPI application - Japanese verb conjugation API."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from katsuyo import __version__, settings
from katsuyo.models import ConjugateRequest, ConjugateResponse
from katsuyo.services.conjugator import conjugate_request
from katsuyo.services.jmdict import JMDictionary

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# Application Lifespan
# ============================================================================


def load_word_store() -> JMDictionary | None:
    """Load the JMdict word store, or None if it is disabled or unavailable."""
    if not settings.LOAD_DICTIONARY:
        logger.info("Word store disabled; verbs are validated by their ending only")
        return None
    try:
        store = JMDictionary.get_instance()
    except (OSError, ValueError) as e:
        logger.warning("Failed to load JMdict: %s", e)
        return None
    return store if store.is_loaded else None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the word store on startup."""
    app.state.word_store = load_word_store()
    yield


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Katsuyo API",
    description="""Japanese verb conjugation API for language learning.

## Features
- **Classification**: ichidan, godan and irregular (する/来る) verbs
- **Conjugation chart**: time, aspect, mood, modals, desire and voice
- **Negative / polite toggles**: applied to every form in the chart
- **English phrasing**: derived from the JMdict definition of the verb

## Endpoints
- `/api/verb/conjugate` - Conjugation chart for a dictionary-form verb
""",
    version=__version__,
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_word_store(request: Request) -> JMDictionary | None:
    """Word store loaded at startup (None when unavailable)."""
    return getattr(request.app.state, "word_store", None)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "katsuyo", "version": __version__}


@app.get("/health", tags=["Health"])
async def health(store: JMDictionary | None = Depends(get_word_store)) -> dict[str, str]:
    """Detailed health check."""
    return {
        "status": "healthy",
        "version": __version__,
        "dictionary": (store.version or "loaded") if store else "unavailable",
    }


# ============================================================================
# Conjugation Endpoints
# ============================================================================


@app.post(
    "/api/verb/conjugate",
    response_model=ConjugateResponse,
    response_model_exclude_none=True,
    tags=["Conjugation"],
)
async def conjugate_endpoint(
    request: ConjugateRequest,
    store: JMDictionary | None = Depends(get_word_store),
) -> ConjugateResponse:
    """
    Conjugate a dictionary-form verb.

    Returns the full chart; with `negative` and/or `polite` set, every
    form is shown in that register. Rejected input comes back with
    `valid: false` and an `error` message.
    """
    try:
        return conjugate_request(
            verb=request.verb,
            negative=request.negative,
            polite=request.polite,
            store=store,
        )
    except Exception as e:
        logger.exception("Conjugation failed for %r", request.verb)
        raise HTTPException(status_code=500, detail=f"Conjugation failed: {e!s}") from e


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "katsuyo.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
    )
