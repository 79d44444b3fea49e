"""
englishnorm/api/normalize.py
=============================
API Endpoint — EnglishNorm

Responsibility:
    - Expose POST /api/v1/ensure-english
    - Accept a JSON body {"text": "..."}
    - Run the ensure-English pipeline off the event loop
    - Return the pipeline result as JSON

Backend failures inside the pipeline never surface here: they degrade
to untranslated chunks listed in "failed_chunks". Only configuration
problems (missing OPENAI_API_KEY, invalid settings) produce a 500.
"""

import asyncio
import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from englishnorm import __version__
from englishnorm.config import load_settings
from englishnorm.language.codes import language_name
from englishnorm.translation.pipeline import EnglishNormalizer

logger = logging.getLogger("englishnorm.api")


class EnsureEnglishRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Raw text in any language.")


@lru_cache(maxsize=1)
def get_normalizer() -> EnglishNormalizer:
    """Process-wide normalizer built from the environment on first use."""
    return EnglishNormalizer.from_settings(load_settings())


def _resolve_normalizer() -> EnglishNormalizer:
    try:
        return get_normalizer()
    except (RuntimeError, ValueError) as exc:
        logger.error("Pipeline configuration error: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="EnglishNorm",
    description="Language detection and chunked translation to English.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------


@app.post("/api/v1/ensure-english")
async def ensure_english_endpoint(
    body: EnsureEnglishRequest,
    normalizer: EnglishNormalizer = Depends(_resolve_normalizer),
):
    """
    Normalize the submitted text to English.

    Returns:
        JSON with english_text, detected_lang, language_name, translated,
        failed_chunks and cancelled.
    """
    logger.info("Text received: %d chars.", len(body.text))

    result = await asyncio.to_thread(normalizer.ensure_english, body.text)

    content = result.to_dict()
    content["language_name"] = language_name(result.detected_lang)
    return JSONResponse(status_code=200, content=content)
