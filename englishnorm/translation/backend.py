"""
englishnorm/translation/backend.py
===================================
Translation Backend Adapter — EnglishNorm

Responsibility:
    - Send ONE chunk of text to an OpenAI chat model for translation
    - Use near-deterministic decoding and a bounded output budget
    - Return the trimmed completion text

Contract:
    translate_chunk(chunk) returns English text on success and raises on
    any failure (network, quota, timeout, empty completion). Per-chunk
    fallback is the orchestrator's job, not this module's.

The model output is trusted as-is: no check is made that it is actually
English.

This module does NOT:
    - Detect language
    - Split or merge text
    - Swallow errors
"""

import logging
from typing import Any, Protocol

from openai import OpenAI

from englishnorm.config import Settings
from englishnorm.openai_retry import chat_completions_with_retry

logger = logging.getLogger("englishnorm.translation.backend")


class TranslationBackend(Protocol):
    """Anything that can translate a single chunk to English."""

    def translate_chunk(self, chunk: str) -> str:
        ...


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

_SYSTEM_PROMPT: str = (
    "You are a professional translator. "
    "Stay faithful to the original meaning, be concise, and keep paragraph "
    "breaks. Do not add explanations."
)

_USER_PROMPT_PREFIX: str = (
    "Translate the following transcript into natural English. "
    "Preserve the meaning and as much of the structure as possible. "
    "Return only the translated English text with no commentary.\n\n"
)


def build_messages(chunk: str) -> list[dict[str, str]]:
    """Chat messages for translating one chunk."""
    return [
        {"role": "system", "content": _SYSTEM_PROMPT},
        {"role": "user", "content": _USER_PROMPT_PREFIX + chunk},
    ]


def extract_completion_text(response: Any) -> str:
    """
    Pull the first completion's text out of a ChatCompletion response.

    Raises:
        ValueError: If the response has no choices or the text is empty.
    """
    choices = getattr(response, "choices", None) or []
    if not choices:
        raise ValueError("Translation response contained no choices.")

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None) if message is not None else None
    text = str(content or "").strip()
    if not text:
        raise ValueError("Translation response was empty.")
    return text


# ---------------------------------------------------------------------------
# OpenAI adapter
# ---------------------------------------------------------------------------


class OpenAITranslationBackend:
    """Translates chunks with an OpenAI chat completion model."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: Any | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._client = client or self._build_client()

    def _build_client(self) -> OpenAI:
        api_key = self._settings.openai_api_key
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY environment variable is not set.")
        # Retries are handled by chat_completions_with_retry
        return OpenAI(
            api_key=api_key,
            timeout=self._settings.request_timeout,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._settings.model

    def translate_chunk(self, chunk: str) -> str:
        """
        Translate one chunk to English.

        Args:
            chunk: Source-language text (one chunk from the word chunker).

        Returns:
            Trimmed English completion text.

        Raises:
            ValueError: If the completion is empty.
            openai.OpenAIError: If the API call fails after retries.
        """
        settings = self._settings
        response = chat_completions_with_retry(
            self._client,
            max_retries=settings.max_retries,
            model=settings.model,
            messages=build_messages(chunk),
            temperature=settings.temperature,
            max_tokens=settings.max_output_tokens,
            timeout=settings.request_timeout,
        )

        text = extract_completion_text(response)
        logger.debug(
            "Chunk translated: %d chars in → %d chars out.", len(chunk), len(text),
        )
        return text
