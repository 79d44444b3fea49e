"""
englishnorm/translation/pipeline.py
====================================
Pipeline Orchestrator ("ensure English") — EnglishNorm

Responsibility:
    1. Detect the language of the input (bounded prefix only)
    2. Return the input untouched when it is already English
    3. Otherwise chunk the full text into overlapping word windows
    4. Translate each chunk IN ORDER, pacing between backend calls
    5. Keep the ORIGINAL chunk text whenever its translation fails
    6. Merge the parts and report detection metadata

Only the exact code "en" short-circuits. Undetermined input ("und") goes
through the full chunk-and-translate path.

Failure semantics:
    - Backend errors never escape ensure_english(); each failed chunk
      falls back to its source text and is listed in failed_chunks.
    - Invalid chunk configuration is rejected at construction time.

Concurrency:
    One invocation is strictly sequential. An EnglishNormalizer holds no
    per-call state, so one instance may serve several threads at once.

This module does NOT:
    - Talk to OpenAI directly (see translation/backend.py)
    - Persist results
"""

import logging
import threading
from dataclasses import dataclass

from englishnorm.config import (
    DEFAULT_CHUNK_OVERLAP_WORDS,
    DEFAULT_MAX_CHUNK_WORDS,
    Settings,
    load_settings,
    validate_chunking,
)
from englishnorm.language.codes import TARGET_LANGUAGE
from englishnorm.language.detector import Classifier, LanguageDetector
from englishnorm.text.chunker import Chunk, chunk_by_words
from englishnorm.text.merger import merge_chunks
from englishnorm.translation.backend import OpenAITranslationBackend, TranslationBackend
from englishnorm.translation.pacing import PacingController

logger = logging.getLogger("englishnorm.translation.pipeline")


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PipelineResult:
    """Normalized English text plus detection metadata."""

    english_text: str
    detected_lang: str
    translated: bool               # True iff the translation path was taken
    failed_chunks: tuple[int, ...] = ()
    cancelled: bool = False

    def to_dict(self) -> dict:
        return {
            "english_text": self.english_text,
            "detected_lang": self.detected_lang,
            "translated": self.translated,
            "failed_chunks": list(self.failed_chunks),
            "cancelled": self.cancelled,
        }


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class EnglishNormalizer:
    """Composes detector, chunker, backend, pacer and merger."""

    def __init__(
        self,
        backend: TranslationBackend,
        detector: LanguageDetector | None = None,
        pacer: PacingController | None = None,
        max_chunk_words: int = DEFAULT_MAX_CHUNK_WORDS,
        chunk_overlap_words: int = DEFAULT_CHUNK_OVERLAP_WORDS,
    ) -> None:
        validate_chunking(max_chunk_words, chunk_overlap_words)
        self._backend = backend
        self._detector = detector or LanguageDetector()
        self._pacer = pacer or PacingController()
        self.max_chunk_words = max_chunk_words
        self.chunk_overlap_words = chunk_overlap_words

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        backend: TranslationBackend | None = None,
        classifier: Classifier | None = None,
    ) -> "EnglishNormalizer":
        """
        Build a normalizer wired from Settings.

        Raises:
            RuntimeError: If no backend is given and OPENAI_API_KEY is unset.
        """
        return cls(
            backend=backend or OpenAITranslationBackend(settings),
            detector=LanguageDetector(
                classifier=classifier,
                sample_chars=settings.detection_sample_chars,
            ),
            pacer=PacingController(interval_seconds=settings.pacing_seconds),
            max_chunk_words=settings.max_chunk_words,
            chunk_overlap_words=settings.chunk_overlap_words,
        )

    def ensure_english(
        self,
        text: str,
        cancel_event: threading.Event | None = None,
    ) -> PipelineResult:
        """
        Return ``text`` in English, translating chunk by chunk if needed.

        Args:
            text:         Raw input text of any length.
            cancel_event: Optional event checked before each chunk. Once
                          set, the remaining chunks are kept untranslated.

        Returns:
            PipelineResult. Always returned; backend failures degrade to
            the original chunk text instead of raising.
        """
        detection = self._detector.detect(text)
        lang = detection.language_code

        if lang == TARGET_LANGUAGE:
            logger.info("Input already English — no translation needed.")
            return PipelineResult(
                english_text=text,
                detected_lang=TARGET_LANGUAGE,
                translated=False,
            )

        chunks = chunk_by_words(
            text, self.max_chunk_words, self.chunk_overlap_words,
        )
        logger.info(
            "Translating %d chunk(s) from '%s' (confidence=%.2f).",
            len(chunks), lang, detection.confidence,
        )

        parts, failed, cancelled = self._translate_chunks(chunks, cancel_event)
        english_text = merge_chunks(parts)

        if failed:
            logger.warning(
                "%d of %d chunk(s) kept untranslated: %s",
                len(failed), len(chunks), list(failed),
            )
        logger.info(
            "Translation complete: %d chunk(s), %d chars out.",
            len(chunks), len(english_text),
        )

        return PipelineResult(
            english_text=english_text,
            detected_lang=lang,
            translated=True,
            failed_chunks=tuple(failed),
            cancelled=cancelled,
        )

    # -----------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------

    def _translate_chunks(
        self,
        chunks: list[Chunk],
        cancel_event: threading.Event | None,
    ) -> tuple[list[str], list[int], bool]:
        parts: list[str] = []
        failed: list[int] = []
        last = len(chunks) - 1

        for chunk in chunks:
            if cancel_event is not None and cancel_event.is_set():
                remaining = chunks[chunk.index:]
                logger.info(
                    "Translation cancelled before chunk %d; keeping %d "
                    "chunk(s) untranslated.",
                    chunk.index, len(remaining),
                )
                parts.extend(c.text for c in remaining)
                return parts, failed, True

            parts.append(self._translate_one(chunk, failed))

            if chunk.index < last:
                self._pacer.pace()

        return parts, failed, False

    def _translate_one(self, chunk: Chunk, failed: list[int]) -> str:
        try:
            return self._backend.translate_chunk(chunk.text)
        except Exception as exc:
            logger.warning(
                "Chunk %d translation failed, keeping original text: %s",
                chunk.index, exc,
            )
            failed.append(chunk.index)
            return chunk.text


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def ensure_english(
    text: str,
    settings: Settings | None = None,
    cancel_event: threading.Event | None = None,
) -> PipelineResult:
    """
    One-shot convenience wrapper around EnglishNormalizer.

    Settings are read from the environment when not supplied.

    Raises:
        RuntimeError: If OPENAI_API_KEY is not configured.
        ValueError: If the environment holds invalid settings.
    """
    normalizer = EnglishNormalizer.from_settings(settings or load_settings())
    return normalizer.ensure_english(text, cancel_event=cancel_event)
