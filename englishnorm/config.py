"""
englishnorm/config.py
======================
Runtime configuration — EnglishNorm

Responsibility:
    - Load environment variables (optionally from a local .env file)
    - Parse and validate numeric tuning knobs for the pipeline
    - Expose a single immutable Settings object

Every value has a default, so an empty environment yields a usable
configuration (apart from OPENAI_API_KEY, which only the OpenAI backend
requires).

This module does NOT:
    - Build OpenAI clients or pipeline objects
    - Mutate settings after they are loaded
"""

import os
from dataclasses import dataclass
from typing import Callable, Mapping, TypeVar

from dotenv import load_dotenv

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_MODEL: str = "gpt-4o-mini"
DEFAULT_MAX_CHUNK_WORDS: int = 1200        # ~1-2k tokens per chunk
DEFAULT_CHUNK_OVERLAP_WORDS: int = 80
DEFAULT_PACING_MS: int = 150
DEFAULT_REQUEST_TIMEOUT: float = 45.0      # seconds, per backend call
DEFAULT_MAX_OUTPUT_TOKENS: int = 1200
DEFAULT_TEMPERATURE: float = 0.1
DEFAULT_DETECTION_SAMPLE_CHARS: int = 2000
DEFAULT_MAX_RETRIES: int = 2


@dataclass(frozen=True)
class Settings:
    """Immutable pipeline configuration."""

    openai_api_key: str | None = None
    model: str = DEFAULT_MODEL
    max_chunk_words: int = DEFAULT_MAX_CHUNK_WORDS
    chunk_overlap_words: int = DEFAULT_CHUNK_OVERLAP_WORDS
    pacing_ms: int = DEFAULT_PACING_MS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    detection_sample_chars: int = DEFAULT_DETECTION_SAMPLE_CHARS
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        validate_chunking(self.max_chunk_words, self.chunk_overlap_words)
        if self.pacing_ms < 0:
            raise ValueError(f"pacing_ms must be >= 0, got {self.pacing_ms}")
        if self.request_timeout <= 0:
            raise ValueError(
                f"request_timeout must be > 0, got {self.request_timeout}"
            )
        if self.max_output_tokens < 1:
            raise ValueError(
                f"max_output_tokens must be >= 1, got {self.max_output_tokens}"
            )
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(
                f"temperature must be between 0.0 and 2.0, got {self.temperature}"
            )
        if self.detection_sample_chars < 1:
            raise ValueError(
                "detection_sample_chars must be >= 1, "
                f"got {self.detection_sample_chars}"
            )
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")

    @property
    def pacing_seconds(self) -> float:
        return self.pacing_ms / 1000.0


def validate_chunking(max_chunk_words: int, chunk_overlap_words: int) -> None:
    """
    Reject chunk settings that would stall the word chunker.

    Raises:
        ValueError: If sizes are non-positive / negative, or the overlap
            is not strictly smaller than the chunk size.
    """
    if max_chunk_words < 1:
        raise ValueError(f"max_chunk_words must be >= 1, got {max_chunk_words}")
    if chunk_overlap_words < 0:
        raise ValueError(
            f"chunk_overlap_words must be >= 0, got {chunk_overlap_words}"
        )
    if chunk_overlap_words >= max_chunk_words:
        raise ValueError(
            "chunk_overlap_words must be smaller than max_chunk_words "
            f"({chunk_overlap_words} >= {max_chunk_words})"
        )


# ---------------------------------------------------------------------------
# Environment parsing
# ---------------------------------------------------------------------------


def _read(
    env: Mapping[str, str],
    name: str,
    parse: Callable[[str], T],
    default: T,
) -> T:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from exc


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the process environment.

    A .env file in the working directory is loaded first when reading
    from ``os.environ``; existing variables are never overridden.

    Args:
        env: Mapping to read instead of ``os.environ`` (used in tests).

    Returns:
        Validated Settings instance.

    Raises:
        ValueError: If any variable cannot be parsed or fails validation.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    return Settings(
        openai_api_key=env.get("OPENAI_API_KEY") or None,
        model=_read(env, "ENGLISHNORM_MODEL", str, DEFAULT_MODEL),
        max_chunk_words=_read(
            env, "ENGLISHNORM_MAX_CHUNK_WORDS", int, DEFAULT_MAX_CHUNK_WORDS,
        ),
        chunk_overlap_words=_read(
            env, "ENGLISHNORM_CHUNK_OVERLAP_WORDS", int, DEFAULT_CHUNK_OVERLAP_WORDS,
        ),
        pacing_ms=_read(env, "ENGLISHNORM_PACING_MS", int, DEFAULT_PACING_MS),
        request_timeout=_read(
            env, "ENGLISHNORM_REQUEST_TIMEOUT", float, DEFAULT_REQUEST_TIMEOUT,
        ),
        max_output_tokens=_read(
            env, "ENGLISHNORM_MAX_OUTPUT_TOKENS", int, DEFAULT_MAX_OUTPUT_TOKENS,
        ),
        temperature=_read(
            env, "ENGLISHNORM_TEMPERATURE", float, DEFAULT_TEMPERATURE,
        ),
        detection_sample_chars=_read(
            env,
            "ENGLISHNORM_DETECTION_SAMPLE_CHARS",
            int,
            DEFAULT_DETECTION_SAMPLE_CHARS,
        ),
        max_retries=_read(
            env, "ENGLISHNORM_MAX_RETRIES", int, DEFAULT_MAX_RETRIES,
        ),
    )
