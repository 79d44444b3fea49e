"""
englishnorm/openai_retry.py
============================
Shared OpenAI API retry utility — EnglishNorm

Provides a thin wrapper around ``client.chat.completions.create`` that
retries transient failures (429 rate-limit, 5xx server errors, connection
errors and timeouts) with exponential back-off.

Usage::

    from englishnorm.openai_retry import chat_completions_with_retry

    response = chat_completions_with_retry(
        client,
        max_retries=2,
        model="gpt-4o-mini",
        messages=[...],
        temperature=0.1,
        max_tokens=1200,
    )

This module does NOT:
    - Create or manage OpenAI client instances
    - Decide what happens when all attempts fail (callers own fallback)
"""

import logging
import time
from typing import Any, Callable

logger = logging.getLogger("englishnorm.openai_retry")

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

MAX_RETRIES: int = 2          # total attempts = MAX_RETRIES + 1 (initial)
BASE_DELAY: float = 1.0       # seconds, first back-off delay
MAX_DELAY: float = 20.0       # cap so a single chunk never stalls for long
BACKOFF_FACTOR: float = 2.0   # exponential multiplier

_RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({408, 429, 500, 502, 503, 504})
_RETRYABLE_ERROR_NAMES: frozenset[str] = frozenset({
    "RateLimitError",
    "APITimeoutError",
    "APIConnectionError",
    "InternalServerError",
})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_retryable(exc: Exception) -> bool:
    """Return True if the exception looks like a transient OpenAI error."""
    if type(exc).__name__ in _RETRYABLE_ERROR_NAMES:
        return True

    status_code = getattr(exc, "status_code", None)
    if isinstance(status_code, int):
        return status_code in _RETRYABLE_STATUS_CODES

    return isinstance(exc, (TimeoutError, ConnectionError))


def backoff_delays(
    max_retries: int,
    base_delay: float = BASE_DELAY,
    max_delay: float = MAX_DELAY,
) -> list[float]:
    """Delays slept between consecutive attempts, in order."""
    delays: list[float] = []
    delay = base_delay
    for _ in range(max_retries):
        delays.append(delay)
        delay = min(delay * BACKOFF_FACTOR, max_delay)
    return delays


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def chat_completions_with_retry(
    client: Any,
    *,
    max_retries: int = MAX_RETRIES,
    base_delay: float = BASE_DELAY,
    max_delay: float = MAX_DELAY,
    sleep: Callable[[float], None] = time.sleep,
    **kwargs: Any,
) -> Any:
    """
    Call ``client.chat.completions.create(**kwargs)`` with automatic retry.

    Args:
        client:      An instantiated ``openai.OpenAI`` client.
        max_retries: Extra attempts after the first one.
        base_delay:  First back-off delay in seconds.
        max_delay:   Upper bound for any single back-off delay.
        sleep:       Sleep function (swapped out in tests).
        **kwargs:    Passed directly to ``client.chat.completions.create()``.

    Returns:
        The OpenAI ChatCompletion response object.

    Raises:
        The last exception if all retries are exhausted, or the first
        non-retryable exception immediately.
    """
    delays = backoff_delays(max_retries, base_delay, max_delay)
    attempts = max_retries + 1

    for attempt in range(attempts):
        try:
            return client.chat.completions.create(**kwargs)
        except Exception as exc:
            if not is_retryable(exc):
                logger.warning(
                    "OpenAI call failed with non-retryable error: %s", exc,
                )
                raise

            if attempt >= max_retries:
                logger.error(
                    "OpenAI call failed after %d attempts: %s", attempts, exc,
                )
                raise

            delay = delays[attempt]
            logger.warning(
                "OpenAI call failed (attempt %d/%d): %s — retrying in %.1fs",
                attempt + 1,
                attempts,
                exc,
                delay,
            )
            sleep(delay)

    # Unreachable: the loop either returns or raises.
    raise RuntimeError("chat_completions_with_retry exited without a result")
