"""
englishnorm/language/detector.py
=================================
Language Detection — EnglishNorm

Responsibility:
    - Guess the dominant language of a text from a bounded prefix
    - Normalize the classifier's code to ISO 639-1 where a mapping exists
    - Degrade to "und" (undetermined) instead of raising

The statistical classifier is injected: any callable that takes a text
sample and returns a language code, or "und" when it cannot decide.
The default classifier wraps langdetect.

Confidence is a fixed constant whenever the classifier produced a
decision; it is not a calibrated probability.

This module does NOT:
    - Translate text
    - Decide whether translation is needed (see translation/pipeline.py)
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from langdetect import DetectorFactory, LangDetectException
from langdetect import detect as _langdetect_detect
from langdetect import detector_factory as _langdetect_factory

from englishnorm.config import DEFAULT_DETECTION_SAMPLE_CHARS
from englishnorm.language.codes import UNDETERMINED, to_iso639_1

# langdetect is non-deterministic on short input unless seeded
DetectorFactory.seed = 0

logger = logging.getLogger("englishnorm.language.detector")

DECISION_CONFIDENCE: float = 0.9

Classifier = Callable[[str], str]


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one detection call."""

    language_code: str  # ISO 639-1 where known (e.g. "en"), else raw code / "und"
    confidence: float   # 0.0 when undetermined, DECISION_CONFIDENCE otherwise


UNDETERMINED_RESULT = DetectionResult(language_code=UNDETERMINED, confidence=0.0)


# ---------------------------------------------------------------------------
# Default classifier
# ---------------------------------------------------------------------------


_profiles_lock = threading.Lock()
_profiles_loaded = False


def _load_langdetect_profiles() -> None:
    """
    Load langdetect's language profiles exactly once.

    langdetect publishes its global factory before the profiles finish
    loading, so concurrent first calls can classify against a partial
    profile set. All loading goes through this lock.
    """
    global _profiles_loaded
    if _profiles_loaded:
        return
    with _profiles_lock:
        if not _profiles_loaded:
            _langdetect_factory.init_factory()
            _profiles_loaded = True


def langdetect_classifier(sample: str) -> str:
    """
    Classify a sample with langdetect.

    langdetect raises LangDetectException when the sample has no usable
    features (digits, punctuation, emoji); that is reported as "und".
    Region suffixes such as "zh-cn" are dropped.
    """
    _load_langdetect_profiles()
    try:
        code = _langdetect_detect(sample)
    except LangDetectException:
        return UNDETERMINED
    return code.split("-", 1)[0].lower()


# ---------------------------------------------------------------------------
# Detector
# ---------------------------------------------------------------------------


class LanguageDetector:
    """Detects the language of a text prefix using an injected classifier."""

    def __init__(
        self,
        classifier: Classifier | None = None,
        sample_chars: int = DEFAULT_DETECTION_SAMPLE_CHARS,
    ) -> None:
        if sample_chars < 1:
            raise ValueError(f"sample_chars must be >= 1, got {sample_chars}")
        self._classifier = classifier or langdetect_classifier
        self._sample_chars = sample_chars

    @property
    def sample_chars(self) -> int:
        return self._sample_chars

    def detect(self, text: str | None) -> DetectionResult:
        """
        Detect the language of ``text``.

        Only the first ``sample_chars`` characters are classified.

        Args:
            text: Arbitrary input text (None is treated as empty).

        Returns:
            DetectionResult. Never raises for classifier failures:
            empty samples and classifier errors both yield
            ("und", 0.0).
        """
        sample = (text or "")[: self._sample_chars]
        if not sample.strip():
            return UNDETERMINED_RESULT

        try:
            raw_code = _normalize_code(self._classifier(sample))
        except Exception as exc:
            logger.warning(
                "Language classifier failed; defaulting to '%s': %s",
                UNDETERMINED, exc,
            )
            return UNDETERMINED_RESULT

        if not raw_code or raw_code.lower() == UNDETERMINED:
            logger.info("Language undetermined for %d-char sample.", len(sample))
            return UNDETERMINED_RESULT

        code = to_iso639_1(raw_code) or raw_code
        logger.debug("Classifier returned %r → %r", raw_code, code)
        return DetectionResult(language_code=code, confidence=DECISION_CONFIDENCE)


def _normalize_code(raw: object) -> str:
    """Coerce a classifier's return value (str, bytes, Enum, None) to a code."""
    if raw is None:
        return ""
    raw = getattr(raw, "value", raw)
    if isinstance(raw, bytes):
        raw = raw.decode("ascii")
    return str(raw).strip()
