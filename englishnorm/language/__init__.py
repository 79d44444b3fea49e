# englishnorm/language/__init__.py
# =================================
# Language Detection Layer — EnglishNorm
#
#   1. Take a bounded prefix of the input text
#   2. Classify it (langdetect by default, injectable)
#   3. Normalize ISO 639-3 codes to ISO 639-1
#
# Public API:
#   LanguageDetector(classifier=None).detect(text) → DetectionResult

from englishnorm.language.codes import (  # noqa: F401
    TARGET_LANGUAGE,
    UNDETERMINED,
    language_name,
)
from englishnorm.language.detector import (  # noqa: F401
    DetectionResult,
    LanguageDetector,
    langdetect_classifier,
)

__all__ = [
    "TARGET_LANGUAGE",
    "UNDETERMINED",
    "language_name",
    "DetectionResult",
    "LanguageDetector",
    "langdetect_classifier",
]
