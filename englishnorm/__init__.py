# englishnorm/__init__.py
# ========================
# EnglishNorm — language detection and chunked translation to English
#
# Pipeline:
#   detect → decide → chunk → translate each chunk (paced) → merge
#
# Public API:
#   ensure_english(text) → PipelineResult

__version__ = "0.1.0"

from englishnorm.translation.pipeline import (  # noqa: F401, E402
    EnglishNormalizer,
    PipelineResult,
    ensure_english,
)

__all__ = [
    "__version__",
    "EnglishNormalizer",
    "PipelineResult",
    "ensure_english",
]
