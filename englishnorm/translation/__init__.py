# englishnorm/translation/__init__.py
# ====================================
# Translation Layer — EnglishNorm
#
# Pipeline ("ensure English"):
#   1. Detect language on a bounded prefix
#   2. Short-circuit when the code is exactly "en"
#   3. Chunk into overlapping word windows
#   4. Translate chunks sequentially via OpenAI, pacing between calls
#   5. Keep the original text of any chunk whose translation failed
#   6. Merge parts with blank lines
#
# Public API:
#   ensure_english(text) → PipelineResult
#   EnglishNormalizer(backend, ...).ensure_english(text)

from englishnorm.translation.backend import (  # noqa: F401
    OpenAITranslationBackend,
    TranslationBackend,
)
from englishnorm.translation.pacing import PacingController  # noqa: F401
from englishnorm.translation.pipeline import (  # noqa: F401
    EnglishNormalizer,
    PipelineResult,
    ensure_english,
)

__all__ = [
    "OpenAITranslationBackend",
    "TranslationBackend",
    "PacingController",
    "EnglishNormalizer",
    "PipelineResult",
    "ensure_english",
]
