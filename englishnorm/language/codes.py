"""
englishnorm/language/codes.py
==============================
Language code tables — EnglishNorm

Responsibility:
    - Map ISO 639-3 (and common ISO 639-2/B) codes to ISO 639-1
    - Provide human-readable names for ISO 639-1 codes

Both tables are read-only module constants.
"""

from types import MappingProxyType
from typing import Mapping

UNDETERMINED: str = "und"
TARGET_LANGUAGE: str = "en"


# ---------------------------------------------------------------------------
# ISO 639-3 → ISO 639-1
# ---------------------------------------------------------------------------

ISO639_3_TO_1: Mapping[str, str] = MappingProxyType({
    "eng": "en",  # English
    "spa": "es",  # Spanish
    "fra": "fr",  # French
    "fre": "fr",  # French (639-2/B)
    "deu": "de",  # German
    "ger": "de",  # German (639-2/B)
    "ita": "it",  # Italian
    "por": "pt",  # Portuguese
    "rus": "ru",  # Russian
    "zho": "zh",  # Chinese
    "chi": "zh",  # Chinese (639-2/B)
    "cmn": "zh",  # Mandarin
    "jpn": "ja",  # Japanese
    "hin": "hi",  # Hindi
    "ara": "ar",  # Arabic
    "arb": "ar",  # Standard Arabic
    "ben": "bn",  # Bengali
    "urd": "ur",  # Urdu
    "tam": "ta",  # Tamil
    "tel": "te",  # Telugu
    "mar": "mr",  # Marathi
    "guj": "gu",  # Gujarati
    "mal": "ml",  # Malayalam
    "pan": "pa",  # Punjabi
    "vie": "vi",  # Vietnamese
    "kor": "ko",  # Korean
    "tur": "tr",  # Turkish
    "ukr": "uk",  # Ukrainian
    "pol": "pl",  # Polish
    "ind": "id",  # Indonesian
    "nld": "nl",  # Dutch
    "dut": "nl",  # Dutch (639-2/B)
    "swe": "sv",  # Swedish
    "fin": "fi",  # Finnish
    "nor": "no",  # Norwegian
    "nob": "no",  # Norwegian Bokmål
    "dan": "da",  # Danish
})


_LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType({
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "zh": "Chinese",
    "ja": "Japanese",
    "hi": "Hindi",
    "ar": "Arabic",
    "bn": "Bengali",
    "ur": "Urdu",
    "ta": "Tamil",
    "te": "Telugu",
    "mr": "Marathi",
    "gu": "Gujarati",
    "ml": "Malayalam",
    "pa": "Punjabi",
    "vi": "Vietnamese",
    "ko": "Korean",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "pl": "Polish",
    "id": "Indonesian",
    "nl": "Dutch",
    "sv": "Swedish",
    "fi": "Finnish",
    "no": "Norwegian",
    "da": "Danish",
    UNDETERMINED: "Undetermined",
})


def to_iso639_1(code: str | None) -> str | None:
    """
    Map a 3-letter code to its 2-letter form.

    Lookup is case-insensitive. Returns None when the code is unknown.
    """
    if not code:
        return None
    return ISO639_3_TO_1.get(code.strip().lower())


def language_name(code: str) -> str:
    """Human-readable name for a language code (title-cased code if unknown)."""
    return _LANGUAGE_NAMES.get(code, code.title())
