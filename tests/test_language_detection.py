"""
tests/test_language_detection.py
=================================
Language Detection Tests — EnglishNorm

Tests verify:
    1. Empty / whitespace samples short-circuit to "und" without classifying
    2. ISO 639-3 codes are mapped to ISO 639-1
    3. Unknown codes pass through unchanged
    4. Classifier failures degrade to "und" instead of raising
    5. Only a bounded prefix reaches the classifier
    6. The default langdetect classifier on real prose
    7. Concurrent first use of langdetect classifies every thread correctly

All tests are OFFLINE.
"""

import enum
import os
import sys
import threading
import unittest
from unittest.mock import MagicMock, patch

# Ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from langdetect import LangDetectException
from langdetect import detector_factory

from englishnorm.language.codes import (
    ISO639_3_TO_1,
    UNDETERMINED,
    language_name,
    to_iso639_1,
)
from englishnorm.language import detector as detector_module
from englishnorm.language.detector import (
    DECISION_CONFIDENCE,
    DetectionResult,
    LanguageDetector,
    langdetect_classifier,
)


ENGLISH_PARAGRAPH = (
    "The committee met on Tuesday morning to review the quarterly budget. "
    "Everyone agreed that the new schedule would make it easier for the "
    "team to finish the project before the end of the year, and the "
    "chairman thanked the volunteers for their hard work."
)

SPANISH_PARAGRAPH = (
    "El comité se reunió el martes por la mañana para revisar el "
    "presupuesto trimestral. Todos estuvieron de acuerdo en que el nuevo "
    "horario facilitaría que el equipo terminara el proyecto antes de fin "
    "de año, y el presidente agradeció a los voluntarios por su trabajo."
)


# ===================================================================
# Code tables
# ===================================================================


class TestLanguageCodes(unittest.TestCase):

    def test_major_languages_are_mapped(self):
        expected = {
            "eng": "en", "spa": "es", "fra": "fr", "deu": "de", "ita": "it",
            "por": "pt", "rus": "ru", "zho": "zh", "jpn": "ja", "hin": "hi",
            "ara": "ar", "ben": "bn", "urd": "ur", "tam": "ta", "tel": "te",
            "mar": "mr", "guj": "gu", "mal": "ml", "pan": "pa", "vie": "vi",
            "kor": "ko", "tur": "tr", "ukr": "uk", "pol": "pl", "ind": "id",
            "nld": "nl", "swe": "sv", "fin": "fi", "nor": "no", "dan": "da",
        }
        for iso3, iso1 in expected.items():
            self.assertEqual(ISO639_3_TO_1[iso3], iso1, iso3)

    def test_lookup_is_case_insensitive(self):
        self.assertEqual(to_iso639_1("DAN"), "da")
        self.assertEqual(to_iso639_1(" Eng "), "en")

    def test_unknown_code_returns_none(self):
        self.assertIsNone(to_iso639_1("xyz"))
        self.assertIsNone(to_iso639_1(""))
        self.assertIsNone(to_iso639_1(None))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            ISO639_3_TO_1["eng"] = "xx"  # type: ignore[index]

    def test_language_name(self):
        self.assertEqual(language_name("es"), "Spanish")
        self.assertEqual(language_name(UNDETERMINED), "Undetermined")
        self.assertEqual(language_name("tgl"), "Tgl")


# ===================================================================
# Detector with injected classifier
# ===================================================================


class TestLanguageDetector(unittest.TestCase):

    def test_empty_text_is_undetermined(self):
        classifier = MagicMock()
        detector = LanguageDetector(classifier=classifier)

        self.assertEqual(detector.detect(""), DetectionResult("und", 0.0))
        self.assertEqual(detector.detect("   "), DetectionResult("und", 0.0))
        self.assertEqual(detector.detect(None), DetectionResult("und", 0.0))
        classifier.assert_not_called()

    def test_iso3_code_is_mapped(self):
        detector = LanguageDetector(classifier=lambda sample: "spa")
        result = detector.detect("hola")
        self.assertEqual(result.language_code, "es")
        self.assertEqual(result.confidence, DECISION_CONFIDENCE)

    def test_unmapped_code_passes_through(self):
        detector = LanguageDetector(classifier=lambda sample: "tgl")
        result = detector.detect("kumusta")
        self.assertEqual(result.language_code, "tgl")
        self.assertEqual(result.confidence, 0.9)

    def test_two_letter_code_passes_through(self):
        detector = LanguageDetector(classifier=lambda sample: "en")
        self.assertEqual(detector.detect("hello").language_code, "en")

    def test_und_from_classifier_has_zero_confidence(self):
        detector = LanguageDetector(classifier=lambda sample: "und")
        result = detector.detect("12345 !!!")
        self.assertEqual(result, DetectionResult("und", 0.0))

    def test_classifier_failure_degrades(self):
        def broken(sample):
            raise ImportError("classifier unavailable")

        detector = LanguageDetector(classifier=broken)
        with self.assertLogs("englishnorm.language.detector", level="WARNING"):
            result = detector.detect("some text")
        self.assertEqual(result, DetectionResult("und", 0.0))

    def test_none_from_classifier_is_undetermined(self):
        detector = LanguageDetector(classifier=lambda sample: None)
        self.assertEqual(detector.detect("some text"), DetectionResult("und", 0.0))

    def test_bytes_and_enum_codes_are_accepted(self):
        class Lang(str, enum.Enum):
            SPANISH = "spa"

        self.assertEqual(
            LanguageDetector(classifier=lambda sample: b"spa").detect("hola").language_code,
            "es",
        )
        self.assertEqual(
            LanguageDetector(classifier=lambda sample: Lang.SPANISH).detect("hola").language_code,
            "es",
        )

    def test_unprintable_classifier_result_degrades(self):
        class Unprintable:
            def __str__(self):
                raise TypeError("no string form")

        detector = LanguageDetector(classifier=lambda sample: Unprintable())
        with self.assertLogs("englishnorm.language.detector", level="WARNING"):
            result = detector.detect("some text")
        self.assertEqual(result, DetectionResult("und", 0.0))

    def test_only_prefix_is_classified(self):
        classifier = MagicMock(return_value="eng")
        detector = LanguageDetector(classifier=classifier, sample_chars=2000)

        detector.detect("a" * 10_000)

        sample = classifier.call_args.args[0]
        self.assertEqual(len(sample), 2000)

    def test_whitespace_prefix_counts_as_empty(self):
        classifier = MagicMock(return_value="eng")
        detector = LanguageDetector(classifier=classifier, sample_chars=5)

        result = detector.detect("      actual words come later")

        self.assertEqual(result.language_code, "und")
        classifier.assert_not_called()

    def test_invalid_sample_size_rejected(self):
        with self.assertRaises(ValueError):
            LanguageDetector(sample_chars=0)


# ===================================================================
# Default langdetect classifier
# ===================================================================


class TestLangdetectClassifier(unittest.TestCase):

    def test_english_prose(self):
        self.assertEqual(langdetect_classifier(ENGLISH_PARAGRAPH), "en")

    def test_spanish_prose(self):
        self.assertEqual(langdetect_classifier(SPANISH_PARAGRAPH), "es")

    def test_no_features_is_undetermined(self):
        self.assertEqual(langdetect_classifier("12345 !!! 678"), UNDETERMINED)

    @patch("englishnorm.language.detector._langdetect_detect")
    def test_region_suffix_dropped(self, mock_detect):
        mock_detect.return_value = "zh-cn"
        self.assertEqual(langdetect_classifier("你好"), "zh")

    @patch("englishnorm.language.detector._langdetect_detect")
    def test_langdetect_exception_is_undetermined(self, mock_detect):
        mock_detect.side_effect = LangDetectException(0, "No features in text.")
        self.assertEqual(langdetect_classifier("..."), UNDETERMINED)

    def test_default_detector_uses_langdetect(self):
        detector = LanguageDetector()
        result = detector.detect(ENGLISH_PARAGRAPH)
        self.assertEqual(result, DetectionResult("en", DECISION_CONFIDENCE))



class TestConcurrentFirstUse(unittest.TestCase):
    """Threads that hit a cold langdetect at the same moment all see English."""

    THREADS = 16

    def setUp(self):
        factory_patch = patch.object(detector_factory, "_factory", None)
        loaded_patch = patch.object(detector_module, "_profiles_loaded", False)
        factory_patch.start()
        loaded_patch.start()
        self.addCleanup(factory_patch.stop)
        self.addCleanup(loaded_patch.stop)

    def test_simultaneous_detection_is_english_everywhere(self):
        barrier = threading.Barrier(self.THREADS)
        results = [None] * self.THREADS
        errors = []

        def worker(slot):
            try:
                barrier.wait(timeout=10)
                results[slot] = LanguageDetector().detect(ENGLISH_PARAGRAPH).language_code
            except Exception as exc:  # surfaced via the errors list
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(self.THREADS)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=30)

        self.assertEqual(errors, [])
        self.assertEqual(results, ["en"] * self.THREADS)


if __name__ == "__main__":
    unittest.main()
