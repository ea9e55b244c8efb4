"""LinguaKit - configurable natural-language detection.

Builds immutable language detectors on top of the lingua engine and
exposes single-text, multi-span, confidence and batch detection.
"""

__version__ = "0.1.0"

from linguakit.core.interfaces import (
    BuilderConsumedError,
    ConfigurationError,
    IdentifierKind,
    InvalidArgumentError,
    LinguaKitError,
    Script,
    StateError,
)
from linguakit.core.language import (
    LanguageDetector,
    LanguageDetectorBuilder,
    languages,
    languages_with_arabic_script,
    languages_with_cyrillic_script,
    languages_with_devanagari_script,
    languages_with_latin_script,
    languages_with_script,
    languages_with_single_unique_script,
    parse_identifiers,
    parse_iso_codes_639_1,
    parse_iso_codes_639_3,
    parse_language,
    parse_languages,
    spoken_languages,
)
from linguakit.models.result import ConfidenceValue, DetectionResult

__all__ = [
    "BuilderConsumedError",
    "ConfigurationError",
    "IdentifierKind",
    "InvalidArgumentError",
    "LinguaKitError",
    "Script",
    "StateError",
    "LanguageDetector",
    "LanguageDetectorBuilder",
    "ConfidenceValue",
    "DetectionResult",
    "languages",
    "languages_with_arabic_script",
    "languages_with_cyrillic_script",
    "languages_with_devanagari_script",
    "languages_with_latin_script",
    "languages_with_script",
    "languages_with_single_unique_script",
    "parse_identifiers",
    "parse_iso_codes_639_1",
    "parse_iso_codes_639_3",
    "parse_language",
    "parse_languages",
    "spoken_languages",
]
