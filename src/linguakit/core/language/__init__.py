"""Language detection components for LinguaKit."""

from linguakit.core.language.builder import LanguageDetectorBuilder
from linguakit.core.language.detector import LanguageDetector
from linguakit.core.language.identifiers import (
    canonical_name,
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

__all__ = [
    "LanguageDetectorBuilder",
    "LanguageDetector",
    "canonical_name",
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
