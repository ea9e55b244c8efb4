"""Shared fixtures for LinguaKit tests."""

import pytest

from linguakit import LanguageDetectorBuilder

ENGLISH_TEXT = "This is a test sentence written in English."
FRENCH_TEXT = "Bonjour tout le monde, comment allez-vous aujourd'hui ?"
GERMAN_TEXT = "Ich spreche Französisch nur ein bisschen und lerne jeden Tag."

MIXED_TEXT = (
    "Parlez-vous français? "
    "Ich spreche Französisch nur ein bisschen. "
    "A little bit is better than nothing."
)


@pytest.fixture(scope="module")
def detector():
    """Detector for English, French and German without a distance threshold."""
    return (
        LanguageDetectorBuilder
        .from_languages(["English", "French", "German"])
        .with_minimum_relative_distance(0.0)
        .build()
    )
