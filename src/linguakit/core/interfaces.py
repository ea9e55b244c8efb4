"""Core interfaces, enums and exceptions for LinguaKit components."""

from enum import Enum


class IdentifierKind(str, Enum):
    """Kinds of free-form identifiers accepted for a language."""

    NAME = "name"
    ISO_639_1 = "iso_639_1"
    ISO_639_3 = "iso_639_3"


class Script(str, Enum):
    """Scripts that a detector's language set can be restricted to."""

    ARABIC = "arabic"
    CYRILLIC = "cyrillic"
    DEVANAGARI = "devanagari"
    LATIN = "latin"


# Exception classes

class LinguaKitError(Exception):
    """Base exception for LinguaKit."""
    pass


class InvalidArgumentError(LinguaKitError, ValueError):
    """Exception raised for malformed or out-of-range input."""
    pass


class BuilderConsumedError(LinguaKitError, RuntimeError):
    """Exception raised when a builder is used after it has been built."""
    pass


StateError = BuilderConsumedError


class ConfigurationError(LinguaKitError):
    """Exception raised when configuration is invalid."""
    pass
