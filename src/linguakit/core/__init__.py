"""Core components and interfaces for LinguaKit."""

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
)

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
]
