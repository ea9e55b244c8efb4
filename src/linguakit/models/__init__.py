"""Data models for LinguaKit."""

from linguakit.models.result import ConfidenceValue, DetectionResult

__all__ = [
    "ConfidenceValue",
    "DetectionResult",
]
