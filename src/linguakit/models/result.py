"""Result models returned by language detectors."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class DetectionResult(BaseModel):
    """A contiguous span of a text attributed to one language.

    Offsets are character indices into the original text, end exclusive.
    """

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., description="Canonical language name")
    start_index: int = Field(..., ge=0, description="Start character offset")
    end_index: int = Field(..., ge=0, description="End character offset (exclusive)")
    word_count: int = Field(0, ge=0, description="Number of words in the span")

    def as_tuple(self) -> Tuple[str, int, int]:
        return (self.language, self.start_index, self.end_index)

    def extract(self, text: str) -> str:
        """Return the slice of ``text`` covered by this span."""
        return text[self.start_index:self.end_index]


class ConfidenceValue(BaseModel):
    """Confidence that a text is written in a given language."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., description="Canonical language name")
    value: float = Field(..., ge=0.0, le=1.0, description="Confidence (0.0-1.0)")

    def as_tuple(self) -> Tuple[str, float]:
        return (self.language, self.value)
