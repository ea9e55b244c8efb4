"""Configuration models for LinguaKit."""

from pathlib import Path
from typing import List, Literal, Optional, Union

import toml
from pydantic import BaseModel, Field, ValidationError

from linguakit.core.interfaces import ConfigurationError


class DetectorConfiguration(BaseModel):
    """Settings accumulated by a builder and committed to one detector.

    ``languages`` holds canonical language names, sorted and deduplicated.
    """

    languages: List[str] = Field(..., min_length=1, description="Selected languages")
    minimum_relative_distance: float = Field(0.0, ge=0.0, le=1.0)
    preload_language_models: bool = False
    low_accuracy_mode: bool = False


class DetectorSection(BaseModel):
    """Which languages to detect and how."""

    languages: List[str] = []
    iso_codes_639_1: List[str] = []
    iso_codes_639_3: List[str] = []
    exclude: List[str] = []
    script: Optional[str] = None
    spoken_only: bool = False
    minimum_relative_distance: float = Field(0.0, ge=0.0, le=1.0)
    preload_language_models: bool = False
    low_accuracy_mode: bool = False


class OutputSection(BaseModel):
    """Output settings for the command-line interface."""

    format: Literal["table", "json"] = "table"
    log_level: str = "WARNING"


class LinguaKitConfig(BaseModel):
    """Complete LinguaKit configuration, usually loaded from TOML."""

    detector: DetectorSection = Field(default_factory=DetectorSection)
    output: OutputSection = Field(default_factory=OutputSection)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "LinguaKitConfig":
        """Load configuration from a TOML file.

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        path = Path(path)
        try:
            data = toml.load(path)
        except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}")

    def to_file(self, path: Union[str, Path]) -> None:
        """Write configuration to a TOML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(exclude_none=True)
        with open(path, 'w', encoding='utf-8') as f:
            toml.dump(data, f)
