"""Builder that configures and creates language detectors."""

import logging
import math
import numbers
import threading
from typing import Iterable, List, Optional, Union

from lingua import Language

from linguakit.core.interfaces import BuilderConsumedError, InvalidArgumentError, Script
from linguakit.core.language import identifiers
from linguakit.core.language.detector import LanguageDetector
from linguakit.models.config import DetectorConfiguration, LinguaKitConfig

logger = logging.getLogger(__name__)


class LanguageDetectorBuilder:
    """One-shot accumulator of detector configuration.

    Every factory returns a builder holding a fresh configuration. Setters
    modify it in place and return the builder for chaining. ``build`` moves
    the configuration into a new detector and leaves the builder consumed;
    any later call on a consumed builder raises ``BuilderConsumedError``.

    The configuration slot is guarded by a lock, so concurrent callers see
    the builder either before or after ``build``, never in between.
    """

    def __init__(self, languages: Iterable[Language]):
        names = identifiers.sorted_names(languages)
        if not names:
            raise InvalidArgumentError("languages list must not be empty")

        self._lock = threading.Lock()
        self._configuration: Optional[DetectorConfiguration] = DetectorConfiguration(languages=names)

    # Factories

    @classmethod
    def from_languages(cls, languages: Iterable[str]) -> "LanguageDetectorBuilder":
        """Create a builder for an explicit, non-empty list of language names."""
        return cls(identifiers.parse_languages(languages))

    @classmethod
    def from_all_languages(cls) -> "LanguageDetectorBuilder":
        return cls(identifiers.all_language_set())

    @classmethod
    def from_all_spoken_languages(cls) -> "LanguageDetectorBuilder":
        """Create a builder for all languages except constructed or extinct ones."""
        return cls(identifiers.spoken_language_set())

    @classmethod
    def from_all_languages_with_script(cls, script: Union[Script, str]) -> "LanguageDetectorBuilder":
        return cls(identifiers.script_language_set(script))

    @classmethod
    def from_all_languages_with_arabic_script(cls) -> "LanguageDetectorBuilder":
        return cls.from_all_languages_with_script(Script.ARABIC)

    @classmethod
    def from_all_languages_with_cyrillic_script(cls) -> "LanguageDetectorBuilder":
        return cls.from_all_languages_with_script(Script.CYRILLIC)

    @classmethod
    def from_all_languages_with_devanagari_script(cls) -> "LanguageDetectorBuilder":
        return cls.from_all_languages_with_script(Script.DEVANAGARI)

    @classmethod
    def from_all_languages_with_latin_script(cls) -> "LanguageDetectorBuilder":
        return cls.from_all_languages_with_script(Script.LATIN)

    @classmethod
    def from_all_languages_with_single_unique_script(cls) -> "LanguageDetectorBuilder":
        return cls(identifiers.single_unique_script_language_set())

    @classmethod
    def from_all_languages_without(cls, languages: Iterable[str]) -> "LanguageDetectorBuilder":
        """Create a builder for all languages except a non-empty exclusion list."""
        excluded = set(identifiers.parse_languages(languages))
        remaining = identifiers.all_language_set() - excluded
        if not remaining:
            raise InvalidArgumentError("at least one language must remain after exclusions")
        return cls(remaining)

    @classmethod
    def from_iso_codes_639_1(cls, iso_codes: Iterable[str]) -> "LanguageDetectorBuilder":
        return cls(identifiers.parse_iso_codes_639_1(iso_codes))

    @classmethod
    def from_iso_codes_639_3(cls, iso_codes: Iterable[str]) -> "LanguageDetectorBuilder":
        return cls(identifiers.parse_iso_codes_639_3(iso_codes))

    @classmethod
    def from_config(cls, app_config: LinguaKitConfig) -> "LanguageDetectorBuilder":
        """Create a builder from the ``detector`` section of a configuration.

        The language set comes from the first non-empty of: ``languages``,
        ``iso_codes_639_1``, ``iso_codes_639_3``, ``exclude``, ``script``,
        ``spoken_only``. With none of them set, all languages are used.
        """
        section = app_config.detector

        if section.languages:
            builder = cls.from_languages(section.languages)
        elif section.iso_codes_639_1:
            builder = cls.from_iso_codes_639_1(section.iso_codes_639_1)
        elif section.iso_codes_639_3:
            builder = cls.from_iso_codes_639_3(section.iso_codes_639_3)
        elif section.exclude:
            builder = cls.from_all_languages_without(section.exclude)
        elif section.script:
            builder = cls.from_all_languages_with_script(section.script)
        elif section.spoken_only:
            builder = cls.from_all_spoken_languages()
        else:
            builder = cls.from_all_languages()

        builder.with_minimum_relative_distance(section.minimum_relative_distance)
        if section.preload_language_models:
            builder.with_preloaded_language_models()
        if section.low_accuracy_mode:
            builder.with_low_accuracy_mode()

        return builder

    # Setters

    def with_minimum_relative_distance(self, distance: float) -> "LanguageDetectorBuilder":
        """Require the best language to lead the runner-up by ``distance``.

        Raises:
            InvalidArgumentError: If ``distance`` is not within [0.0, 1.0]
            BuilderConsumedError: If the builder has already been built
        """
        distance = _validate_distance(distance)
        with self._lock:
            self._require_configuration().minimum_relative_distance = distance
        return self

    def with_preloaded_language_models(self) -> "LanguageDetectorBuilder":
        """Load all language models when the detector is built."""
        with self._lock:
            self._require_configuration().preload_language_models = True
        return self

    def with_low_accuracy_mode(self) -> "LanguageDetectorBuilder":
        """Trade accuracy for lower memory use and faster startup."""
        with self._lock:
            self._require_configuration().low_accuracy_mode = True
        return self

    # Terminal operation

    def build(self) -> LanguageDetector:
        """Consume the builder and create the detector.

        Raises:
            BuilderConsumedError: If the builder has already been built
        """
        with self._lock:
            configuration = self._require_configuration()
            self._configuration = None

        logger.debug(f"Builder consumed, building detector for {len(configuration.languages)} languages")
        return LanguageDetector.from_configuration(configuration)

    # Inspection

    @property
    def is_consumed(self) -> bool:
        with self._lock:
            return self._configuration is None

    @property
    def configuration(self) -> DetectorConfiguration:
        """A copy of the configuration accumulated so far."""
        with self._lock:
            return self._require_configuration().model_copy(deep=True)

    @property
    def languages(self) -> List[str]:
        return self.configuration.languages

    def _require_configuration(self) -> DetectorConfiguration:
        # Caller must hold self._lock
        if self._configuration is None:
            raise BuilderConsumedError("language detector builder has already been consumed")
        return self._configuration

    def __repr__(self) -> str:
        with self._lock:
            configuration = self._configuration
        if configuration is None:
            return f"{self.__class__.__name__}(consumed)"
        return f"{self.__class__.__name__}(languages={len(configuration.languages)})"


def _validate_distance(distance) -> float:
    if isinstance(distance, bool) or not isinstance(distance, numbers.Real):
        raise InvalidArgumentError(
            f"minimum relative distance must be a number, got {type(distance).__name__}"
        )

    distance = float(distance)
    if math.isnan(distance) or not 0.0 <= distance <= 1.0:
        raise InvalidArgumentError("minimum relative distance must be between 0.0 and 1.0")
    return distance
