"""Language detector facade over the lingua detection engine."""

import logging
from typing import Iterable, List, Optional

from lingua import LanguageDetectorBuilder as EngineBuilder

from linguakit.core.interfaces import InvalidArgumentError
from linguakit.core.language import identifiers
from linguakit.models.config import DetectorConfiguration
from linguakit.models.result import ConfidenceValue, DetectionResult

logger = logging.getLogger(__name__)

# Largest minimum relative distance the engine accepts
ENGINE_MAX_RELATIVE_DISTANCE = 0.99


class LanguageDetector:
    """Immutable detector built by ``LanguageDetectorBuilder``.

    Languages are reported by canonical name (``"English"``). Batch
    methods hand the whole batch to the engine, which spreads the texts
    over a worker pool sized to the available CPUs and returns results
    in input order.
    """

    def __init__(self, engine, configuration: DetectorConfiguration):
        self._engine = engine
        self._configuration = configuration.model_copy(deep=True)

    @classmethod
    def from_configuration(cls, configuration: DetectorConfiguration) -> "LanguageDetector":
        """Build the engine detector described by ``configuration``."""
        languages = identifiers.parse_languages(configuration.languages)
        distance = min(configuration.minimum_relative_distance, ENGINE_MAX_RELATIVE_DISTANCE)

        engine_builder = EngineBuilder.from_languages(*languages)
        engine_builder = engine_builder.with_minimum_relative_distance(distance)
        if configuration.preload_language_models:
            engine_builder = engine_builder.with_preloaded_language_models()
        if configuration.low_accuracy_mode:
            engine_builder = engine_builder.with_low_accuracy_mode()

        engine = engine_builder.build()
        logger.info(
            f"Built language detector for {len(languages)} languages "
            f"(min distance {configuration.minimum_relative_distance}, "
            f"preload={configuration.preload_language_models}, "
            f"low_accuracy={configuration.low_accuracy_mode})"
        )
        return cls(engine, configuration)

    @property
    def configuration(self) -> DetectorConfiguration:
        return self._configuration.model_copy(deep=True)

    @property
    def languages(self) -> List[str]:
        return list(self._configuration.languages)

    def unload_language_models(self) -> None:
        """Release loaded model data.

        Safe to call repeatedly and while other threads are detecting;
        later calls reload whatever models they need.
        """
        self._engine.unload_language_models()
        logger.info("Unloaded language models")

    def detect_language(self, text: str) -> Optional[str]:
        """Detect the most likely language of ``text``.

        Returns None when no language can be determined reliably, e.g.
        for empty text or when the top candidates are closer than the
        configured minimum relative distance.
        """
        text = _require_text(text)
        return _name_or_none(self._engine.detect_language_of(text))

    def detect_languages_in_parallel(self, texts: Iterable[str]) -> List[Optional[str]]:
        texts = _require_texts(texts)
        if not texts:
            return []

        logger.debug(f"Detecting languages of {len(texts)} texts")
        return [_name_or_none(language) for language in self._engine.detect_languages_in_parallel_of(texts)]

    def detect_multiple_languages(self, text: str) -> List[DetectionResult]:
        """Split ``text`` into spans of different languages.

        Spans do not overlap and are ordered by start index. Offsets are
        character indices into ``text``.
        """
        text = _require_text(text)
        return _to_detection_results(self._engine.detect_multiple_languages_of(text))

    def detect_multiple_languages_in_parallel(self, texts: Iterable[str]) -> List[List[DetectionResult]]:
        texts = _require_texts(texts)
        if not texts:
            return []

        logger.debug(f"Detecting multiple languages in {len(texts)} texts")
        return [
            _to_detection_results(results)
            for results in self._engine.detect_multiple_languages_in_parallel_of(texts)
        ]

    def compute_language_confidence_values(self, text: str) -> List[ConfidenceValue]:
        """Confidence for every configured language, highest first."""
        text = _require_text(text)
        return _to_confidence_values(self._engine.compute_language_confidence_values(text))

    def compute_language_confidence_values_in_parallel(self, texts: Iterable[str]) -> List[List[ConfidenceValue]]:
        texts = _require_texts(texts)
        if not texts:
            return []

        logger.debug(f"Computing confidence values for {len(texts)} texts")
        return [
            _to_confidence_values(values)
            for values in self._engine.compute_language_confidence_values_in_parallel(texts)
        ]

    def compute_language_confidence(self, text: str, language) -> float:
        """Confidence in [0.0, 1.0] that ``text`` is written in ``language``.

        Raises:
            InvalidArgumentError: If ``language`` is not a known language
        """
        text = _require_text(text)
        language = identifiers.parse_language(language)
        return _clamp(self._engine.compute_language_confidence(text, language))

    def compute_language_confidence_in_parallel(self, texts: Iterable[str], language) -> List[float]:
        texts = _require_texts(texts)
        language = identifiers.parse_language(language)
        if not texts:
            return []

        logger.debug(f"Computing {identifiers.canonical_name(language)} confidence for {len(texts)} texts")
        return [_clamp(value) for value in self._engine.compute_language_confidence_in_parallel(texts, language)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(languages={len(self._configuration.languages)})"


def _require_text(text, what: str = "text") -> str:
    if not isinstance(text, str):
        raise InvalidArgumentError(f"{what} must be a string, got {type(text).__name__}")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(f"{what} is not valid unicode: {e}")
    return text


def _require_texts(texts) -> List[str]:
    texts = identifiers.ensure_list(texts, "texts")
    for index, text in enumerate(texts):
        _require_text(text, f"texts[{index}]")
    return texts


def _name_or_none(language) -> Optional[str]:
    return identifiers.canonical_name(language) if language is not None else None


def _clamp(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


def _to_detection_results(results) -> List[DetectionResult]:
    spans = [
        DetectionResult(
            language=identifiers.canonical_name(result.language),
            start_index=result.start_index,
            end_index=result.end_index,
            word_count=result.word_count,
        )
        for result in results
    ]
    spans.sort(key=lambda span: span.start_index)
    return spans


def _to_confidence_values(values) -> List[ConfidenceValue]:
    confidences = [
        ConfidenceValue(language=identifiers.canonical_name(value.language), value=_clamp(value.value))
        for value in values
    ]
    # Stable sort keeps the engine's order among equal confidences
    confidences.sort(key=lambda confidence: confidence.value, reverse=True)
    return confidences
