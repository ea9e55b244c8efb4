"""Tests for the one-shot language detector builder."""

import threading

import pytest

from linguakit import (
    BuilderConsumedError,
    InvalidArgumentError,
    LanguageDetector,
    LanguageDetectorBuilder,
    StateError,
    languages,
    languages_with_cyrillic_script,
    languages_with_latin_script,
    languages_with_single_unique_script,
    spoken_languages,
)
from linguakit.models.config import DetectorSection, LinguaKitConfig


def _small_builder() -> LanguageDetectorBuilder:
    return LanguageDetectorBuilder.from_languages(["English", "French"])


# ===================================================================
# Factories
# ===================================================================

class TestFactories:
    @pytest.mark.parametrize("factory", [
        LanguageDetectorBuilder.from_languages,
        LanguageDetectorBuilder.from_all_languages_without,
        LanguageDetectorBuilder.from_iso_codes_639_1,
        LanguageDetectorBuilder.from_iso_codes_639_3,
    ])
    def test_empty_list_rejected(self, factory):
        with pytest.raises(InvalidArgumentError):
            factory([])

    def test_unknown_language_rejected(self):
        with pytest.raises(InvalidArgumentError, match="unknown language: Klingon"):
            LanguageDetectorBuilder.from_languages(["English", "Klingon"])

    def test_from_languages_sorts_and_deduplicates(self):
        builder = LanguageDetectorBuilder.from_languages(["German", "english", "German"])
        assert builder.languages == ["English", "German"]

    def test_from_all_languages(self):
        assert LanguageDetectorBuilder.from_all_languages().languages == languages()

    def test_from_all_spoken_languages(self):
        assert LanguageDetectorBuilder.from_all_spoken_languages().languages == spoken_languages()

    def test_script_factories(self):
        assert (
            LanguageDetectorBuilder.from_all_languages_with_cyrillic_script().languages
            == languages_with_cyrillic_script()
        )
        assert (
            LanguageDetectorBuilder.from_all_languages_with_latin_script().languages
            == languages_with_latin_script()
        )
        assert (
            LanguageDetectorBuilder.from_all_languages_with_script("cyrillic").languages
            == languages_with_cyrillic_script()
        )

    def test_unknown_script_rejected(self):
        with pytest.raises(InvalidArgumentError):
            LanguageDetectorBuilder.from_all_languages_with_script("klingon")

    def test_from_all_languages_with_single_unique_script(self):
        builder = LanguageDetectorBuilder.from_all_languages_with_single_unique_script()
        assert builder.languages == languages_with_single_unique_script()

    def test_from_all_languages_without(self):
        builder = LanguageDetectorBuilder.from_all_languages_without(["English", "French"])
        assert "English" not in builder.languages
        assert "French" not in builder.languages
        assert len(builder.languages) == len(languages()) - 2

    def test_excluding_every_language_rejected(self):
        with pytest.raises(InvalidArgumentError, match="at least one language"):
            LanguageDetectorBuilder.from_all_languages_without(languages())

    def test_from_iso_codes(self):
        assert LanguageDetectorBuilder.from_iso_codes_639_1(["fr", "en"]).languages == ["English", "French"]
        assert LanguageDetectorBuilder.from_iso_codes_639_3(["deu"]).languages == ["German"]

    def test_unknown_iso_code_rejected(self):
        with pytest.raises(InvalidArgumentError, match="unknown ISO 639-3 code: xyz"):
            LanguageDetectorBuilder.from_iso_codes_639_3(["eng", "xyz"])


# ===================================================================
# Setters
# ===================================================================

class TestSetters:
    def test_defaults(self):
        configuration = _small_builder().configuration
        assert configuration.minimum_relative_distance == 0.0
        assert configuration.preload_language_models is False
        assert configuration.low_accuracy_mode is False

    def test_setters_chain_on_same_builder(self):
        builder = _small_builder()
        assert builder.with_minimum_relative_distance(0.25) is builder
        assert builder.with_preloaded_language_models() is builder
        assert builder.with_low_accuracy_mode() is builder

    def test_flags_are_recorded(self):
        configuration = _small_builder().with_preloaded_language_models().with_low_accuracy_mode().configuration
        assert configuration.preload_language_models is True
        assert configuration.low_accuracy_mode is True

    @pytest.mark.parametrize("distance", [0.0, 0.5, 0.99, 1.0, 1])
    def test_distance_in_range_is_retained(self, distance):
        builder = _small_builder().with_minimum_relative_distance(distance)
        assert builder.configuration.minimum_relative_distance == float(distance)

    def test_distance_replaces_prior_value(self):
        builder = _small_builder().with_minimum_relative_distance(0.3).with_minimum_relative_distance(0.1)
        assert builder.configuration.minimum_relative_distance == 0.1

    @pytest.mark.parametrize("distance", [-0.01, 1.01, 1.1, float("nan"), float("inf"), -float("inf")])
    def test_distance_out_of_range_rejected(self, distance):
        with pytest.raises(InvalidArgumentError, match="between 0.0 and 1.0"):
            _small_builder().with_minimum_relative_distance(distance)

    @pytest.mark.parametrize("distance", ["0.5", None, True])
    def test_distance_must_be_a_number(self, distance):
        with pytest.raises(InvalidArgumentError, match="must be a number"):
            _small_builder().with_minimum_relative_distance(distance)

    def test_rejected_distance_keeps_previous_value(self):
        builder = _small_builder().with_minimum_relative_distance(0.2)
        with pytest.raises(InvalidArgumentError):
            builder.with_minimum_relative_distance(2.0)
        assert builder.configuration.minimum_relative_distance == 0.2

    def test_configuration_is_a_copy(self):
        builder = _small_builder()
        configuration = builder.configuration
        configuration.languages.append("German")
        configuration.low_accuracy_mode = True
        assert builder.languages == ["English", "French"]
        assert builder.configuration.low_accuracy_mode is False


# ===================================================================
# Build / consume-once
# ===================================================================

class TestBuild:
    def test_build_returns_detector(self):
        detector = _small_builder().with_minimum_relative_distance(0.1).build()
        assert isinstance(detector, LanguageDetector)
        assert detector.languages == ["English", "French"]
        assert detector.configuration.minimum_relative_distance == 0.1

    def test_second_build_fails(self):
        builder = _small_builder()
        builder.build()
        with pytest.raises(BuilderConsumedError, match="already been consumed"):
            builder.build()

    def test_state_error_alias(self):
        builder = _small_builder()
        builder.build()
        with pytest.raises(StateError):
            builder.build()
        with pytest.raises(RuntimeError):
            builder.build()

    @pytest.mark.parametrize("operation", [
        lambda builder: builder.with_minimum_relative_distance(0.5),
        lambda builder: builder.with_preloaded_language_models(),
        lambda builder: builder.with_low_accuracy_mode(),
        lambda builder: builder.configuration,
        lambda builder: builder.languages,
    ])
    def test_operations_after_build_fail(self, operation):
        builder = _small_builder()
        builder.build()
        with pytest.raises(BuilderConsumedError):
            operation(builder)

    def test_is_consumed(self):
        builder = _small_builder()
        assert builder.is_consumed is False
        builder.build()
        assert builder.is_consumed is True
        assert "consumed" in repr(builder)

    def test_maximum_distance_builds(self):
        detector = _small_builder().with_minimum_relative_distance(1.0).build()
        assert detector.configuration.minimum_relative_distance == 1.0

    def test_low_accuracy_and_preload_build(self):
        detector = _small_builder().with_low_accuracy_mode().with_preloaded_language_models().build()
        assert detector.configuration.low_accuracy_mode is True
        assert detector.configuration.preload_language_models is True

    def test_later_builders_are_independent(self):
        first = _small_builder()
        second = _small_builder()
        first.build()
        assert second.is_consumed is False
        second.build()

    def test_concurrent_builds_consume_once(self):
        builder = _small_builder()
        barrier = threading.Barrier(8)
        successes = []
        failures = []

        def attempt():
            barrier.wait()
            try:
                successes.append(builder.build())
            except BuilderConsumedError as e:
                failures.append(e)

        threads = [threading.Thread(target=attempt) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(successes) == 1
        assert len(failures) == 7


# ===================================================================
# from_config
# ===================================================================

class TestFromConfig:
    def test_defaults_select_all_languages(self):
        builder = LanguageDetectorBuilder.from_config(LinguaKitConfig())
        assert builder.languages == languages()

    def test_explicit_languages_win(self):
        config = LinguaKitConfig(detector=DetectorSection(
            languages=["French", "English"],
            iso_codes_639_1=["de"],
            minimum_relative_distance=0.4,
            preload_language_models=True,
            low_accuracy_mode=True,
        ))
        configuration = LanguageDetectorBuilder.from_config(config).configuration
        assert configuration.languages == ["English", "French"]
        assert configuration.minimum_relative_distance == 0.4
        assert configuration.preload_language_models is True
        assert configuration.low_accuracy_mode is True

    def test_iso_codes_then_exclusions_then_script(self):
        by_iso = LinguaKitConfig(detector=DetectorSection(iso_codes_639_3=["deu"], exclude=["English"]))
        assert LanguageDetectorBuilder.from_config(by_iso).languages == ["German"]

        by_exclusion = LinguaKitConfig(detector=DetectorSection(exclude=["English"], script="latin"))
        assert "English" not in LanguageDetectorBuilder.from_config(by_exclusion).languages
        assert "Russian" in LanguageDetectorBuilder.from_config(by_exclusion).languages

        by_script = LinguaKitConfig(detector=DetectorSection(script="cyrillic", spoken_only=True))
        assert LanguageDetectorBuilder.from_config(by_script).languages == languages_with_cyrillic_script()

    def test_spoken_only(self):
        config = LinguaKitConfig(detector=DetectorSection(spoken_only=True))
        assert LanguageDetectorBuilder.from_config(config).languages == spoken_languages()

    def test_invalid_language_in_config(self):
        config = LinguaKitConfig(detector=DetectorSection(languages=["Klingon"]))
        with pytest.raises(InvalidArgumentError):
            LanguageDetectorBuilder.from_config(config)
