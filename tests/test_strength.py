"""Tests for the strength estimator."""
from itertools import product

import pytest

from credgen import config
from credgen.charsets import GenerationOptions
from credgen.engine import Mode
from credgen.strength import LABELS, StrengthResult, estimate_strength


def options_with_variety(variety):
    flags = [i < variety for i in range(4)]
    return GenerationOptions(uppercase=flags[0], lowercase=flags[1], numbers=flags[2], symbols=flags[3])


class TestEmpty:
    @pytest.mark.parametrize("mode", ["random", "pronounceable", "passphrase"])
    def test_empty_is_none(self, mode, all_classes):
        assert estimate_strength("", all_classes, mode) == StrengthResult(0, "None")

    def test_empty_without_options(self):
        result = estimate_strength("")
        assert result.score == 0
        assert result.label == "None"


class TestCharacterModes:
    def test_all_classes_sixteen_is_strong(self, all_classes):
        assert estimate_strength("x" * 16, all_classes, "random") == StrengthResult(4, "Strong")

    def test_all_classes_eight_is_good(self, all_classes):
        assert estimate_strength("x" * 8, all_classes, "random") == StrengthResult(3, "Good")

    def test_short_single_class_clamped_to_weak(self):
        assert estimate_strength("abc", options_with_variety(1), "random") == StrengthResult(1, "Weak")

    def test_alphanumeric_twelve_is_fair(self, alphanumeric):
        assert estimate_strength("a" * 12, alphanumeric, "random") == StrengthResult(2, "Fair")

    def test_composition_not_inspected(self, all_classes):
        # Only the selected options count, not what the string contains
        assert estimate_strength("aaaaaaaaaaaaaaaa", all_classes).score == 4

    def test_pronounceable_scored_like_random(self, alphanumeric):
        pw = "BakoRefi42!"
        assert estimate_strength(pw, alphanumeric, "pronounceable") == estimate_strength(pw, alphanumeric, "random")

    def test_accepts_mode_enum(self, all_classes):
        assert estimate_strength("x" * 16, all_classes, Mode.RANDOM).label == "Strong"

    def test_label_matches_score(self):
        for length, variety in product(range(1, 20), range(0, 5)):
            result = estimate_strength("x" * length, options_with_variety(variety))
            assert 1 <= result.score <= 4
            assert result.label == LABELS[result.score]

    def test_monotonic_in_length(self):
        for variety in range(0, 5):
            options = options_with_variety(variety)
            scores = [estimate_strength("x" * n, options).score for n in range(1, 65)]
            assert scores == sorted(scores)

    def test_monotonic_in_variety(self):
        for length in range(1, 65):
            scores = [estimate_strength("x" * length, options_with_variety(v)).score for v in range(5)]
            assert scores == sorted(scores)


class TestPassphraseMode:
    @pytest.mark.parametrize("passphrase,expected", [
        ("Apple", StrengthResult(1, "Weak")),
        ("Apple-7", StrengthResult(1, "Weak")),
        ("Apple-brave-7", StrengthResult(2, "Fair")),
        ("Apple-brave-cloud-7", StrengthResult(3, "Good")),
        ("Apple-brave-cloud-delta-7", StrengthResult(4, "Strong")),
        ("Apple-brave-cloud-delta-eagle-flame-7", StrengthResult(4, "Strong")),
    ])
    def test_token_thresholds(self, passphrase, expected):
        assert estimate_strength(passphrase, None, "passphrase") == expected

    def test_options_ignored(self):
        none = GenerationOptions(uppercase=False, lowercase=False, numbers=False, symbols=False)
        assert estimate_strength("Apple-brave-cloud-7", none, "passphrase").score == 3

    def test_custom_separator(self):
        assert estimate_strength("Apple.brave.cloud.delta.7", mode="passphrase", separator=".").score == 4
        # Splitting on the wrong separator sees one token
        assert estimate_strength("Apple.brave.cloud.delta.7", mode="passphrase").score == 1

    def test_number_token_switch_read_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "PASSPHRASE_COUNT_NUMBER_TOKEN", False)
        assert estimate_strength("Apple-brave-cloud-7", mode="passphrase").score == 2
        assert estimate_strength("Apple-brave-cloud-7", mode="passphrase", count_number_token=True).score == 3

    def test_number_token_not_counted(self):
        result = estimate_strength("Apple-brave-cloud-7", mode="passphrase", count_number_token=False)
        assert result == StrengthResult(2, "Fair")
