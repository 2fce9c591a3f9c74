"""Unit tests for the theme function."""

import re

import pytest

from resumekit.contexts.templating.defaults import NEUTRALS
from resumekit.contexts.templating.exceptions import InvalidColorError
from resumekit.contexts.templating.theme import build_theme, normalize_hex, relative_luminance

HEX = re.compile(r"^#[0-9a-f]{6}$")


class TestNormalization:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#2563eb", "#2563eb"),
            ("#2563EB", "#2563eb"),
            ("2563eb", "#2563eb"),
            ("  #2563eb\n", "#2563eb"),
            ("#26e", "#2266ee"),
            ("FFF", "#ffffff"),
        ],
    )
    def test_accepted_spellings(self, value, expected):
        assert normalize_hex(value) == expected
        assert build_theme(value).accent == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["blue", "#12345", "", "#ggg", "#2563eb00", "rgb(0,0,0)", None, 0x2563EB])
    def test_rejected_values(self, value):
        with pytest.raises(InvalidColorError):
            build_theme(value)

    @pytest.mark.unit
    def test_invalid_color_is_value_error(self):
        with pytest.raises(ValueError):
            build_theme("not-a-color")


class TestDerivation:
    @pytest.mark.unit
    def test_known_values(self):
        theme = build_theme("#2563eb")
        assert theme.tint(0.5) == "#92b1f5"
        assert theme.shade(0.5) == "#133276"

    @pytest.mark.unit
    def test_endpoints(self):
        theme = build_theme("#2563eb")
        assert theme.tint(0) == "#2563eb"
        assert theme.shade(0) == "#2563eb"
        assert theme.tint(1) == "#ffffff"
        assert theme.shade(1) == "#000000"

    @pytest.mark.unit
    @pytest.mark.parametrize("fraction", [-0.01, 1.01, 2])
    def test_fraction_out_of_range(self, fraction):
        theme = build_theme("#2563eb")
        with pytest.raises(ValueError):
            theme.tint(fraction)
        with pytest.raises(ValueError):
            theme.shade(fraction)

    @pytest.mark.unit
    @pytest.mark.parametrize("accent", ["#2563eb", "#dc2626", "#000000", "#ffffff", "#fde047"])
    def test_outputs_are_lowercase_hex(self, accent):
        theme = build_theme(accent)
        for fraction in (0, 0.1, 0.33, 0.5, 0.9, 1):
            assert HEX.match(theme.tint(fraction))
            assert HEX.match(theme.shade(fraction))

    @pytest.mark.unit
    def test_deterministic_and_cached(self):
        first = build_theme("#2563EB")
        second = build_theme("2563eb")
        assert first is second
        assert first.tint(0.37) == second.tint(0.37)

    @pytest.mark.unit
    def test_tints_lighten_monotonically(self):
        theme = build_theme("#7c3aed")
        luminances = [relative_luminance(theme.tint(f / 10)) for f in range(11)]
        assert luminances == sorted(luminances)


class TestNeutralsAndContrast:
    @pytest.mark.unit
    def test_neutral_roles(self):
        theme = build_theme("#059669")
        assert theme.neutrals == NEUTRALS

    @pytest.mark.unit
    def test_dark_accent_uses_paper_text(self):
        assert build_theme("#2563eb").on_accent == NEUTRALS["paper"]

    @pytest.mark.unit
    def test_light_accent_uses_ink_text(self):
        assert build_theme("#fde047").on_accent == NEUTRALS["ink"]
