"""Tests for party colour palettes and rate helpers."""

import sys

import pytest

sys.path.append("src")

from policy_admin.services.colors import (
    PARTY_COLORS,
    POLICY_PARTY_COLORS,
    UNKNOWN_PARTY_COLOR,
    get_party_color,
    round_half_up,
    split_rates,
)


class TestGetPartyColor:
    """Test colour lookup in both palettes."""

    @pytest.mark.parametrize(
        "name,color",
        [
            ("自由民主党", "#555555"),
            ("立憲民主党", "#4361EE"),
            ("公明党", "#7209B7"),
            ("日本維新の会", "#228B22"),
            ("国民民主党", "#000080"),
            ("日本共産党", "#E63946"),
            ("れいわ新選組", "#F72585"),
            ("社民党", "#118AB2"),
            ("参政党", "#FF4500"),
        ],
    )
    def test_party_palette(self, name, color):
        assert get_party_color(name) == color

    @pytest.mark.parametrize(
        "name,color",
        [
            ("自由民主党", "#E60012"),
            ("立憲民主党", "#FFD900"),
            ("日本維新の会", "#FF4500"),
            ("公明党", "#00A0E9"),
            ("国民民主党", "#009944"),
            ("日本共産党", "#A40000"),
            ("れいわ新選組", "#800080"),
            ("社会民主党", "#800000"),
        ],
    )
    def test_policy_palette(self, name, color):
        assert get_party_color(name, POLICY_PARTY_COLORS) == color

    @pytest.mark.parametrize("name", ["無所属", "", None, "自民党"])
    def test_unknown_names_are_grey(self, name):
        assert get_party_color(name) == UNKNOWN_PARTY_COLOR
        assert get_party_color(name, POLICY_PARTY_COLORS) == "#808080"

    def test_palettes_differ_by_name_spelling(self):
        """Test that each palette only knows its own spelling of the SDP."""
        assert "社民党" in PARTY_COLORS
        assert "社民党" not in POLICY_PARTY_COLORS
        assert get_party_color("社会民主党") == UNKNOWN_PARTY_COLOR


class TestRates:
    """Test rate rounding and splitting."""

    @pytest.mark.parametrize(
        "value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (37.5, 38), (12.4, 12)]
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_split_rates(self):
        assert split_rates(3, 4) == (75, 25)
        assert split_rates(1, 3) == (33, 67)

    def test_split_rates_without_total_uses_default(self):
        assert split_rates(0, 0) == (50, 50)
        assert split_rates(0, 0, default=70) == (70, 30)

    @pytest.mark.parametrize("support,total", [(1, 8), (5, 8), (2, 3), (99, 200)])
    def test_split_rates_sum_to_100(self, support, total):
        support_rate, oppose_rate = split_rates(support, total)

        assert support_rate + oppose_rate == 100
