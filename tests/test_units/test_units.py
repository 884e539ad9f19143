"""Tests for CSS length normalization."""

import pytest

from surfacecss.units import parse_with_unit


class TestParseWithUnit:
    def test_px_passes_through(self) -> None:
        parsed = parse_with_unit("16px")
        assert parsed is not None
        assert parsed.px == 16
        assert parsed.unit == "px"
        assert parsed.was_converted is False

    def test_bare_number_is_px(self) -> None:
        parsed = parse_with_unit("10")
        assert parsed is not None
        assert parsed.unit == "px"
        assert parsed.px == 10

    def test_negative(self) -> None:
        parsed = parse_with_unit("-4px")
        assert parsed is not None
        assert parsed.px == -4

    def test_rem(self) -> None:
        parsed = parse_with_unit("1.5rem")
        assert parsed is not None
        assert parsed.raw == 1.5
        assert parsed.px == 24
        assert parsed.was_converted is True

    def test_em_uses_base_font(self) -> None:
        parsed = parse_with_unit("1em", base_font_px=20)
        assert parsed is not None
        assert parsed.px == 20

    @pytest.mark.parametrize(
        ("raw", "px"),
        [("12pt", 16.0), ("1cm", 37.8), ("10mm", 37.8), (".5rem", 8.0)],
    )
    def test_absolute_units(self, raw: str, px: float) -> None:
        parsed = parse_with_unit(raw)
        assert parsed is not None
        assert parsed.px == pytest.approx(px)
        assert parsed.was_converted is True

    @pytest.mark.parametrize("raw", ["50%", "10vh", "100vw"])
    def test_relative_units_not_converted(self, raw: str) -> None:
        parsed = parse_with_unit(raw)
        assert parsed is not None
        assert parsed.was_converted is False
        assert parsed.px == float(raw.rstrip("%vhw"))

    def test_rounds_to_tenth(self) -> None:
        parsed = parse_with_unit("1pt")
        assert parsed is not None
        assert parsed.px == pytest.approx(1.3)

    def test_surrounding_whitespace(self) -> None:
        parsed = parse_with_unit("  8px ")
        assert parsed is not None
        assert parsed.px == 8

    @pytest.mark.parametrize("raw", ["", "abc", "10px 20px", "12ex", "px"])
    def test_rejects(self, raw: str) -> None:
        assert parse_with_unit(raw) is None

    def test_rejects_numeral_that_overflows(self) -> None:
        assert parse_with_unit("9" * 400 + "px") is None

    def test_rejects_conversion_that_overflows(self) -> None:
        assert parse_with_unit("9" * 308 + "cm") is None

    def test_large_finite_value_kept(self) -> None:
        parsed = parse_with_unit("1" + "0" * 307 + "px")
        assert parsed is not None
        assert parsed.px == pytest.approx(1e307)
