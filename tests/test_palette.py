"""Tests for the palette cycler (recolor/palette.py)."""

import pytest

from recolor.errors import UnknownStyleToken
from recolor.palette import DEFAULT_PALETTE, PaletteCycler, parse_palette
from recolor.styles import RGB, Style, parse_style


class TestDefaultPalette:
    def test_has_at_least_eight_distinct_styles(self):
        assert len(DEFAULT_PALETTE) >= 8
        assert len(set(DEFAULT_PALETTE)) == len(DEFAULT_PALETTE)

    def test_starts_with_green(self):
        assert DEFAULT_PALETTE[0] == Style(color="green")
        assert DEFAULT_PALETTE[1] == Style(color="yellow")


class TestPaletteCycler:
    def test_returns_entries_in_order(self):
        cycler = PaletteCycler()
        assert [cycler.next() for _ in range(3)] == list(DEFAULT_PALETTE[:3])

    def test_wraps_around(self):
        palette = [Style(color="red"), Style(color="blue")]
        cycler = PaletteCycler(palette)
        assert [cycler.next() for _ in range(5)] == [
            palette[0],
            palette[1],
            palette[0],
            palette[1],
            palette[0],
        ]

    def test_counter_advances_once_per_call(self):
        cycler = PaletteCycler()
        assert cycler.counter == 0
        cycler.next()
        cycler.next()
        assert cycler.counter == 2

    def test_builtin_next(self):
        cycler = PaletteCycler([Style(color="red")])
        assert next(cycler) == Style(color="red")
        assert cycler.counter == 1

    def test_deterministic_across_instances(self):
        first, second = PaletteCycler(), PaletteCycler()
        assert [first.next() for _ in range(20)] == [second.next() for _ in range(20)]

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            PaletteCycler([])


class TestParsePalette:
    def test_semicolon_separated(self):
        assert parse_palette("red,bold;#00ff00;cyan") == (
            parse_style("red,bold"),
            Style(color=RGB(0, 255, 0)),
            Style(color="cyan"),
        )

    def test_blank_entries_skipped(self):
        assert parse_palette(" red ;; blue;") == (Style(color="red"), Style(color="blue"))

    def test_empty_falls_back_to_default(self):
        assert parse_palette("") == DEFAULT_PALETTE
        assert parse_palette(" ; ") == DEFAULT_PALETTE

    def test_invalid_entry(self):
        with pytest.raises(UnknownStyleToken):
            parse_palette("red;mauve")

    def test_invalid_entry_names_the_setting(self):
        with pytest.raises(UnknownStyleToken) as excinfo:
            parse_palette("red;mauve")
        assert excinfo.value.token == "mauve"
        assert excinfo.value.argument == "RECOLOR_PALETTE=red;mauve"
        assert "RECOLOR_PALETTE=red;mauve" in str(excinfo.value)
