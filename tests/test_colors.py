"""
Tests for color selector resolution.
"""

import pytest

from boxtools.ui.colors import (
    Colors,
    PALETTE,
    resolve_color,
    fg,
    color_start,
    color_reset,
)


class TestResolveColor:
    """Tests for resolve_color() - palette lookup with raw passthrough."""

    @pytest.mark.parametrize("name,code", [
        ("black", "0"), ("red", "1"), ("green", "2"), ("yellow", "3"),
        ("blue", "4"), ("magenta", "5"), ("cyan", "6"), ("white", "7"),
    ])
    def test_palette_names(self, name, code):
        assert resolve_color(name) == code

    def test_lookup_is_case_sensitive(self):
        """'Red' isn't a palette name, so it passes through untouched."""
        assert resolve_color("Red") == "Red"

    def test_raw_code_passes_through(self):
        assert resolve_color("208") == "208"

    def test_none(self):
        assert resolve_color(None) is None

    def test_palette_is_read_only(self):
        with pytest.raises(TypeError):
            PALETTE["orange"] = 208


class TestColorDirectives:
    """Tests for fg(), color_start() and color_reset()."""

    def test_basic_codes_use_short_form(self):
        assert fg("1") == "\x1b[31m"
        assert fg("7") == "\x1b[37m"

    def test_extended_codes_use_256_form(self):
        assert fg("208") == "\x1b[38;5;208m"
        assert fg("8") == "\x1b[38;5;8m"

    def test_name_and_raw_code_match(self):
        assert color_start("red") == color_start("1")

    def test_absent_selector_emits_nothing(self):
        assert color_start(None) == ""
        assert color_reset(None) == ""

    def test_reset(self):
        assert color_reset("red") == Colors.RESET

    @pytest.mark.parametrize("code", ["Red", "orange", "1.5", "-1", ""])
    def test_non_numeric_code_emits_nothing(self, code):
        """Only directives the width scanner can see through are emitted."""
        assert fg(code) == ""
        assert color_start(code) == ""
        assert color_reset(code) == ""
