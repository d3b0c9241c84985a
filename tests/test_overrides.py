"""Tests for override argument parsing (recolor/overrides.py)."""

import pytest

from recolor.errors import DuplicateOverrideKey, MalformedOverride, UnknownStyleToken
from recolor.overrides import parse_group_key, parse_overrides
from recolor.styles import RGB, Style, parse_style


class TestParseOverrides:
    def test_named_group(self):
        assert parse_overrides(["one=red,bold"]) == {
            "one": Style(color="red", attributes=frozenset(["bold"]))
        }

    def test_ordinal_key_becomes_int(self):
        overrides = parse_overrides(["2=red"])
        assert overrides == {2: Style(color="red")}

    def test_multiple_overrides(self):
        overrides = parse_overrides(["a=red", "b=green,underline", "3=#00ff00"])
        assert overrides["a"] == parse_style("red")
        assert overrides["b"] == parse_style("green,underline")
        assert overrides[3] == Style(color=RGB(0, 255, 0))

    def test_no_arguments(self):
        assert parse_overrides([]) == {}

    def test_splits_on_first_equals_only(self):
        """Everything after the first "=" is the style list, so a second "=" is a bad token."""
        with pytest.raises(UnknownStyleToken) as excinfo:
            parse_overrides(["a=red=bold"])
        assert excinfo.value.token == "red=bold"

    @pytest.mark.parametrize("argument", ["one", "=red", "one=", ""])
    def test_malformed(self, argument):
        with pytest.raises(MalformedOverride) as excinfo:
            parse_overrides([argument])
        assert excinfo.value.argument == argument

    def test_malformed_message_names_argument(self):
        with pytest.raises(MalformedOverride, match="'one'"):
            parse_overrides(["one"])

    @pytest.mark.parametrize("argument", ["my-group=red", "a b=red", "-1=red"])
    def test_invalid_key(self, argument):
        with pytest.raises(MalformedOverride):
            parse_overrides([argument])

    def test_unknown_token_names_token_and_argument(self):
        with pytest.raises(UnknownStyleToken) as excinfo:
            parse_overrides(["level=red", "msg=chartreuse"])
        assert excinfo.value.token == "chartreuse"
        assert excinfo.value.argument == "msg=chartreuse"
        assert "chartreuse" in str(excinfo.value)
        assert "msg=chartreuse" in str(excinfo.value)

    def test_duplicate_key_rejected(self):
        with pytest.raises(DuplicateOverrideKey) as excinfo:
            parse_overrides(["a=red", "a=green"])
        assert excinfo.value.key == "a"
        assert excinfo.value.argument == "a=green"

    def test_duplicate_ordinal_with_leading_zero(self):
        with pytest.raises(DuplicateOverrideKey):
            parse_overrides(["1=red", "01=green"])

    def test_name_and_ordinal_are_different_keys(self):
        overrides = parse_overrides(["a=red", "1=green"])
        assert set(overrides) == {"a", 1}


class TestParseGroupKey:
    def test_digits(self):
        assert parse_group_key("12", "12=red") == 12

    def test_name(self):
        assert parse_group_key("level", "level=red") == "level"

    def test_non_ascii_digits_are_not_ordinals(self):
        with pytest.raises(MalformedOverride):
            parse_group_key("١", "١=red")
