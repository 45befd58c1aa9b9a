"""
Tests for typed options - parsing, validation and change callbacks.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from core.options import Option, OptionSection, OptionType, SetResult, string_to_boolean


@pytest.fixture
def section():
    return OptionSection("bar")


class TestBooleans:
    @pytest.mark.parametrize("text", ["on", "ON", "yes", "true", "1"])
    def test_true_spellings(self, text):
        assert string_to_boolean(text) is True

    @pytest.mark.parametrize("text", ["off", "no", "False", "0"])
    def test_false_spellings(self, text):
        assert string_to_boolean(text) is False

    def test_unknown_spelling(self):
        assert string_to_boolean("maybe") is None

    def test_toggle(self):
        option = Option("x.hidden", OptionType.BOOLEAN, default_value="off")
        assert option.set("toggle") == SetResult.CHANGED
        assert option.value is True
        assert option.value_as_string() == "on"


class TestIntegers:
    def test_bounds(self):
        option = Option("x.size", OptionType.INTEGER, max_value=10, default_value="0")
        assert option.set("11") == SetResult.ERROR
        assert option.set("-1") == SetResult.ERROR
        assert option.value == 0

    def test_relative(self):
        option = Option("x.size", OptionType.INTEGER, max_value=10, default_value="4")
        assert option.set("++3") == SetResult.CHANGED
        assert option.value == 7
        assert option.set("--2") == SetResult.CHANGED
        assert option.value == 5

    def test_not_a_number(self):
        option = Option("x.size", OptionType.INTEGER, max_value=10, default_value="4")
        assert option.set("four") == SetResult.ERROR

    def test_invalid_default_raises(self):
        with pytest.raises(ValueError):
            Option("x.size", OptionType.INTEGER, max_value=10, default_value="50")


class TestEnumerations:
    def test_names_case_insensitive(self):
        option = Option("x.position", OptionType.INTEGER, string_values=["bottom", "top"], default_value="TOP")
        assert option.value == 1
        assert option.string_value == "top"

    def test_unknown_name(self):
        option = Option("x.position", OptionType.INTEGER, string_values=["bottom", "top"], default_value="top")
        assert option.set("middle") == SetResult.ERROR
        assert option.string_value == "top"

    def test_relative_cycles(self):
        values = ["bottom", "top", "left", "right"]
        option = Option("x.position", OptionType.INTEGER, string_values=values, default_value="bottom")
        option.set("--1")
        assert option.string_value == "right"
        option.set("++2")
        assert option.string_value == "top"


class TestColors:
    def test_names_and_numbers(self):
        option = Option("x.color_fg", OptionType.COLOR, default_value="default")
        assert option.set("LightRed") == SetResult.CHANGED
        assert option.value == "lightred"
        assert option.set("214") == SetResult.CHANGED
        assert option.set("256") == SetResult.ERROR
        assert option.set("chartreuse") == SetResult.ERROR
        assert option.value == "214"


class TestCallbacks:
    """Check callback vetoes, change callback fires once per real change."""

    def test_check_callback_vetoes(self):
        option = Option(
            "x.size",
            OptionType.INTEGER,
            max_value=100,
            default_value="1",
            check_callback=lambda opt, value: value != "13",
        )
        assert option.set("13") == SetResult.ERROR
        assert option.value == 1

    def test_change_callback(self):
        calls = []
        option = Option(
            "x.items",
            OptionType.STRING,
            default_value="",
            change_callback=lambda opt: calls.append(opt.value),
        )
        assert option.set("time") == SetResult.CHANGED
        assert option.set("time") == SetResult.SAME_VALUE
        assert calls == ["time"]

    def test_set_without_callback(self):
        calls = []
        option = Option("x.items", OptionType.STRING, default_value="", change_callback=lambda opt: calls.append(1))
        option.set("lag", run_callback=False)
        assert option.value == "lag"
        assert calls == []

    def test_reset(self):
        option = Option("x.size", OptionType.INTEGER, max_value=10, default_value="2")
        option.set("5")
        assert option.reset() == SetResult.CHANGED
        assert option.value == 2
        assert option.reset() == SetResult.SAME_VALUE


class TestSection:
    def test_duplicate_name(self, section):
        assert section.new_option("status.size", OptionType.INTEGER, max_value=10, default_value="0")
        assert section.new_option("status.size", OptionType.INTEGER, max_value=10, default_value="0") is None
        assert len(section) == 1

    def test_invalid_default_gives_none(self, section):
        assert section.new_option("status.size", OptionType.INTEGER, max_value=10, default_value="x") is None
        assert "status.size" not in section

    def test_rename(self, section):
        option = section.new_option("status.items", OptionType.STRING, default_value="")
        section.new_option("other.items", OptionType.STRING, default_value="")

        assert section.rename(option, "other.items") is False
        assert option.name == "status.items"

        assert section.rename(option, "bottom.items") is True
        assert section.search("bottom.items") is option
        assert section.search("status.items") is None

    def test_free(self, section):
        option = section.new_option("status.items", OptionType.STRING, default_value="")
        section.free(option)
        assert "status.items" not in section
        assert option.section is None
