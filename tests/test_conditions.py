"""
Tests for bar display conditions and the modifier hooks behind them.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from core.bars.conditions import check_conditions_for_window, parse_conditions
from core.hooks import ModifierHooks
from ui.window import Buffer, Screen


def make_bar(name="test", conditions=""):
    return SimpleNamespace(name=name, conditions_array=parse_conditions(conditions))


@pytest.fixture
def screen():
    screen = Screen(80, 24)
    screen.add_window(Buffer("core"))
    screen.add_window(Buffer("#python", nicklist=True))
    return screen


@pytest.fixture
def hooks():
    return ModifierHooks()


class TestParseConditions:
    def test_split(self):
        assert parse_conditions("active,nicklist") == ["active", "nicklist"]

    def test_empty(self):
        assert parse_conditions("") == []
        assert parse_conditions(None) == []


class TestBuiltinConditions:
    def test_no_conditions_always_displayed(self, screen, hooks):
        bar = make_bar()
        for window in screen.windows:
            assert check_conditions_for_window(bar, window, screen.current_window, hooks)

    def test_nicklist(self, screen, hooks):
        bar = make_bar(conditions="nicklist")
        core_window, channel_window = screen.windows

        assert not check_conditions_for_window(bar, core_window, screen.current_window, hooks)
        assert check_conditions_for_window(bar, channel_window, screen.current_window, hooks)

    def test_active_and_inactive(self, screen, hooks):
        active = make_bar(conditions="active")
        inactive = make_bar(conditions="Inactive")
        current, other = screen.windows

        assert check_conditions_for_window(active, current, current, hooks)
        assert not check_conditions_for_window(active, other, current, hooks)
        assert not check_conditions_for_window(inactive, current, current, hooks)
        assert check_conditions_for_window(inactive, other, current, hooks)

    def test_unknown_condition_is_ignored(self, screen, hooks):
        bar = make_bar(conditions="away")
        assert check_conditions_for_window(bar, screen.windows[0], screen.current_window, hooks)


class TestConditionModifier:
    """Scripts can hide a bar per window with bar_condition_<name>."""

    def test_modifier_hides_bar(self, screen, hooks):
        seen = []

        def callback(data, modifier, modifier_data, string):
            seen.append((modifier, modifier_data))
            window = screen.window_from_pointer(modifier_data)
            return "0" if window.number == 2 else "1"

        hooks.hook_modifier("bar_condition_test", callback)
        bar = make_bar()
        first, second = screen.windows

        assert check_conditions_for_window(bar, first, first, hooks)
        assert not check_conditions_for_window(bar, second, first, hooks)
        assert seen[0] == ("bar_condition_test", first.pointer)

    def test_modifier_for_other_bar_is_not_called(self, screen, hooks):
        hooks.hook_modifier("bar_condition_other", lambda *args: "0")
        assert check_conditions_for_window(make_bar(), screen.windows[0], None, hooks)

    def test_builtin_failure_skips_modifier(self, screen, hooks):
        calls = []
        hooks.hook_modifier("bar_condition_test", lambda *args: calls.append(args) or "1")
        bar = make_bar(conditions="nicklist")

        assert not check_conditions_for_window(bar, screen.windows[0], None, hooks)
        assert calls == []


class TestModifierHooks:
    def test_no_hook_returns_none(self, hooks):
        assert hooks.exec("anything", "", "text") is None

    def test_results_are_chained(self, hooks):
        hooks.hook_modifier("upper", lambda data, mod, mod_data, string: string.upper())
        hooks.hook_modifier("upper", lambda data, mod, mod_data, string: f"{data}{string}", data=">")
        assert hooks.exec("upper", "", "abc") == ">ABC"

    def test_failing_callback_is_skipped(self, hooks):
        def broken(data, modifier, modifier_data, string):
            raise RuntimeError("script error")

        hooks.hook_modifier("m", broken)
        hooks.hook_modifier("m", lambda data, mod, mod_data, string: string + "!")
        assert hooks.exec("m", "", "ok") == "ok!"

    def test_unhook(self, hooks):
        hook = hooks.hook_modifier("m", lambda *args: "x")
        hooks.unhook(hook)
        assert hooks.exec("m", "", "") is None
