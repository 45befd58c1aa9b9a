"""
Tests for the scroll command grammar.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from core.bars.scroll import ScrollRequest, parse_scroll


class TestValidScroll:
    def test_relative_chars(self):
        assert parse_scroll("x+10") == ScrollRequest(add_x=True, add=True, value=10)

    def test_relative_percent(self):
        assert parse_scroll("y-5%") == ScrollRequest(add_x=False, add=False, percent=True, value=5)

    def test_beginning_and_end(self):
        assert parse_scroll("yb") == ScrollRequest(add_x=False, beginning=True)
        assert parse_scroll("xe") == ScrollRequest(add_x=True, end=True)

    def test_upper_case(self):
        assert parse_scroll("XE") == ScrollRequest(add_x=True, end=True)
        assert parse_scroll("Y+1") == ScrollRequest(add_x=False, add=True, value=1)


class TestMalformedScroll:
    @pytest.mark.parametrize(
        "scroll",
        ["", None, "z3", "+10", "y", "x10", "x+", "x+0", "x-abc", "x+5%%", "xb1", "ye+", "x+-3"],
    )
    def test_rejected(self, scroll):
        assert parse_scroll(scroll) is None
