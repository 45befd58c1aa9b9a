"""
Tests for bar introspection records and the log dump.
"""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from core.bars.infolist import bar_to_record, get_infolist, print_log
from core.bars.manager import BarManager
from ui.window import Buffer, Screen


@pytest.fixture
def manager():
    screen = Screen(80, 24)
    screen.add_window(Buffer("core"))
    return BarManager(screen)


class TestRecords:
    def test_window_bar_record(self, manager):
        bar = manager.new(
            "status",
            {
                "type": "window",
                "priority": "500",
                "position": "bottom",
                "conditions": "active,nicklist",
                "items": "[time],buffer_number+:+buffer_name",
                "separator": "on",
            },
        )
        record = bar_to_record(bar)

        assert record["name"] == "status"
        assert record["hidden"] == 0
        assert record["priority"] == 500
        assert record["type"] == "window"
        assert record["position"] == "bottom"
        assert record["separator"] == 1
        assert record["conditions_count"] == 2
        assert record["conditions_array_00001"] == "active"
        assert record["conditions_array_00002"] == "nicklist"
        assert record["items_count"] == 2
        assert record["items_array_00001_00001"] == "[time]"
        assert record["items_array_00002_00002"] == ":"
        assert record["items_array_00002_00003"] == "buffer_name"
        assert record["bar_window"] is None

    def test_root_bar_has_bar_window(self, manager):
        bar = manager.new("ticker", {"type": "root"})
        assert bar_to_record(bar)["bar_window"].startswith("0x")

    def test_infolist_order_and_filter(self, manager):
        low = manager.new("low", {"priority": "1"})
        high = manager.new("high", {"priority": "9"})

        assert [record["name"] for record in get_infolist(manager)] == ["high", "low"]
        assert [record["name"] for record in get_infolist(manager, low)] == ["low"]

        manager.delete(high)
        assert get_infolist(manager, high) == []


class TestPrintLog:
    def test_dumps_every_bar(self, manager, caplog):
        manager.new("status", {"type": "window", "items": "time"})
        manager.new("ticker", {"type": "root"})

        with caplog.at_level(logging.DEBUG, logger="barkeep"):
            print_log(manager)

        assert '[bar "status"]' in caplog.text
        assert '[bar "ticker"]' in caplog.text
        assert "items_array_00001_00001" in caplog.text
        assert "items_subcount[000] : 1" in caplog.text
        assert "window 1" in caplog.text
