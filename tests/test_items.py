"""
Tests for parsing the items option of a bar.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from core.bars.items import flatten_items, get_item_index, parse_items, split_item_token, token_is_item


class TestParseItems:
    """Splitting "a,b+c" into groups."""

    def test_groups_and_alternatives(self):
        assert parse_items("a,b+c,d") == [["a"], ["b", "c"], ["d"]]

    def test_empty_string_gives_no_groups(self):
        assert parse_items("") == []
        assert parse_items(None) == []

    def test_empty_tokens_are_dropped(self):
        assert parse_items(",a,,b+,+c") == [["a"], ["b"], ["c"]]

    def test_decorations_are_kept_in_tokens(self):
        groups = parse_items("[time],buffer_number+:+buffer_name")
        assert groups == [["[time]"], ["buffer_number", ":", "buffer_name"]]


class TestItemNames:
    """Looking items up through their decorations."""

    def test_split_token(self):
        assert split_item_token("[input_prompt]") == ("[", "input_prompt", "]")
        assert split_item_token("(away)") == ("(", "away", ")")
        assert split_item_token(":") == (":", "", "")
        assert split_item_token("{buffer_nicklist_count}") == ("{", "buffer_nicklist_count", "}")

    def test_token_is_item(self):
        assert token_is_item("[time]", "time")
        assert not token_is_item("[time]", "tim")
        assert token_is_item("[time]", "tim", partial=True)
        assert not token_is_item(":", "")

    def test_get_item_index(self):
        items_array = parse_items("[time],buffer_number+:+buffer_name,lag")
        assert get_item_index(items_array, "time") == (0, 0)
        assert get_item_index(items_array, "buffer_name") == (1, 2)
        assert get_item_index(items_array, "lag") == (2, 0)
        assert get_item_index(items_array, "missing") == (-1, -1)
        assert get_item_index(items_array, "") == (-1, -1)

    def test_flatten_keeps_drawing_order(self):
        assert flatten_items([["a"], ["b", "c"]]) == [(0, 0, "a"), (1, 0, "b"), (1, 1, "c")]
