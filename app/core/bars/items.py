"""
Item list parsing.

A bar's "items" option looks like "[time],buffer_number+:+buffer_name,lag":
commas separate groups, "+" separates items drawn glued together inside a
group. Item tokens may carry decoration around the actual item name, such as
"[time]" or "(away)", which is ignored when looking items up by name.
"""

import re

_ITEM_TOKEN = re.compile(r"^([^A-Za-z0-9_-]*)([A-Za-z0-9_-]*)(.*)$", re.DOTALL)


def parse_items(items: str | None) -> list[list[str]]:
    """Split an items string into groups of items. Empty string gives no groups."""
    if not items:
        return []
    groups = []
    for group in items.split(","):
        if not group:
            continue
        alternatives = [item for item in group.split("+") if item]
        if alternatives:
            groups.append(alternatives)
    return groups


def split_item_token(token: str) -> tuple[str, str, str]:
    """Return (prefix, name, suffix) for an item token, e.g. "[time]" -> ("[", "time", "]")."""
    match = _ITEM_TOKEN.match(token)
    return match.group(1), match.group(2), match.group(3)


def item_name(token: str) -> str:
    return split_item_token(token)[1]


def token_is_item(token: str, name: str, partial: bool = False) -> bool:
    """Check if a token refers to item `name` (or starts with it when partial)."""
    if not name:
        return False
    found = item_name(token)
    if partial:
        return found.startswith(name)
    return found == name


def get_item_index(items_array: list[list[str]], name: str) -> tuple[int, int]:
    """Position (group, item in group) of an item, or (-1, -1) if absent."""
    if not name:
        return -1, -1
    for i, group in enumerate(items_array):
        for j, token in enumerate(group):
            if token_is_item(token, name):
                return i, j
    return -1, -1


def flatten_items(items_array: list[list[str]]) -> list[tuple[int, int, str]]:
    """All tokens with their (group, item) indexes, in drawing order."""
    return [(i, j, token) for i, group in enumerate(items_array) for j, token in enumerate(group)]
