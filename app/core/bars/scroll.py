"""
Scroll command parsing.

Grammar: an axis ("x" or "y"), then either "b" (beginning), "e" (end), or a
signed positive number optionally followed by "%":

    x+10    scroll right 10 chars
    y-5%    scroll up 5% of the bar height
    yb      scroll to top
    xe      scroll to the far right
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScrollRequest:
    add_x: bool
    beginning: bool = False
    end: bool = False
    add: bool = False
    percent: bool = False
    value: int = 0


def parse_scroll(scroll: str | None) -> ScrollRequest | None:
    """Parse a scroll string; None if it is malformed."""
    if not scroll:
        return None

    axis = scroll[0].lower()
    if axis not in ("x", "y"):
        return None
    add_x = axis == "x"
    rest = scroll[1:]
    if not rest:
        return None

    mode = rest[0]
    if mode in ("b", "B"):
        return ScrollRequest(add_x=add_x, beginning=True) if len(rest) == 1 else None
    if mode in ("e", "E"):
        return ScrollRequest(add_x=add_x, end=True) if len(rest) == 1 else None
    if mode not in ("+", "-"):
        return None

    number = rest[1:]
    percent = number.endswith("%")
    if percent:
        number = number[:-1]
    if not number.isdecimal():
        return None
    value = int(number)
    if value <= 0:
        return None

    return ScrollRequest(add_x=add_x, add=mode == "+", percent=percent, value=value)
