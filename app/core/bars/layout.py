"""
Bar layout and sizing rules.

Bars eat into the chat area of the windows they are displayed in. Before a
bar is allowed to grow, every affected window must keep at least
CHAT_MIN_WIDTH x CHAT_MIN_HEIGHT cells for chat.
"""

import sys
from typing import Callable

from core.bars.bar import BarFilling, BarPosition
from core.constants import CHAT_MIN_HEIGHT, CHAT_MIN_WIDTH


def get_filling(bar) -> BarFilling:
    """Filling in effect for the bar's current position."""
    if bar.position.is_horizontal:
        return bar.filling_top_bottom
    return bar.filling_left_right


def _bar_windows_of(bar, screen):
    for window in screen.windows:
        for bar_window in window.bar_windows:
            if bar_window.bar is bar:
                yield bar_window


def get_min_width(bar, screen) -> int:
    """Smallest width among the bar windows of a bar (0 if it has none)."""
    if bar.is_root:
        return bar.bar_window.width if bar.bar_window else 0
    min_width = sys.maxsize
    for bar_window in _bar_windows_of(bar, screen):
        min_width = min(min_width, bar_window.width)
    return 0 if min_width == sys.maxsize else min_width


def get_min_height(bar, screen) -> int:
    """Smallest height among the bar windows of a bar (0 if it has none)."""
    if bar.is_root:
        return bar.bar_window.height if bar.bar_window else 0
    min_height = sys.maxsize
    for bar_window in _bar_windows_of(bar, screen):
        min_height = min(min_height, bar_window.height)
    return 0 if min_height == sys.maxsize else min_height


def check_size_add(bar, add_size: int, screen) -> bool:
    """Check that growing `bar` by `add_size` leaves every affected window enough chat room."""
    sub_width = 0
    sub_height = 0
    if bar.position.is_horizontal:
        sub_height = add_size
    else:
        sub_width = add_size

    for window in screen.windows:
        if bar.is_root or window.search_bar(bar):
            if window.chat_width - sub_width < CHAT_MIN_WIDTH or window.chat_height - sub_height < CHAT_MIN_HEIGHT:
                return False
    return True


def _space_taken(bar_window) -> int:
    return bar_window.current_size + (1 if bar_window.bar.separator else 0)


def root_get_size(registry, bar, position: BarPosition) -> int:
    """Total size of visible root bars at `position` drawn before `bar` (all of them if bar is None)."""
    total_size = 0
    for ptr_bar in registry:
        if bar is not None and ptr_bar is bar:
            return total_size
        if ptr_bar.hidden or not ptr_bar.is_root or ptr_bar.position != position:
            continue
        if ptr_bar.bar_window is not None:
            total_size += _space_taken(ptr_bar.bar_window)
    return total_size


def calculate_chat_area(screen, registry, displayed: Callable[[object, object], bool]) -> None:
    """Recompute the chat area of every window from the bars around it."""
    root_height = root_get_size(registry, None, BarPosition.TOP) + root_get_size(registry, None, BarPosition.BOTTOM)
    root_width = root_get_size(registry, None, BarPosition.LEFT) + root_get_size(registry, None, BarPosition.RIGHT)

    for window in screen.windows:
        sub_width = root_width
        sub_height = root_height
        for bar_window in window.bar_windows:
            bar = bar_window.bar
            if bar.hidden or not displayed(bar, window):
                continue
            if bar.position.is_horizontal:
                sub_height += _space_taken(bar_window)
            else:
                sub_width += _space_taken(bar_window)
        window.chat_width = max(0, window.width - sub_width)
        window.chat_height = max(0, window.height - sub_height)
