"""
Bar windows - the drawn instances of a bar.

A root bar has exactly one bar window covering the whole screen edge; a window
bar has one bar window in each window where it is displayed. A bar window
keeps its own size, scroll offsets and rendered content; the bar itself only
holds the definition.
"""

from typing import Callable

from core.bars.bar import BarFilling
from core.bars.items import split_item_token

ItemProvider = Callable[[str, object], str | None]


def default_item_provider(name: str, window) -> str | None:
    """Render an item as its own name (used when no real item callbacks are registered)."""
    return name or None


class BarWindow:
    """One drawn instance of a bar (root bar: window is None)."""

    def __init__(self, bar, window, screen, item_provider: ItemProvider | None = None):
        self.bar = bar
        self.window = window
        self.screen = screen
        self.item_provider = item_provider or default_item_provider
        self.x = 0
        self.y = 0
        self.width = 1
        self.height = 1
        self.scroll_x = 0
        self.scroll_y = 0
        self.current_size = 1
        self.content: list[str] = []
        self.drawn: list[str] = []
        self.draw_count = 0

        if window is None:
            bar.bar_window = self
        else:
            self._attach(window)
        self.content_build()
        self.set_current_size(bar.size)

    def _attach(self, window) -> None:
        """Insert in the window list, keeping higher priority bars first."""
        for i, bar_window in enumerate(window.bar_windows):
            if self.bar.priority > bar_window.bar.priority:
                window.bar_windows.insert(i, self)
                return
        window.bar_windows.append(self)

    def _area(self) -> tuple[int, int]:
        if self.window is not None:
            return self.window.width, self.window.height
        return self.screen.width, self.screen.height

    def content_build(self) -> None:
        """Render every item group to one string per group."""
        content = []
        for group in self.bar.items_array:
            parts = []
            for token in group:
                prefix, name, suffix = split_item_token(token)
                if not name:
                    # pure decoration like ":" between two items
                    parts.append(token)
                    continue
                text = self.item_provider(name, self.window)
                if text:
                    parts.append(f"{prefix}{text}{suffix}")
            line = "".join(parts)
            if line:
                content.append(line)
        self.content = content

    def _auto_size(self) -> int:
        if self.bar.position.is_horizontal:
            if self.bar.filling_top_bottom != BarFilling.HORIZONTAL:
                return max(1, len(self.content))
            return 1
        return max((len(line) for line in self.content), default=1)

    def set_current_size(self, size: int) -> None:
        new_size = size if size > 0 else self._auto_size()
        if self.bar.size_max > 0 and new_size > self.bar.size_max:
            new_size = self.bar.size_max
        self.current_size = new_size

        area_width, area_height = self._area()
        if self.bar.position.is_horizontal:
            self.width, self.height = area_width, new_size
        else:
            self.width, self.height = new_size, area_height

        if self.window is not None:
            self.window.refresh_needed = True

    def scroll(self, add_x: bool, beginning: bool, end: bool, add: bool, percent: bool, value: int) -> None:
        visible = self.width if add_x else self.height
        if add_x:
            extent = max((len(line) for line in self.content), default=0)
        else:
            extent = len(self.content)
        max_scroll = max(0, extent - visible)

        current = self.scroll_x if add_x else self.scroll_y
        if beginning:
            current = 0
        elif end:
            current = max_scroll
        else:
            amount = (visible * value) // 100 if percent else value
            current = current + amount if add else current - amount
            current = min(max(0, current), max_scroll)

        if add_x:
            self.scroll_x = current
        else:
            self.scroll_y = current
        self.bar.refresh_needed = True

    def draw(self) -> None:
        lines = self.content[self.scroll_y : self.scroll_y + self.height]
        self.drawn = [line[self.scroll_x : self.scroll_x + self.width] for line in lines]
        self.draw_count += 1

    def free(self) -> None:
        if self.window is None:
            if self.bar.bar_window is self:
                self.bar.bar_window = None
        elif self in self.window.bar_windows:
            self.window.bar_windows.remove(self)
            self.window.refresh_needed = True

    def __repr__(self):
        return f"BarWindow({self.bar.name!r}, window={self.window.number if self.window else None})"
