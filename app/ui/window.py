"""
Screen model - windows, buffers and refresh flags.

This is the part of the display the bar core talks to: which windows are
open, which one has focus, how much room each window has left for chat, and
flags asking for a redraw at the next refresh checkpoint. Splitting and
closing windows is done elsewhere; here windows are simply added and removed.
"""

from dataclasses import dataclass, field


@dataclass
class Buffer:
    name: str
    nicklist: bool = False
    lines: list[str] = field(default_factory=list)


class Window:
    """A window on screen, showing one buffer."""

    def __init__(self, number: int, buffer: Buffer | None, width: int, height: int):
        self.number = number
        self.buffer = buffer
        self.width = width
        self.height = height
        # room left for the chat area once bars are laid out
        self.chat_width = width
        self.chat_height = height
        self.bar_windows = []
        self.refresh_needed = False

    @property
    def pointer(self) -> str:
        """Opaque identity string handed to scripts."""
        return f"0x{id(self):x}"

    def search_bar(self, bar):
        """Bar window displaying `bar` in this window, if any."""
        for bar_window in self.bar_windows:
            if bar_window.bar is bar:
                return bar_window
        return None

    def __repr__(self):
        return f"Window({self.number}, buffer={self.buffer.name if self.buffer else None!r})"


class Screen:
    """All windows plus the core buffer used for user-facing messages."""

    def __init__(self, width: int = 80, height: int = 24):
        self.width = width
        self.height = height
        self.windows: list[Window] = []
        self.current_window: Window | None = None
        self.core_buffer = Buffer("core")
        self.refresh_needed = False

    def add_window(self, buffer: Buffer | None = None, width: int | None = None, height: int | None = None) -> Window:
        number = max((w.number for w in self.windows), default=0) + 1
        window = Window(number, buffer, width or self.width, height or self.height)
        self.windows.append(window)
        if self.current_window is None:
            self.current_window = window
        return window

    def remove_window(self, window: Window) -> None:
        if window in self.windows:
            self.windows.remove(window)
        if self.current_window is window:
            self.current_window = self.windows[0] if self.windows else None

    def window_from_pointer(self, pointer: str) -> Window | None:
        for window in self.windows:
            if window.pointer == pointer:
                return window
        return None

    def ask_refresh(self) -> None:
        self.refresh_needed = True

    def print(self, message: str) -> None:
        """Show a message on the core buffer."""
        self.core_buffer.lines.append(message)
