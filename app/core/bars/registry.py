"""
Bar registry - the ordered list of bars.

Bars are kept sorted by descending priority; bars with equal priority keep
their insertion order. The same class backs the staging list of temp bars
used while the config file is read.
"""

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class BarRegistry(Generic[T]):
    """Priority-ordered list of bars with linked-list style navigation."""

    def __init__(self):
        self._bars: list[T] = []

    @property
    def head(self) -> T | None:
        return self._bars[0] if self._bars else None

    @property
    def tail(self) -> T | None:
        return self._bars[-1] if self._bars else None

    def _index(self, bar: T) -> int:
        for i, ptr_bar in enumerate(self._bars):
            if ptr_bar is bar:
                return i
        return -1

    def prev(self, bar: T) -> T | None:
        i = self._index(bar)
        return self._bars[i - 1] if i > 0 else None

    def next(self, bar: T) -> T | None:
        i = self._index(bar)
        return self._bars[i + 1] if 0 <= i < len(self._bars) - 1 else None

    def valid(self, bar: T | None) -> bool:
        """Check that a bar is still in the list."""
        return bar is not None and self._index(bar) >= 0

    def _find_pos(self, bar: T) -> int:
        """Index of the first bar with a strictly lower priority (len if none)."""
        for i, ptr_bar in enumerate(self._bars):
            if bar.priority > ptr_bar.priority:
                return i
        return len(self._bars)

    def insert(self, bar: T) -> None:
        self._bars.insert(self._find_pos(bar), bar)

    def remove(self, bar: T) -> bool:
        i = self._index(bar)
        if i < 0:
            return False
        del self._bars[i]
        return True

    def reinsert(self, bar: T) -> None:
        """Move a bar to its place after a priority change."""
        if self.remove(bar):
            self.insert(bar)

    def find_by_name(self, name: str | None) -> T | None:
        if not name:
            return None
        for bar in self._bars:
            if bar.name == name:
                return bar
        return None

    def find_by_option_name(self, option_name: str | None) -> T | None:
        """Find the bar owning an option like "status.items"."""
        if not option_name or "." not in option_name:
            return None
        bar_name = option_name.split(".", 1)[0]
        return self.find_by_name(bar_name)

    def clear(self) -> None:
        self._bars.clear()

    def __iter__(self) -> Iterator[T]:
        # snapshot so callers may delete while iterating
        return iter(list(self._bars))

    def __len__(self) -> int:
        return len(self._bars)

    def __bool__(self) -> bool:
        return bool(self._bars)

    def __contains__(self, bar: T) -> bool:
        return self.valid(bar)
