"""
Bar definitions - the data model of one bar.

A bar owns one option per BarOption key. All of its settings are read through
those options; nothing writes to them except Option.set(), so change callbacks
always fire.
"""

from dataclasses import dataclass, fields
from enum import Enum

from core.options import Option


class BarOption(Enum):
    HIDDEN = "hidden"
    PRIORITY = "priority"
    TYPE = "type"
    CONDITIONS = "conditions"
    POSITION = "position"
    FILLING_TOP_BOTTOM = "filling_top_bottom"
    FILLING_LEFT_RIGHT = "filling_left_right"
    SIZE = "size"
    SIZE_MAX = "size_max"
    COLOR_FG = "color_fg"
    COLOR_DELIM = "color_delim"
    COLOR_BG = "color_bg"
    SEPARATOR = "separator"
    ITEMS = "items"

    @classmethod
    def search(cls, name: str | None) -> "BarOption | None":
        """Case-insensitive lookup of an option key."""
        if not name:
            return None
        lowered = name.lower()
        for option in cls:
            if option.value == lowered:
                return option
        return None


class BarType(Enum):
    ROOT = "root"
    WINDOW = "window"

    @classmethod
    def search(cls, name: str | None) -> "BarType | None":
        return _search_enum(cls, name)


class BarPosition(Enum):
    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def search(cls, name: str | None) -> "BarPosition | None":
        return _search_enum(cls, name)

    @property
    def is_horizontal(self) -> bool:
        """True for edges whose bars grow in height (top/bottom)."""
        return self in (BarPosition.TOP, BarPosition.BOTTOM)


class BarFilling(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    COLUMNS_HORIZONTAL = "columns_horizontal"
    COLUMNS_VERTICAL = "columns_vertical"


def _search_enum(enum_cls, name):
    if not name:
        return None
    lowered = name.lower()
    for member in enum_cls:
        if member.value == lowered:
            return member
    return None


def enum_names(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


OPTION_DEFAULTS = {
    BarOption.HIDDEN: "off",
    BarOption.PRIORITY: "0",
    BarOption.TYPE: "root",
    BarOption.CONDITIONS: "",
    BarOption.POSITION: "top",
    BarOption.FILLING_TOP_BOTTOM: "horizontal",
    BarOption.FILLING_LEFT_RIGHT: "vertical",
    BarOption.SIZE: "0",
    BarOption.SIZE_MAX: "0",
    BarOption.COLOR_FG: "default",
    BarOption.COLOR_DELIM: "default",
    BarOption.COLOR_BG: "default",
    BarOption.SEPARATOR: "off",
    BarOption.ITEMS: "",
}


@dataclass
class BarOptions:
    """The fixed option set of a bar. Fields stay None until created."""

    hidden: Option | None = None
    priority: Option | None = None
    type: Option | None = None
    conditions: Option | None = None
    position: Option | None = None
    filling_top_bottom: Option | None = None
    filling_left_right: Option | None = None
    size: Option | None = None
    size_max: Option | None = None
    color_fg: Option | None = None
    color_delim: Option | None = None
    color_bg: Option | None = None
    separator: Option | None = None
    items: Option | None = None

    def get(self, key: BarOption) -> Option | None:
        return getattr(self, key.value)

    def put(self, key: BarOption, option: Option | None) -> None:
        setattr(self, key.value, option)

    def all(self) -> list[Option]:
        """Every option that exists, in BarOption order."""
        return [getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None]

    def is_complete(self) -> bool:
        return all(getattr(self, f.name) is not None for f in fields(self))


class Bar:
    """One bar: status line, title, input line, nicklist, or user defined."""

    def __init__(self, name: str, options: BarOptions):
        self.name = name
        self.options = options
        self.conditions_array: list[str] = []
        self.items_array: list[list[str]] = []
        # only set for root bars; window bars keep their instances on each window
        self.bar_window = None
        self.refresh_needed = False

    @property
    def hidden(self) -> bool:
        return bool(self.options.hidden.value)

    @property
    def priority(self) -> int:
        return self.options.priority.value

    @property
    def type(self) -> BarType:
        return BarType(self.options.type.string_value)

    @property
    def position(self) -> BarPosition:
        return BarPosition(self.options.position.string_value)

    @property
    def filling_top_bottom(self) -> BarFilling:
        return BarFilling(self.options.filling_top_bottom.string_value)

    @property
    def filling_left_right(self) -> BarFilling:
        return BarFilling(self.options.filling_left_right.string_value)

    @property
    def size(self) -> int:
        return self.options.size.value

    @property
    def size_max(self) -> int:
        return self.options.size_max.value

    @property
    def color_fg(self) -> str:
        return self.options.color_fg.value

    @property
    def color_delim(self) -> str:
        return self.options.color_delim.value

    @property
    def color_bg(self) -> str:
        return self.options.color_bg.value

    @property
    def separator(self) -> bool:
        return bool(self.options.separator.value)

    @property
    def conditions(self) -> str:
        return self.options.conditions.value or ""

    @property
    def items(self) -> str:
        return self.options.items.value or ""

    @property
    def is_root(self) -> bool:
        return self.type == BarType.ROOT

    @property
    def items_count(self) -> int:
        return len(self.items_array)

    @property
    def items_subcount(self) -> list[int]:
        return [len(group) for group in self.items_array]

    def __repr__(self):
        return f"Bar({self.name!r}, priority={self.options.priority.value if self.options.priority else None})"


class TempBar:
    """Bar definition being rebuilt from the config file; options may be missing."""

    def __init__(self, name: str):
        self.name = name
        self.options = BarOptions()

    @property
    def priority(self) -> int:
        # staging list keeps file order
        return 0

    def __repr__(self):
        return f"TempBar({self.name!r})"
