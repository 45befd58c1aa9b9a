"""
Typed configuration options with validation and change callbacks.

An option has a type (boolean, integer, string or color), an optional list of
string values (turning an integer option into an enumeration), bounds, and two
hooks: a check callback that may veto a raw value before anything changes, and
a change callback fired after a new value is committed.

Options are grouped in an OptionSection and addressed by their full name,
e.g. "status.priority".
"""

from enum import Enum, IntEnum
from typing import Any, Callable

from core.logger import debug, error

BOOLEAN_TRUE = ("on", "yes", "y", "true", "t", "1")
BOOLEAN_FALSE = ("off", "no", "n", "false", "f", "0")

COLOR_NAMES = (
    "default",
    "black",
    "darkgray",
    "red",
    "lightred",
    "green",
    "lightgreen",
    "brown",
    "yellow",
    "blue",
    "lightblue",
    "magenta",
    "lightmagenta",
    "cyan",
    "lightcyan",
    "gray",
    "white",
)
COLOR_PALETTE_MAX = 255


class OptionType(Enum):
    BOOLEAN = "boolean"
    INTEGER = "integer"
    STRING = "string"
    COLOR = "color"


class SetResult(IntEnum):
    """Outcome of Option.set()."""

    ERROR = 0
    SAME_VALUE = 1
    CHANGED = 2


CheckCallback = Callable[["Option", str], bool]
ChangeCallback = Callable[["Option"], None]


def string_to_boolean(text: str | None) -> bool | None:
    """Parse a boolean spelling ("on", "off", "1", "false"...). None if unknown."""
    if text is None:
        return None
    lowered = text.strip().lower()
    if lowered in BOOLEAN_TRUE:
        return True
    if lowered in BOOLEAN_FALSE:
        return False
    return None


def is_color(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in COLOR_NAMES:
        return True
    return lowered.isdigit() and int(lowered) <= COLOR_PALETTE_MAX


def _parse_relative(text: str) -> tuple[int, int] | None:
    """Split "++N" / "--N" into (sign, N). None if text is not relative."""
    if text.startswith("++"):
        sign = 1
    elif text.startswith("--"):
        sign = -1
    else:
        return None
    try:
        return sign, int(text[2:])
    except ValueError:
        return None


class Option:
    """A single typed, validated setting."""

    def __init__(
        self,
        name: str,
        option_type: OptionType,
        description: str = "",
        string_values: list[str] | None = None,
        min_value: int = 0,
        max_value: int = 0,
        default_value: str | None = None,
        check_callback: CheckCallback | None = None,
        change_callback: ChangeCallback | None = None,
    ):
        self.name = name
        self.type = option_type
        self.description = description
        self.string_values = list(string_values) if string_values else None
        self.min = min_value
        self.max = max_value if not self.string_values else len(self.string_values) - 1
        self.check_callback = check_callback
        self.change_callback = change_callback
        self.section: "OptionSection | None" = None

        self.default_value: Any = None
        self.value: Any = None
        if default_value is not None:
            ok, parsed = self.parse(default_value)
            if not ok:
                raise ValueError(f'invalid default value "{default_value}" for option "{name}"')
            self.default_value = parsed
            self.value = parsed

    @property
    def is_enum(self) -> bool:
        return self.type == OptionType.INTEGER and self.string_values is not None

    def parse(self, text: str) -> tuple[bool, Any]:
        """Convert a raw string to this option's value type. Returns (ok, value)."""
        if text is None:
            return False, None

        if self.type == OptionType.BOOLEAN:
            if text.strip().lower() == "toggle":
                return True, not bool(self.value)
            value = string_to_boolean(text)
            return value is not None, value

        if self.type == OptionType.INTEGER:
            return self._parse_integer(text)

        if self.type == OptionType.COLOR:
            if not is_color(text):
                return False, None
            return True, text.strip().lower()

        return True, text

    def _parse_integer(self, text: str) -> tuple[bool, Any]:
        relative = _parse_relative(text)
        if self.string_values:
            if relative and self.value is not None:
                sign, number = relative
                count = len(self.string_values)
                return True, (self.value + sign * number) % count
            lowered = text.strip().lower()
            for index, name in enumerate(self.string_values):
                if name.lower() == lowered:
                    return True, index
            return False, None

        if relative:
            sign, number = relative
            value = (self.value or 0) + sign * number
        else:
            try:
                value = int(text)
            except ValueError:
                return False, None
        if value < self.min or value > self.max:
            return False, None
        return True, value

    def set(self, text: str, run_callback: bool = True) -> SetResult:
        """Validate, commit and notify. Value is untouched on ERROR."""
        if self.check_callback is not None and not self.check_callback(self, text):
            debug(f'Option "{self.name}": value "{text}" rejected by check callback')
            return SetResult.ERROR

        ok, value = self.parse(text)
        if not ok:
            debug(f'Option "{self.name}": invalid value "{text}"')
            return SetResult.ERROR

        if value == self.value:
            return SetResult.SAME_VALUE

        self.value = value
        if run_callback and self.change_callback is not None:
            self.change_callback(self)
        return SetResult.CHANGED

    def reset(self, run_callback: bool = True) -> SetResult:
        if self.default_value == self.value:
            return SetResult.SAME_VALUE
        self.value = self.default_value
        if run_callback and self.change_callback is not None:
            self.change_callback(self)
        return SetResult.CHANGED

    @property
    def string_value(self) -> str:
        """Value of an enumerated option as its name."""
        if self.string_values is None or self.value is None:
            return ""
        return self.string_values[self.value]

    def value_as_string(self) -> str:
        if self.value is None:
            return ""
        if self.type == OptionType.BOOLEAN:
            return "on" if self.value else "off"
        if self.is_enum:
            return self.string_value
        return str(self.value)

    def __repr__(self):
        return f"Option({self.name!r}, {self.value_as_string()!r})"


class OptionSection:
    """Named group of options, keyed by full option name."""

    def __init__(self, name: str):
        self.name = name
        self._options: dict[str, Option] = {}

    def new_option(self, name: str, option_type: OptionType, **kwargs) -> Option | None:
        """Create and register an option. None if the name is taken or the default is invalid."""
        if not name or name in self._options:
            error(f'Unable to create option "{self.name}.{name}": name already used')
            return None
        try:
            option = Option(name, option_type, **kwargs)
        except ValueError as e:
            error(f'Unable to create option "{self.name}.{name}": {e}')
            return None
        option.section = self
        self._options[name] = option
        return option

    def search(self, name: str) -> Option | None:
        return self._options.get(name)

    def rename(self, option: Option, new_name: str) -> bool:
        """Rename an option; fails if the new name is already taken."""
        if not new_name or option.section is not self or new_name in self._options:
            return False
        del self._options[option.name]
        option.name = new_name
        self._options[new_name] = option
        return True

    def free(self, option: Option) -> None:
        if self._options.get(option.name) is option:
            del self._options[option.name]
        option.section = None
        option.check_callback = None
        option.change_callback = None

    def __iter__(self):
        return iter(list(self._options.values()))

    def __len__(self):
        return len(self._options)

    def __contains__(self, name: str) -> bool:
        return name in self._options
