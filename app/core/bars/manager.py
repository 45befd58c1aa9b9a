"""
Bar manager - creating, changing and deleting bars.

The manager owns the bar registry, the temp bar staging list and the "bar"
option section. Every bar option is created here with its check and change
callbacks, so a change to any option (from a command, the config file or a
script) flows back into the manager: re-sort on priority, rebuild bar windows
on hidden, re-parse on items/conditions, resize on size.

Redraws are never done inline. Callbacks only raise refresh flags; the next
call to draw_pending() draws everything that asked for it, once.
"""

from core.bars import layout
from core.bars.bar import (
    OPTION_DEFAULTS,
    Bar,
    BarFilling,
    BarOption,
    BarOptions,
    BarPosition,
    BarType,
    TempBar,
    enum_names,
)
from core.bars.conditions import check_conditions_for_window, parse_conditions
from core.bars.defaults import (
    BAR_DEFAULT_NAME_INPUT,
    BAR_DEFAULT_NAME_NICKLIST,
    BAR_DEFAULT_NAME_STATUS,
    BAR_DEFAULT_NAME_TITLE,
    DEFAULT_BARS,
    ITEM_INPUT_TEXT,
)
from core.bars.items import get_item_index, parse_items, token_is_item
from core.bars.registry import BarRegistry
from core.bars.scroll import parse_scroll
from core.hooks import ModifierHooks
from core.localization import t
from core.logger import debug, info, warning
from core.options import Option, OptionSection, OptionType, SetResult, string_to_boolean
from ui.bar_window import BarWindow, ItemProvider
from ui.window import Buffer, Screen, Window

INT_MAX = 2**31 - 1

# option type, description, enumerated values, max value
_OPTION_TYPES = {
    BarOption.HIDDEN: (OptionType.BOOLEAN, "true if bar is hidden, false if it is displayed", None, 0),
    BarOption.PRIORITY: (OptionType.INTEGER, "bar priority (high number means bar displayed first)", None, INT_MAX),
    BarOption.TYPE: (OptionType.INTEGER, "bar type (root, window)", enum_names(BarType), 0),
    BarOption.CONDITIONS: (OptionType.STRING, 'condition(s) for displaying bar (for bars of type "window")', None, 0),
    BarOption.POSITION: (OptionType.INTEGER, "bar position (bottom, top, left, right)", enum_names(BarPosition), 0),
    BarOption.FILLING_TOP_BOTTOM: (
        OptionType.INTEGER,
        "bar filling direction when bar position is top or bottom",
        enum_names(BarFilling),
        0,
    ),
    BarOption.FILLING_LEFT_RIGHT: (
        OptionType.INTEGER,
        "bar filling direction when bar position is left or right",
        enum_names(BarFilling),
        0,
    ),
    BarOption.SIZE: (OptionType.INTEGER, "bar size in chars (0 = auto size)", None, INT_MAX),
    BarOption.SIZE_MAX: (OptionType.INTEGER, "max bar size in chars (0 = no limit)", None, INT_MAX),
    BarOption.COLOR_FG: (OptionType.COLOR, "default text color for bar", None, 0),
    BarOption.COLOR_DELIM: (OptionType.COLOR, "default delimiter color for bar", None, 0),
    BarOption.COLOR_BG: (OptionType.COLOR, "default background color for bar", None, 0),
    BarOption.SEPARATOR: (OptionType.BOOLEAN, "separator line between bar and other bars/windows", None, 0),
    BarOption.ITEMS: (OptionType.STRING, "items of bar", None, 0),
}

_COLOR_OPTIONS = (BarOption.COLOR_FG, BarOption.COLOR_DELIM, BarOption.COLOR_BG)


class BarManager:
    """Owns all bars and keeps bar windows and layout in sync with their options."""

    def __init__(
        self,
        screen: Screen | None = None,
        hooks: ModifierHooks | None = None,
        item_provider: ItemProvider | None = None,
    ):
        self.screen = screen or Screen()
        self.hooks = hooks or ModifierHooks()
        self.item_provider = item_provider
        self.section = OptionSection("bar")
        self.bars: BarRegistry[Bar] = BarRegistry()
        self.temp_bars: BarRegistry[TempBar] = BarRegistry()

        # check callback, change callback for each option
        self._observers = {
            BarOption.HIDDEN: (None, self._change_hidden),
            BarOption.PRIORITY: (None, self._change_priority),
            BarOption.TYPE: (self._check_type, None),
            BarOption.CONDITIONS: (None, self._change_conditions),
            BarOption.POSITION: (None, self._change_position),
            BarOption.FILLING_TOP_BOTTOM: (None, self._change_filling),
            BarOption.FILLING_LEFT_RIGHT: (None, self._change_filling),
            BarOption.SIZE: (self._check_size, self._change_size),
            BarOption.SIZE_MAX: (None, self._change_size_max),
            BarOption.COLOR_FG: (None, self._change_color),
            BarOption.COLOR_DELIM: (None, self._change_color),
            BarOption.COLOR_BG: (None, self._change_color),
            BarOption.SEPARATOR: (None, self._change_separator),
            BarOption.ITEMS: (None, self._change_items),
        }

    # --- lookup ---

    @staticmethod
    def valid_name(name: str | None) -> bool:
        """Bar names are non-empty and dot-free (options are named "<bar>.<option>")."""
        return bool(name) and "." not in name

    def search(self, name: str | None) -> Bar | None:
        return self.bars.find_by_name(name)

    def search_with_option_name(self, option_name: str) -> Bar | None:
        return self.bars.find_by_option_name(option_name)

    def valid(self, bar: Bar | None) -> bool:
        return self.bars.valid(bar)

    def get_item_index(self, bar: Bar, item_name: str) -> tuple[int, int]:
        if bar is None:
            return -1, -1
        return get_item_index(bar.items_array, item_name)

    def item_used_in_a_bar(self, item_name: str, partial_name: bool = False) -> bool:
        """Check if an item is displayed by any bar."""
        for bar in self.bars:
            for group in bar.items_array:
                for token in group:
                    if token_is_item(token, item_name, partial_name):
                        return True
        return False

    # --- options ---

    def create_option(self, bar_name: str, key: BarOption, value: str) -> Option | None:
        """Create option "<bar_name>.<key>" with its callbacks. None if value is invalid."""
        option_type, description, string_values, max_value = _OPTION_TYPES[key]
        check_callback, change_callback = self._observers[key]
        return self.section.new_option(
            f"{bar_name}.{key.value}",
            option_type,
            description=description,
            string_values=string_values,
            max_value=max_value,
            default_value=value if value is not None else "",
            check_callback=check_callback,
            change_callback=change_callback,
        )

    def _check_type(self, option: Option, value: str) -> bool:
        self.screen.print(t("bar_type_immutable"))
        return False

    def _check_size(self, option: Option, value: str) -> bool:
        bar = self.search_with_option_name(option.name)
        if bar is None:
            return False

        current = bar.size
        try:
            if value.startswith("++"):
                new_value = current + int(value[2:])
            elif value.startswith("--"):
                new_value = current - int(value[2:])
            else:
                new_value = int(value)
        except ValueError:
            return False
        if new_value < 0:
            return False

        if new_value > 0 and (current == 0 or new_value > current):
            if not bar.hidden and not self.check_size_add(bar, new_value - current):
                self.screen.print(t("bar_size_too_big", name=bar.name, size=new_value))
                return False
        return True

    def _change_hidden(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar:
            if bar.is_root and not bar.hidden:
                # root bar window was kept while hidden; catch up on changes made meanwhile
                self.content_build_bar_windows(bar)
                self.apply_current_size(bar)
            self.rebuild_bar_windows()
        self.screen.ask_refresh()

    def _change_priority(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar:
            self.bars.reinsert(bar)
            self.rebuild_bar_windows()
        self.screen.ask_refresh()

    def _change_conditions(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar:
            bar.conditions_array = parse_conditions(bar.conditions)
            self.update_layout()
        self.screen.ask_refresh()

    def _change_position(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar and not bar.hidden:
            self.apply_current_size(bar)
            self.refresh(bar)
        self.screen.ask_refresh()

    def _change_filling(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar and not bar.hidden:
            self.apply_current_size(bar)
            self.refresh(bar)
        self.screen.ask_refresh()

    def _change_size(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar and not bar.hidden:
            self.apply_current_size(bar)
            self.refresh(bar)

    def _change_size_max(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar and not bar.hidden:
            if bar.size_max > 0 and bar.size > bar.size_max:
                bar.options.size.set(str(bar.size_max))
            self.apply_current_size(bar)
            self.screen.ask_refresh()

    def _change_color(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar and not bar.hidden:
            self.refresh(bar)

    def _change_separator(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar and not bar.hidden:
            self.update_layout()
            self.refresh(bar)

    def _change_items(self, option: Option) -> None:
        bar = self.search_with_option_name(option.name)
        if bar:
            bar.items_array = parse_items(bar.items)
            if not bar.hidden:
                self.content_build_bar_windows(bar)
                if bar.size == 0:
                    self.apply_current_size(bar)
                self.ask_refresh(bar)

    def set(self, bar: Bar, property_name: str, value: str) -> bool:
        """Set a bar property by name ("name" renames the bar). False if rejected."""
        if not self.bars.valid(bar) or property_name is None or value is None:
            return False

        if property_name.lower() == "name":
            return self.set_name(bar, value)

        key = BarOption.search(property_name)
        if key is None:
            return False

        if key == BarOption.SEPARATOR:
            value = "on" if string_to_boolean(value) else "off"

        rc = bar.options.get(key).set(value)
        if rc == SetResult.ERROR:
            warning(f'Bar "{bar.name}": invalid value "{value}" for {key.value}')
            return False

        if key in _COLOR_OPTIONS or key == BarOption.SEPARATOR:
            self.refresh(bar)
        elif key == BarOption.ITEMS:
            self.draw(bar)
        return True

    def set_name(self, bar: Bar, name: str) -> bool:
        """Rename a bar and all its options; nothing changes if any rename fails."""
        if not self.bars.valid(bar) or not self.valid_name(name):
            return False
        if name == bar.name:
            return True
        if self.search(name):
            return False

        old_name = bar.name
        options = [(key, bar.options.get(key)) for key in BarOption if bar.options.get(key) is not None]
        if any(f"{name}.{key.value}" in self.section for key, _ in options):
            self.screen.print(t("bar_rename_failed", old_name=old_name, new_name=name))
            return False

        renamed = []
        for key, option in options:
            previous = option.name
            if not self.section.rename(option, f"{name}.{key.value}"):
                for done, done_previous in reversed(renamed):
                    self.section.rename(done, done_previous)
                self.screen.print(t("bar_rename_failed", old_name=old_name, new_name=name))
                return False
            renamed.append((option, previous))

        bar.name = name
        info(f'Bar "{old_name}" renamed to "{name}"')
        self.screen.print(t("bar_renamed", old_name=old_name, new_name=name))
        return True

    # --- creation and deletion ---

    def new(self, name: str, values: dict[str, str]) -> Bar | None:
        """Create a bar from option values (missing ones use defaults). None if rejected."""
        if not self.valid_name(name):
            warning(f'Invalid bar name "{name}"')
            return None
        if self.search(name):
            warning(f'Bar "{name}" already exists')
            return None

        by_key = {}
        for option_name, value in values.items():
            key = BarOption.search(option_name)
            if key is None:
                warning(f'Bar "{name}": unknown option "{option_name}"')
                return None
            by_key[key] = value

        if BarType.search(by_key.get(BarOption.TYPE, OPTION_DEFAULTS[BarOption.TYPE])) is None:
            warning(f'Bar "{name}": unknown type "{by_key.get(BarOption.TYPE)}"')
            return None
        if BarPosition.search(by_key.get(BarOption.POSITION, OPTION_DEFAULTS[BarOption.POSITION])) is None:
            warning(f'Bar "{name}": unknown position "{by_key.get(BarOption.POSITION)}"')
            return None
        if BarOption.SEPARATOR in by_key:
            by_key[BarOption.SEPARATOR] = "on" if string_to_boolean(by_key[BarOption.SEPARATOR]) else "off"

        options = BarOptions()
        for key in BarOption:
            option = self.create_option(name, key, by_key.get(key, OPTION_DEFAULTS[key]))
            if option is None:
                for created in options.all():
                    self.section.free(created)
                warning(f'Bar "{name}": invalid value for option "{key.value}"')
                return None
            options.put(key, option)

        return self.new_with_options(name, options)

    def create(
        self,
        name: str,
        hidden: str,
        priority: str,
        bar_type: str,
        conditions: str,
        position: str,
        filling_top_bottom: str,
        filling_left_right: str,
        size: str,
        size_max: str,
        color_fg: str,
        color_delim: str,
        color_bg: str,
        separator: str,
        items: str,
    ) -> Bar | None:
        """Create a bar with a full set of option values."""
        return self.new(
            name,
            {
                "hidden": hidden,
                "priority": priority,
                "type": bar_type,
                "conditions": conditions,
                "position": position,
                "filling_top_bottom": filling_top_bottom,
                "filling_left_right": filling_left_right,
                "size": size,
                "size_max": size_max,
                "color_fg": color_fg,
                "color_delim": color_delim,
                "color_bg": color_bg,
                "separator": separator,
                "items": items,
            },
        )

    def new_with_options(self, name: str, options: BarOptions) -> Bar:
        bar = Bar(name, options)
        bar.conditions_array = parse_conditions(bar.conditions)
        bar.items_array = parse_items(bar.items)
        bar.refresh_needed = True

        self.bars.insert(bar)

        if bar.is_root:
            BarWindow(bar, None, self.screen, self.item_provider)
            self.screen.ask_refresh()
        elif not bar.hidden:
            for window in self.screen.windows:
                BarWindow(bar, window, self.screen, self.item_provider)

        self.update_layout()
        info(f'Bar "{name}" created (type {bar.type.value}, priority {bar.priority})')
        return bar

    def delete(self, bar: Bar) -> bool:
        """Delete a bar, its bar windows and its options."""
        if not self.bars.valid(bar):
            return False

        if bar.bar_window is not None:
            bar.bar_window.free()
            self.screen.ask_refresh()
        else:
            self.free_bar_windows(bar)

        self.bars.remove(bar)

        for option in bar.options.all():
            self.section.free(option)
        bar.options = BarOptions()
        bar.conditions_array = []
        bar.items_array = []

        self.update_layout()
        info(f'Bar "{bar.name}" deleted')
        return True

    def free_all(self) -> None:
        while self.bars:
            self.delete(self.bars.head)

    def free_bar_windows(self, bar: Bar) -> None:
        """Remove the bar windows of a window bar from every window."""
        for window in self.screen.windows:
            for bar_window in list(window.bar_windows):
                if bar_window.bar is bar:
                    bar_window.free()

    def rebuild_bar_windows(self) -> None:
        """Recreate window bar windows for every visible bar, in priority order."""
        for bar in self.bars:
            self.free_bar_windows(bar)

        for window in self.screen.windows:
            for bar in self.bars:
                if not bar.hidden and not bar.is_root:
                    BarWindow(bar, window, self.screen, self.item_provider)

        self.update_layout()

    def window_init(self, window: Window) -> None:
        """Create bar windows for a window opened after bars were created."""
        for bar in self.bars:
            if not bar.hidden and not bar.is_root and not window.search_bar(bar):
                BarWindow(bar, window, self.screen, self.item_provider)
        self.update_layout()
        window.refresh_needed = True

    def window_remove(self, window: Window) -> None:
        for bar_window in list(window.bar_windows):
            bar_window.free()
        self.screen.remove_window(window)
        self.update_layout()
        self.screen.ask_refresh()

    # --- default bars ---

    def _create_default_bar(self, name: str) -> Bar | None:
        if self.search(name):
            return None
        bar = self.new(name, DEFAULT_BARS[name])
        if bar:
            self.screen.print(t("bar_created", name=name))
        return bar

    def create_default_input(self) -> None:
        if self.item_used_in_a_bar(ITEM_INPUT_TEXT, partial_name=True):
            return

        bar = self.search(BAR_DEFAULT_NAME_INPUT)
        if bar:
            items = f"{bar.items},{ITEM_INPUT_TEXT}" if bar.items else ITEM_INPUT_TEXT
            if bar.options.items.set(items) != SetResult.ERROR:
                self.screen.print(t("bar_updated", name=BAR_DEFAULT_NAME_INPUT))
                self.draw(bar)
        else:
            self._create_default_bar(BAR_DEFAULT_NAME_INPUT)

    def create_default(self) -> None:
        """Create the input, title, status and nicklist bars when they are missing."""
        self.create_default_input()
        self._create_default_bar(BAR_DEFAULT_NAME_TITLE)
        self._create_default_bar(BAR_DEFAULT_NAME_STATUS)
        self._create_default_bar(BAR_DEFAULT_NAME_NICKLIST)

    # --- temp bars (config file reading) ---

    def create_temp_bar(self, name: str) -> TempBar | None:
        """Get or create the temp bar `name`. None if the name is invalid."""
        if not self.valid_name(name):
            warning(f'Invalid bar name "{name}"')
            return None
        temp_bar = self.temp_bars.find_by_name(name)
        if temp_bar is None:
            temp_bar = TempBar(name)
            self.temp_bars.insert(temp_bar)
        return temp_bar

    def create_option_temp(self, temp_bar: TempBar, key: BarOption, value: str) -> bool:
        """Create an option on a temp bar; a later value for the same key replaces the earlier one."""
        previous = temp_bar.options.get(key)
        if previous is not None:
            self.section.free(previous)
            temp_bar.options.put(key, None)
        option = self.create_option(temp_bar.name, key, value)
        if option is None:
            return False
        temp_bar.options.put(key, option)
        return True

    def use_temp_bars(self) -> list[Bar]:
        """Turn temp bars into real bars; incomplete ones are dropped."""
        created = []
        for temp_bar in self.temp_bars:
            if not self.valid_name(temp_bar.name):
                warning(f'Invalid bar name "{temp_bar.name}"')
                for option in temp_bar.options.all():
                    self.section.free(option)
                continue
            for key in BarOption:
                if temp_bar.options.get(key) is None:
                    temp_bar.options.put(key, self.create_option(temp_bar.name, key, OPTION_DEFAULTS[key]))

            if temp_bar.options.is_complete() and not self.search(temp_bar.name):
                created.append(self.new_with_options(temp_bar.name, temp_bar.options))
            else:
                warning(f'Bar "{temp_bar.name}" from config discarded: incomplete options')
                for option in temp_bar.options.all():
                    self.section.free(option)
        self.temp_bars.clear()
        return created

    # --- sizing and drawing ---

    def check_size_add(self, bar: Bar, add_size: int) -> bool:
        return layout.check_size_add(bar, add_size, self.screen)

    def check_conditions_for_window(self, bar: Bar, window: Window) -> bool:
        return check_conditions_for_window(bar, window, self.screen.current_window, self.hooks)

    def update_layout(self) -> None:
        layout.calculate_chat_area(self.screen, self.bars, self.check_conditions_for_window)

    def _bar_windows(self, bar: Bar):
        if bar.bar_window is not None:
            return [bar.bar_window]
        return [bw for window in self.screen.windows for bw in window.bar_windows if bw.bar is bar]

    def content_build_bar_windows(self, bar: Bar) -> None:
        if not self.bars.valid(bar):
            return
        for bar_window in self._bar_windows(bar):
            bar_window.content_build()

    def apply_current_size(self, bar: Bar) -> None:
        if not self.bars.valid(bar):
            return
        for bar_window in self._bar_windows(bar):
            bar_window.set_current_size(bar.size)
        if bar.is_root:
            self.screen.ask_refresh()
        self.update_layout()

    def ask_refresh(self, bar: Bar) -> None:
        if self.bars.valid(bar):
            bar.refresh_needed = True

    def refresh(self, bar: Bar) -> None:
        """Ask redraw of every window where the bar is."""
        if not self.bars.valid(bar):
            return
        if bar.is_root:
            self.screen.ask_refresh()
            return
        for window in self.screen.windows:
            if window.search_bar(bar):
                window.refresh_needed = True

    def update(self, name: str) -> None:
        """Mark a visible bar dirty (an item it displays has changed)."""
        for bar in self.bars:
            if not bar.hidden and bar.name == name:
                self.ask_refresh(bar)

    def _displayed_bar_windows(self, bar: Bar, window_filter=None):
        if bar.hidden:
            return []
        if bar.is_root:
            return [bar.bar_window] if bar.bar_window is not None else []
        result = []
        for window in self.screen.windows:
            if window_filter is not None and not window_filter(window):
                continue
            bar_window = window.search_bar(bar)
            if bar_window is not None and self.check_conditions_for_window(bar, window):
                result.append(bar_window)
        return result

    def draw(self, bar: Bar) -> None:
        """Draw a bar now, in every window where it is displayed."""
        if not self.bars.valid(bar):
            return
        for bar_window in self._displayed_bar_windows(bar):
            bar_window.draw()
        bar.refresh_needed = False

    def draw_pending(self) -> int:
        """Screen refresh checkpoint: draw what asked for it, once. Returns bar windows drawn."""
        self.update_layout()
        full = self.screen.refresh_needed

        targets = []
        for bar in self.bars:
            if full or bar.refresh_needed:
                targets.extend(self._displayed_bar_windows(bar))
            elif not bar.is_root:
                targets.extend(self._displayed_bar_windows(bar, lambda window: window.refresh_needed))

        for bar_window in targets:
            bar_window.draw()

        self.screen.refresh_needed = False
        for window in self.screen.windows:
            window.refresh_needed = False
        for bar in self.bars:
            bar.refresh_needed = False

        if targets:
            debug(f"Drew {len(targets)} bar window(s){' (full refresh)' if full else ''}")
        return len(targets)

    def scroll(self, bar: Bar, buffer: Buffer | None, scroll: str) -> bool:
        """Scroll a bar (in windows showing `buffer` for window bars). False if scroll is malformed."""
        if not self.bars.valid(bar):
            return False

        request = parse_scroll(scroll)
        if request is None:
            return False

        if bar.hidden:
            return True

        if bar.is_root:
            targets = [bar.bar_window] if bar.bar_window is not None else []
        else:
            targets = [
                window.search_bar(bar)
                for window in self.screen.windows
                if window.buffer is buffer and window.search_bar(bar) is not None
            ]
        for bar_window in targets:
            bar_window.scroll(
                request.add_x, request.beginning, request.end, request.add, request.percent, request.value
            )
        return True
