"""
barkeep entry point.
Loads bars on a simulated screen, draws them once and prints the result.
"""

import argparse
import sys

from core.bars.infolist import print_log
from core.bars.manager import BarManager
from core.config_manager import ConfigManager
from core.constants import APP_NAME, APP_VERSION
from core.localization import t
from core.logger import get_logger, warning
from ui.window import Buffer, Screen


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Bar layout manager for terminal chat clients.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--config", metavar="PATH", help="bars config file (default: bars.yaml in data dir)")
    parser.add_argument("--width", type=int, default=80, help="screen width")
    parser.add_argument("--height", type=int, default=24, help="screen height")
    parser.add_argument("--windows", type=int, default=1, help="number of windows to open")
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="BAR.PROPERTY=VALUE",
        help="change a bar property (can be repeated)",
    )
    parser.add_argument("--delete", action="append", default=[], metavar="BAR", help="delete a bar")
    parser.add_argument("--save", action="store_true", help="write bars back to the config file")
    return parser.parse_args(argv)


def build_screen(args: argparse.Namespace) -> Screen:
    screen = Screen(args.width, args.height)
    screen.add_window(Buffer("core"))
    for number in range(2, max(1, args.windows) + 1):
        screen.add_window(Buffer(f"#channel{number}", nicklist=True))
    return screen


def apply_changes(manager: BarManager, args: argparse.Namespace) -> bool:
    ok = True
    for name in args.delete:
        bar = manager.search(name)
        if bar is None or not manager.delete(bar):
            warning(f'Unable to delete bar "{name}"')
            ok = False
        else:
            manager.screen.print(t("bar_deleted", name=name))

    for change in args.set:
        target, sep, value = change.partition("=")
        bar_name, dot, property_name = target.partition(".")
        bar = manager.search(bar_name)
        if not sep or not dot or bar is None or not manager.set(bar, property_name, value):
            manager.screen.print(t("option_invalid_value", value=value, option=target))
            ok = False
    return ok


def list_bars(manager: BarManager) -> list[str]:
    if not manager.bars:
        return [t("bars_list_empty")]

    lines = [t("bars_list_title")]
    for bar in manager.bars:
        hidden = f" ({t('bars_list_hidden')})" if bar.hidden else ""
        lines.append(
            f"  {bar.name}{hidden}: {bar.type.value}, {bar.position.value}, "
            f'priority {bar.priority}, size {bar.size}, items: "{bar.items}"'
        )
    for bar in manager.bars:
        if bar.bar_window is not None:
            for line in bar.bar_window.drawn:
                lines.append(f"[{bar.name}] {line}")
    for window in manager.screen.windows:
        lines.append(f"window {window.number} ({window.buffer.name}): chat {window.chat_width}x{window.chat_height}")
        for bar_window in window.bar_windows:
            for line in bar_window.drawn:
                lines.append(f"  [{bar_window.bar.name}] {line}")
    return lines


def main(argv=None) -> int:
    """Start the application."""
    get_logger()
    args = parse_args(argv)

    manager = BarManager(build_screen(args))
    config = ConfigManager(manager, args.config)
    loaded = config.load_config()
    manager.create_default()
    changed = apply_changes(manager, args)
    manager.draw_pending()
    print_log(manager)

    for message in manager.screen.core_buffer.lines:
        print(message)
    for line in list_bars(manager):
        print(line)

    if args.save and loaded and not config.save_config():
        return 1
    return 0 if loaded and changed else 1


if __name__ == "__main__":
    sys.exit(main())
