"""
Bar introspection.

get_infolist() gives a flat record per bar (what scripts see), and print_log()
dumps the whole registry, bar windows included, to the log file.
"""

from core.bars.bar import Bar
from core.bars.items import flatten_items
from core.logger import dump


def bar_to_record(bar: Bar) -> dict[str, object]:
    """Flat snapshot of one bar."""
    record: dict[str, object] = {
        "name": bar.name,
        "hidden": int(bar.hidden),
        "priority": bar.priority,
        "type": bar.type.value,
        "conditions": bar.conditions,
        "conditions_count": len(bar.conditions_array),
    }
    for i, condition in enumerate(bar.conditions_array, start=1):
        record[f"conditions_array_{i:05d}"] = condition

    record.update(
        {
            "position": bar.position.value,
            "filling_top_bottom": bar.filling_top_bottom.value,
            "filling_left_right": bar.filling_left_right.value,
            "size": bar.size,
            "size_max": bar.size_max,
            "color_fg": bar.color_fg,
            "color_delim": bar.color_delim,
            "color_bg": bar.color_bg,
            "separator": int(bar.separator),
            "items": bar.items,
            "items_count": bar.items_count,
        }
    )
    for i, j, item in flatten_items(bar.items_array):
        record[f"items_array_{i + 1:05d}_{j + 1:05d}"] = item

    record["bar_window"] = f"0x{id(bar.bar_window):x}" if bar.bar_window is not None else None
    return record


def get_infolist(manager, bar: Bar | None = None) -> list[dict[str, object]]:
    """Records for one bar (if given and valid) or for all bars in priority order."""
    if bar is not None:
        if not manager.valid(bar):
            return []
        return [bar_to_record(bar)]
    return [bar_to_record(ptr_bar) for ptr_bar in manager.bars]


def print_log(manager) -> None:
    """Dump every bar and its bar windows to the log."""
    for bar in manager.bars:
        lines = [f"  {key:<20}: {value!r}" for key, value in bar_to_record(bar).items()]
        lines.append(f"  refresh_needed      : {bar.refresh_needed}")
        for i, subcount in enumerate(bar.items_subcount):
            lines.append(f"  items_subcount[{i:03d}] : {subcount}")
        for window in manager.screen.windows:
            bar_window = window.search_bar(bar)
            if bar_window is not None:
                lines.append(
                    f"  window {window.number:<13}: size {bar_window.current_size}, "
                    f"{bar_window.width}x{bar_window.height}, scroll {bar_window.scroll_x},{bar_window.scroll_y}"
                )
        dump(f'[bar "{bar.name}"]', lines)
