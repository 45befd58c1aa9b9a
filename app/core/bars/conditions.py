"""
Bar display conditions.

A window bar may carry conditions such as "active" or "nicklist". After the
built-in conditions pass, scripts get the last word through the modifier
"bar_condition_<barname>": returning "0" hides the bar in that window.
"""

CONDITION_ACTIVE = "active"
CONDITION_INACTIVE = "inactive"
CONDITION_NICKLIST = "nicklist"

MODIFIER_PREFIX = "bar_condition_"


def parse_conditions(conditions: str | None) -> list[str]:
    """Split the comma separated conditions string. Empty string gives no conditions."""
    if not conditions:
        return []
    return [condition for condition in conditions.split(",") if condition]


def check_conditions_for_window(bar, window, current_window, hooks) -> bool:
    """True if `bar` should be displayed in `window`."""
    for condition in bar.conditions_array:
        lowered = condition.lower()
        if lowered == CONDITION_ACTIVE:
            if current_window is not None and current_window is not window:
                return False
        elif lowered == CONDITION_INACTIVE:
            if current_window is None or current_window is window:
                return False
        elif lowered == CONDITION_NICKLIST:
            if window.buffer is not None and not window.buffer.nicklist:
                return False
        # anything else is left to the bar_condition_* modifier

    displayed = hooks.exec(f"{MODIFIER_PREFIX}{bar.name}", window.pointer, "")
    return displayed != "0"
