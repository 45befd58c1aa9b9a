"""Default bars created at startup when missing from the config."""

BAR_DEFAULT_NAME_INPUT = "input"
BAR_DEFAULT_NAME_TITLE = "title"
BAR_DEFAULT_NAME_STATUS = "status"
BAR_DEFAULT_NAME_NICKLIST = "nicklist"

ITEM_INPUT_PROMPT = "input_prompt"
ITEM_INPUT_SEARCH = "input_search"
ITEM_INPUT_PASTE = "input_paste"
ITEM_INPUT_TEXT = "input_text"
ITEM_BUFFER_TITLE = "buffer_title"
ITEM_TIME = "time"
ITEM_BUFFER_COUNT = "buffer_count"
ITEM_BUFFER_PLUGIN = "buffer_plugin"
ITEM_BUFFER_NUMBER = "buffer_number"
ITEM_BUFFER_NAME = "buffer_name"
ITEM_BUFFER_NICKLIST_COUNT = "buffer_nicklist_count"
ITEM_BUFFER_FILTER = "buffer_filter"
ITEM_HOTLIST = "hotlist"
ITEM_COMPLETION = "completion"
ITEM_SCROLL = "scroll"
ITEM_BUFFER_NICKLIST = "buffer_nicklist"

DEFAULT_BARS = {
    BAR_DEFAULT_NAME_INPUT: {
        "hidden": "0",
        "priority": "1000",
        "type": "window",
        "conditions": "",
        "position": "bottom",
        "filling_top_bottom": "horizontal",
        "filling_left_right": "vertical",
        "size": "1",
        "size_max": "0",
        "color_fg": "default",
        "color_delim": "cyan",
        "color_bg": "default",
        "separator": "0",
        "items": f"[{ITEM_INPUT_PROMPT}]+(away),[{ITEM_INPUT_SEARCH}],[{ITEM_INPUT_PASTE}],{ITEM_INPUT_TEXT}",
    },
    BAR_DEFAULT_NAME_TITLE: {
        "hidden": "0",
        "priority": "500",
        "type": "window",
        "conditions": "",
        "position": "top",
        "filling_top_bottom": "horizontal",
        "filling_left_right": "vertical",
        "size": "1",
        "size_max": "0",
        "color_fg": "default",
        "color_delim": "cyan",
        "color_bg": "blue",
        "separator": "0",
        "items": ITEM_BUFFER_TITLE,
    },
    BAR_DEFAULT_NAME_STATUS: {
        "hidden": "0",
        "priority": "500",
        "type": "window",
        "conditions": "",
        "position": "bottom",
        "filling_top_bottom": "horizontal",
        "filling_left_right": "vertical",
        "size": "1",
        "size_max": "0",
        "color_fg": "default",
        "color_delim": "cyan",
        "color_bg": "blue",
        "separator": "0",
        "items": (
            f"[{ITEM_TIME}],[{ITEM_BUFFER_COUNT}],[{ITEM_BUFFER_PLUGIN}],"
            f"{ITEM_BUFFER_NUMBER}+:+{ITEM_BUFFER_NAME}+{{{ITEM_BUFFER_NICKLIST_COUNT}}}+{ITEM_BUFFER_FILTER},"
            f"[lag],[{ITEM_HOTLIST}],{ITEM_COMPLETION},{ITEM_SCROLL}"
        ),
    },
    BAR_DEFAULT_NAME_NICKLIST: {
        "hidden": "0",
        "priority": "200",
        "type": "window",
        "conditions": "nicklist",
        "position": "right",
        "filling_top_bottom": "columns_vertical",
        "filling_left_right": "vertical",
        "size": "0",
        "size_max": "0",
        "color_fg": "default",
        "color_delim": "cyan",
        "color_bg": "default",
        "separator": "1",
        "items": ITEM_BUFFER_NICKLIST,
    },
}
