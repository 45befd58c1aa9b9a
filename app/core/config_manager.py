"""
Config management - loading and saving bar definitions.

Bars live in bars.yaml:

    bars:
      status:
        priority: 500
        type: window
        position: bottom
        items: "[time],buffer_name"

Loading goes through temp bars: every option read from the file is created
on a temp bar, and only once the whole file is read are temp bars promoted
to real bars (missing options get their defaults). A file that cannot be
read or parsed is reported and leaves the current bars untouched.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from core.bars.bar import BarOption
from core.constants import APP_NAME, APP_VERSION, BARS_CONFIG_PATH
from core.errors import ConfigStructureError, get_friendly_error_message
from core.localization import t
from core.logger import error, info, warning
from core.options import Option, OptionType
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError


def _normalize(obj):
    """Convert ruamel.yaml types to plain Python for comparison."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return {str(k): _normalize(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_normalize(v) for v in obj]
    type_name = type(obj).__name__
    if type_name in ("ScalarBoolean", "bool"):
        return bool(obj)
    if type_name in ("ScalarInt", "int"):
        return int(obj)
    if type_name in ("ScalarFloat", "float"):
        return float(obj)
    return str(obj)


def _get_yaml() -> YAML:
    """Get a configured YAML instance."""
    y = YAML()
    y.preserve_quotes = True
    y.allow_unicode = False
    y.indent(mapping=2, sequence=4, offset=2)
    y.width = 120
    y.default_flow_style = False
    return y


def _to_option_string(value: Any) -> str:
    """YAML scalar -> option string ("true" becomes "on", 500 becomes "500")."""
    value = _normalize(value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def _option_to_yaml(option: Option) -> Any:
    if option.type == OptionType.BOOLEAN:
        return bool(option.value)
    if option.type == OptionType.INTEGER and not option.is_enum:
        return int(option.value)
    return option.value_as_string()


def _get_bars_section(data: Any) -> dict:
    """Validate the document shape and return the bars mapping."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigStructureError("root is not a mapping")
    bars = data.get("bars")
    if bars is None:
        return {}
    if not isinstance(bars, dict):
        raise ConfigStructureError("bars is not a mapping")
    for name, options in bars.items():
        if options is not None and not isinstance(options, dict):
            raise ConfigStructureError(f'bar "{name}" is not a mapping')
    return bars


class ConfigManager:
    """Reads and writes the bars of a BarManager."""

    def __init__(self, manager, config_path: str | Path | None = None):
        self.manager = manager
        self._config_path = Path(config_path) if config_path else BARS_CONFIG_PATH
        self._original_config: str = "{}"  # JSON snapshot for change detection
        self.last_error: str = ""

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _bars_data(self) -> dict[str, dict[str, Any]]:
        """Current bars as plain data, in priority order."""
        return {
            bar.name: {key.value: _option_to_yaml(bar.options.get(key)) for key in BarOption}
            for bar in self.manager.bars
        }

    def _snapshot(self) -> str:
        return json.dumps(self._bars_data(), sort_keys=True)

    def load_config(self) -> bool:
        """Create bars from the config file. A missing file is not an error."""
        self.last_error = ""
        if not self._config_path.is_file():
            info(f"No bars config at {self._config_path}, starting without bars")
            self._original_config = self._snapshot()
            return True

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                text = f.read()
            y = _get_yaml()
            bars = _get_bars_section(y.load(text))
        except (OSError, ValueError, YAMLError) as e:
            self.last_error = get_friendly_error_message(e)
            error(f"Error loading {self._config_path}: {e}")
            self.manager.screen.print(self.last_error)
            return False

        for bar_name, options in bars.items():
            bar_name = str(bar_name)
            if self.manager.search(bar_name):
                warning(f'Bar "{bar_name}" already exists, definition in config ignored')
                continue
            temp_bar = self.manager.create_temp_bar(bar_name)
            if temp_bar is None:
                self.manager.screen.print(t("bar_name_invalid", name=bar_name))
                continue
            for option_name, value in (options or {}).items():
                key = BarOption.search(str(option_name))
                if key is None:
                    warning(f'Bar "{bar_name}": unknown option "{option_name}" ignored')
                    continue
                option_value = _to_option_string(value)
                if not self.manager.create_option_temp(temp_bar, key, option_value):
                    self.manager.screen.print(
                        t("option_invalid_value", value=option_value, option=f"{bar_name}.{key.value}")
                    )

        created = self.manager.use_temp_bars()
        info(f"Loaded {len(created)} bar(s) from {self._config_path}")
        self._original_config = self._snapshot()
        return True

    def save_config(self) -> bool:
        """Write all bars to the config file."""
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_path, "w", encoding="utf-8") as f:
                f.write(f"# Generated by {APP_NAME} v{APP_VERSION}\n")
                f.write(f"# Last edited: {datetime.now().strftime('%b %d, %Y %H:%M')}\n\n")

                y = _get_yaml()
                y.dump({"bars": self._bars_data()}, f)

            self._original_config = self._snapshot()
            return True
        except (OSError, YAMLError) as e:
            self.last_error = t("error_config_save", detail=str(e))
            error(f"Error saving config: {e}")
            self.manager.screen.print(self.last_error)
            return False

    def has_config_changed(self) -> bool:
        """Check if bars were modified since the last load or save."""
        return self._snapshot() != self._original_config
