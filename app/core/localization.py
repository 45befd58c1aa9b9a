"""
User-facing messages printed on the core buffer.

These are the lines a user sees when a bar is created, updated, renamed or
deleted, when a size or type change is refused, and when bars.yaml cannot be
read or written. Each locale is a JSON file in locales/ keyed like en.json.
BARKEEP_LANG picks the language. A key missing from it is taken from
English, and an unknown key is returned as is.
"""

import json
import os

from core.constants import DEFAULT_LANGUAGE, LOCALES_DIR
from core.logger import error

_localization = None


class Localization:
    """Handles loading and accessing translated strings."""

    def __init__(self, language: str | None = None):
        self._current_language = language or os.environ.get("BARKEEP_LANG") or DEFAULT_LANGUAGE
        self._translations = {}
        self._fallback = {}
        self._available_languages = {}
        self._locales_dir = LOCALES_DIR

        self._scan_languages()
        self._load_language(self._current_language)

    def _scan_languages(self):
        """Find all available language files in locales/ directory."""
        self._available_languages = {}
        if self._locales_dir.exists():
            for file in self._locales_dir.glob("*.json"):
                try:
                    with open(file, encoding="utf-8") as f:
                        data = json.load(f)
                        self._available_languages[file.stem] = data.get("_language_name", file.stem.upper())
                except (OSError, ValueError) as e:
                    error(f"Error scanning language file {file}: {e}")
        if "en" not in self._available_languages:
            self._available_languages["en"] = "English"

    def _load_language(self, lang_code):
        """Load translations for a specific language code."""
        fallback_path = self._locales_dir / "en.json"
        if fallback_path.exists():
            try:
                with open(fallback_path, encoding="utf-8") as f:
                    self._fallback = json.load(f)
            except (OSError, ValueError) as e:
                error(f"Error loading fallback language: {e}")
                self._fallback = {}

        if lang_code == "en":
            self._translations = self._fallback
            return

        lang_path = self._locales_dir / f"{lang_code}.json"
        if lang_path.exists():
            try:
                with open(lang_path, encoding="utf-8") as f:
                    self._translations = json.load(f)
                return
            except (OSError, ValueError) as e:
                error(f"Error loading language {lang_code}: {e}")
        self._translations = self._fallback

    def get(self, key, **kwargs):
        """Get translated text for a key, with optional formatting."""
        text = self._translations.get(key) or self._fallback.get(key) or key
        if kwargs:
            try:
                text = text.format(**kwargs)
            except (KeyError, ValueError):
                pass
        return text

    def set_language(self, lang_code):
        """Switch language; takes effect immediately for new messages."""
        if lang_code not in self._available_languages:
            return False
        self._current_language = lang_code
        self._load_language(lang_code)
        return True

    def get_current_language(self):
        return self._current_language

    def get_available_languages(self):
        return self._available_languages.copy()


def get_instance():
    """Get the localization instance (creates if needed)."""
    global _localization
    if _localization is None:
        _localization = Localization()
    return _localization


def t(key, **kwargs):
    """Shorthand for getting a translated string."""
    return get_instance().get(key, **kwargs)
