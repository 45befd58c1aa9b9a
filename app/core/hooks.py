"""
Modifier hooks - named string transformers that scripts can register.

A modifier is identified by name (e.g. "bar_condition_nicklist"). Every
callback registered for that name is run in registration order; each one
receives the string returned by the previous callback. Running a modifier
nobody hooked returns None so callers can tell "no answer" from "empty answer".
"""

from dataclasses import dataclass
from typing import Any, Callable

from core.logger import error

ModifierCallback = Callable[[Any, str, str, str], str | None]


@dataclass
class ModifierHook:
    modifier: str
    callback: ModifierCallback
    data: Any = None


class ModifierHooks:
    """Registry of modifier callbacks."""

    def __init__(self):
        self._hooks: list[ModifierHook] = []

    def hook_modifier(self, modifier: str, callback: ModifierCallback, data: Any = None) -> ModifierHook:
        hook = ModifierHook(modifier, callback, data)
        self._hooks.append(hook)
        return hook

    def unhook(self, hook: ModifierHook) -> None:
        if hook in self._hooks:
            self._hooks.remove(hook)

    def exec(self, modifier: str, modifier_data: str, string: str) -> str | None:
        """Run all callbacks for a modifier, chaining their results."""
        result = None
        value = string
        for hook in list(self._hooks):
            if hook.modifier != modifier:
                continue
            try:
                new_value = hook.callback(hook.data, modifier, modifier_data, value)
            except Exception as e:
                # script errors are logged and the hook skipped
                error(f"Modifier \"{modifier}\" callback failed: {e}", exc_info=True)
                continue
            if new_value is None:
                continue
            value = new_value
            result = new_value
        return result
