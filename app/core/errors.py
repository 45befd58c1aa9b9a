"""
Error handling - converting technical exceptions into friendly messages.

Only the persistence path can raise (file access, YAML parsing); everything
in the bar core reports failure through return values instead. This module
turns those exceptions into translated messages suitable for the core buffer.
"""

from core.localization import t
from ruamel.yaml.error import MarkedYAMLError, YAMLError


class ConfigStructureError(ValueError):
    """The YAML document parsed but does not look like a bars configuration."""


def _yaml_detail(e: YAMLError) -> str:
    if isinstance(e, MarkedYAMLError) and e.problem_mark is not None:
        mark = e.problem_mark
        return f"line {mark.line + 1}, column {mark.column + 1}: {e.problem or e}"
    return str(e)


def get_friendly_error_message(e: Exception) -> str:
    """Turn a technical error into something a human can understand."""
    if isinstance(e, YAMLError):
        return t("error_config_syntax", detail=_yaml_detail(e))

    if isinstance(e, ConfigStructureError):
        return t("error_config_structure")

    if isinstance(e, FileNotFoundError):
        return t("error_config_not_found")

    if isinstance(e, PermissionError):
        return t("error_config_permission")

    if isinstance(e, UnicodeDecodeError):
        return t("error_config_encoding")

    # Generic fallback
    return t("error_config_unknown", detail=str(e))
