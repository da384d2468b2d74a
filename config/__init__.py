"""Configuration loader helpers.

``config.parse_args`` / ``config.Settings`` come from ``config.core``;
``config.SETTINGS`` is the environment-driven singleton from ``config.settings``.
"""

from importlib import import_module
from typing import Any

_SETTINGS_NAMES = {"SETTINGS", "AppSettings"}


def __getattr__(name: str) -> Any:  # noqa: D401
    module_name = "config.settings" if name in _SETTINGS_NAMES else "config.core"
    mod = import_module(module_name)
    value = getattr(mod, name)
    globals()[name] = value
    return value

__all__ = ["parse_args", "Settings", "SETTINGS", "AppSettings"]
