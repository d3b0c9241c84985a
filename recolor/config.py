import logging
import os
from dataclasses import dataclass

from rich.color import ColorSystem

from .console import err_console
from .styles import DEFAULT_COLOR_SYSTEM

COLOR_SYSTEMS = {
    "truecolor": ColorSystem.TRUECOLOR,
    "256": ColorSystem.EIGHT_BIT,
    "standard": ColorSystem.STANDARD,
}

# Configuration Defaults
DEFAULT_CONFIG = {
    "RECOLOR_LOG_LEVEL": "WARNING",
    "RECOLOR_COLOR_SYSTEM": next(
        name for name, system in COLOR_SYSTEMS.items() if system == DEFAULT_COLOR_SYSTEM
    ),
    "RECOLOR_PALETTE": "",
    "RECOLOR_ALL_MATCHES": "false",
}


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Default"""
    env_val = os.getenv(key)
    if env_val:
        return env_val
    return default


def get_bool_setting(key: str, default: bool) -> bool:
    """Get boolean setting with priority: Env Var > Default"""
    value = get_setting(key, str(default).lower())
    return value.lower() in ("true", "1", "yes", "on")


def get_color_system_setting(key: str, default: str) -> ColorSystem:
    """Get a Rich color system by name, falling back to the default on bad input"""
    value = get_setting(key, default).lower()
    if value not in COLOR_SYSTEMS:
        err_console.print(
            f"[yellow]Warning: Invalid color system for {key}: {value}, "
            f"using default {default}[/yellow]"
        )
        value = default
    return COLOR_SYSTEMS[value]


def get_log_level_setting(key: str, default: str) -> int:
    """Get a logging level by name, falling back to the default on bad input"""
    value = get_setting(key, default).upper()
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        err_console.print(
            f"[yellow]Warning: Invalid log level for {key}: {value}, "
            f"using default {default}[/yellow]"
        )
        level = logging.getLevelName(default)
    return level


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM
    palette: str = ""
    all_matches: bool = False


def load_settings() -> Settings:
    """Read the current settings from the environment.

    NO_COLOR (https://no-color.org) disables styling entirely, whatever the
    configured color system.
    """
    color_system: ColorSystem | None = get_color_system_setting(
        "RECOLOR_COLOR_SYSTEM", DEFAULT_CONFIG["RECOLOR_COLOR_SYSTEM"]
    )
    if get_setting("NO_COLOR", ""):
        color_system = None

    return Settings(
        log_level=get_log_level_setting("RECOLOR_LOG_LEVEL", DEFAULT_CONFIG["RECOLOR_LOG_LEVEL"]),
        color_system=color_system,
        palette=get_setting("RECOLOR_PALETTE", DEFAULT_CONFIG["RECOLOR_PALETTE"]),
        all_matches=get_bool_setting("RECOLOR_ALL_MATCHES", False),
    )
