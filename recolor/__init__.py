"""recolor - Recolor any command output"""

from .colorizer import colorize, split_line_ending
from .config import Settings, get_bool_setting, get_setting, load_settings
from .errors import (
    DuplicateOverrideKey,
    InvalidPattern,
    MalformedOverride,
    RecolorError,
    UnknownStyleToken,
)
from .groups import GroupInfo, compile_pattern, group_infos, resolve_group_styles
from .overrides import parse_overrides
from .palette import DEFAULT_PALETTE, PaletteCycler, parse_palette
from .styles import RGB, Style, apply, combine, parse_style, parse_style_token

__all__ = [
    # Colorizer
    "colorize",
    "split_line_ending",
    # Config
    "Settings",
    "get_bool_setting",
    "get_setting",
    "load_settings",
    # Errors
    "DuplicateOverrideKey",
    "InvalidPattern",
    "MalformedOverride",
    "RecolorError",
    "UnknownStyleToken",
    # Groups
    "GroupInfo",
    "compile_pattern",
    "group_infos",
    "resolve_group_styles",
    # Overrides
    "parse_overrides",
    # Palette
    "DEFAULT_PALETTE",
    "PaletteCycler",
    "parse_palette",
    # Styles
    "RGB",
    "Style",
    "apply",
    "combine",
    "parse_style",
    "parse_style_token",
]
