"""
Style model: colors, text attributes, and how they render on a terminal.

A Style is an immutable value holding at most one color and any number of
text attributes. Styles are built once at startup from the user's override
arguments (e.g. "green,underline") and never change afterwards.

Rendering is delegated to Rich. Rich already knows the SGR codes for every
named color and attribute we support, and it can downgrade a truecolor hex
value to the nearest 256-color or 16-color equivalent when the terminal
can't display it. Style.to_rich() converts our value into a rich.style.Style
and apply() calls its render() method, which emits:

    ESC[<codes>m<text>ESC[0m

The trailing reset means a styled span never leaks into the unstyled text
that follows it.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple

from rich.color import ColorSystem
from rich.style import Style as RichStyle

from .errors import UnknownStyleToken

# The 16 named terminal colors. The names match Rich's color names exactly.
NAMED_COLORS = frozenset(
    [
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "white",
        "bright_black",
        "bright_red",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "bright_white",
    ]
)

# Accepted spellings for each attribute, mapped to its canonical name.
ATTRIBUTE_SYNONYMS = {
    "bold": "bold",
    "bolded": "bold",
    "dim": "dim",
    "dimmed": "dim",
    "italic": "italic",
    "italics": "italic",
    "underline": "underline",
    "underlined": "underline",
    "blink": "blink",
    "blinking": "blink",
    "hidden": "hidden",
    "strikethrough": "strikethrough",
    "struckthrough": "strikethrough",
    "strike": "strikethrough",
}

# Canonical attribute name -> keyword argument of rich.style.Style
_RICH_ATTRIBUTES = {
    "bold": "bold",
    "dim": "dim",
    "italic": "italic",
    "underline": "underline",
    "blink": "blink",
    "hidden": "conceal",
    "strikethrough": "strike",
}

_HEX_COLOR = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

DEFAULT_COLOR_SYSTEM = ColorSystem.TRUECOLOR


class RGB(NamedTuple):
    """A 24-bit color parsed from a #RRGGBB literal."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class Style:
    """An immutable combination of an optional color and a set of attributes."""

    color: str | RGB | None = None
    attributes: frozenset[str] = field(default_factory=frozenset)

    def __add__(self, other: "Style") -> "Style":
        """Combine two styles; other's color wins when set, attributes are unioned."""
        if not isinstance(other, Style):
            return NotImplemented
        color = other.color if other.color is not None else self.color
        return Style(color=color, attributes=self.attributes | other.attributes)

    def __bool__(self) -> bool:
        return self.color is not None or bool(self.attributes)

    def __str__(self) -> str:
        parts = []
        if isinstance(self.color, RGB):
            parts.append(self.color.hex)
        elif self.color is not None:
            parts.append(self.color)
        parts.extend(sorted(self.attributes))
        return ",".join(parts) or "none"

    def to_rich(self) -> RichStyle:
        """Build the equivalent rich.style.Style."""
        color = self.color.hex if isinstance(self.color, RGB) else self.color
        flags = {_RICH_ATTRIBUTES[name]: True for name in self.attributes}
        return RichStyle(color=color, **flags)


def parse_style_token(token: str) -> Style:
    """Parse a single comma-free token into a Style.

    A token is a named color ("red", "bright_blue"), an attribute or one of its
    synonyms ("bold", "strike"), or a hex color ("#00ff00").

    Raises:
        UnknownStyleToken: if the token is none of the above. Any token starting
            with "#" that isn't exactly six hex digits is rejected too.
    """
    if token.startswith("#"):
        match = _HEX_COLOR.fullmatch(token)
        if match is None:
            raise UnknownStyleToken(token)
        red, green, blue = (int(channel, 16) for channel in match.groups())
        return Style(color=RGB(red, green, blue))

    if token in NAMED_COLORS:
        return Style(color=token)

    if token in ATTRIBUTE_SYNONYMS:
        return Style(attributes=frozenset([ATTRIBUTE_SYNONYMS[token]]))

    raise UnknownStyleToken(token)


def combine(tokens: Iterable[str]) -> Style:
    """Fold style tokens left to right into one Style.

    Attributes accumulate as a set, so repeating one is harmless. A later
    color token replaces an earlier one: "red,green" is green.
    """
    style = Style()
    for token in tokens:
        style = style + parse_style_token(token)
    return style


def parse_style(value: str) -> Style:
    """Parse a comma-separated style list such as "green,underline"."""
    return combine(value.split(","))


def apply(
    style: Style, text: str, color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM
) -> str:
    """Wrap text in the escape sequences for style, closed by a reset.

    Returns text unchanged when the style is empty, the text is empty, or
    color_system is None (color output disabled).
    """
    if not style or not text or color_system is None:
        return text
    return style.to_rich().render(text, color_system=color_system)
