"""Default styles for capture groups that have no explicit override."""

from collections.abc import Sequence

from .errors import UnknownStyleToken
from .styles import Style, parse_style

# Groups without an override take these in order, wrapping around after the
# last one. The first six keep the order recolor has always used.
DEFAULT_PALETTE: tuple[Style, ...] = tuple(
    Style(color=name)
    for name in (
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "red",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "bright_red",
    )
)


class PaletteCycler:
    """Hands out palette styles in a fixed, repeating order.

    One cycler is created per run and only consulted while group styles are
    resolved, so a given group gets the same style on every line.
    """

    def __init__(self, palette: Sequence[Style] = DEFAULT_PALETTE):
        if not palette:
            raise ValueError("palette must contain at least one style")
        self._palette = tuple(palette)
        self._counter = 0

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def palette(self) -> tuple[Style, ...]:
        return self._palette

    def next(self) -> Style:
        """Return the current palette entry and advance."""
        style = self._palette[self._counter % len(self._palette)]
        self._counter += 1
        return style

    __next__ = next

    def __iter__(self):
        return self


def parse_palette(value: str, setting: str = "RECOLOR_PALETTE") -> tuple[Style, ...]:
    """Parse a ';'-separated list of style values, e.g. "red,bold;#00ff00;cyan".

    Blank entries are skipped. Returns DEFAULT_PALETTE when nothing is left.
    A bad entry raises UnknownStyleToken naming the setting it came from.
    """
    try:
        styles = tuple(
            parse_style(entry.strip()) for entry in value.split(";") if entry.strip()
        )
    except UnknownStyleToken as e:
        raise UnknownStyleToken(e.token, f"{setting}={value}") from None
    return styles or DEFAULT_PALETTE
