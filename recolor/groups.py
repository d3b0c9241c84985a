"""
Capture group introspection and per-group style resolution.

Group styles are resolved once per run, not per line: the set of groups is
a property of the pattern, so group N gets the same style on every line.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import InvalidPattern
from .palette import PaletteCycler
from .styles import Style

logger = logging.getLogger(__name__)

# "(?<name>" not preceded by an escaping backslash, and not a look-behind.
_ANGLE_NAMED_GROUP = re.compile(r"(?<!\\)((?:\\\\)*)\(\?<(?![=!])")


@dataclass(frozen=True)
class GroupInfo:
    position: int
    name: str | None = None


def compile_pattern(source: str) -> re.Pattern[str]:
    """Compile a user-supplied pattern.

    Accepts both (?P<name>...) and (?<name>...) for named groups.

    Raises:
        InvalidPattern: naming the pattern and the reason it didn't compile.
    """
    translated = _ANGLE_NAMED_GROUP.sub(r"\1(?P<", source)
    try:
        return re.compile(translated)
    except re.error as e:
        raise InvalidPattern(source, str(e)) from None


def group_infos(pattern: re.Pattern[str]) -> list[GroupInfo]:
    """List a pattern's capture groups in the order they appear in its source."""
    names = {index: name for name, index in pattern.groupindex.items()}
    return [GroupInfo(index, names.get(index)) for index in range(1, pattern.groups + 1)]


def resolve_group_styles(
    groups: list[GroupInfo],
    overrides: Mapping[int | str, Style],
    palette: PaletteCycler,
) -> dict[int, Style]:
    """Pick a style for every group, keyed by group position.

    An override keyed by the group's name wins, then one keyed by its
    position. Groups with neither take the next palette style; overridden
    groups never advance the palette.
    """
    styles: dict[int, Style] = {}
    used: set[int | str] = set()
    shadowed: dict[int, str] = {}
    for group in groups:
        key: int | str | None = None
        if group.name is not None and group.name in overrides:
            key = group.name
            if group.position in overrides:
                shadowed[group.position] = group.name
        elif group.position in overrides:
            key = group.position

        if key is not None:
            styles[group.position] = overrides[key]
            used.add(key)
        else:
            styles[group.position] = palette.next()
        logger.debug("group %d (%s) -> %s", group.position, group.name, styles[group.position])

    for key in overrides:
        if key in used:
            continue
        if key in shadowed:
            logger.warning(
                "style override for group %d ignored, group %r is styled by name",
                key,
                shadowed[key],
            )
        else:
            logger.warning(
                "style override for group %r matches no capture group, ignored", str(key)
            )
    return styles
