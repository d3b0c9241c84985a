"""
Parse style override arguments such as "level=red,bold" or "2=#ff8800".

The key on the left of the first "=" names a capture group, either by name
(for groups written as (?P<name>...)) or by its 1-based position in the
pattern. The value on the right is a comma-separated style list understood
by styles.parse_style().
"""

import logging
from collections.abc import Sequence

from .errors import DuplicateOverrideKey, MalformedOverride, UnknownStyleToken
from .styles import Style, parse_style

logger = logging.getLogger(__name__)


def parse_group_key(key: str, argument: str) -> int | str:
    """Turn the key part of an override into a group identifier.

    Unsigned integers become ordinals ("02" and "2" are the same group); any
    other key must be a valid group name.
    """
    if key.isascii() and key.isdigit():
        return int(key)
    if key.isidentifier():
        return key
    raise MalformedOverride(argument, f"invalid capture group name {key!r} in {argument!r}")


def parse_overrides(spec_args: Sequence[str]) -> dict[int | str, Style]:
    """Build the override map from key=value arguments.

    Raises:
        MalformedOverride: an argument has no "=", an empty key or an empty value.
        UnknownStyleToken: a style word in the value isn't recognized.
        DuplicateOverrideKey: two arguments target the same key.
    """
    overrides: dict[int | str, Style] = {}
    for argument in spec_args:
        key, sep, value = argument.partition("=")
        if not sep or not key or not value:
            raise MalformedOverride(argument)

        group = parse_group_key(key, argument)
        if group in overrides:
            raise DuplicateOverrideKey(group, argument)

        try:
            overrides[group] = parse_style(value)
        except UnknownStyleToken as e:
            raise UnknownStyleToken(e.token, argument) from None

        logger.debug("override %r -> %s", group, overrides[group])
    return overrides
