"""
Line colorizer: styles the text captured by each group of a single match.

How it works:
  1. Find the match (by default only the first one in the line).
  2. Record an "open" and a "close" boundary at the start and end of every
     capture group that took part in the match. Groups that didn't participate
     (e.g. the untaken side of an alternation) report a span of (-1, -1) and
     are skipped. The overall match (group 0) is never styled.
  3. Walk the boundaries left to right. Text between two boundaries is styled
     with the innermost group still open, or copied verbatim when no group is
     open.

Nested groups fall out of step 3 naturally: in "12(3(5))" the "3" belongs to
group 1 only and the "5" to both, so "5" gets group 2's style. Each segment is
rendered on its own, so every escape sequence is closed before the next one
starts.
"""

import re
from collections import defaultdict
from collections.abc import Iterator, Mapping

from rich.color import ColorSystem

from .styles import DEFAULT_COLOR_SYSTEM, Style, apply

_LINE_ENDINGS = ("\r\n", "\n", "\r")


def split_line_ending(raw: str) -> tuple[str, str]:
    """Split a raw line into its body and its terminator ("" if it has none)."""
    for ending in _LINE_ENDINGS:
        if raw.endswith(ending):
            return raw[: -len(ending)], ending
    return raw, ""


def _matches(line: str, pattern: re.Pattern[str], all_matches: bool) -> Iterator[re.Match[str]]:
    if all_matches:
        yield from pattern.finditer(line)
        return
    match = pattern.search(line)
    if match is not None:
        yield match


def colorize(
    line: str,
    pattern: re.Pattern[str],
    group_styles: Mapping[int, Style],
    *,
    color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM,
    all_matches: bool = False,
) -> str:
    """Return line with each captured span wrapped in its group's style.

    Lines the pattern doesn't match are returned unchanged.
    """
    # position -> [(opening, (match number, group index)), ...] in insertion order
    boundaries: defaultdict[int, list[tuple[bool, tuple[int, int]]]] = defaultdict(list)
    for number, match in enumerate(_matches(line, pattern, all_matches)):
        for index in range(1, pattern.groups + 1):
            start, end = match.span(index)
            if start == -1:
                continue
            boundaries[start].append((True, (number, index)))
            boundaries[end].append((False, (number, index)))

    if not boundaries:
        return line

    pieces: list[str] = []
    open_groups: list[tuple[int, int]] = []
    last = 0
    for position in sorted(boundaries):
        if position > last:
            segment = line[last:position]
            if open_groups:
                style = group_styles.get(open_groups[-1][1], Style())
                segment = apply(style, segment, color_system)
            pieces.append(segment)
            last = position
        for opening, group in boundaries[position]:
            if opening:
                open_groups.append(group)
            else:
                open_groups.remove(group)

    pieces.append(line[last:])
    return "".join(pieces)
