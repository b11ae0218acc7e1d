# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 jj-hunk
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, see <https://www.gnu.org/licenses/>.
#  */
# -----------------------------------------------------------------------------

"""
Path glob matching used by the include/exclude filters.

Patterns are matched segment by segment against "/" separated paths:
``*`` and ``?`` are wildcards inside a single segment and never cross a
separator, while a ``**`` segment spans zero or more whole segments.
Matching is case-sensitive and anchored at both ends.
"""

from collections.abc import Iterable, Sequence


def _strip_dot_slash(value: str) -> str:
    while value.startswith("./"):
        value = value[2:]
    return value


def glob_match(pattern: str, path: str) -> bool:
    pattern = _strip_dot_slash(pattern)
    path = _strip_dot_slash(path)

    if not pattern:
        return not path

    pattern_segments = [s for s in pattern.split("/") if s]
    path_segments = [s for s in path.split("/") if s]

    return match_segments(pattern_segments, path_segments)


def match_segments(pattern: Sequence[str], path: Sequence[str]) -> bool:
    if not pattern:
        return not path

    if pattern[0] == "**":
        # either ** matches nothing more, or it swallows one more segment
        if match_segments(pattern[1:], path):
            return True
        if path:
            return match_segments(pattern, path[1:])
        return False

    if not path:
        return False

    if not match_segment(pattern[0], path[0]):
        return False

    return match_segments(pattern[1:], path[1:])


def match_segment(pattern: str, text: str) -> bool:
    """
    Classic wildcard match of one path segment.

    dp[i][j] is True when the first i pattern characters match the first j
    text characters.
    """
    if pattern == "*":
        return True

    rows = len(pattern)
    cols = len(text)
    dp = [[False] * (cols + 1) for _ in range(rows + 1)]
    dp[0][0] = True

    for i in range(1, rows + 1):
        if pattern[i - 1] == "*":
            dp[i][0] = dp[i - 1][0]

    for i in range(1, rows + 1):
        p = pattern[i - 1]
        for j in range(1, cols + 1):
            if p == "*":
                dp[i][j] = dp[i - 1][j] or dp[i][j - 1]
            elif p == "?":
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = dp[i - 1][j - 1] and p == text[j - 1]

    return dp[rows][cols]


def normalize_patterns(patterns: Iterable[str]) -> list[str]:
    """Splits comma separated patterns and drops blanks."""
    return [
        part.strip()
        for pattern in patterns
        for part in pattern.split(",")
        if part.strip()
    ]


def matches_any(patterns: Iterable[str], path: str) -> bool:
    return any(glob_match(pattern, path) for pattern in patterns)
