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

def split_lines_with_endings(text: str) -> list[str]:
    """
    Splits text into physical lines, keeping each line's trailing newline.

    A final line without a newline is kept as-is, and empty input gives an
    empty list. Only "\\n" terminates a line, so "\\r\\n" stays attached to
    its line and a lone "\\r" does not split.
    """
    if not text:
        return []

    lines = []
    start = 0
    while True:
        end = text.find("\n", start)
        if end == -1:
            break
        lines.append(text[start : end + 1])
        start = end + 1

    if start < len(text):
        lines.append(text[start:])

    return lines


def count_lines(text: str) -> int:
    """Number of lines covered by a run of edit-script text."""
    if not text:
        return 0

    count = text.count("\n")
    if not text.endswith("\n"):
        count += 1
    return count
