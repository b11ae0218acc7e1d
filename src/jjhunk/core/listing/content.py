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

from jjhunk.core.diff.line_segmenter import split_lines_with_endings


def is_binary_data(data: bytes) -> bool:
    """Content the hunk engine must not see: NUL bytes or invalid UTF-8."""
    if not data:
        return False
    if b"\0" in data:
        return True
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return True
    return False


def truncate_text(
    content: str, max_bytes: int | None = None, max_lines: int | None = None
) -> tuple[str, bool]:
    """
    Caps text to a number of lines, then to a number of UTF-8 bytes.

    The byte cap backs off to a character boundary, so the result is always
    valid text. Returns the text and whether anything was cut.
    """
    truncated = False
    result = content

    if max_lines is not None:
        if max_lines == 0:
            truncated = bool(result)
            result = ""
        else:
            lines = split_lines_with_endings(result)
            if len(lines) > max_lines:
                result = "".join(lines[:max_lines])
                truncated = True

    if max_bytes is not None:
        encoded = result.encode("utf-8")
        if len(encoded) > max_bytes:
            result = encoded[:max_bytes].decode("utf-8", errors="ignore")
            truncated = True

    return result, truncated
