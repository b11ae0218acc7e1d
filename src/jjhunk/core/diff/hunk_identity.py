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
Content-addressed hunk identifiers.

An id is a SHA-256 over the hunk kind, its removed and added text and, when
available, the unchanged lines around it. It does not depend on the hunk's
position, so an id recorded from one listing still selects the same change
after earlier hunks in the file have been dropped or shifted.
"""

import hashlib
import string

from jjhunk.constants import CONTEXT_LINES, HUNK_ID_ALIAS_PREFIXES, HUNK_ID_PREFIX
from jjhunk.core.data.hunk import HunkContext, HunkKind, LineRange

_HEX_DIGITS = frozenset(string.hexdigits)


def determine_hunk_kind(removed: str, added: str) -> HunkKind:
    if not removed and added:
        return "insert"
    if removed and not added:
        return "delete"
    return "replace"


def build_context(
    before_lines: list[str], before_range: LineRange
) -> HunkContext | None:
    """
    Collects up to CONTEXT_LINES unchanged lines on each side of a hunk.

    Windows are clipped to the text. Context is absent only when both
    windows come out empty; a hunk at the top of a file still gets context
    from the lines that follow it.
    """
    if not before_lines:
        return None

    total = len(before_lines)
    start_idx = min(max(before_range.start - 1, 0), total)

    pre = before_lines[max(start_idx - CONTEXT_LINES, 0) : start_idx]

    post_start = min(start_idx + before_range.length, total)
    post = before_lines[post_start : min(post_start + CONTEXT_LINES, total)]

    if not pre and not post:
        return None

    return HunkContext(before="".join(pre), after="".join(post))


def compute_hunk_id(
    kind: str, removed: str, added: str, context: HunkContext | None
) -> str:
    hasher = hashlib.sha256()
    hasher.update(b"type\0")
    hasher.update(kind.encode("utf-8"))
    hasher.update(b"\0removed\0")
    hasher.update(removed.encode("utf-8"))
    hasher.update(b"\0added\0")
    hasher.update(added.encode("utf-8"))
    hasher.update(b"\0context\0")
    if context is not None:
        hasher.update(context.before.encode("utf-8"))
        hasher.update(b"\0")
        hasher.update(context.after.encode("utf-8"))

    return f"{HUNK_ID_PREFIX}{hasher.hexdigest()}"


def normalize_hunk_id(value: str) -> str | None:
    """
    Canonicalizes a user supplied hunk id.

    Accepts bare hex or hex behind one of the recognized prefixes
    (``hunk-``, ``id:``, ``sha:``, ``sha256:``), in any letter case.

    Returns:
        The canonical ``hunk-<lowercase hex>`` form, or None when the value
        is not a valid id.
    """
    trimmed = value.strip()
    if not trimmed:
        return None

    hex_part = trimmed
    for prefix in (HUNK_ID_PREFIX, *HUNK_ID_ALIAS_PREFIXES):
        if trimmed.startswith(prefix):
            hex_part = trimmed[len(prefix) :]
            break

    if not hex_part or not all(c in _HEX_DIGITS for c in hex_part):
        return None

    return f"{HUNK_ID_PREFIX}{hex_part.lower()}"
