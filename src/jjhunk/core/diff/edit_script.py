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
Line-level edit script between two texts.

The alignment itself comes from difflib.SequenceMatcher; this module only
reshapes its opcodes into ordered EQUAL / DELETE / INSERT runs of whole
lines (terminators included).
"""

from dataclasses import dataclass
from difflib import SequenceMatcher
from enum import Enum

from .line_segmenter import split_lines_with_endings


class EditTag(Enum):
    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True)
class EditOp:
    tag: EditTag
    # exact line content, terminators included
    text: str


def compute_edit_script(before: str, after: str) -> list[EditOp]:
    """
    Returns the edit script turning `before` into `after`.

    Concatenating the EQUAL and DELETE runs reproduces `before`, and the
    EQUAL and INSERT runs reproduce `after`. A replaced region is emitted as
    a DELETE run immediately followed by an INSERT run. The result is a pure
    function of the two texts, which the two-pass hunk selection relies on.
    """
    before_lines = split_lines_with_endings(before)
    after_lines = split_lines_with_endings(after)

    # autojunk would make the alignment depend on line popularity in large files
    matcher = SequenceMatcher(None, before_lines, after_lines, autojunk=False)

    ops: list[EditOp] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            ops.append(EditOp(EditTag.EQUAL, "".join(before_lines[i1:i2])))
        elif tag == "delete":
            ops.append(EditOp(EditTag.DELETE, "".join(before_lines[i1:i2])))
        elif tag == "insert":
            ops.append(EditOp(EditTag.INSERT, "".join(after_lines[j1:j2])))
        elif tag == "replace":
            ops.append(EditOp(EditTag.DELETE, "".join(before_lines[i1:i2])))
            ops.append(EditOp(EditTag.INSERT, "".join(after_lines[j1:j2])))

    return ops
