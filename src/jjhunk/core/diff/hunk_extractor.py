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

from collections.abc import Iterator
from dataclasses import dataclass, field

from loguru import logger

from jjhunk.core.data.hunk import Hunk, LineRange

from .edit_script import EditTag, compute_edit_script
from .hunk_identity import build_context, compute_hunk_id, determine_hunk_kind
from .line_segmenter import count_lines, split_lines_with_endings


@dataclass(frozen=True)
class EqualRun:
    """Unchanged text shared by both sides, passed through verbatim."""

    text: str


DiffEvent = EqualRun | Hunk


@dataclass
class _PendingHunk:
    before_start: int
    after_start: int
    removed: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    before_length: int = 0
    after_length: int = 0

    def finalize(self, index: int, before_lines: list[str]) -> Hunk:
        removed = "".join(self.removed)
        added = "".join(self.added)
        kind = determine_hunk_kind(removed, added)
        before_range = LineRange(self.before_start, self.before_length)
        after_range = LineRange(self.after_start, self.after_length)
        context = build_context(before_lines, before_range)

        return Hunk(
            index=index,
            id=compute_hunk_id(kind, removed, added, context),
            kind=kind,
            removed=removed,
            added=added,
            before_range=before_range,
            after_range=after_range,
            context=context,
        )


def iter_diff_events(before: str, after: str) -> Iterator[DiffEvent]:
    """
    Walks a freshly computed edit script, yielding equal runs and hunks in order.

    Consecutive DELETE and INSERT runs with no EQUAL between them are
    grouped into a single hunk, which is closed by the next EQUAL run or by
    the end of the script. Both hunk listing and selective reconstruction
    go through this walk so they agree on every index and id.
    """
    before_lines = split_lines_with_endings(before)
    before_line = 1
    after_line = 1
    index = 0
    pending: _PendingHunk | None = None

    for op in compute_edit_script(before, after):
        line_count = count_lines(op.text)

        if op.tag is EditTag.EQUAL:
            if pending is not None:
                yield pending.finalize(index, before_lines)
                index += 1
                pending = None
            yield EqualRun(op.text)
            before_line += line_count
            after_line += line_count
            continue

        if pending is None:
            pending = _PendingHunk(before_start=before_line, after_start=after_line)

        if op.tag is EditTag.DELETE:
            pending.removed.append(op.text)
            pending.before_length += line_count
            before_line += line_count
        else:
            pending.added.append(op.text)
            pending.after_length += line_count
            after_line += line_count

    if pending is not None:
        yield pending.finalize(index, before_lines)


def extract_hunks(before: str, after: str) -> list[Hunk]:
    """Extracts the ordered, identified hunks between two texts."""
    hunks = [event for event in iter_diff_events(before, after) if isinstance(event, Hunk)]
    logger.debug("Extracted {count} hunks", count=len(hunks))
    return hunks
