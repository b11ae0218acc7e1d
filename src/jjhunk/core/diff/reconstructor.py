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

from loguru import logger

from jjhunk.core.data.selection import HunkSelection

from .hunk_extractor import EqualRun, iter_diff_events


def apply_selected_hunks(before: str, after: str, selection: HunkSelection) -> str:
    """
    Rebuilds `before` with only the selected hunks of `after` applied.

    The pair is re-diffed rather than read from an earlier listing; each hunk
    is re-identified and checked against the selection by index or id.
    Selecting nothing returns `before` and selecting every hunk returns
    `after`, byte for byte.
    """
    parts: list[str] = []
    applied = 0

    for event in iter_diff_events(before, after):
        if isinstance(event, EqualRun):
            parts.append(event.text)
        elif selection.matches(event.index, event.id):
            parts.append(event.added)
            applied += 1
        else:
            parts.append(event.removed)

    logger.debug("Applied {applied} selected hunks", applied=applied)
    return "".join(parts)
