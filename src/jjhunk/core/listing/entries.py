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

from dataclasses import dataclass, field
from typing import Any

from jjhunk.core.data.hunk import Hunk
from jjhunk.core.data.selection import HunkSelection
from jjhunk.core.jj_commands.jj_commands import DiffSummaryEntry, RenameInfo
from jjhunk.core.matching.glob_matcher import matches_any


@dataclass
class FileEntry:
    path: str
    status: str
    hunks: list[Hunk] = field(default_factory=list)
    rename: RenameInfo | None = None
    binary: bool = False
    truncated: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"path": self.path, "status": self.status}
        if self.rename is not None:
            data["rename"] = self.rename.to_dict()
        data["hunks"] = [hunk.to_dict() for hunk in self.hunks]
        if self.binary:
            data["binary"] = True
        if self.truncated:
            data["truncated"] = True
        return data


@dataclass
class FileSummary:
    path: str
    status: str
    hunk_count: int
    rename: RenameInfo | None = None
    binary: bool = False
    truncated: bool = False

    @classmethod
    def from_entry(cls, entry: FileEntry) -> "FileSummary":
        return cls(
            path=entry.path,
            status=entry.status,
            hunk_count=len(entry.hunks),
            rename=entry.rename,
            binary=entry.binary,
            truncated=entry.truncated,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"path": self.path, "status": self.status}
        if self.rename is not None:
            data["rename"] = self.rename.to_dict()
        data["hunk_count"] = self.hunk_count
        if self.binary:
            data["binary"] = True
        if self.truncated:
            data["truncated"] = True
        return data


def filter_hunks(hunks: list[Hunk], selection: HunkSelection) -> list[Hunk]:
    return [hunk for hunk in hunks if selection.matches(hunk.index, hunk.id)]


def should_include_entry(
    entry: DiffSummaryEntry, include: list[str], exclude: list[str]
) -> bool:
    """
    Include patterns must match at least one of the entry's paths; exclude
    patterns drop it if they match any of them. Renames are matched on both
    the source and target path.
    """
    paths = entry.paths()

    if include and not any(matches_any(include, path) for path in paths):
        return False

    if exclude and any(matches_any(exclude, path) for path in paths):
        return False

    return True
