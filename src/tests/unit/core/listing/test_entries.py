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

from jjhunk.core.data.selection import HunkSelection
from jjhunk.core.diff.hunk_extractor import extract_hunks
from jjhunk.core.jj_commands.jj_commands import DiffSummaryEntry, RenameInfo
from jjhunk.core.listing.entries import (
    FileEntry,
    FileSummary,
    filter_hunks,
    should_include_entry,
)


def _hunks():
    return extract_hunks("a\nb\nc\nd\ne\n", "a\nB\nc\nd\nE\n")


def test_file_entry_to_dict():
    hunks = _hunks()
    entry = FileEntry(path="src/a.py", status="modified", hunks=hunks)

    data = entry.to_dict()

    assert list(data) == ["path", "status", "hunks"]
    assert data["hunks"][0] == {
        "index": 0,
        "id": hunks[0].id,
        "type": "replace",
        "removed": "b\n",
        "added": "B\n",
        "before": {"start": 2, "lines": 1},
        "after": {"start": 2, "lines": 1},
        "context": {"pre": "a\n", "post": "c\nd\ne\n"},
    }


def test_file_entry_flags_and_rename():
    entry = FileEntry(
        path="new.bin",
        status="renamed",
        rename=RenameInfo("old.bin", "new.bin"),
        binary=True,
        truncated=True,
    )

    assert entry.to_dict() == {
        "path": "new.bin",
        "status": "renamed",
        "rename": {"from": "old.bin", "to": "new.bin"},
        "hunks": [],
        "binary": True,
        "truncated": True,
    }


def test_file_summary_from_entry():
    entry = FileEntry(path="src/a.py", status="modified", hunks=_hunks(), truncated=True)

    summary = FileSummary.from_entry(entry)

    assert summary.hunk_count == 2
    assert summary.to_dict() == {
        "path": "src/a.py",
        "status": "modified",
        "hunk_count": 2,
        "truncated": True,
    }


def test_filter_hunks():
    hunks = _hunks()

    kept = filter_hunks(hunks, HunkSelection(ids=frozenset({hunks[1].id})))

    assert kept == [hunks[1]]


def test_should_include_entry_without_patterns():
    assert should_include_entry(DiffSummaryEntry("modified", "a.txt"), [], [])


def test_should_include_entry_include_and_exclude():
    entry = DiffSummaryEntry("modified", "src/core/a.py")

    assert should_include_entry(entry, ["src/**"], [])
    assert not should_include_entry(entry, ["docs/**"], [])
    assert not should_include_entry(entry, ["src/**"], ["**/*.py"])


def test_should_include_entry_matches_rename_source():
    entry = DiffSummaryEntry("renamed", "lib/b.py", source="src/a.py", target="lib/b.py")

    assert should_include_entry(entry, ["src/**"], [])
    assert not should_include_entry(entry, [], ["src/**"])
