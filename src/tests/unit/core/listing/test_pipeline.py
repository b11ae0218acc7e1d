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

from unittest.mock import Mock

import pytest

from jjhunk.core.jj_commands.jj_commands import DiffSummaryEntry, JJCommands
from jjhunk.core.listing.options import BinaryMode, ListOptions
from jjhunk.core.listing.pipeline import build_file_entries
from jjhunk.core.spec.spec import Spec

# (rev, path) -> content; None rev is the working copy
CONTENTS = {
    ("@-", "src/a.py"): b"a\nb\nc\nd\ne\n",
    (None, "src/a.py"): b"a\nB\nc\nd\nE\n",
    (None, "docs/new.md"): b"hello\n",
    ("@-", "img.png"): b"\x89PNG\0\1",
    (None, "img.png"): b"\x89PNG\0\2",
    ("@-", "same.txt"): b"same\n",
    (None, "same.txt"): b"same\n",
}


@pytest.fixture
def commands():
    mock = Mock(spec=JJCommands)
    mock.read_diff_summary.return_value = [
        DiffSummaryEntry("modified", "src/a.py"),
        DiffSummaryEntry("added", "docs/new.md"),
        DiffSummaryEntry("modified", "img.png"),
        DiffSummaryEntry("modified", "same.txt"),
    ]
    mock.read_file.side_effect = lambda rev, path: CONTENTS.get((rev, path), b"")
    return mock


def test_lists_text_and_binary_files(commands):
    files = build_file_entries(commands, ListOptions())

    assert [f.path for f in files] == ["src/a.py", "docs/new.md", "img.png"]
    assert len(files[0].hunks) == 2
    assert files[1].hunks[0].kind == "insert"
    assert files[2].binary
    assert files[2].hunks == []


def test_added_file_reads_only_the_after_side(commands):
    build_file_entries(commands, ListOptions(include=["docs/**"]))

    commands.read_file.assert_called_once_with(None, "docs/new.md")


def test_include_and_exclude(commands):
    files = build_file_entries(
        commands, ListOptions(include=["src/**,docs/**"], exclude=["*.md"])
    )

    assert [f.path for f in files] == ["src/a.py", "docs/new.md"]

    files = build_file_entries(commands, ListOptions(exclude=["**/*.md"]))
    assert [f.path for f in files] == ["src/a.py", "img.png"]


def test_binary_skip(commands):
    files = build_file_entries(commands, ListOptions(binary=BinaryMode.SKIP))
    assert "img.png" not in [f.path for f in files]


def test_binary_include_diffs_lossily(commands):
    files = build_file_entries(
        commands, ListOptions(include=["img.png"], binary=BinaryMode.INCLUDE)
    )

    assert files[0].binary
    assert len(files[0].hunks) == 1


def test_spec_filters_files_and_hunks(commands):
    spec = Spec.from_str('{"files": {"src/a.py": {"hunks": [1]}}}')

    files = build_file_entries(commands, ListOptions(), spec)

    assert [f.path for f in files] == ["src/a.py"]
    assert [h.index for h in files[0].hunks] == [1]
    assert files[0].hunks[0].added == "E\n"


def test_spec_keep_default(commands):
    spec = Spec.from_str('{"files": {"img.png": {"action": "reset"}}, "default": "keep"}')

    files = build_file_entries(commands, ListOptions(), spec)

    assert [f.path for f in files] == ["src/a.py", "docs/new.md"]


def test_truncation_is_reported(commands):
    files = build_file_entries(commands, ListOptions(include=["src/**"], max_lines=2))

    assert files[0].truncated
    assert [h.added for h in files[0].hunks] == ["B\n"]


def test_revision_is_passed_through(commands):
    build_file_entries(commands, ListOptions(rev="xyz", include=["src/**"]))

    commands.read_diff_summary.assert_called_once_with("xyz")
    commands.read_file.assert_any_call("(xyz)^", "src/a.py")
    commands.read_file.assert_any_call("xyz", "src/a.py")
