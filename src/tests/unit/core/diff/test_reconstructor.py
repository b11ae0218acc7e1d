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

import pytest

from jjhunk.core.data.selection import HunkSelection
from jjhunk.core.diff.hunk_extractor import extract_hunks
from jjhunk.core.diff.reconstructor import apply_selected_hunks

CASES = [
    ("a\nb\nc\n", "a\nb2\nc\n"),
    ("", "x\n"),
    ("x\n", ""),
    ("a\nb\nc\nd\ne\n", "a\nB\nc\nd\nE\n"),
    ("a\nb", "a\nc"),
    ("a\r\nb\r\n", "a\r\nB\r\nc\r\n"),
    ("one\ntwo\nthree\n", "zero\none\nthree\nfour"),
    ("same\n", "same\n"),
]


@pytest.mark.parametrize("before, after", CASES)
def test_empty_selection_gives_before(before, after):
    assert apply_selected_hunks(before, after, HunkSelection()) == before


@pytest.mark.parametrize("before, after", CASES)
def test_selecting_every_id_gives_after(before, after):
    ids = frozenset(h.id for h in extract_hunks(before, after))
    assert apply_selected_hunks(before, after, HunkSelection(ids=ids)) == after


@pytest.mark.parametrize("before, after", CASES)
def test_selecting_every_index_gives_after(before, after):
    indices = frozenset(h.index for h in extract_hunks(before, after))
    assert apply_selected_hunks(before, after, HunkSelection(indices=indices)) == after


def test_scenario_select_by_id():
    before = "a\nb\nc\n"
    after = "a\nb2\nc\n"
    (hunk,) = extract_hunks(before, after)

    selection = HunkSelection(ids=frozenset({hunk.id}))

    assert apply_selected_hunks(before, after, selection) == after


def test_subset_by_index():
    before = "a\nb\nc\nd\ne\n"
    after = "a\nB\nc\nd\nE\n"

    selection = HunkSelection(indices=frozenset({1}))

    assert apply_selected_hunks(before, after, selection) == "a\nb\nc\nd\nE\n"


def test_subset_by_id():
    before = "a\nb\nc\nd\ne\n"
    after = "a\nB\nc\nd\nE\n"
    first = extract_hunks(before, after)[0]

    selection = HunkSelection(ids=frozenset({first.id}))

    assert apply_selected_hunks(before, after, selection) == "a\nB\nc\nd\ne\n"


def test_index_or_id_is_a_union():
    before = "a\nb\nc\nd\ne\n"
    after = "a\nB\nc\nd\nE\n"
    second = extract_hunks(before, after)[1]

    selection = HunkSelection(indices=frozenset({0}), ids=frozenset({second.id}))

    assert apply_selected_hunks(before, after, selection) == after


def test_unknown_id_selects_nothing():
    selection = HunkSelection(ids=frozenset({"hunk-00"}), indices=frozenset({7}))
    assert apply_selected_hunks("a\n", "b\n", selection) == "a\n"
