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

from jjhunk.core.diff.line_segmenter import count_lines, split_lines_with_endings


def test_split_keeps_terminators():
    assert split_lines_with_endings("a\nb\nc\n") == ["a\n", "b\n", "c\n"]


def test_split_final_line_without_newline():
    assert split_lines_with_endings("a\nb") == ["a\n", "b"]


def test_split_empty_text():
    assert split_lines_with_endings("") == []


def test_split_only_on_newline():
    # \r\n stays attached and a lone \r is not a terminator
    assert split_lines_with_endings("a\r\nb\rc\n") == ["a\r\n", "b\rc\n"]


def test_split_blank_lines():
    assert split_lines_with_endings("\n\n") == ["\n", "\n"]


def test_count_lines():
    assert count_lines("") == 0
    assert count_lines("a\n") == 1
    assert count_lines("a\nb") == 2
    assert count_lines("a\nb\n") == 2
