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

from jjhunk.core.data.hunk import Hunk, HunkContext, LineRange
from jjhunk.core.data.selection import HunkSelection
from jjhunk.core.diff.hunk_extractor import extract_hunks
from jjhunk.core.diff.hunk_identity import normalize_hunk_id
from jjhunk.core.diff.line_segmenter import split_lines_with_endings
from jjhunk.core.diff.reconstructor import apply_selected_hunks
from jjhunk.core.matching.glob_matcher import glob_match
from jjhunk.core.spec.spec import Spec

__all__ = [
    "Hunk",
    "HunkContext",
    "HunkSelection",
    "LineRange",
    "Spec",
    "apply_selected_hunks",
    "extract_hunks",
    "glob_match",
    "normalize_hunk_id",
    "split_lines_with_endings",
]
