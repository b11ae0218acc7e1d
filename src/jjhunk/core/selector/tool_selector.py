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
The diff-editor side of jj-hunk.

jj materializes the two sides of a change as a `left` (before) and `right`
(after) directory and keeps whatever is left in `right` once the tool exits.
Applying a spec therefore means rewriting files in `right`.
"""

import shutil
from pathlib import Path

from loguru import logger

from jjhunk.constants import JJ_INSTRUCTIONS_FILE
from jjhunk.core.data.selection import HunkSelection
from jjhunk.core.diff.reconstructor import apply_selected_hunks
from jjhunk.core.exceptions import FileSystemError
from jjhunk.core.spec.spec import Action, ActionSpec, DefaultAction, Spec


def list_files(directory: Path) -> set[str]:
    """Relative paths of all files below `directory`, "/" separated."""
    if not directory.exists():
        return set()

    return {
        path.relative_to(directory).as_posix()
        for path in directory.rglob("*")
        if path.is_file() and path.name != JJ_INSTRUCTIONS_FILE
    }


def reset_file(left: Path, right: Path, filepath: str) -> None:
    """Drops a file's changes by making the right side match the left side."""
    left_file = left / filepath
    right_file = right / filepath

    if left_file.exists():
        right_file.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(left_file, right_file)
    elif right_file.exists():
        right_file.unlink()


def _read_text(path: Path) -> str:
    # no newline translation: \r\n must survive the round trip
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def apply_hunk_selection(
    left: Path, right: Path, filepath: str, selection: HunkSelection
) -> None:
    left_file = left / filepath
    right_file = right / filepath

    if not right_file.exists():
        # deleted file: nothing to partially keep
        return

    before = _read_text(left_file) if left_file.exists() else ""
    after = _read_text(right_file)

    with open(right_file, "w", encoding="utf-8", newline="") as f:
        f.write(apply_selected_hunks(before, after, selection))


def apply_spec_to_directories(left: Path, right: Path, spec: Spec) -> None:
    """Rewrites `right` so it holds only the changes `spec` keeps."""
    all_files = list_files(left) | list_files(right)
    logger.debug(f"Applying spec to {len(all_files)} files")

    for filepath in sorted(all_files):
        file_spec = spec.file_spec(filepath)
        try:
            if file_spec is None:
                if spec.default is DefaultAction.RESET:
                    reset_file(left, right, filepath)
            elif isinstance(file_spec, ActionSpec):
                if file_spec.action is Action.RESET:
                    reset_file(left, right, filepath)
            else:
                apply_hunk_selection(left, right, filepath, file_spec.to_selection())
        except (OSError, UnicodeDecodeError) as e:
            raise FileSystemError(f"Failed to apply selection to {filepath}", str(e)) from e
