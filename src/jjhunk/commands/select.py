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

import os
from pathlib import Path

import typer
from loguru import logger

from jjhunk.constants import SELECTION_ENV_VAR
from jjhunk.core.exceptions import SpecError, handle_jjhunk_exception
from jjhunk.core.selector.tool_selector import apply_spec_to_directories
from jjhunk.core.spec.spec import Spec


def run_select(left: Path, right: Path, spec_path: str | None) -> bool:
    """Applies the spec at `spec_path` to the diff-editor directories. Returns False when no spec was given."""
    if spec_path is None:
        # no selection: keep everything
        logger.debug(f"{SELECTION_ENV_VAR} not set, keeping all changes")
        return False

    try:
        content = Path(spec_path).read_text(encoding="utf-8")
    except OSError as e:
        raise SpecError(f"Failed to read spec from {spec_path}", str(e)) from e

    spec = Spec.from_str(content)
    apply_spec_to_directories(left, right, spec)
    return True


def main(
    left: Path = typer.Argument(..., help='Path to "before" directory'),
    right: Path = typer.Argument(..., help='Path to "after" directory'),
) -> None:
    """Select hunks (called by jj --tool)

    The spec is read from the file named by the JJ_HUNK_SELECTION
    environment variable. Without it every change is kept.
    """
    with handle_jjhunk_exception():
        run_select(left, right, os.environ.get(SELECTION_ENV_VAR))
