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

import typer
from loguru import logger

from jjhunk.context import GlobalContext
from jjhunk.core.exceptions import handle_jjhunk_exception
from jjhunk.core.spec.spec import Spec
from jjhunk.core.spec.spec_input import normalize_spec_message, resolve_spec_input


def build_split_args(message: str, rev: str | None = None) -> list[str]:
    args = ["split", "--tool=jj-hunk", "-m", message]
    if rev is not None:
        args += ["-r", rev]
    return args


def run_split(
    global_context: GlobalContext,
    spec: str | None,
    spec_file: str | None,
    message: str,
    rev: str | None = None,
) -> None:
    spec_content = resolve_spec_input(spec, spec_file)
    # fail before jj opens the diff editor
    Spec.from_str(spec_content)

    global_context.jj_commands.run_with_selection(
        build_split_args(message, rev), spec_content
    )
    logger.success("Split completed successfully")


def main(
    ctx: typer.Context,
    spec: str | None = typer.Argument(
        None,
        help="JSON/YAML spec string, or '-' for stdin (omit when using --spec-file)",
    ),
    message: str | None = typer.Argument(None, help="Commit message"),
    spec_file: str | None = typer.Option(
        None, "--spec-file", "-f", help="Read spec from a file (JSON or YAML)"
    ),
    rev: str | None = typer.Option(
        None, "--rev", "-r", help="Revision to split (default: @)"
    ),
) -> None:
    """Split changes with hunk selection

    The selected hunks go into the first commit, the rest stay in the second.

    Examples:
        jj-hunk split '{"files": {"src/app.py": {"hunks": [0]}}}' "first part"
        jj-hunk split -f selection.yaml "first part"
    """
    global_context: GlobalContext = ctx.obj

    with handle_jjhunk_exception():
        spec, message = normalize_spec_message(spec, message, spec_file, "split")
        run_split(global_context, spec, spec_file, message, rev)
