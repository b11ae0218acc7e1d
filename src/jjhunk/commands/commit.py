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


def run_commit(
    global_context: GlobalContext,
    spec: str | None,
    spec_file: str | None,
    message: str,
) -> None:
    spec_content = resolve_spec_input(spec, spec_file)
    Spec.from_str(spec_content)

    global_context.jj_commands.run_with_selection(
        ["commit", "-i", "--tool=jj-hunk", "-m", message], spec_content
    )
    logger.success("Commit completed successfully")


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
) -> None:
    """Commit selected hunks

    Examples:
        jj-hunk commit '{"files": {"README.md": {"action": "keep"}}}' "docs"
    """
    global_context: GlobalContext = ctx.obj

    with handle_jjhunk_exception():
        spec, message = normalize_spec_message(spec, message, spec_file, "commit")
        run_commit(global_context, spec, spec_file, message)
