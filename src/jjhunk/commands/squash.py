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
from jjhunk.core.spec.spec_input import normalize_spec_only, resolve_spec_input


def run_squash(
    global_context: GlobalContext,
    spec: str | None,
    spec_file: str | None,
    rev: str | None = None,
) -> None:
    spec_content = resolve_spec_input(spec, spec_file)
    Spec.from_str(spec_content)

    args = ["squash", "-i", "--tool=jj-hunk"]
    if rev is not None:
        args += ["-r", rev]

    global_context.jj_commands.run_with_selection(args, spec_content)
    logger.success("Squash completed successfully")


def main(
    ctx: typer.Context,
    spec: str | None = typer.Argument(
        None,
        help="JSON/YAML spec string, or '-' for stdin (omit when using --spec-file)",
    ),
    spec_file: str | None = typer.Option(
        None, "--spec-file", "-f", help="Read spec from a file (JSON or YAML)"
    ),
    rev: str | None = typer.Option(
        None, "--rev", "-r", help="Revision to squash (default: @)"
    ),
) -> None:
    """Squash selected hunks into parent"""
    global_context: GlobalContext = ctx.obj

    with handle_jjhunk_exception():
        spec = normalize_spec_only(spec, spec_file, "squash")
        run_squash(global_context, spec, spec_file, rev)
