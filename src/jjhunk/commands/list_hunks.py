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

import sys

import typer
from loguru import logger

from jjhunk.context import GlobalContext
from jjhunk.core.exceptions import ValidationError, handle_jjhunk_exception
from jjhunk.core.listing.entries import FileSummary
from jjhunk.core.listing.options import (
    BinaryMode,
    ListFormat,
    ListGrouping,
    ListMode,
    ListOptions,
)
from jjhunk.core.listing.output import (
    build_listing,
    build_spec_template,
    render_text,
    serialize,
)
from jjhunk.core.listing.pipeline import build_file_entries
from jjhunk.core.logging.utils import log_file_entries, time_block
from jjhunk.core.spec.spec import Spec
from jjhunk.core.spec.spec_input import resolve_optional_spec


def run_list(global_context: GlobalContext, options: ListOptions, color: bool = False) -> str:
    """Builds the rendered `list` output for the given options."""
    if options.mode is ListMode.SPEC_TEMPLATE and options.format is ListFormat.TEXT:
        raise ValidationError(
            "--spec-template does not support text output (use json or yaml)"
        )

    spec_text = resolve_optional_spec(options.spec, options.spec_file)
    spec = Spec.from_str(spec_text) if spec_text is not None else None

    with time_block("Collect hunks"):
        files = build_file_entries(global_context.jj_commands, options, spec)
    log_file_entries("list", files)

    if options.mode is ListMode.SPEC_TEMPLATE:
        return serialize(build_spec_template(files), options.format)

    if options.mode is ListMode.FILES:
        summaries = [FileSummary.from_entry(file) for file in files]
        if options.format is ListFormat.TEXT:
            return render_text(summaries, options.group, summary=True)
        return serialize(build_listing(summaries, options.group), options.format)

    if options.format is ListFormat.TEXT:
        return render_text(files, options.group, color=color)
    return serialize(build_listing(files, options.group), options.format)


def main(
    ctx: typer.Context,
    rev: str | None = typer.Option(
        None, "--rev", "-r", help="Revset to diff (e.g. @, @-, or a change id)"
    ),
    include: list[str] = typer.Option(
        [], "--include", "-i", help="Include glob patterns (repeatable)"
    ),
    exclude: list[str] = typer.Option(
        [], "--exclude", "-x", help="Exclude glob patterns (repeatable)"
    ),
    group: ListGrouping = typer.Option(
        ListGrouping.NONE,
        "--group",
        help="Group output by directory, extension, or status",
    ),
    format: ListFormat | None = typer.Option(
        None, "--format", help="Output format (default: list_format from config)"
    ),
    binary: BinaryMode | None = typer.Option(
        None, "--binary", help="Binary handling (default: binary_mode from config)"
    ),
    max_bytes: int | None = typer.Option(
        None, "--max-bytes", min=0, help="Truncate file contents to N bytes before diffing"
    ),
    max_lines: int | None = typer.Option(
        None, "--max-lines", min=0, help="Truncate file contents to N lines before diffing"
    ),
    spec: str | None = typer.Option(
        None, "--spec", help="Optional JSON/YAML spec to preview (inline or '-')"
    ),
    spec_file: str | None = typer.Option(
        None, "--spec-file", "-f", help="Read spec from a file (JSON or YAML)"
    ),
    files: bool = typer.Option(False, "--files", help="Only list files with hunk counts"),
    spec_template: bool = typer.Option(
        False, "--spec-template", help="Output a spec template instead of hunks"
    ),
) -> None:
    """List hunks in current changes

    Examples:
        # List hunks of the working copy as JSON
        jj-hunk list

        # Preview what a spec would keep, as text
        jj-hunk list --spec '{"files": {"src/app.py": {"hunks": [0]}}}' --format text
    """
    global_context: GlobalContext = ctx.obj

    with handle_jjhunk_exception():
        if files and spec_template:
            raise ValidationError("--files and --spec-template cannot be used together")

        if files:
            mode = ListMode.FILES
        elif spec_template:
            mode = ListMode.SPEC_TEMPLATE
        else:
            mode = ListMode.FULL

        options = ListOptions(
            rev=rev,
            include=include,
            exclude=exclude,
            group=group,
            format=format or ListFormat(global_context.config.list_format),
            mode=mode,
            spec=spec,
            spec_file=spec_file,
            binary=binary or BinaryMode(global_context.config.binary_mode),
            max_bytes=max_bytes,
            max_lines=max_lines,
        )
        logger.debug(f"List options: {options}")

        output = run_list(global_context, options, color=sys.stdout.isatty())
        typer.echo(output, nl=False)
