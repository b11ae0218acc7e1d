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
from pathlib import Path

from jjhunk.core.exceptions import SpecError, ValidationError, spec_file_not_found


def resolve_spec_input(spec: str | None, spec_file: str | None) -> str:
    """
    Returns the raw spec text from a file, stdin ("-") or the inline argument.
    """
    if spec_file is not None:
        if not spec_file:
            raise SpecError("Spec file path is empty")
        try:
            return Path(spec_file).read_text(encoding="utf-8")
        except OSError as e:
            raise spec_file_not_found(spec_file) from e

    if spec is None:
        raise SpecError("Spec is required (or use --spec-file)")

    if spec == "-":
        buffer = sys.stdin.read()
        if not buffer.strip():
            raise SpecError("Spec from stdin is empty")
        return buffer

    return spec


def resolve_optional_spec(spec: str | None, spec_file: str | None) -> str | None:
    if spec is None and spec_file is None:
        return None
    return resolve_spec_input(spec, spec_file)


def normalize_spec_message(
    spec: str | None,
    message: str | None,
    spec_file: str | None,
    command: str,
) -> tuple[str | None, str]:
    """
    Sorts out `<spec> <message>` positionals against --spec-file.

    With --spec-file the only positional given is the message, so typer
    puts it in the `spec` slot and it has to be moved over.
    """
    if spec_file is not None and message is None:
        message, spec = spec, None

    if message is None:
        raise ValidationError(f"{command} requires a commit message")

    if spec_file is not None:
        if spec is not None:
            raise ValidationError(f"{command}: omit <spec> when using --spec-file")
        return None, message

    if spec is None:
        raise ValidationError(f"{command} requires a spec (or use --spec-file)")
    return spec, message


def normalize_spec_only(
    spec: str | None, spec_file: str | None, command: str
) -> str | None:
    if spec_file is not None:
        if spec is not None:
            raise ValidationError(f"{command}: omit <spec> when using --spec-file")
        return None

    if spec is None:
        raise ValidationError(f"{command} requires a spec (or use --spec-file)")
    return spec
