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

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from jjhunk.constants import SELECTION_ENV_VAR
from jjhunk.core.exceptions import JJError
from jjhunk.core.jj_interface.interface import JJInterface

# one JSON object per changed file
SUMMARY_TEMPLATE = (
    r'"{\"status\":" ++ self.status().escape_json()'
    r' ++ ",\"path\":" ++ self.path().display().escape_json()'
    r' ++ ",\"source\":" ++ self.source().path().display().escape_json()'
    r' ++ ",\"target\":" ++ self.target().path().display().escape_json()'
    r' ++ "}\n"'
)


@dataclass(frozen=True)
class RenameInfo:
    source: str
    target: str

    def to_dict(self) -> dict[str, str]:
        return {"from": self.source, "to": self.target}


@dataclass(frozen=True)
class FilePaths:
    before: str | None
    after: str | None


@dataclass(frozen=True)
class DiffSummaryEntry:
    status: str
    path: str
    source: str = ""
    target: str = ""

    @property
    def primary_path(self) -> str:
        return self.path or self.target or self.source

    def paths(self) -> list[str]:
        """All distinct non-empty paths of the entry, for include/exclude matching."""
        paths = []
        if self.path:
            paths.append(self.path)
        if self.source and self.source != self.path:
            paths.append(self.source)
        if self.target and self.target not in (self.path, self.source):
            paths.append(self.target)
        return paths

    def rename_info(self) -> RenameInfo | None:
        if self.status not in ("renamed", "copied") or not self.source:
            return None
        return RenameInfo(self.source, self.target or self.path)

    def file_paths(self) -> FilePaths:
        """Where to read the before and after content of this entry."""
        path = self.primary_path
        if self.status == "added":
            return FilePaths(before=None, after=path)
        if self.status == "removed":
            return FilePaths(before=path, after=None)
        if self.status in ("renamed", "copied"):
            return FilePaths(before=self.source or path, after=self.target or path)
        return FilePaths(before=path, after=path)


def resolve_revisions(rev: str | None) -> tuple[str | None, str | None]:
    """Before/after revisions to read file content from; None means working copy."""
    if rev is not None:
        return f"({rev})^", rev
    return "@-", None


class JJCommands:
    def __init__(self, jj: JJInterface):
        self.jj = jj

    def read_diff_summary(self, rev: str | None = None) -> list[DiffSummaryEntry]:
        args = ["diff", "--template", SUMMARY_TEMPLATE]
        if rev is not None:
            args += ["-r", rev]

        output = self.jj.run_jj_text_out(args)
        if output is None:
            raise JJError("jj diff failed", "Run with --verbose to see jj's error output")

        entries = []
        for line_number, line in enumerate(output.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
                entries.append(
                    DiffSummaryEntry(
                        status=data["status"],
                        path=data["path"],
                        source=data.get("source", ""),
                        target=data.get("target", ""),
                    )
                )
            except (json.JSONDecodeError, KeyError, TypeError) as e:
                raise JJError(
                    f"Failed to parse diff summary line {line_number}", str(e)
                ) from e

        logger.debug(f"Diff summary has {len(entries)} entries")
        return entries

    def read_file(self, rev: str | None, path: str) -> bytes:
        args = ["file", "show"]
        if rev is not None:
            args += ["-r", rev]
        args.append(path)

        content = self.jj.run_jj_binary_out(args)
        return content if content is not None else b""

    def run_with_selection(self, args: list[str], spec_content: str) -> None:
        """
        Runs a jj command that calls back into `jj-hunk select`.

        The spec is handed over through a temporary file named by the
        JJ_HUNK_SELECTION environment variable.
        """
        with tempfile.NamedTemporaryFile(
            "w", prefix="jj-hunk-", suffix=".spec", encoding="utf-8", delete=False
        ) as f:
            f.write(spec_content)
            spec_path = Path(f.name)

        env = dict(os.environ)
        env[SELECTION_ENV_VAR] = str(spec_path)

        try:
            returncode = self.jj.run_jj_passthrough(args, env=env)
        finally:
            spec_path.unlink(missing_ok=True)

        if returncode != 0:
            raise JJError(f"jj command failed: jj {' '.join(args)}")
