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

from loguru import logger

from jjhunk.core.diff.hunk_extractor import extract_hunks
from jjhunk.core.jj_commands.jj_commands import JJCommands, resolve_revisions
from jjhunk.core.matching.glob_matcher import normalize_patterns
from jjhunk.core.spec.spec import DecisionKind, Spec, spec_decision

from .content import is_binary_data, truncate_text
from .entries import FileEntry, filter_hunks, should_include_entry
from .options import BinaryMode, ListOptions


def build_file_entries(
    commands: JJCommands, options: ListOptions, spec: Spec | None = None
) -> list[FileEntry]:
    """
    Collects the changed files of a revision with their hunks.

    Files are filtered by the include/exclude globs and, when a spec is
    given, by what the spec would keep. Binary files are skipped, marked
    without hunks, or diffed lossily depending on the binary mode.
    """
    include = normalize_patterns(options.include)
    exclude = normalize_patterns(options.exclude)

    summary = commands.read_diff_summary(options.rev)
    before_rev, after_rev = resolve_revisions(options.rev)

    files: list[FileEntry] = []
    for entry in summary:
        path = entry.primary_path
        if not path:
            continue

        if not should_include_entry(entry, include, exclude):
            logger.debug(f"Filtered out {path}")
            continue

        decision = spec_decision(spec, path)
        if decision.kind is DecisionKind.SKIP:
            logger.debug(f"Spec resets {path}")
            continue

        file_paths = entry.file_paths()
        before_bytes = (
            commands.read_file(before_rev, file_paths.before)
            if file_paths.before is not None
            else b""
        )
        after_bytes = (
            commands.read_file(after_rev, file_paths.after)
            if file_paths.after is not None
            else b""
        )

        is_binary = is_binary_data(before_bytes) or is_binary_data(after_bytes)
        if is_binary and options.binary is BinaryMode.SKIP:
            continue

        hunks = []
        truncated = False
        if not (is_binary and options.binary is BinaryMode.MARK):
            before_text, before_truncated = truncate_text(
                before_bytes.decode("utf-8", errors="replace"),
                options.max_bytes,
                options.max_lines,
            )
            after_text, after_truncated = truncate_text(
                after_bytes.decode("utf-8", errors="replace"),
                options.max_bytes,
                options.max_lines,
            )
            truncated = before_truncated or after_truncated
            hunks = extract_hunks(before_text, after_text)

        if decision.kind is DecisionKind.KEEP_SELECTION:
            hunks = filter_hunks(hunks, decision.selection)

        if not hunks and not is_binary:
            continue

        files.append(
            FileEntry(
                path=path,
                status=entry.status,
                hunks=hunks,
                rename=entry.rename_info(),
                binary=is_binary,
                truncated=truncated,
            )
        )

    logger.debug(f"Listing {len(files)} files")
    return files
