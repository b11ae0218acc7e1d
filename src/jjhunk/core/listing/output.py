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
Rendering of `jj-hunk list` results as JSON, YAML or plain text.
"""

import json
from pathlib import PurePosixPath
from typing import Any, TypeVar

import yaml
from colorama import Fore, Style

from jjhunk.core.diff.line_segmenter import split_lines_with_endings
from jjhunk.core.spec.spec import DefaultAction

from .entries import FileEntry, FileSummary
from .options import ListFormat, ListGrouping

T = TypeVar("T", FileEntry, FileSummary)

STATUS_CHARS = {
    "modified": "M",
    "added": "A",
    "removed": "D",
    "renamed": "R",
    "copied": "C",
}


def status_char(status: str) -> str:
    return STATUS_CHARS.get(status, "?")


def directory_group(path: str) -> str:
    parent = str(PurePosixPath(path).parent)
    return parent if parent not in ("", ".") else "."


def extension_group(path: str) -> str:
    suffix = PurePosixPath(path).suffix
    return suffix[1:] if suffix else "<no-ext>"


def group_key(item: FileEntry | FileSummary, grouping: ListGrouping) -> str:
    if grouping is ListGrouping.DIRECTORY:
        return directory_group(item.path)
    if grouping is ListGrouping.EXTENSION:
        return extension_group(item.path)
    if grouping is ListGrouping.STATUS:
        return item.status
    return ""


def group_files(items: list[T], grouping: ListGrouping) -> list[tuple[str, list[T]]]:
    """Groups items by key, keeping groups and their members in first-seen order."""
    groups: dict[str, list[T]] = {}
    for item in items:
        groups.setdefault(group_key(item, grouping), []).append(item)
    return list(groups.items())


def build_listing(
    items: list[FileEntry] | list[FileSummary], grouping: ListGrouping
) -> dict[str, Any]:
    if grouping is ListGrouping.NONE:
        return {"files": [item.to_dict() for item in items]}

    return {
        "groups": [
            {"name": name, "files": [item.to_dict() for item in members]}
            for name, members in group_files(items, grouping)
        ]
    }


def build_spec_template(files: list[FileEntry]) -> dict[str, Any]:
    """
    A spec that keeps exactly the listed hunks, for the user to edit down.

    Binary files have no hunks and are kept whole.
    """
    template: dict[str, Any] = {}
    for file in files:
        if file.hunks:
            template[file.path] = {"ids": [hunk.id for hunk in file.hunks]}
        elif file.binary:
            template[file.path] = {"action": "keep"}

    return {"files": template, "default": DefaultAction.RESET.value}


def serialize(data: dict[str, Any], fmt: ListFormat) -> str:
    if fmt is ListFormat.YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def _paint(text: str, style: str, color: bool) -> str:
    return f"{style}{text}{Style.RESET_ALL}" if color else text


def _file_header(item: FileEntry | FileSummary) -> str:
    header = f"{status_char(item.status)} {item.path}"
    if item.rename is not None:
        header += f" ({item.rename.source} -> {item.rename.target})"
    return header


def _file_flags(item: FileEntry | FileSummary) -> str:
    flags = ""
    if item.binary:
        flags += " [binary]"
    if item.truncated:
        flags += " [truncated]"
    return flags


def _display_lines(text: str) -> list[str]:
    # only "\n" ends a line; a form feed or lone "\r" stays inside it
    return [
        line.removesuffix("\n").removesuffix("\r")
        for line in split_lines_with_endings(text)
    ]


def _format_files_text(lines: list[str], files: list[FileEntry], color: bool) -> None:
    for file in files:
        lines.append(_paint(_file_header(file) + _file_flags(file), Style.BRIGHT, color))
        for hunk in file.hunks:
            lines.append(
                _paint(
                    f"  hunk {hunk.index} {hunk.kind} {hunk.id} "
                    f"(before {hunk.before_range.start}+{hunk.before_range.length} "
                    f"after {hunk.after_range.start}+{hunk.after_range.length})",
                    Fore.BLUE,
                    color,
                )
            )
            for line in _display_lines(hunk.removed):
                lines.append(_paint(f"    - {line}", Fore.RED, color))
            for line in _display_lines(hunk.added):
                lines.append(_paint(f"    + {line}", Fore.GREEN, color))


def _format_summary_text(lines: list[str], files: list[FileSummary]) -> None:
    for file in files:
        line = f"{status_char(file.status)} {file.path} ({file.hunk_count} hunks)"
        if file.rename is not None:
            line += f" ({file.rename.source} -> {file.rename.target})"
        lines.append(line + _file_flags(file))


def render_text(
    items: list[FileEntry] | list[FileSummary],
    grouping: ListGrouping,
    summary: bool = False,
    color: bool = False,
) -> str:
    lines: list[str] = []

    def format_items(members):
        if summary:
            _format_summary_text(lines, members)
        else:
            _format_files_text(lines, members, color)

    if grouping is ListGrouping.NONE:
        format_items(items)
    else:
        groups = group_files(items, grouping)
        for position, (name, members) in enumerate(groups):
            lines.append(f"{name if name not in ('', '.') else '<root>'}:")
            format_items(members)
            if position + 1 < len(groups):
                lines.append("")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"
