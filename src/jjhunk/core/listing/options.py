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

from dataclasses import dataclass, field
from enum import Enum


class ListFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"
    TEXT = "text"


class ListGrouping(str, Enum):
    NONE = "none"
    DIRECTORY = "directory"
    EXTENSION = "extension"
    STATUS = "status"


class BinaryMode(str, Enum):
    # leave binary files out of the listing
    SKIP = "skip"
    # list binary files without hunks
    MARK = "mark"
    # diff them anyway, decoding lossily
    INCLUDE = "include"


class ListMode(str, Enum):
    FULL = "full"
    FILES = "files"
    SPEC_TEMPLATE = "spec-template"


@dataclass(frozen=True)
class ListOptions:
    rev: str | None = None
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    group: ListGrouping = ListGrouping.NONE
    format: ListFormat = ListFormat.JSON
    mode: ListMode = ListMode.FULL
    spec: str | None = None
    spec_file: str | None = None
    binary: BinaryMode = BinaryMode.MARK
    max_bytes: int | None = None
    max_lines: int | None = None
