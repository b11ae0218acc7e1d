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

from dataclasses import dataclass
from typing import Any, Literal

HunkKind = Literal["insert", "delete", "replace"]


@dataclass(frozen=True)
class LineRange:
    # 1-based line number; for an empty range this is the insertion point
    start: int
    length: int

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "lines": self.length}


@dataclass(frozen=True)
class HunkContext:
    """Unchanged lines around a hunk in the before text, used only for identity."""

    before: str
    after: str

    def to_dict(self) -> dict[str, str]:
        return {"pre": self.before, "post": self.after}


@dataclass(frozen=True)
class Hunk:
    """
    One maximal run of non-equal line changes between two texts.

    `index` is the ordinal position within a single extraction. `id` is the
    content-addressed identifier that stays valid as long as the change
    itself (and its surrounding context) is unchanged.
    """

    index: int
    id: str
    kind: HunkKind
    removed: str
    added: str
    before_range: LineRange
    after_range: LineRange
    context: HunkContext | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "index": self.index,
            "id": self.id,
            "type": self.kind,
            "removed": self.removed,
            "added": self.added,
            "before": self.before_range.to_dict(),
            "after": self.after_range.to_dict(),
        }
        if self.context is not None:
            data["context"] = self.context.to_dict()
        return data
