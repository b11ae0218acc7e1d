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

from collections.abc import Iterable
from dataclasses import dataclass, field

from jjhunk.core.diff.hunk_identity import normalize_hunk_id
from jjhunk.core.exceptions import invalid_hunk_id, invalid_selector


@dataclass(frozen=True)
class HunkSelection:
    """
    The hunks accepted for a file, addressed by ordinal index or by id.

    A hunk is selected when its index OR its id is present; the two sets
    are independent. An empty selection accepts nothing.
    """

    indices: frozenset[int] = field(default_factory=frozenset)
    ids: frozenset[str] = field(default_factory=frozenset)

    def is_empty(self) -> bool:
        return not self.indices and not self.ids

    def matches(self, index: int, hunk_id: str) -> bool:
        return index in self.indices or hunk_id in self.ids

    @classmethod
    def from_selectors(
        cls,
        hunks: Iterable[int | str] = (),
        ids: Iterable[str] = (),
    ) -> "HunkSelection":
        """
        Builds a selection from mixed selectors and a list of ids.

        Entries of `hunks` are indices, or strings that are read as an index
        when they are a non-negative integer (an optional leading "+" is
        allowed) and as a hunk id otherwise.
        Entries of `ids` are always hunk ids.

        Raises:
            SelectorError: if any entry is neither a valid index nor a valid id.
        """
        indices: set[int] = set()
        id_set: set[str] = set()

        for selector in hunks:
            parsed = parse_hunk_selector(selector)
            if isinstance(parsed, int):
                indices.add(parsed)
            else:
                id_set.add(parsed)

        for value in ids:
            id_set.add(parse_hunk_id(value))

        return cls(frozenset(indices), frozenset(id_set))


def parse_hunk_selector(selector: int | str) -> int | str:
    """Returns an index (int) or a canonical hunk id (str) for one selector."""
    # bool is an int subclass but never a meaningful index
    if isinstance(selector, bool):
        raise invalid_selector(str(selector))

    if isinstance(selector, int):
        if selector < 0:
            raise invalid_selector(str(selector))
        return selector

    if not isinstance(selector, str):
        raise invalid_selector(repr(selector))

    trimmed = selector.strip()
    if not trimmed:
        raise invalid_selector("empty value")

    digits = trimmed.removeprefix("+")
    if digits.isascii() and digits.isdigit():
        return int(digits)

    hunk_id = normalize_hunk_id(trimmed)
    if hunk_id is None:
        raise invalid_selector(selector)
    return hunk_id


def parse_hunk_id(value: str) -> str:
    hunk_id = normalize_hunk_id(value) if isinstance(value, str) else None
    if hunk_id is None:
        raise invalid_hunk_id(str(value))
    return hunk_id
