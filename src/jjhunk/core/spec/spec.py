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
Selection spec: which hunks of which files survive.

A spec maps file paths to a decision (keep everything, reset everything, or
keep a selection of hunks) and carries a default action for unlisted paths.
It is written as JSON or YAML, for example::

    files:
      src/lib.rs:
        hunks: [0, "hunk-3f2a..."]
        ids: ["sha256:9c1e..."]
      README.md:
        action: keep
    default: reset
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from jjhunk.core.data.selection import (
    HunkSelection,
    parse_hunk_id,
    parse_hunk_selector,
)
from jjhunk.core.exceptions import SelectorError, SpecError


class Action(str, Enum):
    KEEP = "keep"
    RESET = "reset"


class DefaultAction(str, Enum):
    KEEP = "keep"
    RESET = "reset"


class HunkSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    hunks: list[int | str] = Field(default_factory=list)
    ids: list[str] = Field(default_factory=list)

    @field_validator("hunks", mode="before")
    @classmethod
    def _parse_hunks(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        try:
            return [parse_hunk_selector(item) for item in value]
        except SelectorError as e:
            raise ValueError(e.message) from e

    @field_validator("ids", mode="before")
    @classmethod
    def _parse_ids(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        try:
            return [parse_hunk_id(item) for item in value]
        except SelectorError as e:
            raise ValueError(e.message) from e

    def to_selection(self) -> HunkSelection:
        return HunkSelection.from_selectors(self.hunks, self.ids)


class ActionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    action: Action


FileSpec = Annotated[HunkSpec | ActionSpec, Field(union_mode="left_to_right")]


class Spec(BaseModel):
    model_config = ConfigDict(frozen=True)

    files: dict[str, FileSpec] = Field(default_factory=dict)
    default: DefaultAction = DefaultAction.RESET

    @classmethod
    def from_str(cls, text: str) -> "Spec":
        """
        Parses a spec written as JSON, falling back to YAML.

        Raises:
            SpecError: if the text is neither a valid JSON nor a valid YAML spec.
        """
        try:
            return cls.model_validate_json(text)
        except PydanticValidationError as json_err:
            json_error = json_err

        try:
            data = yaml.safe_load(text)
            if data is None:
                data = {}
            return cls.model_validate(data)
        except (yaml.YAMLError, PydanticValidationError) as yaml_err:
            raise SpecError(
                "Failed to parse spec as JSON or YAML",
                f"JSON: {json_error}\nYAML: {yaml_err}",
            ) from yaml_err

    def file_spec(self, path: str) -> HunkSpec | ActionSpec | None:
        return self.files.get(path)


class DecisionKind(str, Enum):
    SKIP = "skip"
    KEEP_ALL = "keep_all"
    KEEP_SELECTION = "keep_selection"


@dataclass(frozen=True)
class SpecDecision:
    kind: DecisionKind
    selection: HunkSelection | None = None


def spec_decision(spec: Spec | None, path: str) -> SpecDecision:
    """Decides how much of a file's changes a spec keeps."""
    if spec is None:
        return SpecDecision(DecisionKind.KEEP_ALL)

    file_spec = spec.file_spec(path)
    if file_spec is None:
        if spec.default is DefaultAction.RESET:
            return SpecDecision(DecisionKind.SKIP)
        return SpecDecision(DecisionKind.KEEP_ALL)

    if isinstance(file_spec, ActionSpec):
        if file_spec.action is Action.KEEP:
            return SpecDecision(DecisionKind.KEEP_ALL)
        return SpecDecision(DecisionKind.SKIP)

    selection = file_spec.to_selection()
    if selection.is_empty():
        return SpecDecision(DecisionKind.SKIP)
    return SpecDecision(DecisionKind.KEEP_SELECTION, selection)

