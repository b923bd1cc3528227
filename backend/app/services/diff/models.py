"""
Diff data model: edit entries, hunks, inline tokens and the composed result.

All records are built fresh per request. ``EditEntry`` is deliberately mutable:
the inline annotator is its only writer and attaches word-level highlighting
after hunks have been grouped. Hunks hold references to the same entry objects
as ``DiffResult.full_diff``, so annotations show up in both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class EditKind(StrEnum):
    """Alignment operation for a single token."""

    EQUAL = "equal"
    ADDED = "added"
    DELETED = "deleted"


@dataclass(slots=True)
class InlineToken:
    """A word or whitespace run inside a modified line."""

    text: str
    kind: EditKind

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "type": self.kind.value}


@dataclass(slots=True)
class InlineResult:
    """Word-level alignment of a deleted/added line pair."""

    left: list[InlineToken]   # EQUAL | DELETED
    right: list[InlineToken]  # EQUAL | ADDED


@dataclass(slots=True)
class EditEntry:
    """
    One step of an edit script.

    ``left_pos`` / ``right_pos`` are 1-based token indexes. EQUAL entries carry
    both sides, ADDED only the right side and DELETED only the left side.
    """

    kind: EditKind
    left: str | None = None
    right: str | None = None
    left_pos: int | None = None
    right_pos: int | None = None
    inline_diff: list[InlineToken] | None = None
    is_modified: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.kind.value,
            "left": self.left,
            "right": self.right,
            "leftLine": self.left_pos,
            "rightLine": self.right_pos,
        }
        if self.inline_diff is not None:
            data["inlineDiff"] = [token.to_dict() for token in self.inline_diff]
        if self.is_modified:
            data["isModified"] = True
        return data


@dataclass(slots=True)
class Hunk:
    """A context-bounded window of the edit script."""

    left_start: int
    right_start: int
    lines: list[EditEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "leftStart": self.left_start,
            "rightStart": self.right_start,
            "lines": [entry.to_dict() for entry in self.lines],
        }


@dataclass(slots=True)
class DiffStats:
    added: int = 0
    deleted: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"added": self.added, "deleted": self.deleted}


@dataclass(slots=True)
class DiffResult:
    """Composed output of a line diff."""

    hunks: list[Hunk]
    stats: DiffStats
    full_diff: list[EditEntry]

    @property
    def has_changes(self) -> bool:
        return bool(self.stats.added or self.stats.deleted)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON shape consumed by the review UI."""
        return {
            "hunks": [hunk.to_dict() for hunk in self.hunks],
            "stats": self.stats.to_dict(),
            "fullDiff": [entry.to_dict() for entry in self.full_diff],
        }
