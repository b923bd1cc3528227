"""Line-level diff of two texts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from app.services.diff.aligner import align
from app.services.diff.models import DiffStats, EditEntry, EditKind


def split_lines(text: str) -> list[str]:
    """
    Split on ``\\n`` exactly like a plain string split.

    An empty text yields ``[""]`` and a trailing newline yields a trailing
    empty line; ``\\r`` is left attached to its line.
    """
    return text.split("\n")


def count_stats(script: Iterable[EditEntry]) -> DiffStats:
    stats = DiffStats()
    for entry in script:
        if entry.kind is EditKind.ADDED:
            stats.added += 1
        elif entry.kind is EditKind.DELETED:
            stats.deleted += 1
    return stats


def diff_line_sequences(
    left_lines: Sequence[str], right_lines: Sequence[str]
) -> tuple[list[EditEntry], DiffStats]:
    """Align two already-split line sequences and count the changes."""
    script = align(left_lines, right_lines)
    return script, count_stats(script)


def diff_texts(left: str, right: str) -> tuple[list[EditEntry], DiffStats]:
    return diff_line_sequences(split_lines(left), split_lines(right))
