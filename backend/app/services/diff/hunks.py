"""
Hunk grouper: partitions a full edit script into context-bounded windows.

Single pass with one open-hunk register. A hunk opens on the first change,
reaching back ``context_lines`` entries. While open, every entry is appended;
once the run of trailing unchanged entries exceeds ``2 * context_lines`` the
hunk is trimmed to ``context_lines`` of that run and closed. Changes separated
by fewer unchanged entries therefore land in the same hunk.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.services.diff.models import EditEntry, EditKind, Hunk

DEFAULT_CONTEXT_LINES = 3


def _trailing_equal_run(lines: list[EditEntry]) -> int:
    count = 0
    for entry in reversed(lines):
        if entry.kind is not EditKind.EQUAL:
            break
        count += 1
    return count


def group_hunks(
    script: Sequence[EditEntry], context_lines: int = DEFAULT_CONTEXT_LINES
) -> list[Hunk]:
    """Group ``script`` into hunks. Entries are shared with ``script``, not copied."""
    if context_lines < 0:
        raise ValueError("context_lines must be non-negative")

    hunks: list[Hunk] = []
    current: Hunk | None = None

    for idx, entry in enumerate(script):
        if entry.kind is not EditKind.EQUAL:
            if current is None:
                start = max(0, idx - context_lines)
                first = script[start]
                current = Hunk(
                    left_start=first.left_pos or 0,
                    right_start=first.right_pos or 0,
                    lines=list(script[start : idx + 1]),
                )
            else:
                current.lines.append(entry)
            continue

        if current is None:
            continue

        current.lines.append(entry)
        unchanged = _trailing_equal_run(current.lines)
        if unchanged > context_lines * 2:
            del current.lines[len(current.lines) - (unchanged - context_lines) :]
            hunks.append(current)
            current = None

    # The last hunk keeps whatever trailing context it accumulated.
    if current is not None:
        hunks.append(current)

    return hunks
