"""
Sequence aligner: longest-common-subsequence alignment of two token sequences.

Used for both the line pass and the word pass. The full (m+1)x(n+1) table is
kept so the backtrack can read historical values; memory is O(m*n), so callers
must bound their input sizes.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.services.diff.models import EditEntry, EditKind


def lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Return ``L`` where ``L[i][j]`` is the LCS length of ``a[:i]`` and ``b[:j]``."""
    n = len(b)
    table = [[0] * (n + 1) for _ in range(len(a) + 1)]

    for i, token in enumerate(a, start=1):
        prev = table[i - 1]
        row = table[i]
        for j in range(1, n + 1):
            if token == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    return table


def align(a: Sequence[str], b: Sequence[str]) -> list[EditEntry]:
    """
    Produce the edit script turning ``a`` into ``b``.

    Entries are ordered by increasing position on both sides. When the table
    does not favour either direction, an insertion is emitted before a
    deletion during the backward walk, which places deletions first in the
    final script. Golden outputs depend on this tie-break.
    """
    table = lcs_table(a, b)
    script: list[EditEntry] = []
    i, j = len(a), len(b)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            script.append(
                EditEntry(EditKind.EQUAL, left=a[i - 1], right=b[j - 1], left_pos=i, right_pos=j)
            )
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            script.append(EditEntry(EditKind.ADDED, right=b[j - 1], right_pos=j))
            j -= 1
        else:
            script.append(EditEntry(EditKind.DELETED, left=a[i - 1], left_pos=i))
            i -= 1

    # Built back-to-front; one reversal restores positional order.
    script.reverse()
    return script
