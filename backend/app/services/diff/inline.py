"""
Inline (word-level) highlighting for modified lines.

A deleted line immediately followed by an added line inside a hunk is treated
as a modification; the pair is re-aligned over word tokens so the UI can
highlight the changed words.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import structlog

from app.services.diff.aligner import align
from app.services.diff.models import EditKind, Hunk, InlineResult, InlineToken

_log = structlog.get_logger(__name__)

# ECMAScript \s: narrower than Python's Unicode \s (no \x1c-\x1f or \x85), plus \ufeff.
_WHITESPACE_RUN_RE = re.compile(
    r"([\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+)"
)


def tokenize_words(text: str) -> list[str]:
    """
    Split text into alternating word and whitespace tokens.

    Whitespace runs are kept as tokens so reassembly is lossless. Leading or
    trailing whitespace produces an empty edge token, as a regex split does.
    """
    return _WHITESPACE_RUN_RE.split(text)


def inline_diff(
    left: str | None, right: str | None, max_cells: int | None = None
) -> InlineResult | None:
    """
    Align two lines word by word.

    Returns None when either side is empty or missing; pure insertions,
    deletions and blank lines get no inline highlighting. Also returns None
    when the word table would exceed ``max_cells`` (tokens left x tokens right).
    """
    if not left or not right:
        return None

    left_words = tokenize_words(left)
    right_words = tokenize_words(right)
    cells = len(left_words) * len(right_words)
    if max_cells is not None and cells > max_cells:
        _log.debug("inline_diff_skipped", cells=cells, limit=max_cells)
        return None

    left_tokens: list[InlineToken] = []
    right_tokens: list[InlineToken] = []

    for entry in align(left_words, right_words):
        if entry.kind is EditKind.EQUAL:
            left_tokens.append(InlineToken(entry.left, EditKind.EQUAL))
            right_tokens.append(InlineToken(entry.right, EditKind.EQUAL))
        elif entry.kind is EditKind.DELETED:
            left_tokens.append(InlineToken(entry.left, EditKind.DELETED))
        else:
            right_tokens.append(InlineToken(entry.right, EditKind.ADDED))

    return InlineResult(left=left_tokens, right=right_tokens)


def annotate_hunks(hunks: Iterable[Hunk], max_cells: int | None = None) -> int:
    """
    Attach inline diffs to every adjacent deleted/added pair, in place.

    Scans one position at a time, left to right. Pairs whose word table would
    exceed ``max_cells`` are left unannotated. Returns the number of pairs
    annotated.
    """
    pairs = 0
    for hunk in hunks:
        lines = hunk.lines
        for current, following in zip(lines, lines[1:]):
            if current.kind is not EditKind.DELETED or following.kind is not EditKind.ADDED:
                continue

            result = inline_diff(current.left, following.right, max_cells)
            if result is None:
                continue

            current.inline_diff = result.left
            following.inline_diff = result.right
            current.is_modified = True
            following.is_modified = True
            pairs += 1

    if pairs:
        _log.debug("inline_pairs_annotated", pairs=pairs)
    return pairs
