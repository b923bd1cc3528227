"""
Diff service: validates two texts and composes line diff, hunks and inline
highlighting into a single ``DiffResult``.

Pipeline:
  split lines → LCS alignment → hunk grouping → inline annotation

Each call owns all of its tables and records, so a single instance can serve
concurrent requests.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog
from prometheus_client import Counter, Histogram

from app.core.errors import InputTooLargeError, InvalidInputError
from app.services.diff.hunks import DEFAULT_CONTEXT_LINES, group_hunks
from app.services.diff.inline import annotate_hunks
from app.services.diff.line_differ import diff_line_sequences, split_lines
from app.services.diff.models import DiffResult

if TYPE_CHECKING:
    from app.config.settings import Settings

_log = structlog.get_logger(__name__)

DIFF_REQUESTS = Counter(
    "linediff_diff_requests_total",
    "Diff computations by outcome",
    ["outcome"],
)
DIFF_DURATION = Histogram(
    "linediff_diff_duration_seconds",
    "Time spent computing a diff",
)


class DiffService:
    """Stateless orchestrator around the diff core."""

    def __init__(
        self,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        max_input_lines: int | None = None,
        max_input_chars: int | None = None,
        max_table_cells: int | None = None,
        max_inline_cells: int | None = None,
    ) -> None:
        if context_lines < 0:
            raise ValueError("context_lines must be non-negative")
        self.context_lines = context_lines
        self.max_input_lines = max_input_lines
        self.max_input_chars = max_input_chars
        self.max_table_cells = max_table_cells
        self.max_inline_cells = max_inline_cells

    @classmethod
    def from_settings(cls, settings: Settings) -> DiffService:
        return cls(
            context_lines=settings.context_lines,
            max_input_lines=settings.max_input_lines,
            max_input_chars=settings.max_input_chars,
            max_table_cells=settings.max_table_cells,
            max_inline_cells=settings.max_inline_cells,
        )

    def compute(self, left: object, right: object) -> DiffResult:
        """
        Diff ``left`` against ``right``.

        Raises:
            InvalidInputError: either side is missing or not a string.
            InputTooLargeError: either side, or the line table, exceeds the
                configured ceiling.
        """
        try:
            left_lines = self._checked_lines("left", left)
            right_lines = self._checked_lines("right", right)
            self._check_table_size(len(left_lines), len(right_lines))
        except (InvalidInputError, InputTooLargeError) as exc:
            DIFF_REQUESTS.labels(outcome="rejected").inc()
            _log.info("diff_rejected", error_code=exc.code.value, reason=exc.message)
            raise

        start = time.perf_counter()
        script, stats = diff_line_sequences(left_lines, right_lines)
        hunks = group_hunks(script, self.context_lines)
        modified = annotate_hunks(hunks, self.max_inline_cells)
        elapsed = time.perf_counter() - start
        result = DiffResult(hunks=hunks, stats=stats, full_diff=script)

        DIFF_DURATION.observe(elapsed)
        DIFF_REQUESTS.labels(outcome="ok").inc()
        _log.info(
            "diff_computed",
            changed=result.has_changes,
            left_lines=len(left_lines),
            right_lines=len(right_lines),
            hunks=len(hunks),
            added=stats.added,
            deleted=stats.deleted,
            modified_pairs=modified,
            duration_ms=int(elapsed * 1000),
        )
        return result

    def _checked_lines(self, side: str, text: object) -> list[str]:
        if text is None:
            raise InvalidInputError(f"'{side}' is required", detail={"field": side})
        if not isinstance(text, str):
            raise InvalidInputError(
                f"'{side}' must be a string",
                detail={"field": side, "type": type(text).__name__},
            )

        if self.max_input_chars is not None and len(text) > self.max_input_chars:
            raise InputTooLargeError(
                f"'{side}' exceeds {self.max_input_chars} characters",
                detail={"field": side, "chars": len(text), "limit": self.max_input_chars},
            )

        lines = split_lines(text)
        if self.max_input_lines is not None and len(lines) > self.max_input_lines:
            raise InputTooLargeError(
                f"'{side}' exceeds {self.max_input_lines} lines",
                detail={"field": side, "lines": len(lines), "limit": self.max_input_lines},
            )
        return lines

    def _check_table_size(self, left_count: int, right_count: int) -> None:
        cells = left_count * right_count
        if self.max_table_cells is not None and cells > self.max_table_cells:
            raise InputTooLargeError(
                f"Line table of {cells} cells exceeds {self.max_table_cells}",
                detail={"cells": cells, "limit": self.max_table_cells},
            )
