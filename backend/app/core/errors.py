"""
Structured error taxonomy for LineDiff.

Every application error has:
  - A stable error code (prefixed by domain)
  - An HTTP status code
  - A human-readable message
  - An optional detail dict for machine consumers

The diff computation itself is total over string inputs; the only failures a
client can see are rejected requests.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stable, versioned error codes. Never reuse a retired code."""

    # Diff
    DIFF_INVALID_INPUT = "DIFF_001"
    DIFF_INPUT_TOO_LARGE = "DIFF_002"

    # Generic
    INTERNAL_ERROR = "GEN_001"
    RATE_LIMITED = "GEN_002"


class AppError(Exception):
    """Base class for all application errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        http_status: int = 500,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.detail = detail or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "detail": self.detail,
            }
        }


# ── Typed convenience subclasses ──────────────────────────────────────── #


class InvalidInputError(AppError):
    """Either diff input is missing or is not a text value."""

    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(
            code=ErrorCode.DIFF_INVALID_INPUT,
            message=message,
            http_status=422,
            detail=detail,
        )


class InputTooLargeError(AppError):
    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(
            code=ErrorCode.DIFF_INPUT_TOO_LARGE,
            message=message,
            http_status=413,
            detail=detail,
        )

