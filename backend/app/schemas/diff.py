"""Diff request schema."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr


class DiffRequest(BaseModel):
    """Two texts to compare. Both must be strings; empty strings are valid."""

    left: StrictStr = Field(..., description="Original text")
    right: StrictStr = Field(..., description="Modified text")
