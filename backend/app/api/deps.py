"""FastAPI dependency providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.services.diff.service import DiffService


def get_diff_service(request: Request) -> DiffService:
    """The app-wide DiffService built from the app's settings."""
    return request.app.state.diff_service


DiffServiceDep = Annotated[DiffService, Depends(get_diff_service)]
