"""Diff API endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.api.deps import DiffServiceDep
from app.schemas.diff import DiffRequest

router = APIRouter(prefix="/diff", tags=["diff"])


@router.post(
    "",
    summary="Compute a line diff with hunks and inline highlighting",
    response_class=JSONResponse,
)
def compute_diff(body: DiffRequest, service: DiffServiceDep) -> JSONResponse:
    """
    Compare ``left`` and ``right`` line by line.

    Returns ``hunks`` (changes with up to ``context_lines`` of surrounding
    context), ``stats`` (added/deleted line counts) and ``fullDiff`` (every
    line of both inputs). Adjacent deleted/added pairs carry ``inlineDiff``
    word tokens and ``isModified: true``.
    """
    # Sync handler: FastAPI runs it in the threadpool.
    result = service.compute(body.left, body.right)
    return JSONResponse(content=result.to_dict())
