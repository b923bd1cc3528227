"""
Shared pytest fixtures for LineDiff backend tests.

Provides:
  - test Settings (no .env dependence for diff limits)
  - FastAPI app built through the factory
  - async HTTP client over ASGITransport (no network)
"""
from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config.settings import Settings
from app.main import create_app
from app.services.diff.service import DiffService


# ─── Settings override ────────────────────────────────────────────────────────

TEST_SETTINGS = Settings(
    environment="testing",
    debug=True,
    cors_origins=["http://localhost:3000"],
    context_lines=3,
    max_input_lines=5_000,
    max_input_chars=2_000_000,
    max_table_cells=25_000_000,
    max_inline_cells=1_000_000,
    rate_limit_default="1000/minute",
    log_json=False,
)


@pytest.fixture
def settings() -> Settings:
    return TEST_SETTINGS


@pytest.fixture
def diff_service() -> DiffService:
    return DiffService.from_settings(TEST_SETTINGS)


# ─── App & HTTP client ────────────────────────────────────────────────────────

@pytest.fixture
def app(settings: Settings):
    return create_app(settings=settings)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
