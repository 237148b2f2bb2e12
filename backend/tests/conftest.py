"""
Pytest configuration and fixtures for Pagewright service tests.
"""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from backend.main import app
from backend.services.session_store import session_store


@pytest.fixture(autouse=True)
def clear_sessions():
    """Every test starts with an empty session store."""
    session_store.clear()
    yield
    session_store.clear()


@pytest_asyncio.fixture
async def async_client():
    """Async HTTP client against the ASGI app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def session_id(async_client):
    """Open a blank-canvas session and return its id."""
    resp = await async_client.post("/api/sessions")
    assert resp.status_code == 201
    return resp.json()["id"]
