"""
NoteKeeper Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own NoteStore and its own app instance, so
       mutations in one test never leak into another.

Fixtures:
    ├── fixed_clock: deterministic timestamp for created notes
    ├── store: NoteStore seeded with the three fixture notes
    ├── empty_store: NoteStore with no notes
    ├── app: FastAPI app built around `store`
    └── test_client: HTTPX AsyncClient talking to `app` in-process
"""

import os
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("PORT", None)

from notekeeper.main import create_app  # noqa: E402
from notekeeper.services.note_store import NoteStore, seed_notes  # noqa: E402

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock returning FIXED_NOW, for asserting on server-assigned dates."""
    return lambda: FIXED_NOW


@pytest.fixture
def store(fixed_clock):
    """NoteStore holding the fixture notes (ids 1, 2, 3)."""
    return NoteStore(seed_notes(), clock=fixed_clock)


@pytest.fixture
def empty_store(fixed_clock):
    return NoteStore(clock=fixed_clock)


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
