from collections.abc import AsyncGenerator

import fakeredis.aioredis
from httpx import ASGITransport, AsyncClient
import pytest

from handover.api.main import create_app
from handover.store import ChecklistStore
from handover.tracker import Tracker


@pytest.fixture
async def redis_client() -> AsyncGenerator[fakeredis.aioredis.FakeRedis, None]:
    server = fakeredis.FakeServer()
    client = fakeredis.aioredis.FakeRedis(server=server, decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
def store(redis_client) -> ChecklistStore:
    return ChecklistStore(redis_client, key_prefix="test")


@pytest.fixture
async def tracker(store) -> AsyncGenerator[Tracker, None]:
    tracker = Tracker(store)
    yield tracker
    await tracker.drain()


@pytest.fixture
async def async_client(tracker) -> AsyncGenerator[AsyncClient, None]:
    """API client backed by the fake store; the lifespan is not run."""
    app = create_app()
    app.state.tracker = tracker
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
