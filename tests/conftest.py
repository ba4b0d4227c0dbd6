"""
Shared test fixtures.

Coordinates are real points around the Stony Brook campus so the expected
distances can be sanity-checked on a map.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ── Sample points ─────────────────────────────────────────────────────

CAMPUS_SOURCE = [40.9148, -73.1215]
NEAR_LOT = {"name": "Engineering Lot", "coordinates": [40.9151, -73.1230]}
FAR_LOT = {"name": "South P Lot", "coordinates": [40.9200, -73.1500]}

# ~50 km east of campus, ~8 km apart: each is the other's nearest neighbour
REMOTE_A = {"name": "Remote A", "coordinates": [40.9148, -72.5300]}
REMOTE_B = {"name": "Remote B", "coordinates": [40.9148, -72.4350]}


@pytest.fixture
def campus_lots():
    return [
        dict(NEAR_LOT, id=1, capacity=120),
        dict(FAR_LOT, id=2, capacity=800),
    ]


@pytest.fixture
def stranded_lots():
    """One lot on campus plus a remote pair disconnected from it."""
    return [dict(NEAR_LOT), dict(REMOTE_A), dict(REMOTE_B)]


# ── API client ────────────────────────────────────────────────────────


@pytest.fixture
def app():
    """Fresh app with a clean rate-limit window."""
    from parkpath.api.app import create_app
    from parkpath.api.middleware import limiter

    limiter.reset()
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
