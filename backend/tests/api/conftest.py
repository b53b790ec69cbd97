"""API test fixtures — httpx AsyncClient bound to a fresh app per profile.

Invariants:
    - Each test gets its own app instance (no shared router state)
    - Requests go through ASGITransport, no socket is opened

Design Decisions:
    - raise_app_exceptions=False: the catch-all 500 handler is asserted on,
      instead of the exception propagating into the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from httpbench.core.domain_types import RouteProfile
from httpbench.main import create_app


def _client_for(app) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
def full_app():
    return create_app(RouteProfile.FULL)


@pytest.fixture
async def client(full_app):
    """Client for the full route table."""
    async with _client_for(full_app) as c:
        yield c


@pytest.fixture
async def baseline_client():
    """Client for the baseline (health/plaintext/json) route table."""
    async with _client_for(create_app(RouteProfile.BASELINE)) as c:
        yield c
