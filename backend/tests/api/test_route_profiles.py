"""Route Profiles — baseline exposes only the three static routes.

Tests:
    - Baseline serves /health, /plaintext, /json unchanged
    - Baseline 404s the dynamic routes
    - create_app falls back to the configured profile
"""

import pytest

from httpbench.core.domain_types import RouteProfile
from httpbench.main import create_app


async def test_baseline_serves_static_routes(baseline_client):
    assert (await baseline_client.get("/health")).status_code == 200
    assert (await baseline_client.get("/plaintext")).text == "OK"
    assert (await baseline_client.get("/json")).json() == {"message": "OK"}


@pytest.mark.parametrize("method,path", [
    ("POST", "/echo"),
    ("GET", "/search"),
    ("GET", "/user/42"),
])
async def test_baseline_has_no_dynamic_routes(baseline_client, method, path):
    res = await baseline_client.request(method, path)
    assert res.status_code == 404


def _paths(app):
    return {route.path for route in app.routes}


def test_create_app_uses_settings_profile(monkeypatch):
    monkeypatch.setenv("HTTPBENCH_ROUTE_PROFILE", "baseline")
    app = create_app()
    assert app.state.route_profile is RouteProfile.BASELINE
    assert "/echo" not in _paths(app)


def test_create_app_accepts_profile_string():
    app = create_app("full")
    assert {"/health", "/plaintext", "/json", "/echo", "/search", "/user/{id}"} <= _paths(app)


def test_create_app_rejects_unknown_profile():
    with pytest.raises(ValueError):
        create_app("turbo")
