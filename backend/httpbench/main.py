"""httpbench API — FastAPI application factory and module-level app.

Invariants:
    - Routes registered explicitly per RouteProfile (no auto-discovery)
    - No OpenAPI/docs routes: the route table is exactly the benchmark contract
    - Logging configured once on startup via lifespan; nothing printed at INFO
    - The app holds no mutable state besides the router table

Design Decisions:
    - Factory over a single global: tests build one app per profile
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from httpbench import __version__
from httpbench.api.error_handlers import register_error_handlers
from httpbench.api.routes import dynamic_payloads, health, static_payloads
from httpbench.config import get_settings
from httpbench.core.domain_types import RouteProfile
from httpbench.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

_PROFILE_ROUTERS = {
    RouteProfile.BASELINE: (health.router, static_payloads.router),
    RouteProfile.FULL: (
        health.router, static_payloads.router, dynamic_payloads.router,
    ),
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format.value)
    logger.debug(
        "httpbench server ready",
        extra={"entry": app.state.route_profile.value},
    )
    yield


def create_app(profile: RouteProfile | str | None = None) -> FastAPI:
    """Build the benchmark app for a route profile (settings default if None)."""
    if profile is None:
        profile = get_settings().route_profile
    profile = RouteProfile(profile)

    app = FastAPI(
        title="httpbench",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.route_profile = profile

    for router in _PROFILE_ROUTERS[profile]:
        app.include_router(router)

    register_error_handlers(app)
    return app


app = create_app()
