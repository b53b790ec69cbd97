"""Server Runner — binds the benchmark app to its TCP port with uvicorn.

Invariants:
    - Plain HTTP, no TLS, default 0.0.0.0:8080
    - No startup banner and no access log: uvicorn logs at warning and above only
    - Runs until terminated externally (uvicorn's default signal handling)
"""

from uvicorn import Config, Server

from httpbench.config import Settings, get_settings
from httpbench.main import create_app


def build_server(settings: Settings | None = None) -> Server:
    """Create a uvicorn Server for the configured route profile."""
    settings = settings or get_settings()
    config = Config(
        app=create_app(settings.route_profile),
        host=settings.host,
        port=settings.port,
        reload=False,
        access_log=False,
        log_level="warning",
    )
    return Server(config)


def serve(settings: Settings | None = None) -> None:
    """Run the server in the foreground."""
    build_server(settings).run()
