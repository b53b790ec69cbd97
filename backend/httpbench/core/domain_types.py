"""Domain Types — enums shared by configuration, the app factory and the CLI.

Invariants:
    - BASELINE routes are a strict subset of FULL routes
"""

from enum import Enum


class RouteProfile(str, Enum):
    """Which route table the server exposes."""
    BASELINE = "baseline"   # /health, /plaintext, /json
    FULL = "full"           # baseline + /echo, /search, /user/{id}


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    TEXT = "text"
