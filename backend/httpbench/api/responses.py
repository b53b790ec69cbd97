"""Response Classes — explicit charset on JSON bodies.

Invariants:
    - JSON bodies are compact and deterministic (Starlette's JSONResponse rendering)
    - Content-Type is always "application/json; charset=utf-8"
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse that states its charset, matching the other benchmark targets."""
    media_type = "application/json; charset=utf-8"
