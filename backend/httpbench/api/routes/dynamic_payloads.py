"""Dynamic Payloads — endpoints whose body depends on the request.

Invariants:
    - POST /echo returns the request's JSON object unchanged, or 400 "Invalid JSON"
    - GET /search never fails: q defaults to "", limit coerces to an int (default 0)
    - GET /user/{id} returns id as a string, never coerced
    - Routes never contain parsing logic (delegate to core.request_parsing)
"""

from fastapi import APIRouter, Request

from httpbench.api.responses import UTF8JSONResponse
from httpbench.core.request_parsing import coerce_limit, parse_json_object

router = APIRouter(tags=["dynamic"])


@router.post("/echo", response_class=UTF8JSONResponse)
async def echo(request: Request):
    """Echo a JSON object body. InvalidJSONError is mapped to 400 by error_handlers."""
    body = await request.body()
    return UTF8JSONResponse(parse_json_object(body))


@router.get("/search", response_class=UTF8JSONResponse)
async def search(q: str = "", limit: str | None = None):
    # limit stays a str here; coerce_limit maps non-numeric values to 0
    return UTF8JSONResponse({"query": q, "limit": coerce_limit(limit)})


@router.get("/user/{id}", response_class=UTF8JSONResponse)
async def get_user(id: str):
    return UTF8JSONResponse({"id": id})
