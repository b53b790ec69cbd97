"""Static Payloads — constant plaintext and JSON bodies.

Invariants:
    - GET /plaintext → "OK", text/plain; charset=utf-8
    - GET /json → {"message":"OK"}, application/json; charset=utf-8
    - Responses are byte-identical across requests
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from httpbench.api.responses import UTF8JSONResponse

router = APIRouter(tags=["static"])


@router.get("/plaintext", response_class=PlainTextResponse)
async def plaintext():
    return PlainTextResponse("OK")


@router.get("/json", response_class=UTF8JSONResponse)
async def json_message():
    return UTF8JSONResponse({"message": "OK"})
