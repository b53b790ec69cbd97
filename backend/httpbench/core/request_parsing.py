"""Request Parsing — pure helpers for the echo and search endpoints.

Invariants:
    - parse_json_object accepts only a JSON object; anything else raises InvalidJSONError
    - coerce_limit never raises: non-numeric input becomes 0
    - Key order of a parsed object is preserved
    - NaN and Infinity literals are rejected, as JSON.parse does
    - Only ASCII digits count toward limit

Design Decisions:
    - pydantic TypeAdapter over json.loads + isinstance: one call validates
      UTF-8, JSON syntax and the top-level type
    - limit uses integer-prefix parsing ("12abc" -> 12), the permissive
      behavior load generators were written against
"""

import math
import re
from typing import Any

from pydantic import TypeAdapter, ValidationError

from httpbench.core.errors import InvalidJSONError

_JSON_OBJECT = TypeAdapter(dict[str, Any])
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def parse_json_object(raw: bytes) -> dict[str, Any]:
    """Parse a request body as a JSON object or raise InvalidJSONError."""
    try:
        parsed = _JSON_OBJECT.validate_json(raw)
    except ValidationError as exc:
        raise InvalidJSONError() from exc
    if not _all_finite(parsed):
        raise InvalidJSONError()
    return parsed


def _all_finite(value: Any) -> bool:
    """False if any float in the document is NaN or infinite (not valid JSON)."""
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(_all_finite(v) for v in value.values())
    if isinstance(value, list):
        return all(_all_finite(v) for v in value)
    return True


def coerce_limit(raw: str | None) -> int:
    """Leading-integer parse of a query value; missing or non-numeric -> 0."""
    if not raw:
        return 0
    match = _INT_PREFIX.match(raw)
    if match is None:
        return 0
    return int(match.group(1))
