"""Dynamic Payloads — echo, search and user routes.

Tests:
    - /echo returns the object unchanged; anything but a JSON object is 400 "Invalid JSON"
    - /search defaults and permissive limit coercion
    - /user/{id} keeps id as a string
"""

import pytest


# ─── /echo ───────────────────────────────────────────────────────

async def test_echo_returns_same_object(client):
    res = await client.post("/echo", json={"a": 1})
    assert res.status_code == 200
    assert res.json() == {"a": 1}


async def test_echo_preserves_nested_values_and_key_order(client):
    payload = '{"z":[1,2,{"x":null}],"a":{"b":true},"m":"é"}'
    res = await client.post(
        "/echo", content=payload.encode("utf-8"),
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 200
    assert list(res.json()) == ["z", "a", "m"]
    assert res.json() == {"z": [1, 2, {"x": None}], "a": {"b": True}, "m": "é"}


async def test_echo_empty_object(client):
    res = await client.post("/echo", json={})
    assert res.status_code == 200
    assert res.json() == {}


async def test_echo_ignores_request_content_type(client):
    res = await client.post(
        "/echo", content=b'{"a":1}', headers={"content-type": "text/plain"},
    )
    assert res.status_code == 200
    assert res.json() == {"a": 1}


@pytest.mark.parametrize("body", [
    b"not json",
    b"",
    b'{"a":',
    b"[1, 2]",
    b'"string"',
    b"42",
    b"null",
    b"\xff\xfe",
    b'{"a": NaN}',
    b'{"a": Infinity}',
    b'{"a": -Infinity}',
    b'{"a": {"b": [1, NaN]}}',
])
async def test_echo_rejects_non_object_bodies(client, body):
    res = await client.post("/echo", content=body)
    assert res.status_code == 400
    assert res.text == "Invalid JSON"
    assert res.headers["content-type"].startswith("text/plain")


async def test_echo_requires_post(client):
    res = await client.get("/echo")
    assert res.status_code == 405


# ─── /search ─────────────────────────────────────────────────────

async def test_search_with_params(client):
    res = await client.get("/search", params={"q": "foo", "limit": "5"})
    assert res.status_code == 200
    assert res.json() == {"query": "foo", "limit": 5}


async def test_search_defaults(client):
    res = await client.get("/search")
    assert res.status_code == 200
    assert res.json() == {"query": "", "limit": 0}


async def test_search_non_numeric_limit_coerces_to_zero(client):
    res = await client.get("/search", params={"q": "x", "limit": "abc"})
    assert res.status_code == 200
    assert res.json() == {"query": "x", "limit": 0}


async def test_search_limit_integer_prefix(client):
    res = await client.get("/search", params={"limit": "12abc"})
    assert res.json() == {"query": "", "limit": 12}


async def test_search_negative_limit(client):
    res = await client.get("/search", params={"limit": "-3"})
    assert res.json()["limit"] == -3


async def test_search_query_is_echoed_verbatim(client):
    res = await client.get("/search", params={"q": "a b&c=d"})
    assert res.json() == {"query": "a b&c=d", "limit": 0}


# ─── /user/{id} ──────────────────────────────────────────────────

async def test_user_returns_id_as_string(client):
    res = await client.get("/user/42")
    assert res.status_code == 200
    assert res.json() == {"id": "42"}


async def test_user_accepts_non_numeric_id(client):
    res = await client.get("/user/alice")
    assert res.json() == {"id": "alice"}


async def test_user_without_id_is_404(client):
    res = await client.get("/user/")
    assert res.status_code == 404


async def test_search_ignores_non_ascii_digits(client):
    res = await client.get("/search", params={"limit": "٣"})
    assert res.json() == {"query": "", "limit": 0}
