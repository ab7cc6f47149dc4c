"""Error Handlers - not-found and unexpected failures on the roster routes.

Invariants:
    - Browsers get a short plain-text body; Accept: application/json gets the envelope
    - Unexpected failures answer 500 without internal details

Design Decisions:
    - raise_app_exceptions=False: the server error middleware re-raises after
      sending the 500, so the transport must not turn it back into an exception
"""

from httpx import ASGITransport, AsyncClient

from roster.config import Settings, get_settings
from roster.infrastructure.user_store import get_user_store
from roster.main import app


async def test_not_found_plain_text_for_browsers(client):
    res = await client.get("/7/update", headers={"accept": "text/html"})
    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "User not found"


async def test_not_found_json_envelope_when_requested(client):
    res = await client.post(
        "/7/update", headers={"accept": "application/json"},
    )
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "User '7' not found"
    assert error["context"]["resource_id"] == "7"


async def _get_with_broken_store(path: str, accept: str):
    def broken_store():
        raise RuntimeError("store exploded at 0xdeadbeef")

    app.dependency_overrides[get_user_store] = broken_store
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            return await c.get(path, headers={"accept": accept})
    finally:
        app.dependency_overrides.clear()


async def test_unexpected_error_plain_500():
    res = await _get_with_broken_store("/", "text/html")
    assert res.status_code == 500
    assert res.text == "Internal Server Error"
    assert "deadbeef" not in res.text


async def test_unexpected_error_json_500():
    res = await _get_with_broken_store("/", "application/json")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == "internal"
    assert "deadbeef" not in res.text
