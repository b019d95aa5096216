"""Application assembly: health, global error envelope, middleware."""

import logging

from httpx import ASGITransport, AsyncClient

from marketplace_api.app.core.config import Settings
from marketplace_api.app.core.routing import list_routes
from marketplace_api.app.main import create_app

EXPECTED_ROUTES = {
    ("POST", "/api/favorites"),
    ("GET", "/api/favorites"),
    ("DELETE", "/api/favorites/{favorite_id}"),
    ("POST", "/api/reviews"),
    ("GET", "/api/reviews/eligible/{order_id}"),
    ("PUT", "/api/reviews/{review_id}"),
    ("GET", "/api/admin/sellers"),
    ("GET", "/api/admin/sellers/{seller_id}"),
    ("PUT", "/api/admin/sellers/{seller_id}/audit"),
    ("GET", "/api/seller/orders"),
    ("GET", "/api/seller/orders/{order_id}"),
}


async def test_health(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"message": "OK", "success": True}


def test_all_routes_mounted(app):
    mounted = set(list_routes(app))
    assert EXPECTED_ROUTES <= mounted


def test_title_and_version_from_settings(monkeypatch):
    monkeypatch.setenv("PROJECT_NAME", "Shop")
    monkeypatch.setenv("API_VERSION", "2.3.4")
    app = create_app(Settings.from_env())
    assert app.title == "Shop"
    assert app.version == "2.3.4"


async def test_unknown_route_uses_envelope(client):
    res = await client.get("/api/nowhere")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found", "success": False}


async def test_wrong_method_uses_envelope(client):
    res = await client.patch("/api/favorites")
    assert res.status_code == 405
    assert res.json() == {"message": "Method Not Allowed", "success": False}


async def test_unhandled_exception_uses_generic_envelope(app):
    @app.get("/explode")
    async def explode():
        raise RuntimeError("secret internals")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        res = await c.get("/explode")
    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error", "success": False}
    assert "secret" not in res.text


async def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="marketplace_api.access"):
        await client.get("/api/favorites")
    lines = [r.getMessage() for r in caplog.records if r.name == "marketplace_api.access"]
    assert any(line.startswith("GET /api/favorites -> 200") for line in lines)


async def test_handlers_log_on_entry(client, caplog):
    with caplog.at_level(logging.INFO):
        await client.delete("/api/favorites/77")
    assert "Removing favorite 77" in caplog.text


async def test_cors_preflight_allowed(client):
    res = await client.options(
        "/api/favorites",
        headers={"Origin": "http://localhost:5000", "Access-Control-Request-Method": "GET"},
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"


async def test_openapi_documents_envelope(client):
    res = await client.get("/openapi.json")
    assert res.status_code == 200
    assert "ApiResponse" in res.json()["components"]["schemas"]


def test_routes_listed_after_late_registration(app):
    @app.get("/late")
    async def late():
        return {}

    assert ("GET", "/late") in list_routes(app)


async def test_trailing_slash_reaches_same_handler(client):
    for method, path in [
        ("GET", "/api/favorites/"),
        ("POST", "/api/reviews/"),
        ("PUT", "/api/admin/sellers/9/audit/"),
        ("GET", "/health/"),
    ]:
        res = await client.request(method, path)
        assert res.status_code == 200, path
        assert res.json()["success"] is True


async def test_trailing_slash_on_unknown_route_is_404_not_redirect(client):
    res = await client.get("/api/nowhere/")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found", "success": False}
