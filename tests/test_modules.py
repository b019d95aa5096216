"""Module registration: mounting routers on a host application."""

import pytest
from fastapi import APIRouter, FastAPI
from httpx import ASGITransport, AsyncClient

from marketplace_api.app.api.modules import get_modules
from marketplace_api.app.core.modules import ApiModule, mount_modules, register_module
from marketplace_api.app.core.routing import list_routes


def _router():
    router = APIRouter()

    @router.get("/ping")
    async def ping():
        return {"pong": True}

    return router


async def test_register_module_mounts_under_prefix():
    app = FastAPI()
    returned = register_module(app, _router(), "/api/test")
    assert returned is app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        res = await c.get("/api/test/ping")
    assert res.status_code == 200
    assert res.json() == {"pong": True}


def test_trailing_slash_in_prefix_is_normalised():
    app = FastAPI()
    register_module(app, _router(), "/api/")
    assert ("GET", "/api/ping") in list_routes(app)


@pytest.mark.parametrize("prefix", ["", "api", "api/v1"])
def test_invalid_prefix_rejected(prefix):
    with pytest.raises(ValueError):
        register_module(FastAPI(), _router(), prefix)


def test_same_router_twice_at_same_prefix_rejected():
    app = FastAPI()
    router = _router()
    register_module(app, router, "/x")
    with pytest.raises(ValueError):
        register_module(app, router, "/x")


def test_different_routers_may_share_a_prefix():
    app = FastAPI()
    register_module(app, _router(), "/shared")
    register_module(app, _router(), "/shared")


def test_same_router_on_two_apps():
    router = _router()
    register_module(FastAPI(), router, "/x")
    register_module(FastAPI(), router, "/x")


def test_mount_modules_registers_in_order():
    app = FastAPI()
    modules = [
        ApiModule(name="a", router=_router(), prefix="/a", tags=["a"]),
        ApiModule(name="b", router=_router(), prefix="/b"),
    ]
    mount_modules(app, modules)
    paths = [path for _, path in list_routes(app) if path.endswith("/ping")]
    assert paths == ["/a/ping", "/b/ping"]


def test_application_module_table():
    prefixes = {m.name: m.prefix for m in get_modules()}
    assert prefixes == {
        "favorites": "/api",
        "reviews": "/api",
        "sellers": "/api/admin",
        "seller_orders": "/api/seller/orders",
    }
