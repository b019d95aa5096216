"""
Routing helpers shared by the application and the command line.

``list_routes`` reports what an application serves from its OpenAPI
document, which lists every operation however the framework stores
included routers internally.

``TrailingSlashMiddleware`` lets ``/api/favorites/`` reach the same
handler as ``/api/favorites`` instead of answering with a redirect.
"""

from typing import List, Tuple

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "head", "options")


def list_routes(app: FastAPI) -> List[Tuple[str, str]]:
    """Return ``(METHOD, path)`` pairs in registration order.

    The schema is rebuilt on every call so routes added after the first
    ``/openapi.json`` request are included.
    """
    schema = get_openapi(title=app.title, version=app.version, routes=app.routes)
    pairs: List[Tuple[str, str]] = []
    for path, operations in schema.get("paths", {}).items():
        for method in HTTP_METHODS:
            if method in operations:
                pairs.append((method.upper(), path))
    return pairs


class TrailingSlashMiddleware:
    """ASGI middleware stripping a trailing ``/`` from request paths."""

    def __init__(self, app) -> None:
        self.app = app

    async def __call__(self, scope, receive, send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope)
                scope["path"] = path.rstrip("/") or "/"
                raw_path = scope.get("raw_path")
                if raw_path:
                    scope["raw_path"] = raw_path.rstrip(b"/") or b"/"
        await self.app(scope, receive, send)
