"""
Module registration.

A *module* is a router together with the prefix it is served under and,
optionally, the objects that implement it (controller, service,
repository).  ``register_module`` attaches a router to the host
application; ``ApiModule`` bundles everything a feature package
exports so the application can mount it without knowing its internals.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from fastapi import APIRouter, FastAPI

logger = logging.getLogger(__name__)


def _mounted(app: FastAPI) -> set:
    """(prefix, router id) pairs already registered on ``app``."""
    if not hasattr(app.state, "mounted_modules"):
        app.state.mounted_modules = set()
    return app.state.mounted_modules


def register_module(
    app: FastAPI,
    router: APIRouter,
    prefix: str,
    tags: Optional[List[str]] = None,
) -> FastAPI:
    """Mount ``router`` on ``app`` under ``prefix``.

    Returns the application so calls can be chained.

    Raises
    ------
    ValueError
        If ``prefix`` is empty or does not start with ``/``, or if the
        same router is already mounted at ``prefix`` on this application.
    """
    if not prefix or not prefix.startswith("/"):
        raise ValueError(f"Module prefix must start with '/': {prefix!r}")
    prefix = prefix.rstrip("/") or "/"
    mounted = _mounted(app)
    key = (prefix, id(router))
    if key in mounted:
        raise ValueError(f"Router already mounted at {prefix}")
    app.include_router(router, prefix="" if prefix == "/" else prefix, tags=tags)
    mounted.add(key)
    logger.info("Mounted %d route(s) at %s", len(router.routes), prefix)
    return app


@dataclass
class ApiModule:
    """A mountable feature module.

    ``exports`` holds the module's implementation objects by reference
    (e.g. ``{"controller": OrderController, ...}``); nothing in the
    registration path depends on them.
    """

    name: str
    router: APIRouter
    prefix: str
    tags: List[str] = field(default_factory=list)
    exports: Dict[str, Any] = field(default_factory=dict)

    def register(self, app: FastAPI) -> FastAPI:
        return register_module(app, self.router, self.prefix, tags=self.tags or None)

    def __getattr__(self, item: str) -> Any:
        exports = self.__dict__.get("exports", {})
        if item in exports:
            return exports[item]
        raise AttributeError(f"{type(self).__name__} {self.__dict__.get('name')!r} has no export {item!r}")


def mount_modules(app: FastAPI, modules: Iterable[ApiModule]) -> FastAPI:
    """Register ``modules`` on ``app`` in order."""
    for module in modules:
        module.register(app)
    return app
