"""
Main entrypoint for the Marketplace API.

This module assembles the FastAPI application, sets up logging,
error handling and middleware, and mounts every API module.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn marketplace_api.app.main:app --reload --port 3000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.modules import get_modules
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import log_requests, setup_logging
from .core.modules import mount_modules
from .core.responses import success_response
from .core.routing import TrailingSlashMiddleware
from .schemas.response import ApiResponse

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to build the app from.  Defaults to the
        module-level settings read from the environment at import.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that module registration below is visible.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.middleware("http")(log_requests)
    # Outermost, so routing and the access log both see the stripped path.
    app.add_middleware(TrailingSlashMiddleware)
    register_error_handlers(app)

    @app.get("/health", response_model=ApiResponse, tags=["health"])
    async def health() -> JSONResponse:
        return success_response("OK")

    mount_modules(app, get_modules())
    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
