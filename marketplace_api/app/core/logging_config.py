"""
Logging setup for the Marketplace API.

``setup_logging`` attaches a console handler (and, on request, a file
handler) to the root logger; records show time, level, logger name and
message.  ``log_requests`` is an HTTP middleware that writes one access
line per request through the same handlers.
"""

import logging
import time
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

from fastapi import Request, Response

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

access_logger = logging.getLogger("marketplace_api.access")


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send every ``marketplace_api`` log record to the console.

    Runs once per process: if the root logger already has a handler
    (a previous ``create_app`` call, or pytest's capture handler) the
    existing setup is left untouched.

    Parameters
    ----------
    level : str
        Name of the root level, e.g. ``"DEBUG"``.  Unrecognised names
        mean ``INFO``.
    logfile : Optional[str]
        When given, records are also appended to this file (UTF-8),
        relative to the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log method, path, status code and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    access_logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response
