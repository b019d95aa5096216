"""
Helpers for building the response envelope.

Handlers never construct ``JSONResponse`` objects by hand; they call
``success_response`` on the happy path and ``error_response`` from
their ``except`` block so that every body has the same shape::

    {"message": "...", "success": true, "data": [...]}

``read_payload`` is a dependency that yields the request body as
parsed JSON, or ``None`` when the body is empty or not valid JSON.
"""

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse


def success_response(message: str, **payload: Any) -> JSONResponse:
    """Return an HTTP 200 envelope with ``success`` set.

    Keyword arguments (in practice only ``data``) are merged into the
    body, so omitting them omits the key.
    """
    body = {"message": message, "success": True}
    body.update(payload)
    return JSONResponse(status_code=status.HTTP_200_OK, content=body)


def error_response(
    message: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    headers: dict | None = None,
) -> JSONResponse:
    """Return an error envelope without a ``data`` member."""
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "success": False},
        headers=headers,
    )


async def read_payload(request: Request) -> Any:
    """Parse the request body as JSON, tolerating anything.

    Empty bodies, malformed JSON and JSON nested too deeply to decode
    all produce ``None`` instead of a validation error.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return await request.json()
    except (ValueError, RecursionError):
        return None
