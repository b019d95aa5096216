"""
Pydantic schema for the response envelope shared by all routes.

The envelope carries a human readable ``message``, a ``success`` flag
and an optional ``data`` member.  Collection endpoints return a list,
single-object endpoints return ``null`` and mutations omit ``data``
entirely.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Schema for every JSON body returned by the API."""

    message: str = Field(..., example="Favorites retrieved successfully")
    success: bool = Field(..., example=True)
    data: Optional[Any] = Field(None, description="Payload; absent for mutations")
