"""
API endpoints for buyer favorites.

Buyers can bookmark products, list their bookmarks and remove one.
Every endpoint accepts any input and answers with the standard
envelope; failures inside the service are logged and reported as a
generic HTTP 500.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from marketplace_api.app.core.responses import error_response, read_payload, success_response
from marketplace_api.app.schemas.response import ApiResponse
from marketplace_api.app.services.favorite_service import FavoriteService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/favorites", response_model=ApiResponse, summary="Add a favorite")
async def add_favorite(payload: Any = Depends(read_payload)) -> JSONResponse:
    logger.info("Adding favorite")
    try:
        await FavoriteService.add_favorite(payload)
        return success_response("Favorite added successfully")
    except Exception as e:
        logger.error("Failed to add favorite: %s", e)
        return error_response("Failed to add favorite")


@router.get("/favorites", response_model=ApiResponse, summary="List favorites")
async def list_favorites() -> JSONResponse:
    """Return the current buyer's favorites."""
    logger.info("Listing favorites")
    try:
        favorites = await FavoriteService.list_favorites()
        return success_response("Favorites retrieved successfully", data=favorites)
    except Exception as e:
        logger.error("Failed to retrieve favorites: %s", e)
        return error_response("Failed to retrieve favorites")


@router.delete("/favorites/{favorite_id}", response_model=ApiResponse, summary="Remove a favorite")
async def remove_favorite(favorite_id: str) -> JSONResponse:
    logger.info("Removing favorite %s", favorite_id)
    try:
        await FavoriteService.remove_favorite(favorite_id)
        return success_response("Favorite removed successfully")
    except Exception as e:
        logger.error("Failed to remove favorite %s: %s", favorite_id, e)
        return error_response("Failed to remove favorite")
