"""
Business logic for buyer favorites.

Favorites are products a buyer has bookmarked.  Nothing is stored yet:
adding and removing are accepted unconditionally and listing always
returns an empty collection.
"""

import logging
from typing import Any, List

logger = logging.getLogger(__name__)


class FavoriteService:
    """Service for a buyer's favorite products."""

    @classmethod
    async def add_favorite(cls, payload: Any) -> None:
        logger.debug("add_favorite payload=%r", payload)

    @classmethod
    async def list_favorites(cls) -> List[dict]:
        return []

    @classmethod
    async def remove_favorite(cls, favorite_id: str) -> None:
        logger.debug("remove_favorite id=%s", favorite_id)
