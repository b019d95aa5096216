"""
Order persistence for the seller order module.

No order store is connected: lookups find nothing and writes are
accepted and dropped.
"""

import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class OrderRepository:
    """Data access for a seller's orders."""

    @classmethod
    async def find_all(cls, filters: Optional[dict] = None) -> List[dict]:
        return []

    @classmethod
    async def find_by_id(cls, order_id: str) -> Optional[dict]:
        return None

    @classmethod
    async def aggregate_stats(cls) -> Optional[dict]:
        return None

    @classmethod
    async def save_changes(cls, order_id: str, changes: Any) -> None:
        logger.debug("save_changes order=%s changes=%r", order_id, changes)
