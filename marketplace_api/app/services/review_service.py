"""
Business logic for product reviews.

Buyers review the items of orders they received.  The eligibility
check answers which items of an order can still be reviewed; with no
order data available it has nothing to report and returns ``None``.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for buyer reviews."""

    @classmethod
    async def create_review(cls, payload: Any) -> None:
        logger.debug("create_review payload=%r", payload)

    @classmethod
    async def get_eligibility(cls, order_id: str) -> Optional[dict]:
        """Return the reviewable items of ``order_id``, if known."""
        return None

    @classmethod
    async def update_review(cls, review_id: str, payload: Any) -> None:
        logger.debug("update_review id=%s payload=%r", review_id, payload)
