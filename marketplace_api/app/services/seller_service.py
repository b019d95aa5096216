"""
Business logic for seller management.

Administrators list sellers, inspect a single seller and record the
outcome of a seller's onboarding audit.
"""

import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class SellerService:
    """Service used by the admin seller-management endpoints."""

    @classmethod
    async def list_sellers(cls) -> List[dict]:
        return []

    @classmethod
    async def get_seller(cls, seller_id: str) -> Optional[dict]:
        return None

    @classmethod
    async def audit_seller(cls, seller_id: str, payload: Any) -> None:
        """Record an audit decision for ``seller_id``."""
        logger.debug("audit_seller id=%s payload=%r", seller_id, payload)
