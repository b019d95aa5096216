"""
Business logic for the seller order module.

Every state transition (status change, shipment, cancellation, refund
decision) is recorded through ``OrderRepository.save_changes``.
"""

from typing import Any, List, Optional

from .repository import OrderRepository


class OrderService:
    """Seller-side order operations."""

    @classmethod
    async def list_orders(cls, filters: Optional[dict] = None) -> List[dict]:
        return await OrderRepository.find_all(filters)

    @classmethod
    async def get_stats(cls) -> Optional[dict]:
        return await OrderRepository.aggregate_stats()

    @classmethod
    async def get_order(cls, order_id: str) -> Optional[dict]:
        return await OrderRepository.find_by_id(order_id)

    @classmethod
    async def update_status(cls, order_id: str, payload: Any) -> None:
        await OrderRepository.save_changes(order_id, {"action": "status", "payload": payload})

    @classmethod
    async def ship(cls, order_id: str, payload: Any) -> None:
        await OrderRepository.save_changes(order_id, {"action": "ship", "payload": payload})

    @classmethod
    async def cancel(cls, order_id: str, payload: Any) -> None:
        await OrderRepository.save_changes(order_id, {"action": "cancel", "payload": payload})

    @classmethod
    async def decide_refund(cls, order_id: str, approved: bool, payload: Any) -> None:
        action = "refund_approve" if approved else "refund_reject"
        await OrderRepository.save_changes(order_id, {"action": action, "payload": payload})

    @classmethod
    async def batch_ship(cls, payload: Any) -> None:
        await OrderRepository.save_changes("batch", {"action": "ship", "payload": payload})
