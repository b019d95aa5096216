"""
HTTP controller for the seller order module.

Each method is an endpoint function: it logs the request, delegates to
``OrderService`` and wraps the result in the response envelope.  Any
exception raised below is logged and turned into a generic HTTP 500.
"""

import logging
from typing import Any

from fastapi import Depends
from fastapi.responses import JSONResponse

from marketplace_api.app.core.responses import error_response, read_payload, success_response

from .service import OrderService

logger = logging.getLogger(__name__)


class OrderController:
    """Endpoint functions for ``/api/seller/orders``."""

    @classmethod
    async def get_order_list(cls) -> JSONResponse:
        logger.info("Seller listing orders")
        try:
            orders = await OrderService.list_orders()
            return success_response("Orders retrieved successfully", data=orders)
        except Exception as e:
            logger.error("Failed to retrieve orders: %s", e)
            return error_response("Failed to retrieve orders")

    @classmethod
    async def get_order_stats(cls) -> JSONResponse:
        logger.info("Seller fetching order statistics")
        try:
            stats = await OrderService.get_stats()
            return success_response("Order statistics retrieved successfully", data=stats)
        except Exception as e:
            logger.error("Failed to retrieve order statistics: %s", e)
            return error_response("Failed to retrieve order statistics")

    @classmethod
    async def get_order_detail(cls, order_id: str) -> JSONResponse:
        logger.info("Seller fetching order %s", order_id)
        try:
            order = await OrderService.get_order(order_id)
            return success_response("Order retrieved successfully", data=order)
        except Exception as e:
            logger.error("Failed to retrieve order %s: %s", order_id, e)
            return error_response("Failed to retrieve order")

    @classmethod
    async def update_order_status(
        cls, order_id: str, payload: Any = Depends(read_payload)
    ) -> JSONResponse:
        logger.info("Seller updating status of order %s", order_id)
        try:
            await OrderService.update_status(order_id, payload)
            return success_response("Order status updated successfully")
        except Exception as e:
            logger.error("Failed to update status of order %s: %s", order_id, e)
            return error_response("Failed to update order status")

    @classmethod
    async def ship_order(cls, order_id: str, payload: Any = Depends(read_payload)) -> JSONResponse:
        logger.info("Seller shipping order %s", order_id)
        try:
            await OrderService.ship(order_id, payload)
            return success_response("Order shipped successfully")
        except Exception as e:
            logger.error("Failed to ship order %s: %s", order_id, e)
            return error_response("Failed to ship order")

    @classmethod
    async def cancel_order(cls, order_id: str, payload: Any = Depends(read_payload)) -> JSONResponse:
        logger.info("Seller cancelling order %s", order_id)
        try:
            await OrderService.cancel(order_id, payload)
            return success_response("Order cancelled successfully")
        except Exception as e:
            logger.error("Failed to cancel order %s: %s", order_id, e)
            return error_response("Failed to cancel order")

    @classmethod
    async def approve_refund(cls, order_id: str, payload: Any = Depends(read_payload)) -> JSONResponse:
        logger.info("Seller approving refund for order %s", order_id)
        try:
            await OrderService.decide_refund(order_id, True, payload)
            return success_response("Refund approved successfully")
        except Exception as e:
            logger.error("Failed to approve refund for order %s: %s", order_id, e)
            return error_response("Failed to approve refund")

    @classmethod
    async def reject_refund(cls, order_id: str, payload: Any = Depends(read_payload)) -> JSONResponse:
        logger.info("Seller rejecting refund for order %s", order_id)
        try:
            await OrderService.decide_refund(order_id, False, payload)
            return success_response("Refund rejected successfully")
        except Exception as e:
            logger.error("Failed to reject refund for order %s: %s", order_id, e)
            return error_response("Failed to reject refund")

    @classmethod
    async def batch_ship_orders(cls, payload: Any = Depends(read_payload)) -> JSONResponse:
        logger.info("Seller batch shipping orders")
        try:
            await OrderService.batch_ship(payload)
            return success_response("Orders shipped successfully")
        except Exception as e:
            logger.error("Failed to batch ship orders: %s", e)
            return error_response("Failed to ship orders")
