"""
Route table for the seller order module.

Routes are bound directly to ``OrderController`` methods.  The list
route has an empty path so it answers on the bare module prefix.
``/stats`` and ``/batch/ship`` are registered before the
``/{order_id}`` routes so they are not captured as identifiers.
"""

from fastapi import APIRouter

from marketplace_api.app.schemas.response import ApiResponse

from .controller import OrderController

ROUTES = [
    ("GET", "", OrderController.get_order_list, "List orders"),
    ("GET", "/stats", OrderController.get_order_stats, "Order statistics"),
    ("POST", "/batch/ship", OrderController.batch_ship_orders, "Ship several orders"),
    ("GET", "/{order_id}", OrderController.get_order_detail, "Get an order"),
    ("PUT", "/{order_id}/status", OrderController.update_order_status, "Update order status"),
    ("PUT", "/{order_id}/ship", OrderController.ship_order, "Ship an order"),
    ("PUT", "/{order_id}/cancel", OrderController.cancel_order, "Cancel an order"),
    ("PUT", "/{order_id}/refund/approve", OrderController.approve_refund, "Approve a refund"),
    ("PUT", "/{order_id}/refund/reject", OrderController.reject_refund, "Reject a refund"),
]


def build_router() -> APIRouter:
    router = APIRouter()
    for method, path, endpoint, summary in ROUTES:
        router.add_api_route(
            path,
            endpoint,
            methods=[method],
            response_model=ApiResponse,
            summary=summary,
        )
    return router


router = build_router()
