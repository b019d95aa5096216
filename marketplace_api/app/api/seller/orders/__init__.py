"""
Seller order module.

Aggregates the module's layers so callers can reach them through one
import::

    from marketplace_api.app.api.seller import orders
    orders.module.register(app)       # mount at /api/seller/orders
    orders.module.service             # OrderService

``module`` is the ``ApiModule`` the application mounts.
"""

from marketplace_api.app.core.modules import ApiModule

from .controller import OrderController
from .repository import OrderRepository
from .routes import router
from .service import OrderService

PREFIX = "/api/seller/orders"

module = ApiModule(
    name="seller_orders",
    router=router,
    prefix=PREFIX,
    tags=["seller orders"],
    exports={
        "controller": OrderController,
        "service": OrderService,
        "repository": OrderRepository,
    },
)

__all__ = ["OrderController", "OrderRepository", "OrderService", "PREFIX", "module", "router"]
