"""
Every mountable API module, in mount order.

To expose a new feature, build an ``ApiModule`` for it and append it
here; ``create_app`` mounts the list as is.
"""

from typing import List

from marketplace_api.app.core.modules import ApiModule

from .admin import sellers
from .buyer import favorites, reviews
from .seller import orders

API_PREFIX = "/api"
ADMIN_PREFIX = "/api/admin"


def get_modules() -> List[ApiModule]:
    return [
        ApiModule(name="favorites", router=favorites.router, prefix=API_PREFIX, tags=["favorites"]),
        ApiModule(name="reviews", router=reviews.router, prefix=API_PREFIX, tags=["reviews"]),
        ApiModule(name="sellers", router=sellers.router, prefix=ADMIN_PREFIX, tags=["sellers"]),
        orders.module,
    ]
