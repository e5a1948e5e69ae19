"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from product_management.api.attributes import router as attributes_router
from product_management.api.health import router as health_router
from product_management.api.product_forms import router as product_forms_router

__all__ = [
    "attributes_router",
    "health_router",
    "product_forms_router",
]
