"""Abstract products read by the product form."""

from product_management.product.models import (
    ProductAbstractLocalizedAttributesModel,
    ProductAbstractModel,
)
from product_management.product.repository import ProductAbstractRepository

__all__ = [
    "ProductAbstractLocalizedAttributesModel",
    "ProductAbstractModel",
    "ProductAbstractRepository",
]
