"""Application services - use case orchestration."""

from product_management.application.product_form_service import (
    ProductFormService,
    ProductFormView,
    SuggestionPage,
    get_product_form_service,
)

__all__ = [
    "ProductFormService",
    "ProductFormView",
    "SuggestionPage",
    "get_product_form_service",
]
