"""Attribute API endpoints.

Provides endpoints for attribute value autocomplete:
- GET /attributes/{id_attribute}/suggestions - paginated translated values
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from product_management.api.dependencies import get_service
from product_management.api.errors import domain_error_to_http
from product_management.api.schemas import (
    AttributeValueSuggestionSchema,
    AttributeValueSuggestionsResponse,
    ErrorResponse,
)
from product_management.application.product_form_service import ProductFormService
from product_management.domain.exceptions import DomainError
from product_management.infrastructure.config import settings

router = APIRouter(prefix="/attributes", tags=["Attributes"])


@router.get(
    "/{id_attribute}/suggestions",
    response_model=AttributeValueSuggestionsResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Suggest attribute values",
    description="Search translated values of an attribute in one locale.",
)
async def get_attribute_value_suggestions(
    id_attribute: int,
    service: Annotated[ProductFormService, Depends(get_service)],
    locale_id: int = Query(..., description="Locale of the translations"),
    q: str = Query(default="", max_length=255, description="Case-insensitive substring"),
    offset: int = Query(default=0, description="Number of matches to skip"),
    limit: int = Query(
        default=settings.suggestion_default_limit, description="Maximum matches to return"
    ),
) -> AttributeValueSuggestionsResponse:
    """Get a page of attribute value suggestions.

    Out-of-range offset/limit values are rejected by the reader with
    400 rather than clamped.

    Args:
        id_attribute: Attribute definition ID.
        service: Product form service.
        locale_id: Locale ID.
        q: Search text.
        offset: Page offset.
        limit: Page size.

    Returns:
        Page of suggestions.

    Raises:
        HTTPException: If the attribute or locale is unknown, or pagination is invalid.
    """
    try:
        page = await service.suggest_attribute_values(
            id_attribute=id_attribute,
            id_locale=locale_id,
            search_text=q,
            offset=offset,
            limit=limit,
        )
    except DomainError as e:
        raise domain_error_to_http(e) from e

    return AttributeValueSuggestionsResponse(
        items=[AttributeValueSuggestionSchema(**item.to_dict()) for item in page.items],
        total=page.total,
        offset=page.offset,
        limit=page.limit,
        has_more=page.has_more,
    )
