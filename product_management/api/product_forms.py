"""Product form API endpoints.

Provides endpoints backing the multi-step product create/edit screens:
- GET /product-forms/new - blank form data
- GET /product-forms/{id_product_abstract} - form data of an existing product
- POST /product-forms/validate - validate a submitted form per group
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from product_management.api.dependencies import get_service
from product_management.api.errors import domain_error_to_http
from product_management.api.schemas import (
    ErrorResponse,
    ProductFormData,
    ProductFormResponse,
    ProductFormValidationResponse,
)
from product_management.application.product_form_service import (
    ProductFormService,
    ProductFormView,
)
from product_management.domain.exceptions import DomainError

router = APIRouter(prefix="/product-forms", tags=["Product Forms"])


def view_to_response(view: ProductFormView) -> ProductFormResponse:
    """Convert ProductFormView to ProductFormResponse."""
    return ProductFormResponse(data=view.data, form=view.form.to_dict())


@router.get(
    "/new",
    response_model=ProductFormResponse,
    responses={401: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Get add form",
    description="Get blank form data and the form description for a new product.",
)
async def get_add_form(
    service: Annotated[ProductFormService, Depends(get_service)],
) -> ProductFormResponse:
    """Get blank product form data."""
    try:
        view = await service.get_add_form()
    except DomainError as e:
        raise domain_error_to_http(e) from e
    return view_to_response(view)


@router.post(
    "/validate",
    response_model=ProductFormValidationResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Validate product form",
    description=(
        "Validate submitted product form data. Pass one or more `groups` to "
        "validate a single step; omit it to validate the full submission."
    ),
)
async def validate_product_form(
    request: ProductFormData,
    service: Annotated[ProductFormService, Depends(get_service)],
    groups: Annotated[list[str] | None, Query(description="Validation groups to run")] = None,
) -> ProductFormValidationResponse:
    """Validate a submitted product form.

    Args:
        request: Submitted form data.
        service: Product form service.
        groups: Validation groups; all groups when omitted.

    Returns:
        Validation outcome.

    Raises:
        HTTPException: 422 with per-field violations when validation fails.
    """
    try:
        result = await service.validate_submission(request.model_dump(), groups)
    except DomainError as e:
        raise domain_error_to_http(e) from e

    return ProductFormValidationResponse(valid=result.is_valid, groups=result.groups)


@router.get(
    "/{id_product_abstract}",
    response_model=ProductFormResponse,
    responses={401: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Get edit form",
    description=(
        "Get form data of an existing product. Unknown products yield the "
        "blank form rather than 404."
    ),
)
async def get_edit_form(
    id_product_abstract: int,
    service: Annotated[ProductFormService, Depends(get_service)],
) -> ProductFormResponse:
    """Get product form data for editing."""
    try:
        view = await service.get_edit_form(id_product_abstract)
    except DomainError as e:
        raise domain_error_to_http(e) from e
    return view_to_response(view)
