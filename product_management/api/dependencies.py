"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from product_management.application.product_form_service import (
    ProductFormService,
    get_product_form_service,
)
from product_management.infrastructure.database import get_session


def get_service(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductFormService:
    """Get product form service bound to the request session and ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_product_form_service(session, request_id=request_id)
