"""Product form application service.

Orchestrates the product management use cases for one request:
- Preparing add and edit form data with the assembled form
- Validating a submitted form per validation group
- Serving attribute value suggestions for autocomplete inputs
"""

from collections.abc import Iterable
from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from product_management.attribute.reader import AttributeReader
from product_management.attribute.repository import AttributeRepository, LocaleRepository
from product_management.domain.exceptions import FormValidationError
from product_management.domain.value_objects import AttributeValueTranslation
from product_management.form.assembler import ProductFormAssembler
from product_management.form.data_provider import (
    FormData,
    FormDefaults,
    ProductFormAddDataProvider,
    ProductFormEditDataProvider,
)
from product_management.form.schema import Form, ValidationResult
from product_management.product.repository import ProductAbstractRepository

logger = structlog.get_logger()


# ============================================================================
# Service Result Types
# ============================================================================


@dataclass
class ProductFormView:
    """Initial form data together with the assembled form."""

    data: FormData
    form: Form


@dataclass
class SuggestionPage:
    """One page of attribute value suggestions."""

    items: list[AttributeValueTranslation]
    total: int
    offset: int
    limit: int

    @property
    def has_more(self) -> bool:
        """Check if there are matches after this page."""
        return self.offset + len(self.items) < self.total


# ============================================================================
# Product Form Service
# ============================================================================


class ProductFormService:
    """Service for the product management form and suggestions.

    Example usage:
        async with async_session_factory() as session:
            service = ProductFormService(session)
            view = await service.get_edit_form(42)
            await service.validate_submission(view.data)
    """

    def __init__(
        self,
        session: AsyncSession,
        assembler: ProductFormAssembler | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            assembler: Form assembler; a default one is created if omitted.
            request_id: Request ID for log correlation.
        """
        self.session = session
        self.assembler = assembler or ProductFormAssembler()
        self.attribute_reader = AttributeReader(
            AttributeRepository(session),
            LocaleRepository(session),
        )
        self.locale_repository = LocaleRepository(session)
        self.product_repository = ProductAbstractRepository(session)
        self._defaults: FormDefaults | None = None
        self._logger = logger.bind(request_id=request_id) if request_id else logger

    async def get_defaults(self) -> FormDefaults:
        """Load locales and attribute definitions once per service."""
        if self._defaults is None:
            locales = await self.locale_repository.find_active()
            definitions = await self.attribute_reader.get_attribute_definitions()
            self._defaults = FormDefaults(
                locales=[locale.to_domain() for locale in locales],
                attribute_definitions=definitions,
            )
        return self._defaults

    async def get_form(self) -> Form:
        """Assemble the product form from the current configuration."""
        defaults = await self.get_defaults()
        return self.assembler.build(defaults.get_options())

    async def get_add_form(self) -> ProductFormView:
        """Blank form data for creating a product."""
        provider = ProductFormAddDataProvider(await self.get_defaults())
        form = self.assembler.build(provider.get_options())
        return ProductFormView(data=provider.get_data(), form=form)

    async def get_edit_form(self, id_product_abstract: int) -> ProductFormView:
        """Form data for editing a product; blank if the product is missing."""
        provider = ProductFormEditDataProvider(await self.get_defaults(), self.product_repository)
        form = self.assembler.build(provider.get_options())
        data = await provider.get_data(id_product_abstract)
        return ProductFormView(data=data, form=form)

    async def validate_submission(
        self,
        data: FormData,
        groups: Iterable[str] | None = None,
    ) -> ValidationResult:
        """Validate submitted form data.

        Args:
            data: Submitted form data.
            groups: Validation groups to run; None runs all of them.

        Returns:
            The (successful) validation result.

        Raises:
            FormValidationError: If any rule in the selected groups fails.
        """
        form = await self.get_form()
        result = form.validate(data, groups)

        if not result.is_valid:
            self._logger.info(
                "Product form rejected",
                groups=result.groups,
                violations=[v.to_dict() for v in result.violations],
            )
            raise FormValidationError(result.violations)

        self._logger.info("Product form accepted", groups=result.groups, sku=data.get("sku"))
        return result

    async def suggest_attribute_values(
        self,
        id_attribute: int,
        id_locale: int,
        search_text: str = "",
        offset: int = 0,
        limit: int = 10,
    ) -> SuggestionPage:
        """Get a page of attribute value suggestions with the total count."""
        items = await self.attribute_reader.get_attribute_value_suggestions(
            id_attribute=id_attribute,
            id_locale=id_locale,
            search_text=search_text,
            offset=offset,
            limit=limit,
        )
        total = await self.attribute_reader.count_attribute_value_suggestions(
            id_attribute=id_attribute,
            id_locale=id_locale,
            search_text=search_text,
        )
        return SuggestionPage(items=items, total=total, offset=offset, limit=limit)


def get_product_form_service(
    session: AsyncSession,
    request_id: str | None = None,
) -> ProductFormService:
    """Get product form service instance.

    Args:
        session: Async SQLAlchemy session.
        request_id: Request ID for correlation.

    Returns:
        ProductFormService instance.
    """
    return ProductFormService(session, request_id=request_id)


__all__ = [
    "ProductFormService",
    "ProductFormView",
    "SuggestionPage",
    "get_product_form_service",
]
