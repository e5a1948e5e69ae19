"""Attribute reader.

Read-only access to attribute definitions and the paginated, locale-scoped
value suggestions used by autocomplete inputs in the product form.
"""

import structlog

from product_management.attribute.repository import AttributeRepository, LocaleRepository
from product_management.domain.exceptions import (
    AttributeNotFoundError,
    InvalidArgumentError,
    LocaleNotFoundError,
)
from product_management.domain.value_objects import (
    AttributeDefinition,
    AttributeValueTranslation,
)
from product_management.infrastructure.config import settings

logger = structlog.get_logger()


class AttributeReader:
    """Reads attribute definitions and suggests attribute values.

    Example usage:
        async with async_session_factory() as session:
            reader = AttributeReader(
                AttributeRepository(session),
                LocaleRepository(session),
            )
            page = await reader.get_attribute_value_suggestions(1, 46, "bl")
    """

    def __init__(
        self,
        attribute_repository: AttributeRepository,
        locale_repository: LocaleRepository,
        max_limit: int | None = None,
    ) -> None:
        """Initialize reader.

        Args:
            attribute_repository: Attribute storage.
            locale_repository: Locale storage.
            max_limit: Largest accepted page size; defaults to settings.
        """
        self.attribute_repository = attribute_repository
        self.locale_repository = locale_repository
        self.max_limit = max_limit or settings.suggestion_max_limit

    async def get_attribute_definitions(self) -> list[AttributeDefinition]:
        """Get all attribute definitions ordered by key.

        Returns:
            Attribute definitions with their permissible values.
        """
        attributes = await self.attribute_repository.find_all()
        return [attribute.to_domain() for attribute in attributes]

    async def get_attribute_value_suggestions(
        self,
        id_attribute: int,
        id_locale: int,
        search_text: str = "",
        offset: int = 0,
        limit: int = 10,
    ) -> list[AttributeValueTranslation]:
        """Get a page of translated values matching the search text.

        Args:
            id_attribute: Attribute definition ID.
            id_locale: Locale ID.
            search_text: Case-insensitive substring; empty matches all.
            offset: Number of matches to skip.
            limit: Maximum number of matches to return.

        Returns:
            At most ``limit`` translations, ordered by translation text.

        Raises:
            InvalidArgumentError: If offset or limit is out of range.
            AttributeNotFoundError: If the attribute does not exist.
            LocaleNotFoundError: If the locale does not exist.
        """
        self._validate_pagination(offset, limit)
        search = await self._prepare_search(id_attribute, id_locale, search_text)

        translations = await self.attribute_repository.find_value_translations(
            id_attribute=id_attribute,
            id_locale=id_locale,
            search=search,
            limit=limit,
            offset=offset,
        )

        logger.debug(
            "Attribute value suggestions",
            id_attribute=id_attribute,
            id_locale=id_locale,
            search=search,
            offset=offset,
            limit=limit,
            result_count=len(translations),
        )

        return [translation.to_domain() for translation in translations]

    async def count_attribute_value_suggestions(
        self,
        id_attribute: int,
        id_locale: int,
        search_text: str = "",
    ) -> int:
        """Count all translated values matching the search text.

        Args:
            id_attribute: Attribute definition ID.
            id_locale: Locale ID.
            search_text: Case-insensitive substring; empty matches all.

        Returns:
            Total number of matches across all pages.
        """
        search = await self._prepare_search(id_attribute, id_locale, search_text)
        return await self.attribute_repository.count_value_translations(
            id_attribute=id_attribute,
            id_locale=id_locale,
            search=search,
        )

    def _validate_pagination(self, offset: int, limit: int) -> None:
        if offset < 0:
            raise InvalidArgumentError("offset", offset, "must not be negative")
        if limit <= 0:
            raise InvalidArgumentError("limit", limit, "must be positive")
        if limit > self.max_limit:
            raise InvalidArgumentError("limit", limit, f"must not exceed {self.max_limit}")

    async def _prepare_search(self, id_attribute: int, id_locale: int, search_text: str) -> str:
        """Check both references exist and normalize the search text."""
        attribute = await self.attribute_repository.get_by_id(id_attribute, include_values=False)
        if attribute is None:
            raise AttributeNotFoundError(id_attribute)

        locale = await self.locale_repository.get_by_id(id_locale)
        if locale is None:
            raise LocaleNotFoundError(id_locale)

        return (search_text or "").strip()
