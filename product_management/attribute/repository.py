"""Attribute repository for database operations.

Provides read access to locales, attribute definitions and translated
attribute values, including the substring search behind suggestions.
"""

from collections.abc import Sequence

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, selectinload

from product_management.attribute.models import (
    AttributeModel,
    AttributeValueModel,
    AttributeValueTranslationModel,
    LocaleModel,
)

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so they match literally.

    Args:
        text: Raw search text.

    Returns:
        Text safe to embed in a LIKE pattern.
    """
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class LocaleRepository:
    """Repository for locale lookups."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_by_id(self, id_locale: int) -> LocaleModel | None:
        """Get locale by ID.

        Args:
            id_locale: Locale ID.

        Returns:
            Locale if found, None otherwise.
        """
        return await self.session.get(LocaleModel, id_locale)

    async def find_active(self) -> Sequence[LocaleModel]:
        """Get active locales ordered by name.

        Returns:
            Sequence of active locales.
        """
        query = (
            select(LocaleModel)
            .where(LocaleModel.is_active.is_(True))
            .order_by(LocaleModel.locale_name)
        )
        result = await self.session.execute(query)
        return result.scalars().all()


class AttributeRepository:
    """Repository for attribute definition and value database operations.

    Example usage:
        async with get_session() as session:
            repo = AttributeRepository(session)
            rows = await repo.find_value_translations(
                id_attribute=1,
                id_locale=46,
                search="bl",
                limit=10,
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_by_id(
        self,
        id_attribute: int,
        include_values: bool = True,
    ) -> AttributeModel | None:
        """Get attribute definition by ID.

        Args:
            id_attribute: Attribute ID.
            include_values: Whether to eagerly load values.

        Returns:
            Attribute if found, None otherwise.
        """
        query = select(AttributeModel).where(AttributeModel.id == id_attribute)

        if include_values:
            query = query.options(selectinload(AttributeModel.values))

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_all(self) -> Sequence[AttributeModel]:
        """Get all attribute definitions with their values, ordered by key.

        Returns:
            Sequence of attribute definitions.
        """
        query = (
            select(AttributeModel)
            .options(selectinload(AttributeModel.values))
            .order_by(AttributeModel.key)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def find_value_translations(
        self,
        id_attribute: int,
        id_locale: int,
        search: str = "",
        limit: int = 10,
        offset: int = 0,
    ) -> Sequence[AttributeValueTranslationModel]:
        """Find translated values of an attribute in one locale.

        Matching is a case-insensitive substring match on the translation.
        Results are ordered by lower-cased translation, then by value ID,
        so offset pagination is deterministic.

        Args:
            id_attribute: Attribute ID.
            id_locale: Locale ID.
            search: Substring to match; empty matches everything.
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of translations with their attribute value loaded.
        """
        query = (
            select(AttributeValueTranslationModel)
            .join(AttributeValueTranslationModel.attribute_value)
            .where(self._translation_conditions(id_attribute, id_locale, search))
            .options(contains_eager(AttributeValueTranslationModel.attribute_value))
            .order_by(
                func.lower(AttributeValueTranslationModel.translation).asc(),
                AttributeValueTranslationModel.fk_attribute_value.asc(),
            )
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count_value_translations(
        self,
        id_attribute: int,
        id_locale: int,
        search: str = "",
    ) -> int:
        """Count translated values matching a search.

        Args:
            id_attribute: Attribute ID.
            id_locale: Locale ID.
            search: Substring to match; empty matches everything.

        Returns:
            Count of matching translations.
        """
        query = (
            select(func.count(AttributeValueTranslationModel.id))
            .join(AttributeValueTranslationModel.attribute_value)
            .where(self._translation_conditions(id_attribute, id_locale, search))
        )

        result = await self.session.execute(query)
        return result.scalar_one()

    def _translation_conditions(self, id_attribute: int, id_locale: int, search: str):
        """Build the WHERE clause shared by find and count."""
        conditions = [
            AttributeValueModel.fk_attribute == id_attribute,
            AttributeValueTranslationModel.fk_locale == id_locale,
        ]

        if search:
            conditions.append(
                AttributeValueTranslationModel.translation.ilike(
                    f"%{escape_like(search)}%", escape=LIKE_ESCAPE
                )
            )

        return and_(*conditions)
