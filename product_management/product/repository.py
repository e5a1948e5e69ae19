"""Product abstract repository.

The product lookup capability the edit form reads from.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from product_management.domain.entities import ProductAbstract
from product_management.product.models import (
    ProductAbstractLocalizedAttributesModel,
    ProductAbstractModel,
)


class ProductAbstractRepository:
    """Repository for ProductAbstract database reads."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_by_id(self, id_product_abstract: int) -> ProductAbstract | None:
        """Get product abstract by ID with its localized attributes.

        Args:
            id_product_abstract: Product abstract ID.

        Returns:
            Product abstract if found, None otherwise.
        """
        query = (
            select(ProductAbstractModel)
            .where(ProductAbstractModel.id == id_product_abstract)
            .options(
                selectinload(ProductAbstractModel.localized_attributes).selectinload(
                    ProductAbstractLocalizedAttributesModel.locale
                )
            )
        )

        result = await self.session.execute(query)
        model = result.scalar_one_or_none()
        return model.to_domain() if model is not None else None
