"""Tests for the product abstract repository."""

import pytest
from sqlalchemy import select

from product_management.domain.entities import ProductAbstract
from product_management.infrastructure.seed import DEMO_PRODUCT
from product_management.product.models import ProductAbstractModel
from product_management.product.repository import ProductAbstractRepository


async def demo_product_id(session) -> int:
    result = await session.execute(
        select(ProductAbstractModel.id).where(ProductAbstractModel.sku == DEMO_PRODUCT["sku"])
    )
    return result.scalar_one()


class TestProductAbstractRepository:
    """Tests for loading product abstracts."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, session, demo_data) -> None:
        id_product_abstract = await demo_product_id(session)

        product = await ProductAbstractRepository(session).get_by_id(id_product_abstract)

        assert isinstance(product, ProductAbstract)
        assert product.sku == "SHOE-001"
        assert product.attributes == {"color": "black", "size": "42"}

    @pytest.mark.asyncio
    async def test_localized_attributes_keyed_by_locale(self, session, demo_data) -> None:
        id_product_abstract = await demo_product_id(session)

        product = await ProductAbstractRepository(session).get_by_id(id_product_abstract)

        assert set(product.localized_attributes) == {"de_DE", "en_US"}
        assert product.get_localized("de_DE").name == "Laufschuh"
        assert product.get_localized("en_US").description == "Lightweight running shoe"

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, session, demo_data) -> None:
        assert await ProductAbstractRepository(session).get_by_id(9999) is None
