"""Tests for domain value objects and entities."""

import pytest

from product_management.domain import (
    AttributeDefinition,
    AttributeInputType,
    AttributeValueTranslation,
    Locale,
    LocalizedAttributes,
    ProductAbstract,
)


class TestAttributeDefinition:
    """Tests for AttributeDefinition value object."""

    def test_closed_attribute_permits_only_its_values(self) -> None:
        """Closed attributes reject values outside their set."""
        color = AttributeDefinition(
            id=1, key="color", allow_input=False, values=("red", "blue")
        )
        assert color.permits("red")
        assert not color.permits("green")

    def test_open_attribute_permits_anything(self) -> None:
        """Open attributes accept free input."""
        material = AttributeDefinition(id=2, key="material", allow_input=True, values=("cotton",))
        assert material.permits("linen")

    def test_display_label_falls_back_to_key(self) -> None:
        """Label defaults to the attribute key."""
        assert AttributeDefinition(id=1, key="color").display_label == "color"
        assert AttributeDefinition(id=1, key="color", label="Colour").display_label == "Colour"

    @pytest.mark.parametrize(
        ("input_type", "expected"),
        [
            (AttributeInputType.MULTISELECT, True),
            (AttributeInputType.SELECT, False),
            (AttributeInputType.TEXT, False),
        ],
    )
    def test_is_multiple(self, input_type: AttributeInputType, expected: bool) -> None:
        """Only multiselect attributes take several values."""
        assert AttributeDefinition(id=1, key="k", input_type=input_type).is_multiple is expected

    def test_is_immutable(self) -> None:
        """Attribute definitions cannot be modified."""
        color = AttributeDefinition(id=1, key="color")
        with pytest.raises(AttributeError):
            color.key = "size"  # type: ignore[misc]


class TestAttributeValueTranslation:
    """Tests for AttributeValueTranslation value object."""

    def test_equal_by_value(self) -> None:
        """Translations with the same fields are equal."""
        t1 = AttributeValueTranslation(1, 2, 3, "red", "Rot")
        t2 = AttributeValueTranslation(1, 2, 3, "red", "Rot")
        assert t1 == t2

    def test_to_dict(self) -> None:
        """Translation converts to a plain dictionary."""
        translation = AttributeValueTranslation(
            id_attribute=1, id_locale=2, id_attribute_value=3, value="red", translation="Rot"
        )
        assert translation.to_dict() == {
            "id_attribute": 1,
            "id_locale": 2,
            "id_attribute_value": 3,
            "value": "red",
            "translation": "Rot",
        }


class TestLocale:
    """Tests for Locale value object."""

    def test_active_by_default(self) -> None:
        assert Locale(id=1, locale_name="de_DE").is_active


class TestProductAbstract:
    """Tests for ProductAbstract entity."""

    @pytest.fixture
    def product(self) -> ProductAbstract:
        return ProductAbstract(
            id=7,
            sku="SHOE-001",
            attributes={"color": "black"},
            localized_attributes={
                "de_DE": LocalizedAttributes(locale_name="de_DE", name="Laufschuh"),
            },
        )

    def test_equality_by_identity(self, product: ProductAbstract) -> None:
        """Products with the same id are equal regardless of fields."""
        other = ProductAbstract(id=7, sku="OTHER")
        assert product == other
        assert hash(product) == hash(other)
        assert product != ProductAbstract(id=8, sku="SHOE-001")

    def test_get_localized(self, product: ProductAbstract) -> None:
        """Localized fields are looked up by locale name."""
        assert product.get_localized("de_DE").name == "Laufschuh"
        assert product.get_localized("en_US") is None

    def test_to_dict(self, product: ProductAbstract) -> None:
        """Product flattens into a plain dictionary."""
        assert product.to_dict() == {
            "id": 7,
            "sku": "SHOE-001",
            "attributes": {"color": "black"},
            "localized_attributes": {
                "de_DE": {"name": "Laufschuh", "description": None, "attributes": {}},
            },
        }

    def test_to_dict_copies_attributes(self, product: ProductAbstract) -> None:
        """Mutating the flattened dict leaves the entity untouched."""
        data = product.to_dict()
        data["attributes"]["color"] = "white"
        assert product.attributes["color"] == "black"
