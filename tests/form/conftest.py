"""Fixtures for product form tests."""

import pytest

from product_management.domain.value_objects import (
    AttributeDefinition,
    AttributeInputType,
    Locale,
)
from product_management.form.assembler import ProductFormOptions


@pytest.fixture
def locales() -> list[Locale]:
    return [Locale(id=1, locale_name="de_DE"), Locale(id=2, locale_name="en_US")]


@pytest.fixture
def attribute_definitions() -> list[AttributeDefinition]:
    return [
        AttributeDefinition(
            id=1,
            key="color",
            label="Color",
            input_type=AttributeInputType.SELECT,
            allow_input=False,
            values=("black", "white"),
        ),
        AttributeDefinition(
            id=2,
            key="size",
            input_type=AttributeInputType.TEXT,
            allow_input=True,
        ),
    ]


@pytest.fixture
def options(locales, attribute_definitions) -> ProductFormOptions:
    return ProductFormOptions(
        attributes=attribute_definitions,
        attribute_values=attribute_definitions,
        locales=locales,
    )


@pytest.fixture
def valid_data() -> dict:
    """A submission that passes every validation group."""
    return {
        "sku": "SHOE-001",
        "localized_attributes": {
            "de_DE": {"name": "Laufschuh", "description": None},
            "en_US": {"name": "Running Shoe", "description": "Light"},
        },
        "attributes": {"color": {"value": True}, "size": {"value": False}},
        "attribute_values": {"color": {"value": "black"}, "size": {"value": ""}},
    }
