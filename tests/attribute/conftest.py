"""Fixtures for attribute tests."""

from dataclasses import dataclass

import pytest_asyncio

from product_management.attribute.models import (
    AttributeModel,
    AttributeValueModel,
    AttributeValueTranslationModel,
    LocaleModel,
)

COLOR_TRANSLATIONS = {
    "black": ("Schwarz", "Black"),
    "blue": ("Blau", "Blue"),
    "light_blue": ("Hellblau", "light blue"),
    "navy": ("Marineblau", "Navy Blue"),
    "red": ("Rot", "Red"),
    "white": ("Weiß", "White"),
    "percent": ("100% Blau", None),
    "underscore": ("Blau_Grün", None),
}


@dataclass
class AttributeCatalog:
    """IDs of the rows created for attribute tests."""

    de_DE: int
    en_US: int
    fr_FR: int
    color: int
    material: int


@pytest_asyncio.fixture
async def attribute_catalog(session) -> AttributeCatalog:
    """Color with German/English translations, material without any values.

    fr_FR exists but has no translations.
    """
    de = LocaleModel(locale_name="de_DE")
    en = LocaleModel(locale_name="en_US")
    fr = LocaleModel(locale_name="fr_FR")
    inactive = LocaleModel(locale_name="it_IT", is_active=False)
    session.add_all([de, en, fr, inactive])
    await session.flush()

    color = AttributeModel(key="color", label="Color", input_type="select", allow_input=False)
    for value, (german, english) in COLOR_TRANSLATIONS.items():
        attribute_value = AttributeValueModel(value=value)
        attribute_value.translations.append(
            AttributeValueTranslationModel(fk_locale=de.id, translation=german)
        )
        if english is not None:
            attribute_value.translations.append(
                AttributeValueTranslationModel(fk_locale=en.id, translation=english)
            )
        color.values.append(attribute_value)

    material = AttributeModel(key="material", input_type="text", allow_input=True)
    session.add_all([color, material])
    await session.commit()

    catalog = AttributeCatalog(
        de_DE=de.id,
        en_US=en.id,
        fr_FR=fr.id,
        color=color.id,
        material=material.id,
    )
    session.expunge_all()
    return catalog
