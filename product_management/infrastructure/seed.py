"""Demo reference data.

Locales, attributes with translated values and one product abstract,
used by the seeding script and the API tests.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from product_management.attribute.models import (
    AttributeModel,
    AttributeValueModel,
    AttributeValueTranslationModel,
    LocaleModel,
)
from product_management.domain.value_objects import AttributeInputType
from product_management.product.models import (
    ProductAbstractLocalizedAttributesModel,
    ProductAbstractModel,
)

DEMO_LOCALES = ["de_DE", "en_US"]

# key -> (input type, allow_input, {value: {locale: translation}})
DEMO_ATTRIBUTES: dict[str, tuple[AttributeInputType, bool, dict[str, dict[str, str]]]] = {
    "color": (
        AttributeInputType.SELECT,
        False,
        {
            "black": {"de_DE": "Schwarz", "en_US": "Black"},
            "blue": {"de_DE": "Blau", "en_US": "Blue"},
            "light_blue": {"de_DE": "Hellblau", "en_US": "Light Blue"},
            "navy": {"de_DE": "Marineblau", "en_US": "Navy"},
            "red": {"de_DE": "Rot", "en_US": "Red"},
            "white": {"de_DE": "Weiß", "en_US": "White"},
        },
    ),
    "material": (
        AttributeInputType.MULTISELECT,
        True,
        {
            "cotton": {"de_DE": "Baumwolle", "en_US": "Cotton"},
            "leather": {"de_DE": "Leder", "en_US": "Leather"},
            "wool": {"de_DE": "Wolle", "en_US": "Wool"},
        },
    ),
    "size": (
        AttributeInputType.SELECT,
        False,
        {
            "40": {"de_DE": "40", "en_US": "7"},
            "42": {"de_DE": "42", "en_US": "8.5"},
            "44": {"de_DE": "44", "en_US": "10"},
        },
    ),
}

DEMO_PRODUCT: dict[str, Any] = {
    "sku": "SHOE-001",
    "attributes": {"color": "black", "size": "42"},
    "localized_attributes": {
        "de_DE": {"name": "Laufschuh", "description": "Leichter Laufschuh"},
        "en_US": {"name": "Running Shoe", "description": "Lightweight running shoe"},
    },
}


async def seed_demo_data(session: AsyncSession) -> dict[str, int]:
    """Insert demo locales, attributes and product.

    Args:
        session: Async SQLAlchemy session; flushed, not committed.

    Returns:
        Counts of created rows.
    """
    locales = {name: LocaleModel(locale_name=name, is_active=True) for name in DEMO_LOCALES}
    session.add_all(locales.values())
    await session.flush()

    translation_count = 0
    for key, (input_type, allow_input, values) in DEMO_ATTRIBUTES.items():
        attribute = AttributeModel(
            key=key,
            label=key.replace("_", " ").title(),
            input_type=input_type.value,
            allow_input=allow_input,
        )
        for value, translations in values.items():
            attribute_value = AttributeValueModel(value=value)
            attribute_value.translations = [
                AttributeValueTranslationModel(
                    fk_locale=locales[locale_name].id,
                    translation=translation,
                )
                for locale_name, translation in translations.items()
            ]
            translation_count += len(translations)
            attribute.values.append(attribute_value)
        session.add(attribute)

    product = ProductAbstractModel(
        sku=DEMO_PRODUCT["sku"],
        attributes=dict(DEMO_PRODUCT["attributes"]),
        localized_attributes=[
            ProductAbstractLocalizedAttributesModel(
                fk_locale=locales[locale_name].id,
                name=fields["name"],
                description=fields["description"],
                attributes={},
            )
            for locale_name, fields in DEMO_PRODUCT["localized_attributes"].items()
        ],
    )
    session.add(product)
    await session.flush()

    return {
        "locales": len(locales),
        "attributes": len(DEMO_ATTRIBUTES),
        "translations": translation_count,
        "products": 1,
    }
