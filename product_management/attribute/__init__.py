"""Product management attributes.

Attribute definitions, their values and per-locale translations, and
the reader that serves autocomplete suggestions over them.
"""

from product_management.attribute.models import (
    AttributeModel,
    AttributeValueModel,
    AttributeValueTranslationModel,
    LocaleModel,
)
from product_management.attribute.reader import AttributeReader
from product_management.attribute.repository import AttributeRepository, LocaleRepository

__all__ = [
    # Models
    "AttributeModel",
    "AttributeValueModel",
    "AttributeValueTranslationModel",
    "LocaleModel",
    # Repository
    "AttributeRepository",
    "LocaleRepository",
    # Reader
    "AttributeReader",
]
