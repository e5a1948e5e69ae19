"""Domain entities.

``ProductAbstract`` is created and stored elsewhere; the product
management form only loads it and reshapes it into form data.
"""

from dataclasses import dataclass, field
from typing import Any

from product_management.domain.base import Entity


@dataclass
class LocalizedAttributes:
    """Per-locale product fields.

    Attributes:
        locale_name: Locale code these fields belong to.
        name: Localized product name.
        description: Localized product description.
        attributes: Localized attribute values keyed by attribute key.
    """

    locale_name: str
    name: str | None = None
    description: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to form-shaped dictionary (without the locale key).

        Returns:
            Dictionary representation.
        """
        return {
            "name": self.name,
            "description": self.description,
            "attributes": dict(self.attributes),
        }


@dataclass(eq=False)
class ProductAbstract(Entity[int]):
    """Abstract product as edited in the back-office.

    Attributes:
        id: Product abstract identifier.
        sku: Unique stock keeping unit.
        attributes: Selected attribute values keyed by attribute key.
        localized_attributes: Localized fields keyed by locale name.
    """

    sku: str
    attributes: dict[str, Any] = field(default_factory=dict)
    localized_attributes: dict[str, LocalizedAttributes] = field(default_factory=dict)

    def get_localized(self, locale_name: str) -> LocalizedAttributes | None:
        """Get localized fields for a locale.

        Args:
            locale_name: Locale code.

        Returns:
            Localized fields if the product has them for this locale.
        """
        return self.localized_attributes.get(locale_name)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the entity into a plain dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "sku": self.sku,
            "attributes": dict(self.attributes),
            "localized_attributes": {
                locale_name: localized.to_dict()
                for locale_name, localized in self.localized_attributes.items()
            },
        }
