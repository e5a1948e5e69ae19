"""Domain layer - entities, value objects and domain exceptions.

This module exports the core domain building blocks:

- **Entities**: Objects with identity (ProductAbstract)
- **Value Objects**: Immutable reference data (Locale, AttributeDefinition,
  AttributeValueTranslation)
- **Exceptions**: Domain-specific errors and invariant violations

Example usage:
    from product_management.domain import AttributeDefinition, AttributeInputType

    color = AttributeDefinition(
        id=1,
        key="color",
        input_type=AttributeInputType.SELECT,
        allow_input=False,
        values=("red", "blue"),
    )
    color.permits("green")  # False
"""

# Base classes
from product_management.domain.base import Entity, ValueObject

# Entities
from product_management.domain.entities import LocalizedAttributes, ProductAbstract

# Exceptions
from product_management.domain.exceptions import (
    AttributeNotFoundError,
    DomainError,
    FormConfigurationError,
    FormError,
    FormValidationError,
    InvalidArgumentError,
    LocaleNotFoundError,
    NotFoundError,
)

# Value Objects
from product_management.domain.value_objects import (
    AttributeDefinition,
    AttributeInputType,
    AttributeValueTranslation,
    Locale,
)

__all__ = [
    # Base classes
    "Entity",
    "ValueObject",
    # Entities
    "LocalizedAttributes",
    "ProductAbstract",
    # Exceptions
    "AttributeNotFoundError",
    "DomainError",
    "FormConfigurationError",
    "FormError",
    "FormValidationError",
    "InvalidArgumentError",
    "LocaleNotFoundError",
    "NotFoundError",
    # Value Objects
    "AttributeDefinition",
    "AttributeInputType",
    "AttributeValueTranslation",
    "Locale",
]
