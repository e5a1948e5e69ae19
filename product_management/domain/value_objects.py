"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. Locales, attribute definitions and attribute value
translations are reference data: this module reads them, never changes them.
"""

from dataclasses import dataclass, field
from enum import Enum

from product_management.domain.base import ValueObject


class AttributeInputType(str, Enum):
    """How an attribute value is entered in the admin form."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    SELECT = "select"
    MULTISELECT = "multiselect"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class Locale(ValueObject):
    """A locale products can be localized into.

    Attributes:
        id: Locale identifier.
        locale_name: Locale code, e.g. ``de_DE``.
        is_active: Whether the locale is offered in the back-office.
    """

    id: int
    locale_name: str
    is_active: bool = True


@dataclass(frozen=True)
class AttributeDefinition(ValueObject):
    """A named, typed product characteristic (e.g. ``color``).

    Attributes:
        id: Attribute definition identifier.
        key: Unique attribute key.
        label: Display label for the admin form.
        input_type: Widget type used to enter values.
        allow_input: Whether values outside ``values`` are accepted.
        values: Permissible canonical values, in display order.
    """

    id: int
    key: str
    label: str | None = None
    input_type: AttributeInputType = AttributeInputType.TEXT
    allow_input: bool = True
    values: tuple[str, ...] = field(default_factory=tuple)

    @property
    def display_label(self) -> str:
        """Label shown in the form, falling back to the key."""
        return self.label or self.key

    @property
    def is_multiple(self) -> bool:
        """Whether more than one value can be selected."""
        return self.input_type == AttributeInputType.MULTISELECT

    def permits(self, value: str) -> bool:
        """Check whether a value is acceptable for this attribute.

        Open attributes (``allow_input``) accept anything; closed ones
        only accept their configured values.

        Args:
            value: Canonical value to check.

        Returns:
            True if the value is acceptable.
        """
        return self.allow_input or value in self.values


@dataclass(frozen=True)
class AttributeValueTranslation(ValueObject):
    """A translated attribute value, the unit of suggestion results.

    Attributes:
        id_attribute: Owning attribute definition.
        id_locale: Locale of the translation.
        id_attribute_value: Translated attribute value.
        value: Canonical (untranslated) value.
        translation: Text shown for the locale.
    """

    id_attribute: int
    id_locale: int
    id_attribute_value: int
    value: str
    translation: str

    def to_dict(self) -> dict:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id_attribute": self.id_attribute,
            "id_locale": self.id_locale,
            "id_attribute_value": self.id_attribute_value,
            "value": self.value,
            "translation": self.translation,
        }
