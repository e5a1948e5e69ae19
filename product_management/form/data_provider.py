"""Product form data providers.

Produce the initial form data and the assembler options for the add and
edit screens. Both providers share one ``FormDefaults`` instance rather
than a base class.
"""

import copy
from collections.abc import Mapping
from typing import Any, Protocol

import structlog

from product_management.domain.entities import ProductAbstract
from product_management.domain.value_objects import AttributeDefinition, Locale
from product_management.form.assembler import (
    ATTRIBUTE_VALUES,
    ATTRIBUTES,
    FIELD_DESCRIPTION,
    FIELD_NAME,
    FIELD_SKU,
    FIELD_VALUE,
    LOCALIZED_ATTRIBUTES,
    ProductFormOptions,
)

logger = structlog.get_logger()

FormData = dict[str, Any]


class ProductAbstractLookup(Protocol):
    """Capability to load a product abstract by ID."""

    async def get_by_id(self, id_product_abstract: int) -> ProductAbstract | None: ...


def merge_form_data(defaults: Mapping[str, Any], loaded: Mapping[str, Any]) -> FormData:
    """Overlay loaded fields on defaults; loaded values win on key collision.

    Args:
        defaults: Default form data.
        loaded: Fields projected from a loaded entity.

    Returns:
        New form data; neither input is modified.
    """
    merged = copy.deepcopy(dict(defaults))
    merged.update(copy.deepcopy(dict(loaded)))
    return merged


class FormDefaults:
    """Default form fields and options shared by the add and edit providers.

    Attributes:
        locales: Locales that get a localized sub-form.
        attribute_definitions: Definitions offered by the form.
    """

    def __init__(
        self,
        locales: list[Locale],
        attribute_definitions: list[AttributeDefinition],
    ) -> None:
        self.locales = locales
        self.attribute_definitions = attribute_definitions

    @property
    def attribute_keys(self) -> list[str]:
        return [d.key for d in self.attribute_definitions]

    def get_localized_default_fields(self) -> FormData:
        """Empty name/description/attributes for one locale."""
        return {FIELD_NAME: None, FIELD_DESCRIPTION: None, ATTRIBUTES: {}}

    def get_attributes_default_fields(self) -> dict[str, FormData]:
        """Localized defaults keyed by locale name."""
        return {
            locale.locale_name: self.get_localized_default_fields() for locale in self.locales
        }

    def get_default_form_fields(self) -> FormData:
        """Form data of a blank product."""
        return {
            FIELD_SKU: None,
            LOCALIZED_ATTRIBUTES: self.get_attributes_default_fields(),
        }

    def get_options(self) -> ProductFormOptions:
        """Options for ``ProductFormAssembler.build``."""
        return ProductFormOptions(
            attributes=list(self.attribute_definitions),
            attribute_values=list(self.attribute_definitions),
            locales=list(self.locales),
        )


class ProductFormAddDataProvider:
    """Initial data for the create-product screen."""

    def __init__(self, defaults: FormDefaults) -> None:
        self.defaults = defaults

    def get_data(self) -> FormData:
        return self.defaults.get_default_form_fields()

    def get_options(self) -> ProductFormOptions:
        return self.defaults.get_options()


class ProductFormEditDataProvider:
    """Initial data for the edit-product screen.

    Example usage:
        provider = ProductFormEditDataProvider(defaults, ProductAbstractRepository(session))
        data = await provider.get_data(id_product_abstract)
    """

    def __init__(self, defaults: FormDefaults, product_lookup: ProductAbstractLookup) -> None:
        """Initialize provider.

        Args:
            defaults: Shared defaults capability.
            product_lookup: Product abstract lookup.
        """
        self.defaults = defaults
        self.product_lookup = product_lookup

    def get_options(self) -> ProductFormOptions:
        return self.defaults.get_options()

    async def get_data(self, id_product_abstract: int) -> FormData:
        """Load a product abstract and reshape it into form data.

        A missing product is not an error: the blank form is returned.

        Args:
            id_product_abstract: Product abstract ID.

        Returns:
            Defaults overlaid with the product's fields.
        """
        form_data: FormData = {}
        defaults = self.defaults.get_default_form_fields()

        product = await self.product_lookup.get_by_id(id_product_abstract)
        if product is not None:
            form_data = product.to_dict()
            form_data[LOCALIZED_ATTRIBUTES] = self.get_localized_abstract_attributes(product)
            form_data[ATTRIBUTES] = self.get_selected_attributes(product)
            form_data[ATTRIBUTE_VALUES] = self.get_attribute_values(product)
        else:
            logger.info(
                "Product abstract not found, using blank form",
                id_product_abstract=id_product_abstract,
            )

        return merge_form_data(defaults, form_data)

    def get_localized_abstract_attributes(self, product: ProductAbstract) -> dict[str, FormData]:
        """Project the product's localized fields onto the configured locales.

        Locales the product has no data for keep their defaults.
        """
        localized_attributes = {}
        for locale in self.defaults.locales:
            localized = product.get_localized(locale.locale_name)
            if localized is None:
                localized_attributes[locale.locale_name] = (
                    self.defaults.get_localized_default_fields()
                )
            else:
                localized_attributes[locale.locale_name] = localized.to_dict()
        return localized_attributes

    def get_selected_attributes(self, product: ProductAbstract) -> dict[str, FormData]:
        """Attribute selection entries for configured attributes the product uses."""
        return {
            key: {FIELD_VALUE: True}
            for key in self.defaults.attribute_keys
            if key in product.attributes
        }

    def get_attribute_values(self, product: ProductAbstract) -> dict[str, FormData]:
        """Attribute value entries for configured attributes the product uses."""
        return {
            key: {FIELD_VALUE: product.attributes[key]}
            for key in self.defaults.attribute_keys
            if key in product.attributes
        }
