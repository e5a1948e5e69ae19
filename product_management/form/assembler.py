"""Product form assembler.

Builds the ``productAdd`` form: SKU, per-locale localized fields, the
attribute selection and the attribute values, each attribute collection
guarded by its own validation group.
"""

from dataclasses import dataclass, field
from functools import partial

import structlog

from product_management.domain.exceptions import FormConfigurationError
from product_management.domain.value_objects import (
    AttributeDefinition,
    AttributeInputType,
    Locale,
)
from product_management.form.rules import (
    Rule,
    at_least_one_selected,
    each_locale,
    known_keys,
    not_blank,
    permitted_values,
    predicate_rule,
    single_line,
)
from product_management.form.schema import FieldSpec, Form

logger = structlog.get_logger()

FORM_NAME = "productAdd"

FIELD_SKU = "sku"
FIELD_NAME = "name"
FIELD_DESCRIPTION = "description"
FIELD_VALUE = "value"

LOCALIZED_ATTRIBUTES = "localized_attributes"
ATTRIBUTES = "attributes"
ATTRIBUTE_VALUES = "attribute_values"

VALIDATION_GROUP_DEFAULT = "default"
VALIDATION_GROUP_ATTRIBUTES = "attributes"
VALIDATION_GROUP_ATTRIBUTE_VALUES = "attribute_values"

MESSAGE_NOT_BLANK = "This value should not be blank."
MESSAGE_SINGLE_LINE = "This value should be a single line."
MESSAGE_SELECT_ATTRIBUTE = "Please select at least one attribute"
MESSAGE_SELECT_ATTRIBUTE_VALUE = "Please select at least one attribute value"

# attribute input type -> widget used for the value entry
VALUE_WIDGETS = {
    AttributeInputType.TEXT: "text",
    AttributeInputType.TEXTAREA: "textarea",
    AttributeInputType.NUMBER: "number",
    AttributeInputType.SELECT: "select",
    AttributeInputType.MULTISELECT: "select",
    AttributeInputType.CHECKBOX: "checkbox",
}


@dataclass
class ProductFormOptions:
    """Options the product form is assembled from.

    Attributes:
        attributes: Definitions offered in the attribute selection.
        attribute_values: Definitions offered for value entry.
        locales: Locales that get a localized sub-form.
    """

    attributes: list[AttributeDefinition] = field(default_factory=list)
    attribute_values: list[AttributeDefinition] = field(default_factory=list)
    locales: list[Locale] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            ATTRIBUTES: [a.key for a in self.attributes],
            ATTRIBUTE_VALUES: [a.key for a in self.attribute_values],
            "locales": [locale.locale_name for locale in self.locales],
        }


class ProductFormAssembler:
    """Assembles the product create/edit form from its options.

    Example usage:
        form = ProductFormAssembler().build(options)
        result = form.validate(data)
        if not result.is_valid:
            ...
    """

    def build(self, options: ProductFormOptions) -> Form:
        """Build the product form.

        Args:
            options: Attribute definitions and locales.

        Returns:
            The assembled form.

        Raises:
            FormConfigurationError: If either attribute option is empty,
                which would make the "at least one selected" rules
                impossible to satisfy.
        """
        if not options.attributes:
            raise FormConfigurationError(ATTRIBUTES, "at least one attribute definition is required")
        if not options.attribute_values:
            raise FormConfigurationError(
                ATTRIBUTE_VALUES, "at least one attribute value definition is required"
            )

        form = Form(name=FORM_NAME)
        self._add_sku_field(form)
        self._add_localized_form(form, options.locales)
        self._add_attributes_form(form, options.attributes)
        self._add_attribute_values_form(form, options.attribute_values)

        logger.debug(
            "Product form assembled",
            attributes=len(options.attributes),
            attribute_values=len(options.attribute_values),
            locales=len(options.locales),
        )
        return form

    def _add_sku_field(self, form: Form) -> None:
        form.add_field(FieldSpec(name=FIELD_SKU, type="text", label="SKU", required=True))
        form.add_rule(VALIDATION_GROUP_DEFAULT, predicate_rule(FIELD_SKU, not_blank, MESSAGE_NOT_BLANK))
        form.add_rule(
            VALIDATION_GROUP_DEFAULT, predicate_rule(FIELD_SKU, single_line, MESSAGE_SINGLE_LINE)
        )

    def _add_localized_form(self, form: Form, locales: list[Locale]) -> None:
        locale_names = [locale.locale_name for locale in locales]
        form.add_field(
            FieldSpec(
                name=LOCALIZED_ATTRIBUTES,
                type="collection",
                label="Localized Attributes",
                entries={
                    locale_name: FieldSpec(
                        name=locale_name,
                        type="collection",
                        label=locale_name,
                        entries={
                            FIELD_NAME: FieldSpec(
                                name=FIELD_NAME, type="text", label="Name", required=True
                            ),
                            FIELD_DESCRIPTION: FieldSpec(
                                name=FIELD_DESCRIPTION, type="textarea", label="Description"
                            ),
                        },
                    )
                    for locale_name in locale_names
                },
            )
        )
        form.add_rule(
            VALIDATION_GROUP_DEFAULT,
            Rule(
                field=LOCALIZED_ATTRIBUTES,
                check=partial(each_locale, locale_names=locale_names, required_fields=[FIELD_NAME]),
            ),
        )

    def _add_attributes_form(self, form: Form, definitions: list[AttributeDefinition]) -> None:
        form.add_field(
            FieldSpec(
                name=ATTRIBUTES,
                type="collection",
                label="Attributes",
                entries={
                    d.key: FieldSpec(name=FIELD_VALUE, type="checkbox", label=d.display_label)
                    for d in definitions
                },
            )
        )
        form.add_rule(
            VALIDATION_GROUP_ATTRIBUTES,
            Rule(field=ATTRIBUTES, check=partial(at_least_one_selected, message=MESSAGE_SELECT_ATTRIBUTE)),
        )
        form.add_rule(
            VALIDATION_GROUP_ATTRIBUTES,
            Rule(field=ATTRIBUTES, check=partial(known_keys, allowed=[d.key for d in definitions])),
        )

    def _add_attribute_values_form(
        self, form: Form, definitions: list[AttributeDefinition]
    ) -> None:
        form.add_field(
            FieldSpec(
                name=ATTRIBUTE_VALUES,
                type="collection",
                label="Attribute Values",
                entries={
                    d.key: FieldSpec(
                        name=FIELD_VALUE,
                        type=VALUE_WIDGETS[d.input_type],
                        label=d.display_label,
                        choices=d.values,
                        allow_input=d.allow_input,
                        multiple=d.is_multiple,
                    )
                    for d in definitions
                },
            )
        )
        form.add_rule(
            VALIDATION_GROUP_ATTRIBUTE_VALUES,
            Rule(
                field=ATTRIBUTE_VALUES,
                check=partial(at_least_one_selected, message=MESSAGE_SELECT_ATTRIBUTE_VALUE),
            ),
        )
        form.add_rule(
            VALIDATION_GROUP_ATTRIBUTE_VALUES,
            Rule(field=ATTRIBUTE_VALUES, check=partial(known_keys, allowed=[d.key for d in definitions])),
        )
        form.add_rule(
            VALIDATION_GROUP_ATTRIBUTE_VALUES,
            Rule(
                field=ATTRIBUTE_VALUES,
                check=partial(permitted_values, definitions={d.key: d for d in definitions}),
            ),
        )
