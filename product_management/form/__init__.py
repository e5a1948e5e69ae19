"""Product create/edit form.

Schema and validation groups (``assembler``), pure validation rules
(``rules``) and the providers of initial form data (``data_provider``).
"""

from product_management.form.assembler import (
    ATTRIBUTE_VALUES,
    ATTRIBUTES,
    FIELD_SKU,
    LOCALIZED_ATTRIBUTES,
    VALIDATION_GROUP_ATTRIBUTE_VALUES,
    VALIDATION_GROUP_ATTRIBUTES,
    VALIDATION_GROUP_DEFAULT,
    ProductFormAssembler,
    ProductFormOptions,
)
from product_management.form.data_provider import (
    FormDefaults,
    ProductFormAddDataProvider,
    ProductFormEditDataProvider,
    merge_form_data,
)
from product_management.form.rules import Violation
from product_management.form.schema import FieldSpec, Form, ValidationResult

__all__ = [
    # Field and group names
    "ATTRIBUTES",
    "ATTRIBUTE_VALUES",
    "FIELD_SKU",
    "LOCALIZED_ATTRIBUTES",
    "VALIDATION_GROUP_ATTRIBUTES",
    "VALIDATION_GROUP_ATTRIBUTE_VALUES",
    "VALIDATION_GROUP_DEFAULT",
    # Schema
    "FieldSpec",
    "Form",
    "ValidationResult",
    "Violation",
    # Assembler
    "ProductFormAssembler",
    "ProductFormOptions",
    # Data providers
    "FormDefaults",
    "ProductFormAddDataProvider",
    "ProductFormEditDataProvider",
    "merge_form_data",
]
