"""Request and response bodies of the HTTP API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """One offending field of an error."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")
    group: str | None = Field(default=None, description="Validation group of the failed rule")


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Attribute Suggestion Schemas
# ============================================================================


class AttributeValueSuggestionSchema(BaseModel):
    """A translated attribute value."""

    id_attribute: int = Field(..., description="Attribute definition ID")
    id_locale: int = Field(..., description="Locale ID")
    id_attribute_value: int = Field(..., description="Attribute value ID")
    value: str = Field(..., description="Canonical (untranslated) value")
    translation: str = Field(..., description="Value text in the requested locale")


class AttributeValueSuggestionsResponse(BaseModel):
    """Page of attribute value suggestions."""

    items: list[AttributeValueSuggestionSchema] = Field(..., description="Matching values")
    total: int = Field(..., description="Total number of matches")
    offset: int = Field(..., description="Offset of this page")
    limit: int = Field(..., description="Requested page size")
    has_more: bool = Field(..., description="Whether there are more matches")


# ============================================================================
# Product Form Schemas
# ============================================================================


class AttributeEntrySchema(BaseModel):
    """One entry of the attributes or attribute_values collection."""

    model_config = ConfigDict(extra="allow")

    value: Any = Field(default=None, description="Selected value(s)")


class LocalizedAttributesSchema(BaseModel):
    """Localized fields of one locale."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, description="Localized product name")
    description: str | None = Field(default=None, description="Localized description")
    attributes: dict[str, Any] = Field(default_factory=dict, description="Localized attributes")


class ProductFormData(BaseModel):
    """Product form state as loaded or submitted."""

    model_config = ConfigDict(extra="allow")

    sku: str | None = Field(default=None, description="Stock keeping unit")
    localized_attributes: dict[str, LocalizedAttributesSchema] = Field(
        default_factory=dict, description="Localized fields keyed by locale name"
    )
    attributes: dict[str, AttributeEntrySchema] = Field(
        default_factory=dict, description="Attribute selection keyed by attribute key"
    )
    attribute_values: dict[str, AttributeEntrySchema] = Field(
        default_factory=dict, description="Attribute values keyed by attribute key"
    )


class ProductFormResponse(BaseModel):
    """Initial form data with the form description."""

    data: dict[str, Any] = Field(..., description="Initial form data")
    form: dict[str, Any] = Field(..., description="Fields and validation groups")


class ProductFormValidationResponse(BaseModel):
    """Successful validation result."""

    valid: bool = Field(..., description="Whether the form passed validation")
    groups: list[str] = Field(..., description="Validation groups that were run")
