"""Tests for the product form assembler."""

import pytest

from product_management.domain.exceptions import FormConfigurationError, InvalidArgumentError
from product_management.form.assembler import (
    ATTRIBUTE_VALUES,
    ATTRIBUTES,
    FORM_NAME,
    MESSAGE_SELECT_ATTRIBUTE,
    MESSAGE_SELECT_ATTRIBUTE_VALUE,
    VALIDATION_GROUP_ATTRIBUTE_VALUES,
    VALIDATION_GROUP_ATTRIBUTES,
    VALIDATION_GROUP_DEFAULT,
    ProductFormAssembler,
    ProductFormOptions,
)
from product_management.form.schema import Form


@pytest.fixture
def form(options: ProductFormOptions) -> Form:
    return ProductFormAssembler().build(options)


class TestBuild:
    """Tests for assembling the form."""

    def test_fields_and_groups(self, form: Form) -> None:
        """Form declares all fields and validation groups."""
        assert form.name == FORM_NAME
        assert list(form.fields) == ["sku", "localized_attributes", "attributes", "attribute_values"]
        assert form.group_names == [
            VALIDATION_GROUP_DEFAULT,
            VALIDATION_GROUP_ATTRIBUTES,
            VALIDATION_GROUP_ATTRIBUTE_VALUES,
        ]

    def test_sku_is_required(self, form: Form) -> None:
        assert form.fields["sku"].required

    def test_localized_sub_form_per_locale(self, form: Form) -> None:
        entries = form.fields["localized_attributes"].entries
        assert list(entries) == ["de_DE", "en_US"]
        assert entries["de_DE"].entries["name"].required

    def test_attribute_value_entries_carry_choices(self, form: Form) -> None:
        color = form.fields[ATTRIBUTE_VALUES].entries["color"]
        assert color.type == "select"
        assert color.choices == ("black", "white")
        assert not color.allow_input

    def test_empty_attributes_is_configuration_error(self, options: ProductFormOptions) -> None:
        """An empty selection can never be satisfied, so assembly fails."""
        options.attributes = []
        with pytest.raises(FormConfigurationError) as exc_info:
            ProductFormAssembler().build(options)
        assert exc_info.value.details["option"] == ATTRIBUTES

    def test_empty_attribute_values_is_configuration_error(
        self, options: ProductFormOptions
    ) -> None:
        options.attribute_values = []
        with pytest.raises(FormConfigurationError) as exc_info:
            ProductFormAssembler().build(options)
        assert exc_info.value.details["option"] == ATTRIBUTE_VALUES

    def test_to_dict(self, form: Form) -> None:
        data = form.to_dict()
        assert data["name"] == FORM_NAME
        assert [f["name"] for f in data["fields"]][0] == "sku"
        assert data["validation_groups"] == form.group_names


class TestValidateAttributesGroup:
    """Tests for the "attributes" validation group."""

    def test_one_selected_passes(self, form: Form) -> None:
        data = {"attributes": {"color": {"value": ""}, "size": {"value": "x"}}}
        result = form.validate(data, [VALIDATION_GROUP_ATTRIBUTES])
        assert result.is_valid

    def test_all_empty_fails(self, form: Form) -> None:
        data = {"attributes": {"color": {"value": ""}, "size": {"value": ""}}}
        result = form.validate(data, [VALIDATION_GROUP_ATTRIBUTES])
        assert not result.is_valid
        assert [v.message for v in result.violations] == [MESSAGE_SELECT_ATTRIBUTE]
        assert result.violations[0].field == ATTRIBUTES
        assert result.violations[0].group == VALIDATION_GROUP_ATTRIBUTES

    def test_unchecked_checkboxes_fail(self, form: Form) -> None:
        data = {"attributes": {"color": {"value": 0}, "size": {"value": "0"}}}
        result = form.validate(data, [VALIDATION_GROUP_ATTRIBUTES])
        assert [v.message for v in result.violations] == [MESSAGE_SELECT_ATTRIBUTE]

    def test_unknown_attribute_rejected(self, form: Form) -> None:
        data = {"attributes": {"color": {"value": True}, "weight": {"value": True}}}
        result = form.validate(data, [VALIDATION_GROUP_ATTRIBUTES])
        assert [v.field for v in result.violations] == ["attributes[weight]"]

    def test_other_groups_not_run(self, form: Form) -> None:
        """Selecting one group ignores the other groups' rules."""
        data = {"attributes": {"color": {"value": True}}}
        assert form.validate(data, [VALIDATION_GROUP_ATTRIBUTES]).is_valid


class TestValidateAttributeValuesGroup:
    """Tests for the "attribute_values" validation group."""

    def test_all_empty_fails(self, form: Form) -> None:
        data = {"attribute_values": {"color": {"value": None}}}
        result = form.validate(data, [VALIDATION_GROUP_ATTRIBUTE_VALUES])
        assert [v.message for v in result.violations] == [MESSAGE_SELECT_ATTRIBUTE_VALUE]

    def test_closed_value_outside_set_fails(self, form: Form) -> None:
        data = {"attribute_values": {"color": {"value": "purple"}}}
        result = form.validate(data, [VALIDATION_GROUP_ATTRIBUTE_VALUES])
        assert [v.field for v in result.violations] == ["attribute_values[color].value"]

    def test_open_value_passes(self, form: Form) -> None:
        data = {"attribute_values": {"size": {"value": "42"}}}
        assert form.validate(data, [VALIDATION_GROUP_ATTRIBUTE_VALUES]).is_valid


class TestValidateFullSubmission:
    """Tests for validating every group at once."""

    def test_valid_submission(self, form: Form, valid_data: dict) -> None:
        result = form.validate(valid_data)
        assert result.is_valid
        assert result.groups == form.group_names

    def test_both_attribute_groups_must_pass(self, form: Form, valid_data: dict) -> None:
        """A full submission collects violations from every group."""
        valid_data["attributes"] = {}
        valid_data["attribute_values"] = {}
        result = form.validate(valid_data)
        grouped = result.by_group()
        assert [v.message for v in grouped[VALIDATION_GROUP_ATTRIBUTES]] == [
            MESSAGE_SELECT_ATTRIBUTE
        ]
        assert [v.message for v in grouped[VALIDATION_GROUP_ATTRIBUTE_VALUES]] == [
            MESSAGE_SELECT_ATTRIBUTE_VALUE
        ]
        assert grouped[VALIDATION_GROUP_DEFAULT] == []

    @pytest.mark.parametrize("sku", [None, "", "   "])
    def test_blank_sku_fails(self, form: Form, valid_data: dict, sku) -> None:
        valid_data["sku"] = sku
        result = form.validate(valid_data)
        assert [v.field for v in result.violations] == ["sku"]

    def test_multiline_sku_fails(self, form: Form, valid_data: dict) -> None:
        valid_data["sku"] = "SHOE\n001"
        result = form.validate(valid_data)
        assert [v.message for v in result.violations] == ["This value should be a single line."]

    def test_blank_localized_name_fails(self, form: Form, valid_data: dict) -> None:
        valid_data["localized_attributes"]["en_US"]["name"] = ""
        result = form.validate(valid_data)
        assert [v.field for v in result.violations] == ["localized_attributes[en_US].name"]

    def test_unknown_group_rejected(self, form: Form, valid_data: dict) -> None:
        with pytest.raises(InvalidArgumentError):
            form.validate(valid_data, ["pricing"])
