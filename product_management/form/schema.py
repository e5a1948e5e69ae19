"""Form schema structures.

A form is a set of recognized fields plus named rule groups. Groups are
validated selectively, which is how the multi-step product form checks
one step at a time and everything on final submission.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from product_management.domain.exceptions import InvalidArgumentError
from product_management.form.rules import Rule, Violation


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one form field.

    Attributes:
        name: Field name (key in form data).
        type: Widget type ("text", "checkbox", "select", "collection", ...).
        label: Display label.
        required: Whether the widget is marked required.
        choices: Selectable values for choice widgets.
        allow_input: Whether free text is accepted next to choices.
        multiple: Whether several choices can be selected.
        entries: Sub-fields of a collection, keyed by entry key.
    """

    name: str
    type: str = "text"
    label: str | None = None
    required: bool = False
    choices: tuple[str, ...] = ()
    allow_input: bool = True
    multiple: bool = False
    entries: dict[str, "FieldSpec"] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for form rendering clients."""
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "label": self.label,
            "required": self.required,
        }
        if self.choices:
            data["choices"] = list(self.choices)
            data["allow_input"] = self.allow_input
            data["multiple"] = self.multiple
        if self.entries:
            data["entries"] = {key: spec.to_dict() for key, spec in self.entries.items()}
        return data


@dataclass
class ValidationResult:
    """Outcome of validating form data.

    Attributes:
        groups: Groups that were validated.
        violations: Collected violations, in rule order.
    """

    groups: list[str]
    violations: list[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Whether no rule failed."""
        return not self.violations

    def by_group(self) -> dict[str, list[Violation]]:
        """Violations keyed by group, with an entry for every validated group."""
        grouped: dict[str, list[Violation]] = {group: [] for group in self.groups}
        for violation in self.violations:
            grouped.setdefault(violation.group, []).append(violation)
        return grouped


@dataclass
class Form:
    """An assembled form: fields plus named validation rule groups.

    Attributes:
        name: Form name.
        fields: Field declarations in display order.
        rule_groups: Rules keyed by validation group name.
    """

    name: str
    fields: dict[str, FieldSpec] = field(default_factory=dict)
    rule_groups: dict[str, list[Rule]] = field(default_factory=dict)

    def add_field(self, spec: FieldSpec) -> None:
        self.fields[spec.name] = spec

    def add_rule(self, group: str, rule: Rule) -> None:
        self.rule_groups.setdefault(group, []).append(rule)

    @property
    def group_names(self) -> list[str]:
        return list(self.rule_groups)

    def validate(
        self,
        data: Mapping[str, Any],
        groups: Iterable[str] | None = None,
    ) -> ValidationResult:
        """Validate form data against the selected groups.

        Args:
            data: Submitted form data.
            groups: Group names to run; None runs every group.

        Returns:
            Validation result with violations from all selected groups.

        Raises:
            InvalidArgumentError: If a group name is unknown.
        """
        selected = self.group_names if groups is None else list(dict.fromkeys(groups))
        unknown = [group for group in selected if group not in self.rule_groups]
        if unknown:
            raise InvalidArgumentError(
                "validation group", unknown[0], f"must be one of {self.group_names}"
            )

        result = ValidationResult(groups=selected)
        for group in selected:
            for rule in self.rule_groups[group]:
                result.violations.extend(rule.apply(data, group))
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for form rendering clients."""
        return {
            "name": self.name,
            "fields": [spec.to_dict() for spec in self.fields.values()],
            "validation_groups": self.group_names,
        }
