"""Validation rules for the product form.

Rules are pure functions over submitted values returning a list of
violations. Paths in returned violations are relative to the field the
rule is attached to; ``Rule.apply`` prefixes them and stamps the group.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from product_management.domain.value_objects import AttributeDefinition

VALUE = "value"


@dataclass(frozen=True)
class Violation:
    """A single failed rule.

    Attributes:
        field: Path of the offending field (e.g. ``localized_attributes[de_DE].name``).
        message: Human-readable message.
        group: Validation group the rule belongs to.
    """

    field: str
    message: str
    group: str = "default"

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"field": self.field, "message": self.message, "group": self.group}


Check = Callable[[Any], list[Violation]]


def join_path(prefix: str, suffix: str) -> str:
    """Join a field path and a relative sub-path."""
    if not suffix:
        return prefix
    if suffix.startswith("["):
        return f"{prefix}{suffix}"
    return f"{prefix}.{suffix}"


@dataclass(frozen=True)
class Rule:
    """A check bound to one top-level form field.

    Attributes:
        field: Top-level field name the check reads.
        check: Pure function from the field value to violations.
    """

    field: str
    check: Check

    def apply(self, data: Mapping[str, Any], group: str) -> list[Violation]:
        """Run the check against submitted data.

        Args:
            data: Submitted form data.
            group: Group name to stamp on violations.

        Returns:
            Violations with absolute field paths.
        """
        return [
            replace(v, field=join_path(self.field, v.field), group=group)
            for v in self.check(data.get(self.field))
        ]


def predicate_rule(field: str, predicate: Callable[[Any], bool], message: str) -> Rule:
    """Build a rule from a predicate and the message used when it fails."""

    def check(value: Any) -> list[Violation]:
        return [] if predicate(value) else [Violation("", message)]

    return Rule(field=field, check=check)


# ============================================================================
# Predicates
# ============================================================================


def is_blank(value: Any) -> bool:
    """Check whether a text field was left blank.

    None, False, whitespace-only strings and empty collections are blank.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def is_empty(value: Any) -> bool:
    """Check whether a submitted selection counts as "not selected".

    Blank values are empty, and so are zero and ``"0"``, which is what an
    unchecked checkbox submits.
    """
    if is_blank(value) or value == "0":
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0


def not_blank(value: Any) -> bool:
    return not is_blank(value)


def single_line(value: Any) -> bool:
    return not isinstance(value, str) or ("\n" not in value and "\r" not in value)


def entry_value(entry: Any) -> Any:
    """Get the ``value`` of a collection entry; absent entries are None."""
    if isinstance(entry, Mapping):
        return entry.get(VALUE)
    return None


def _entries(collection: Any) -> Iterable[tuple[str, Any]]:
    if isinstance(collection, Mapping):
        return collection.items()
    return ()


# ============================================================================
# Collection checks
# ============================================================================


def at_least_one_selected(collection: Any, message: str) -> list[Violation]:
    """Require at least one entry with a non-empty ``value``.

    Args:
        collection: Mapping of key -> ``{"value": ...}``.
        message: Message for the violation.

    Returns:
        A single violation when nothing is selected, else nothing.
    """
    for _, entry in _entries(collection):
        if not is_empty(entry_value(entry)):
            return []
    return [Violation("", message)]


def known_keys(collection: Any, allowed: Iterable[str]) -> list[Violation]:
    """Reject entries whose key is not a configured attribute."""
    allowed = set(allowed)
    return [
        Violation(f"[{key}]", f"Unknown attribute '{key}'")
        for key, _ in _entries(collection)
        if key not in allowed
    ]


def permitted_values(
    collection: Any,
    definitions: Mapping[str, AttributeDefinition],
) -> list[Violation]:
    """Reject values outside a closed attribute's permissible values."""
    violations = []
    for key, entry in _entries(collection):
        definition = definitions.get(key)
        value = entry_value(entry)
        if definition is None or is_empty(value):
            continue

        values = value if isinstance(value, (list, tuple)) else [value]
        if len(values) > 1 and not definition.is_multiple:
            violations.append(
                Violation(f"[{key}].{VALUE}", f"Attribute '{key}' accepts a single value")
            )
            continue

        for item in values:
            if not definition.permits(str(item)):
                violations.append(
                    Violation(
                        f"[{key}].{VALUE}",
                        f"Value '{item}' is not allowed for attribute '{key}'",
                    )
                )
    return violations


def each_locale(
    collection: Any,
    locale_names: Iterable[str],
    required_fields: Iterable[str],
) -> list[Violation]:
    """Validate every locale's sub-form independently.

    Missing locales are reported once; present locales are checked
    field by field.
    """
    entries = dict(_entries(collection))
    violations = []
    for locale_name in locale_names:
        localized = entries.get(locale_name)
        if not isinstance(localized, Mapping):
            violations.append(
                Violation(f"[{locale_name}]", f"Missing localized fields for '{locale_name}'")
            )
            continue
        for field_name in required_fields:
            if is_blank(localized.get(field_name)):
                violations.append(
                    Violation(f"[{locale_name}].{field_name}", "This value should not be blank.")
                )
    return violations
