"""Domain exceptions.

All domain-level errors that represent business rule violations.
These exceptions are raised by readers, the form assembler and the
application services when invariants are violated or invalid
operations are attempted.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Lookup Errors
# ============================================================================


class NotFoundError(DomainError):
    """Base class for referenced entities that do not exist."""

    pass


class AttributeNotFoundError(NotFoundError):
    """Raised when an attribute definition id does not exist."""

    def __init__(self, id_attribute: int) -> None:
        """Initialize attribute not found error.

        Args:
            id_attribute: ID of the missing attribute definition.
        """
        super().__init__(
            f"Attribute {id_attribute} not found",
            details={"id_attribute": id_attribute},
        )


class LocaleNotFoundError(NotFoundError):
    """Raised when a locale id does not exist."""

    def __init__(self, id_locale: int) -> None:
        """Initialize locale not found error.

        Args:
            id_locale: ID of the missing locale.
        """
        super().__init__(
            f"Locale {id_locale} not found",
            details={"id_locale": id_locale},
        )


# ============================================================================
# Argument Errors
# ============================================================================


class InvalidArgumentError(DomainError):
    """Raised when a caller passes an out-of-range argument."""

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the argument.
            value: The rejected value.
            reason: Explanation of why the value is invalid.
        """
        super().__init__(
            f"Invalid {argument} {value!r}: {reason}",
            details={"argument": argument, "value": value, "reason": reason},
        )


# ============================================================================
# Form Errors
# ============================================================================


class FormError(DomainError):
    """Base class for product form errors."""

    pass


class FormConfigurationError(FormError):
    """Raised when the product form cannot be assembled from its options."""

    def __init__(self, option: str, reason: str) -> None:
        """Initialize form configuration error.

        Args:
            option: Name of the offending form option.
            reason: What is wrong with it.
        """
        super().__init__(
            f"Invalid form option '{option}': {reason}",
            details={"option": option, "reason": reason},
        )


class FormValidationError(FormError):
    """Raised when a submitted form state violates validation rules.

    Attributes:
        violations: Violations collected across the validated groups.
    """

    def __init__(self, violations: list[Any]) -> None:
        """Initialize form validation error.

        Args:
            violations: Violations collected by the assembler.
        """
        groups = sorted({v.group for v in violations})
        super().__init__(
            f"Form has {len(violations)} violation(s) in group(s) {groups}",
            details={"groups": groups},
        )
        self.violations = violations
