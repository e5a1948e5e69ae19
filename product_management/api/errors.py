"""Mapping of domain errors to HTTP errors."""

from fastapi import HTTPException, status

from product_management.domain.exceptions import (
    DomainError,
    FormConfigurationError,
    FormValidationError,
    InvalidArgumentError,
    NotFoundError,
)

# Ordered: first matching class wins
ERROR_STATUS = [
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST, "INVALID_ARGUMENT"),
    (FormValidationError, status.HTTP_422_UNPROCESSABLE_CONTENT, "VALIDATION_ERROR"),
    (FormConfigurationError, status.HTTP_409_CONFLICT, "FORM_CONFIGURATION_ERROR"),
]


def domain_error_to_http(exc: DomainError) -> HTTPException:
    """Convert a domain error into an HTTPException with the standard body.

    Args:
        exc: Domain error raised by a service.

    Returns:
        HTTPException to raise from the endpoint.
    """
    status_code, error_code = status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR"
    for error_class, code, name in ERROR_STATUS:
        if isinstance(exc, error_class):
            status_code, error_code = code, name
            break

    if isinstance(exc, FormValidationError):
        details = [v.to_dict() for v in exc.violations]
    else:
        details = [{"field": key, "message": str(value)} for key, value in exc.details.items()]

    return HTTPException(
        status_code=status_code,
        detail={
            "error_code": error_code,
            "message": exc.message,
            "details": details,
        },
    )
