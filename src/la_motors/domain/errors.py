"""Domain error classes.

Protocol-agnostic errors that represent inventory failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains business error information that can be translated to any
    transport format by the protocol adapters.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Required-field or range violation detected before any store call.

    Examples:
        - make is blank after trimming
        - price <= 0
        - year outside 1900..current_year + 1
        - unrecognized fuel_type / transmission / drivetrain / status

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be > 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Vehicle")
            identifier: Resource identifier (e.g., UUID)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class PersistenceError(DomainError):
    """The record or object store rejected an operation.

    Carries the store's diagnostic text verbatim. Write paths propagate it
    to the caller; nothing retries automatically.

    Examples:
        - Constraint violation on insert
        - Connection dropped mid-update
        - Object upload refused by storage

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "PERSISTENCE_ERROR"

    def __init__(self, operation: str, diagnostic: str, **context: Any) -> None:
        """Create a persistence error.

        Args:
            operation: What was being attempted (e.g., "create vehicle")
            diagnostic: Store-side message explaining the failure
            **context: Additional context
        """
        self.operation = operation
        self.diagnostic = diagnostic
        super().__init__(f"Failed to {operation}: {diagnostic}", **context)


class TransientReadFailure(PersistenceError):
    """A read against the record store failed.

    Raised by adapters on read paths. Use cases absorb it and degrade to an
    empty result instead of propagating.
    """

    error_code: str = "TRANSIENT_READ_FAILURE"


class UnauthorizedError(DomainError):
    """Admin credentials missing or wrong.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
