"""Domain error classes.

Protocol-agnostic errors that represent business and data-source failures.
These errors are translated to HTTP responses by the entrypoint adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains error information that can be translated
    to an HTTP response or to a failure reason shown by the browser.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
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
    """Business rule validation error.

    Examples:
        - page_size < 1
        - page < 1

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
                   Example: [{"field": "page_size", "message": "Must be positive"}]
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


class ConflictError(DomainError):
    """Operation conflicts with the current state.

    Examples:
        - Loading the dataset a second time
        - State transition not allowed

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class ServiceUnavailableError(DomainError):
    """The requested data is not available yet.

    Raised while the one-shot fetch is still outstanding.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "NOT_READY"


# ==============================================================================
# Data source failures
# ==============================================================================


class FetchError(DomainError):
    """The single attempt to fetch the country dataset failed.

    Every fetch failure is terminal: nothing retries it. ``kind`` is kept for
    diagnostics only and does not change how the failure is handled.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "UPSTREAM_UNAVAILABLE"
    kind: str = "unknown"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, kind=self.kind, **context)

    def copy(self) -> "FetchError":
        """Return a new instance of the same class with the same message and context.

        The recorded failure is shared by every request; raising a copy keeps
        its traceback and chaining state untouched.
        """
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.context = dict(self.context)
        Exception.__init__(clone, self.message)
        return clone


class TransportError(FetchError):
    """Network unreachable: DNS failure, refused connection, timeout."""

    kind = "transport"


class HttpStatusError(FetchError):
    """The data provider answered with a non-2xx status."""

    kind = "http_status"

    def __init__(self, status_code: int, **context: Any) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}", status_code=status_code, **context)


class DecodeError(FetchError):
    """The response body does not have the expected shape."""

    kind = "decode"
