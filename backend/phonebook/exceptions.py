"""
Phonebook Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the phonebook error taxonomy.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       turn them into responses with the right HTTP status code.
Who:   Raised by the service and the stores; caught by global handlers.

Exception Hierarchy:
    PhonebookError (base)
    ├── ValidationError          → 400 Bad Request {"error": message}
    ├── NotFoundError            → 404 Not Found (empty body)
    ├── DatabaseError            → 500 Internal Server Error
    └── StoreUnavailableError    → 503 Service Unavailable
"""

from typing import Any, Dict, Optional


class PhonebookError(Exception):
    """
    Base exception for all Phonebook application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PhonebookError):
    """
    Raised when client input fails validation.

    When:    Missing name/number, duplicate name, malformed id or body.
    HTTP:    400 Bad Request

    The message is the whole API contract, e.g. {"error": "name missing"},
    so it must stay stable.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(PhonebookError):
    """
    Raised when a requested contact does not exist.

    HTTP:    404 Not Found, empty body.

    Stores return None for missing records; the service converts that
    None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PhonebookError):
    """
    Raised when a store operation fails unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the original
    error type is kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreUnavailableError(PhonebookError):
    """
    Raised when the store cannot be reached or timed out.

    When:    Connection refused, pool checkout timeout, dropped connection.
    HTTP:    503 Service Unavailable with a Retry-After header.
    """

    def __init__(
        self,
        message: str = "The contact store is temporarily unavailable",
        retry_after: int = 5,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
