"""
Catalog API - Error Taxonomy
============================

What:  Defines the closed set of user-facing error kinds the API can report.
How:   Each exception class carries an ErrorKind, a message, an optional field
       name and an optional context dict. The GraphQL layer reads `code` and
       `field` from these exceptions to build `errors[].extensions`.
Who:   Raised by validation rules, the error normalizer, the authorization
       gate and the product service; formatted by catalog.graphql.errors.
When:  During request processing when recoverable errors occur.

Exception Hierarchy:
    CatalogError (base)
    ├── InvalidInputError          → BAD_USER_INPUT
    ├── InvalidIdentifierError     → BAD_USER_INPUT
    ├── NotFoundError              → NOT_FOUND
    ├── DuplicateKeyError          → ALREADY_EXISTS
    ├── UnauthenticatedError       → UNAUTHENTICATED
    ├── ForbiddenError             → FORBIDDEN
    └── InternalError              → INTERNAL_SERVER_ERROR
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_IDENTIFIER = "invalid_identifier"
    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


# Machine-readable codes surfaced in GraphQL `extensions.code`
ERROR_CODES: Dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: "BAD_USER_INPUT",
    ErrorKind.INVALID_IDENTIFIER: "BAD_USER_INPUT",
    ErrorKind.NOT_FOUND: "NOT_FOUND",
    ErrorKind.DUPLICATE_KEY: "ALREADY_EXISTS",
    ErrorKind.UNAUTHENTICATED: "UNAUTHENTICATED",
    ErrorKind.FORBIDDEN: "FORBIDDEN",
    ErrorKind.INTERNAL: "INTERNAL_SERVER_ERROR",
}


class CatalogError(Exception):
    """
    Base exception for all Catalog API errors.

    Attributes:
        kind:     ErrorKind tag; determines the error code
        message:  User-facing error description (safe to return in API response)
        field:    Offending input field, when the error is field-scoped
        context:  Additional debug info (logged but NOT returned to client)
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.field = field
        self.context = context or {}
        if field:
            self.context.setdefault("field", field)
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return ERROR_CODES[self.kind]

    @property
    def extensions(self) -> Dict[str, Any]:
        """GraphQL error extensions for this error."""
        ext: Dict[str, Any] = {"code": self.code}
        if self.field:
            ext["field"] = self.field
        return ext


class InvalidInputError(CatalogError):
    """
    Raised when a payload breaks a business rule (negative price, blank name...).

    Always raised before any storage mutation is attempted.
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(
        self,
        field: str,
        message: str = "Invalid input",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, field=field, context=context)


class InvalidIdentifierError(CatalogError):
    """Raised when an identifier does not match the storage layer's format."""

    kind = ErrorKind.INVALID_IDENTIFIER

    def __init__(
        self,
        field: str = "id",
        value: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The value provided for '{field}' is not a valid identifier"
        if value is not None:
            message = f"'{value}' is not a valid identifier for '{field}'"
        super().__init__(message=message, field=field, context=context)


class NotFoundError(CatalogError):
    """
    Raised when a point lookup or point mutation matches no record.

    The storage layer returns None for missing records (not an exception);
    the product service converts None into this error.
    """

    kind = ErrorKind.NOT_FOUND

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


class DuplicateKeyError(CatalogError):
    """Raised when a write would break a uniqueness constraint."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(
        self,
        field: str,
        value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"A record with the same '{field}' already exists"
        if value is not None:
            message = f"A record with {field} '{value}' already exists"
        super().__init__(message=message, field=field, context=context)


class UnauthenticatedError(CatalogError):
    kind = ErrorKind.UNAUTHENTICATED

    def __init__(
        self,
        message: str = "You must be authenticated to perform this operation",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(CatalogError):
    kind = ErrorKind.FORBIDDEN

    def __init__(
        self,
        message: str = "You do not have permission to perform this operation",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InternalError(CatalogError):
    """
    Catch-all for failures outside the taxonomy.

    Built at the GraphQL boundary from unrecognized exceptions. The message
    is replaced with a generic text in production; the original error is
    logged server-side only.
    """

    kind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str = "An internal server error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
