"""
Catalog API - Storage Error Normalizer
======================================

What:  Translates storage failures into the catalog error taxonomy.
How:   normalize_error() maps one exception to its typed counterpart:
         unique IntegrityError     → DuplicateKeyError(field)
         MalformedIdentifierError  → InvalidIdentifierError(field)
         CatalogError              → unchanged (already typed)
         anything else             → unchanged (reported as internal),
                                     including other IntegrityErrors
       normalized_errors() wraps a block of service code and re-raises the
       normalized error, chained to the original.
Who:   ProductService, around every storage-touching operation.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError

from catalog.exceptions import CatalogError, DuplicateKeyError, InvalidIdentifierError
from catalog.models.product import UNIQUE_NAME_CONSTRAINT
from catalog.repositories.product_repository import MalformedIdentifierError

logger = logging.getLogger(__name__)

# Constraint or column marker in the driver message → offending field
_UNIQUE_FIELDS = {
    UNIQUE_NAME_CONSTRAINT: "name",
    "products.name": "name",
    "(name)": "name",
}

# SQLite text / PostgreSQL text and SQLSTATE for a uniqueness violation
_UNIQUE_VIOLATION_MARKERS = ("UNIQUE constraint failed", "violates unique constraint")
_UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == _UNIQUE_VIOLATION_SQLSTATE:
        return True
    message = str(orig) if orig is not None else str(exc)
    return any(marker in message for marker in _UNIQUE_VIOLATION_MARKERS)


def duplicate_field(exc: IntegrityError) -> Optional[str]:
    """
    Field behind a uniqueness violation, or None.

    None for any other integrity failure (NOT NULL, CHECK, foreign key) and
    for uniqueness violations on columns with no known marker.
    """
    if not is_unique_violation(exc):
        return None
    message = str(exc.orig) if exc.orig is not None else str(exc)
    for marker, field in _UNIQUE_FIELDS.items():
        if marker in message:
            return field
    return None


def normalize_error(
    exc: BaseException,
    operation: str,
    log: Optional[logging.Logger] = None,
) -> BaseException:
    """
    Return the taxonomy error for `exc`, logging it when it is normalized.

    Unrecognized failures are returned as-is so the caller can re-raise them
    untouched; the GraphQL boundary reports those as INTERNAL_SERVER_ERROR.
    """
    log = log or logger
    field = duplicate_field(exc) if isinstance(exc, IntegrityError) else None

    if isinstance(exc, CatalogError):
        normalized: BaseException = exc
    elif field is not None:
        normalized = DuplicateKeyError(
            field=field,
            context={"operation": operation},
        )
    elif isinstance(exc, MalformedIdentifierError):
        normalized = InvalidIdentifierError(
            field=exc.field,
            value=str(exc.value),
            context={"operation": operation},
        )
    else:
        return exc

    log.error(
        "%s failed: %s [kind=%s field=%s]",
        operation,
        normalized.message,
        normalized.kind.value,
        normalized.field,
    )
    return normalized


@contextmanager
def normalized_errors(operation: str, log: Optional[logging.Logger] = None) -> Iterator[None]:
    """
    Run a block and re-raise any failure in normalized form.

    Example:
        with normalized_errors("get_by_id", self._logger):
            product = await self._repository.find_by_id(product_id)
    """
    try:
        yield
    except Exception as exc:
        normalized = normalize_error(exc, operation, log)
        if normalized is exc:
            raise
        raise normalized from exc
