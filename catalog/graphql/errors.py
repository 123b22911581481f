"""
Catalog API - GraphQL Error Handling
====================================

What:  Logs and formats every error a GraphQL operation produces.
How:   Two hooks on the strawberry schema:
         CatalogSchema.process_errors   logs each error server-side
         ErrorFormattingExtension       writes `extensions.code` (+ `field`)
                                        and masks internal messages in production

Error mapping:
    CatalogError subclass    → its own code (BAD_USER_INPUT, NOT_FOUND, ...)
    request / coercion error → BAD_USER_INPUT, never masked
                               (syntax, schema validation, bad variable values)
    anything else            → INTERNAL_SERVER_ERROR
"""

import logging
import re
from typing import Any, Dict, Iterator, List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from catalog.config import settings
from catalog.exceptions import ERROR_CODES, CatalogError, ErrorKind, InternalError
from catalog.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

GENERIC_INTERNAL_MESSAGE = "An internal server error occurred. Please try again later."

# graphql-core: "Variable '$stock' got invalid value 1.5; ..." / "... was not provided."
_VARIABLE_NAME = re.compile(r"Variable '\$(\w+)'")


def is_request_error(error: GraphQLError) -> bool:
    """
    True for errors the GraphQL engine raised about the request itself.

    These have no resolver path (parse, validation, variable coercion) or
    wrap another GraphQLError; no resolver code ran for them.
    """
    original = error.original_error
    return error.path is None or original is None or isinstance(original, GraphQLError)


def request_error_extensions(error: GraphQLError) -> Dict[str, Any]:
    extensions: Dict[str, Any] = {"code": ERROR_CODES[ErrorKind.INVALID_INPUT]}
    match = _VARIABLE_NAME.search(error.message)
    if match:
        extensions["field"] = match.group(1)
    return extensions


def format_error(error: GraphQLError, mask_internal: bool) -> GraphQLError:
    """Return `error` with extensions set according to the error mapping."""
    original = error.original_error

    if isinstance(original, CatalogError):
        error.extensions = {**(error.extensions or {}), **original.extensions}
        return error

    if is_request_error(error):
        error.extensions = {**(error.extensions or {}), **request_error_extensions(error)}
        return error

    internal = InternalError(
        message=GENERIC_INTERNAL_MESSAGE if mask_internal else error.message,
    )
    return GraphQLError(
        internal.message,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=None if mask_internal else original,
        extensions=internal.extensions,
    )


class ErrorFormattingExtension(SchemaExtension):
    """
    Post-processes the operation result's errors after execution.

    Used instead of strawberry's MaskErrors: every error needs an
    `extensions.code`, not only the masked ones.
    """

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        errors = getattr(result, "errors", None)
        if not errors:
            return
        mask_internal = settings.is_production
        errors[:] = [format_error(error, mask_internal) for error in errors]


class CatalogSchema(strawberry.Schema):
    """Strawberry schema whose error logging carries the request id."""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[object] = None,
    ) -> None:
        rid = request_id_var.get("")
        for error in errors:
            original = error.original_error
            if isinstance(original, CatalogError):
                logger.warning(
                    "[%s] GraphQL %s error at %s: %s",
                    rid, original.code, error.path, original.message,
                )
            elif is_request_error(error):
                logger.warning("[%s] GraphQL request error: %s", rid, error.message)
            else:
                logger.error(
                    "[%s] Unexpected error at %s: %s",
                    rid,
                    error.path,
                    str(original),
                    exc_info=original,
                )
