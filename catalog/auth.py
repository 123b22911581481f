"""
Catalog API - Principals & Authorization Gate
=============================================

What:  Resolves the caller's principal from the bearer credential and
       checks per-operation capabilities before mutations run.
How:   principal_from_authorization() maps the configured tokens to the
       ADMIN and USER principals. require_authenticated() and require_admin()
       raise UnauthenticatedError / ForbiddenError. Authentication is always
       checked before role, so a missing principal never yields FORBIDDEN.
Who:   The GraphQL context getter (principal) and the mutation resolvers (gate).
"""

import logging
import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from catalog.config import settings
from catalog.exceptions import ForbiddenError, UnauthenticatedError

logger = logging.getLogger(__name__)


class Role(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


@dataclass(frozen=True)
class Principal:
    """Authenticated caller attached to one request context."""

    id: str
    role: Role
    name: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


ADMIN_PRINCIPAL = Principal(id="1", role=Role.ADMIN, name="Super Admin")
USER_PRINCIPAL = Principal(id="2", role=Role.USER, name="Catalog Editor")


def _extract_token(authorization: Optional[str]) -> str:
    if not authorization:
        return ""
    value = authorization.strip()
    scheme, _, credential = value.partition(" ")
    if credential and scheme.lower() == "bearer":
        return credential.strip()
    return value


def principal_from_authorization(authorization: Optional[str]) -> Optional[Principal]:
    """
    Map an Authorization header value to a principal.

    Accepts "Bearer <token>" or the raw token. Unknown or missing
    credentials yield None (anonymous).
    """
    token = _extract_token(authorization)
    if not token:
        return None
    if settings.admin_token and secrets.compare_digest(token.encode(), settings.admin_token.encode()):
        return ADMIN_PRINCIPAL
    if settings.user_token and secrets.compare_digest(token.encode(), settings.user_token.encode()):
        return USER_PRINCIPAL
    logger.debug("Unrecognized bearer credential; treating request as anonymous")
    return None


def require_authenticated(principal: Optional[Principal], operation: str) -> Principal:
    if principal is None:
        logger.warning("Rejected %s: no authenticated principal", operation)
        raise UnauthenticatedError(
            message=f"You must be authenticated to run {operation}",
            context={"operation": operation},
        )
    return principal


def require_admin(principal: Optional[Principal], operation: str) -> Principal:
    principal = require_authenticated(principal, operation)
    if not principal.is_admin:
        logger.warning("Rejected %s: principal %s lacks the ADMIN role", operation, principal.id)
        raise ForbiddenError(
            message=f"The ADMIN role is required to run {operation}",
            context={"operation": operation, "principal_id": principal.id},
        )
    return principal
