"""
Catalog API - Authorization Gate Tests
======================================

What:  Tests for principal resolution and the per-operation capability checks.

What we test:
    ✅ Configured tokens map to the ADMIN and USER principals
    ✅ "Bearer <token>" and raw tokens are both accepted
    ✅ Unknown or missing credentials are anonymous
    ✅ Authentication is checked before role
"""

import os

import pytest

from catalog.auth import (
    ADMIN_PRINCIPAL,
    USER_PRINCIPAL,
    Role,
    principal_from_authorization,
    require_admin,
    require_authenticated,
)
from catalog.exceptions import ForbiddenError, UnauthenticatedError

ADMIN_TOKEN = os.environ["ADMIN_TOKEN"]
USER_TOKEN = os.environ["USER_TOKEN"]


class TestPrincipalFromAuthorization:

    def test_admin_bearer(self):
        principal = principal_from_authorization(f"Bearer {ADMIN_TOKEN}")
        assert principal == ADMIN_PRINCIPAL
        assert principal.role is Role.ADMIN
        assert principal.is_admin

    def test_user_bearer(self):
        principal = principal_from_authorization(f"Bearer {USER_TOKEN}")
        assert principal == USER_PRINCIPAL
        assert not principal.is_admin

    def test_raw_token(self):
        assert principal_from_authorization(ADMIN_TOKEN) == ADMIN_PRINCIPAL

    def test_scheme_is_case_insensitive(self):
        assert principal_from_authorization(f"bearer {USER_TOKEN}") == USER_PRINCIPAL

    @pytest.mark.parametrize("header", [None, "", "   ", "Bearer ", "Bearer wrong", "wrong", "Bearer ñandú"])
    def test_anonymous(self, header):
        assert principal_from_authorization(header) is None


class TestRequireAuthenticated:

    def test_passes_principal_through(self):
        assert require_authenticated(USER_PRINCIPAL, "addProduct") is USER_PRINCIPAL

    def test_anonymous_rejected(self):
        with pytest.raises(UnauthenticatedError) as exc_info:
            require_authenticated(None, "addProduct")

        assert exc_info.value.code == "UNAUTHENTICATED"
        assert "addProduct" in exc_info.value.message


class TestRequireAdmin:

    def test_admin_allowed(self):
        assert require_admin(ADMIN_PRINCIPAL, "deleteProduct") is ADMIN_PRINCIPAL

    def test_user_forbidden(self):
        with pytest.raises(ForbiddenError) as exc_info:
            require_admin(USER_PRINCIPAL, "deleteProduct")
        assert exc_info.value.code == "FORBIDDEN"

    def test_anonymous_is_unauthenticated_not_forbidden(self):
        with pytest.raises(UnauthenticatedError):
            require_admin(None, "deleteProduct")
