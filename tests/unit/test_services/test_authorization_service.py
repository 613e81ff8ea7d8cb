# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for authorization_service."""

import pytest

from rolegate.models import UserType
from rolegate.rbac.permissions import Permission
from rolegate.services import authorization_service
from rolegate.services.authorization_service import AccessDecision

A = Permission.BUNDLES_VIEW
B = Permission.BUNDLES_EDIT


@pytest.fixture
def user_with_a(make_role, make_user):
    role = make_role("Viewer", [A.value])
    return make_user("viewer", roles=[role])


class TestAuthorize:
    """Tests for authorize."""

    def test_single_permission_allowed(self, db_session, user_with_a):
        assert authorization_service.authorize(db_session, user_with_a, A) == AccessDecision.ALLOW

    def test_single_permission_denied(self, db_session, user_with_a):
        assert authorization_service.authorize(db_session, user_with_a, B) == AccessDecision.DENY

    def test_all_semantics_denies_partial_match(self, db_session, user_with_a):
        decision = authorization_service.authorize(
            db_session, user_with_a, [A, B], require_all=True
        )
        assert decision == AccessDecision.DENY

    def test_any_semantics_allows_partial_match(self, db_session, user_with_a):
        decision = authorization_service.authorize(
            db_session, user_with_a, [A, B], require_all=False
        )
        assert decision == AccessDecision.ALLOW

    def test_all_is_default(self, db_session, user_with_a):
        assert authorization_service.authorize(db_session, user_with_a, [A, B]) == AccessDecision.DENY

    def test_any_with_no_match(self, db_session, user_with_a):
        decision = authorization_service.authorize(
            db_session, user_with_a, [B, Permission.ROLES_DELETE], require_all=False
        )
        assert decision == AccessDecision.DENY

    def test_empty_requirement(self, db_session, user_with_a):
        assert authorization_service.authorize(db_session, user_with_a, []) == AccessDecision.ALLOW
        assert (
            authorization_service.authorize(db_session, user_with_a, [], require_all=False)
            == AccessDecision.DENY
        )

    def test_plain_string_code(self, db_session, user_with_a):
        assert authorization_service.is_allowed(db_session, user_with_a, "bundles.view")

    def test_user_without_roles_is_denied(self, db_session, plain_user):
        assert authorization_service.authorize(db_session, plain_user, A) == AccessDecision.DENY

    @pytest.mark.parametrize("require_all", [True, False])
    def test_admin_bypass(self, db_session, make_user, require_all):
        admin = make_user("root", user_type=UserType.ADMIN)
        for required in (A, [A, B], list(Permission)):
            decision = authorization_service.authorize(
                db_session, admin, required, require_all=require_all
            )
            assert decision == AccessDecision.ALLOW

    def test_is_allowed(self, db_session, user_with_a):
        assert authorization_service.is_allowed(db_session, user_with_a, A) is True
        assert authorization_service.is_allowed(db_session, user_with_a, B) is False
