"""Unit tests for the static role table."""

import pytest

from fuel_permissions.core.enums import ErrorCode
from fuel_permissions.core.errors import ValidationError
from fuel_permissions.core.result import Failure, Success
from fuel_permissions.domain.enums import Action, GroupRole
from fuel_permissions.infrastructure.authorization.role_table import (
    compare_roles,
    highest_role,
    parse_role,
    role_permits,
)


@pytest.mark.unit
class TestRolePermits:
    """Tests for implied actions of each role."""

    @pytest.mark.parametrize("role", [GroupRole.OWNER, GroupRole.ADMIN])
    def test_owner_and_admin_read_and_write(self, role):
        assert role_permits(role, Action.READ)
        assert role_permits(role, Action.WRITE)

    def test_member_is_read_only(self):
        assert role_permits(GroupRole.MEMBER, Action.READ)
        assert not role_permits(GroupRole.MEMBER, Action.WRITE)


@pytest.mark.unit
class TestPrecedence:
    """Tests for highest_role() and compare_roles()."""

    def test_highest_role_ignores_order(self):
        roles = [GroupRole.MEMBER, GroupRole.OWNER, GroupRole.ADMIN]

        assert highest_role(roles) == GroupRole.OWNER
        assert highest_role(reversed(roles)) == GroupRole.OWNER

    def test_highest_role_of_nothing_is_none(self):
        assert highest_role([]) is None

    def test_compare_roles(self):
        assert compare_roles(GroupRole.OWNER, GroupRole.ADMIN) > 0
        assert compare_roles(GroupRole.ADMIN, GroupRole.ADMIN) == 0
        assert compare_roles(GroupRole.MEMBER, GroupRole.ADMIN) < 0


@pytest.mark.unit
class TestParseRole:
    """Tests for parse_role()."""

    def test_known_name(self):
        result = parse_role("admin")

        assert result == Success(value=GroupRole.ADMIN)

    def test_unknown_name(self):
        result = parse_role("superuser")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_ROLE
        assert result.error.field == "role"
