"""Unit tests for authorization domain enums.

Tests for Action and GroupRole enums.
"""

import pytest

from fuel_permissions.domain.enums import Action, GroupRole


# =============================================================================
# Action Tests
# =============================================================================


@pytest.mark.unit
class TestAction:
    """Tests for Action enum."""

    def test_all_actions_exist(self) -> None:
        """Test all expected actions are defined."""
        assert Action.READ.value == "read"
        assert Action.WRITE.value == "write"

    def test_action_count(self) -> None:
        """Test expected number of actions."""
        assert len(Action) == 2

    def test_action_is_string_enum(self) -> None:
        """Test actions compare equal to their persisted names."""
        assert Action.READ == "read"
        assert Action("write") is Action.WRITE

    def test_values(self) -> None:
        """Test values() lists every action name."""
        assert Action.values() == ["read", "write"]

    def test_is_valid(self) -> None:
        """Test is_valid() accepts only known names."""
        assert Action.is_valid("read")
        assert not Action.is_valid("delete")
        assert not Action.is_valid("READ")

    def test_invalid_action_raises_error(self) -> None:
        """Test invalid action value raises ValueError."""
        with pytest.raises(ValueError):
            Action("execute")


# =============================================================================
# GroupRole Tests
# =============================================================================


@pytest.mark.unit
class TestGroupRole:
    """Tests for GroupRole enum."""

    def test_all_roles_exist(self) -> None:
        """Test all expected roles are defined."""
        assert GroupRole.OWNER.value == "owner"
        assert GroupRole.ADMIN.value == "admin"
        assert GroupRole.MEMBER.value == "member"

    def test_values_in_precedence_order(self) -> None:
        """Test values() lists roles highest first."""
        assert GroupRole.values() == ["owner", "admin", "member"]

    def test_is_valid(self) -> None:
        """Test is_valid() accepts only known names."""
        assert GroupRole.is_valid("member")
        assert not GroupRole.is_valid("superuser")
        assert not GroupRole.is_valid("")

    def test_role_from_value(self) -> None:
        """Test creating role from string value."""
        assert GroupRole("owner") == GroupRole.OWNER

    def test_invalid_role_raises_error(self) -> None:
        """Test invalid role value raises ValueError."""
        with pytest.raises(ValueError):
            GroupRole("guest")
