"""Unit tests for the system administrator registry."""

import pytest

from fuel_permissions.infrastructure.authorization.admin_registry import (
    AdminRegistry,
    parse_admins_csv,
)


@pytest.mark.unit
class TestParseAdminsCsv:
    """Tests for CSV parsing."""

    def test_trims_and_drops_empty_entries(self):
        assert parse_admins_csv("userA, userB,   ") == {"userA", "userB"}

    def test_empty_string(self):
        assert parse_admins_csv("") == frozenset()

    def test_only_separators(self):
        assert parse_admins_csv(" , ,") == frozenset()

    def test_duplicates_collapse(self):
        assert parse_admins_csv("root,root , root") == {"root"}


@pytest.mark.unit
class TestAdminRegistry:
    """Tests for AdminRegistry."""

    def test_starts_empty(self):
        registry = AdminRegistry()

        assert registry.members == frozenset()
        assert not registry.contains("root")

    def test_replace_is_wholesale(self):
        registry = AdminRegistry(["old"])

        installed = registry.replace("new1,new2")

        assert installed == {"new1", "new2"}
        assert registry.members == installed
        assert not registry.contains("old")

    def test_replace_with_empty_clears(self):
        registry = AdminRegistry(["root"])

        registry.replace("")

        assert registry.members == frozenset()

    def test_members_is_immutable(self):
        registry = AdminRegistry(["root"])

        assert isinstance(registry.members, frozenset)
