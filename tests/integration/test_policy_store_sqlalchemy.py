"""Integration tests for SqlAlchemyPolicyStore.

Tests run against a real SQLite file:
    - Tuples round-trip through the policy_tuple table
    - Duplicate inserts collapse
    - Pattern deletes run in one transaction
    - Rows with unknown values are skipped on load
    - A fresh engine sees tuples written by a previous engine
    - SQLAlchemy failures map to DatabaseError
"""

import pytest
from sqlalchemy import func, select

from fuel_permissions.core.enums import ErrorCode
from fuel_permissions.core.result import Failure, Success
from fuel_permissions.domain.enums import Action, GroupRole
from fuel_permissions.domain.value_objects import (
    GrantPattern,
    GrantTuple,
    MembershipPattern,
    MembershipTuple,
)
from fuel_permissions.infrastructure.authorization.permissions_engine import (
    PermissionsEngine,
)
from fuel_permissions.infrastructure.authorization.sqlalchemy_store import (
    SqlAlchemyPolicyStore,
)
from fuel_permissions.infrastructure.enums import InfrastructureErrorCode
from fuel_permissions.infrastructure.errors import DatabaseError
from fuel_permissions.infrastructure.persistence.database import Database
from fuel_permissions.infrastructure.persistence.models import PolicyTupleModel

GRANT = GrantTuple(subject="team", resource="world-1", action=Action.WRITE)
MEMBERSHIP = MembershipTuple(user="alice", group="team", role=GroupRole.OWNER)


@pytest.fixture
def database(tmp_path):
    db = Database(database_url=f"sqlite:///{tmp_path / 'policy.db'}")
    db.create_all()
    yield db
    db.close()


@pytest.fixture
def store(database):
    return SqlAlchemyPolicyStore(database)


def _row_count(database: Database) -> int:
    with database.get_session() as session:
        return session.execute(select(func.count(PolicyTupleModel.id))).scalar_one()


@pytest.mark.integration
class TestSqlAlchemyPolicyStore:
    """Store operations on a real database."""

    def test_empty_load(self, store):
        loaded = store.load_all()

        assert isinstance(loaded, Success)
        assert loaded.value.grants == frozenset()
        assert loaded.value.memberships == frozenset()

    def test_round_trip(self, store):
        assert store.insert(GRANT) == Success(value=None)
        assert store.insert(MEMBERSHIP) == Success(value=None)

        loaded = store.load_all().value

        assert loaded.grants == {GRANT}
        assert loaded.memberships == {MEMBERSHIP}

    def test_duplicate_insert_is_single_row(self, store, database):
        store.insert(GRANT)
        store.insert(GRANT)

        assert _row_count(database) == 1

    def test_delete_by_patterns(self, store):
        store.insert(GRANT)
        store.insert(GrantTuple(subject="bob", resource="world-1", action=Action.READ))
        store.insert(MEMBERSHIP)
        store.insert(MembershipTuple(user="bob", group="other", role=GroupRole.MEMBER))

        result = store.delete(
            GrantPattern(resource="world-1"), MembershipPattern(group="team")
        )

        assert result == Success(value=3)
        loaded = store.load_all().value
        assert loaded.grants == frozenset()
        assert loaded.memberships == {
            MembershipTuple(user="bob", group="other", role=GroupRole.MEMBER)
        }

    def test_delete_narrowed_by_role(self, store):
        store.insert(MEMBERSHIP)
        store.insert(MembershipTuple(user="alice", group="team", role=GroupRole.MEMBER))

        store.delete(MembershipPattern(user="alice", group="team", role=GroupRole.OWNER))

        assert store.load_all().value.memberships == {
            MembershipTuple(user="alice", group="team", role=GroupRole.MEMBER)
        }

    def test_grant_and_membership_do_not_collide(self, store):
        # Same string values, different kinds.
        store.insert(GrantTuple(subject="a", resource="b", action=Action.READ))

        store.delete(MembershipPattern(user="a"))

        assert len(store.load_all().value.grants) == 1

    def test_unknown_values_are_skipped(self, store, database):
        with database.get_session() as session:
            session.add(PolicyTupleModel(kind="grant", v0="a", v1="r", v2="delete"))
            session.add(PolicyTupleModel(kind="membership", v0="a", v1="g", v2="boss"))
            session.add(PolicyTupleModel(kind="p", v0="a", v1="r", v2="read"))
        store.insert(GRANT)

        loaded = store.load_all().value

        assert loaded.grants == {GRANT}
        assert loaded.memberships == frozenset()


@pytest.mark.integration
class TestStoreFailures:
    """SQLAlchemy errors surface as DatabaseError."""

    def test_missing_table(self, tmp_path):
        db = Database(database_url=f"sqlite:///{tmp_path / 'empty.db'}")
        store = SqlAlchemyPolicyStore(db)

        result = store.load_all()

        assert isinstance(result, Failure)
        assert isinstance(result.error, DatabaseError)
        assert result.error.code == ErrorCode.STORAGE_FAILURE
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.DATABASE_CONNECTION_FAILED
        )
        assert result.error.details["operation"] == "load_all"
        db.close()


@pytest.mark.integration
class TestEnginePersistence:
    """Engines over the same database share durable state."""

    def test_new_engine_sees_previous_writes(self, database, mock_logger):
        first = PermissionsEngine(SqlAlchemyPolicyStore(database), mock_logger)
        first.init("")
        first.add_user_group_role("alice", "team", GroupRole.MEMBER)
        first.add_permission("team", "world-1", Action.WRITE)
        first.add_permission("bob", "world-2", Action.READ)
        first.remove_resource("world-2")

        second = PermissionsEngine(SqlAlchemyPolicyStore(database), mock_logger)
        second.init("")

        assert isinstance(second.is_authorized("alice", "world-1", Action.WRITE), Success)
        assert isinstance(second.is_authorized("bob", "world-2", Action.READ), Failure)
        assert second.get_groups_and_roles_for_user("alice") == {"team": "member"}
