"""SQLAlchemy policy store.

Adapter for hexagonal architecture: implements PolicyStoreProtocol on the
policy_tuple table and maps rows to domain tuples.

Error Handling:
    SQLAlchemyError is caught and returned as Failure(DatabaseError) with
    ErrorCode.STORAGE_FAILURE. Other exceptions propagate.
"""

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.sql.elements import ColumnElement

from fuel_permissions.core.enums import ErrorCode
from fuel_permissions.core.result import Failure, Result, Success
from fuel_permissions.domain.enums import Action, GroupRole
from fuel_permissions.domain.value_objects import (
    GrantPattern,
    GrantTuple,
    MembershipTuple,
    PolicyPattern,
    PolicySet,
    PolicyTuple,
)
from fuel_permissions.infrastructure.enums import InfrastructureErrorCode
from fuel_permissions.infrastructure.errors import DatabaseError
from fuel_permissions.infrastructure.persistence.database import Database
from fuel_permissions.infrastructure.persistence.models import (
    PolicyTupleKind,
    PolicyTupleModel,
)


class SqlAlchemyPolicyStore:
    """Policy store persisting tuples in the policy_tuple table.

    Attributes:
        database: Database providing transactional sessions.

    Example:
        >>> store = SqlAlchemyPolicyStore(Database(settings.database_url))
        >>> store.insert(GrantTuple(subject="alice", resource="m1", action=Action.READ))
        Success(value=None)
    """

    def __init__(self, database: Database) -> None:
        """Initialize store with database.

        Args:
            database: Database providing sessions.
        """
        self.database = database

    def load_all(self) -> Result[PolicySet, DatabaseError]:
        """Load every row and map it to grant/membership tuples.

        Rows with an unknown kind, action or role are skipped.
        """
        try:
            with self.database.get_session() as session:
                rows = session.execute(select(PolicyTupleModel)).scalars().all()
                grants: set[GrantTuple] = set()
                memberships: set[MembershipTuple] = set()
                for row in rows:
                    if row.kind == PolicyTupleKind.GRANT.value and Action.is_valid(
                        row.v2
                    ):
                        grants.add(
                            GrantTuple(
                                subject=row.v0, resource=row.v1, action=Action(row.v2)
                            )
                        )
                    elif row.kind == PolicyTupleKind.MEMBERSHIP.value and (
                        GroupRole.is_valid(row.v2)
                    ):
                        memberships.add(
                            MembershipTuple(
                                user=row.v0, group=row.v1, role=GroupRole(row.v2)
                            )
                        )
        except SQLAlchemyError as e:
            return Failure(error=self._to_error("load_all", e))

        return Success(
            value=PolicySet(
                grants=frozenset(grants), memberships=frozenset(memberships)
            )
        )

    def insert(self, item: PolicyTuple) -> Result[None, DatabaseError]:
        """Insert one tuple unless an identical row exists."""
        kind, v0, v1, v2 = self._to_row(item)
        try:
            with self.database.get_session() as session:
                existing = session.execute(
                    select(PolicyTupleModel.id).where(
                        PolicyTupleModel.kind == kind,
                        PolicyTupleModel.v0 == v0,
                        PolicyTupleModel.v1 == v1,
                        PolicyTupleModel.v2 == v2,
                    )
                ).first()
                if existing is None:
                    session.add(PolicyTupleModel(kind=kind, v0=v0, v1=v1, v2=v2))
        except SQLAlchemyError as e:
            return Failure(error=self._to_error("insert", e, kind=kind))
        return Success(value=None)

    def delete(self, *patterns: PolicyPattern) -> Result[int, DatabaseError]:
        """Delete rows matched by any pattern in a single transaction."""
        if not patterns:
            return Success(value=0)
        condition = or_(*(self._to_condition(pattern) for pattern in patterns))
        try:
            with self.database.get_session() as session:
                result = session.execute(delete(PolicyTupleModel).where(condition))
                deleted = result.rowcount or 0
        except SQLAlchemyError as e:
            return Failure(error=self._to_error("delete", e))
        return Success(value=deleted)

    @staticmethod
    def _to_row(item: PolicyTuple) -> tuple[str, str, str, str]:
        if isinstance(item, GrantTuple):
            return (
                PolicyTupleKind.GRANT.value,
                item.subject,
                item.resource,
                item.action.value,
            )
        return (
            PolicyTupleKind.MEMBERSHIP.value,
            item.user,
            item.group,
            item.role.value,
        )

    @staticmethod
    def _to_condition(pattern: PolicyPattern) -> ColumnElement[bool]:
        if isinstance(pattern, GrantPattern):
            kind = PolicyTupleKind.GRANT.value
            values = (
                pattern.subject,
                pattern.resource,
                pattern.action.value if pattern.action else None,
            )
        else:
            kind = PolicyTupleKind.MEMBERSHIP.value
            values = (
                pattern.user,
                pattern.group,
                pattern.role.value if pattern.role else None,
            )
        columns = (PolicyTupleModel.v0, PolicyTupleModel.v1, PolicyTupleModel.v2)
        clauses = [PolicyTupleModel.kind == kind]
        clauses.extend(
            column == value
            for column, value in zip(columns, values)
            if value is not None
        )
        return and_(*clauses)

    @staticmethod
    def _to_error(operation: str, e: SQLAlchemyError, **context: str) -> DatabaseError:
        if isinstance(e, IntegrityError):
            infrastructure_code = InfrastructureErrorCode.DATABASE_CONSTRAINT_VIOLATION
        elif isinstance(e, OperationalError):
            infrastructure_code = InfrastructureErrorCode.DATABASE_CONNECTION_FAILED
        else:
            infrastructure_code = InfrastructureErrorCode.DATABASE_ERROR
        return DatabaseError(
            code=ErrorCode.STORAGE_FAILURE,
            message=f"Policy store {operation} failed: {str(e)}",
            infrastructure_code=infrastructure_code,
            details={
                "operation": operation,
                "error_type": type(e).__name__,
                **context,
            },
        )
