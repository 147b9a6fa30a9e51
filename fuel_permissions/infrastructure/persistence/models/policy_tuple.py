"""Policy tuple database model.

One table stores both tuple kinds of the permissions engine.

Tuple Kinds (kind):
    - 'grant': v0=subject, v1=resource, v2=action
    - 'membership': v0=user, v1=group, v2=role

Examples:
    kind='grant', v0='team-sim', v1='world-7', v2='write'
    Means: members of team-sim (and team-sim itself) can write world-7

    kind='membership', v0='alice', v1='org-osrf', v2='owner'
    Means: alice is an owner of org-osrf
"""

from enum import Enum

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from fuel_permissions.infrastructure.persistence.base import BaseModel


class PolicyTupleKind(str, Enum):
    """Discriminator for the policy_tuple.kind column."""

    GRANT = "grant"
    MEMBERSHIP = "membership"


class PolicyTupleModel(BaseModel):
    """Policy tuple model.

    Fields:
        id: Auto-incrementing integer primary key
        kind: 'grant' or 'membership'
        v0-v2: Tuple values (meaning depends on kind)
    """

    __tablename__ = "policy_tuple"

    kind: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        comment="Tuple kind: 'grant' or 'membership'",
    )

    v0: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Subject for 'grant', user for 'membership'",
    )

    v1: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Resource for 'grant', group for 'membership'",
    )

    v2: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Action for 'grant', role for 'membership'",
    )

    __table_args__ = (
        UniqueConstraint("kind", "v0", "v1", "v2", name="uq_policy_tuple_values"),
        Index("idx_policy_tuple_kind_v1", "kind", "v1"),
        Index("idx_policy_tuple_kind_v0", "kind", "v0"),
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of the tuple.
        """
        return (
            f"<PolicyTupleModel(kind={self.kind}, "
            f"v0={self.v0}, v1={self.v1}, v2={self.v2})>"
        )
