"""add_policy_tuple_table

Revision ID: 5b1f0c2a7d3e
Revises:
Create Date: 2026-10-17 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5b1f0c2a7d3e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create policy_tuple table."""
    op.create_table(
        "policy_tuple",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "kind",
            sa.String(length=16),
            nullable=False,
            comment="Tuple kind: grant or membership",
        ),
        sa.Column(
            "v0",
            sa.String(length=255),
            nullable=False,
            comment="grant: subject, membership: user",
        ),
        sa.Column(
            "v1",
            sa.String(length=255),
            nullable=False,
            comment="grant: resource, membership: group",
        ),
        sa.Column(
            "v2",
            sa.String(length=32),
            nullable=False,
            comment="grant: action, membership: role",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("kind", "v0", "v1", "v2", name="uq_policy_tuple_values"),
    )
    op.create_index("idx_policy_tuple_kind_v0", "policy_tuple", ["kind", "v0"])
    op.create_index("idx_policy_tuple_kind_v1", "policy_tuple", ["kind", "v1"])


def downgrade() -> None:
    """Drop policy_tuple table."""
    op.drop_index("idx_policy_tuple_kind_v1", table_name="policy_tuple")
    op.drop_index("idx_policy_tuple_kind_v0", table_name="policy_tuple")
    op.drop_table("policy_tuple")
