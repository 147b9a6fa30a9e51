"""Base model for all database entities.

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain value objects (GrantTuple, MembershipTuple) do NOT inherit from this
- Stores map between the two

Usage:
    class PolicyTupleModel(BaseModel):
        __tablename__ = "policy_tuple"
        kind: Mapped[str]
        # Has: id, created_at
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields:
    - id: Auto-incrementing integer primary key
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"
