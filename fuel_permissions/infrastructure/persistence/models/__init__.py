"""Database models for persistence layer.

Models:
    - policy_tuple.py: Grant and membership tuples of the permissions engine

Note:
    Domain value objects live in fuel_permissions/domain/value_objects/.
    They are mapped to and from these models by the policy store.
"""

from fuel_permissions.infrastructure.persistence.models.policy_tuple import (
    PolicyTupleKind,
    PolicyTupleModel,
)

__all__ = ["PolicyTupleKind", "PolicyTupleModel"]
