"""Domain value objects.

Usage:
    from fuel_permissions.domain.value_objects import GrantTuple, MembershipTuple
"""

from fuel_permissions.domain.value_objects.policy_tuples import (
    GrantPattern,
    GrantTuple,
    MembershipPattern,
    MembershipTuple,
    PolicyPattern,
    PolicySet,
    PolicyTuple,
)

__all__ = [
    "GrantPattern",
    "GrantTuple",
    "MembershipPattern",
    "MembershipTuple",
    "PolicyPattern",
    "PolicySet",
    "PolicyTuple",
]
