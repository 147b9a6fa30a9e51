"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from fuel_permissions.domain.protocols import AuthorizationProtocol
"""

from fuel_permissions.domain.protocols.authorization_protocol import (
    AuthorizationProtocol,
)
from fuel_permissions.domain.protocols.logger_protocol import LoggerProtocol
from fuel_permissions.domain.protocols.policy_store_protocol import (
    PolicyStoreProtocol,
)

__all__ = [
    "AuthorizationProtocol",
    "LoggerProtocol",
    "PolicyStoreProtocol",
]
