"""Pytest configuration and shared fixtures.

Fixtures:
    mock_logger: LoggerProtocol double (bind() returns the same mock)
    memory_store: Empty InMemoryPolicyStore
    engine: PermissionsEngine over memory_store, initialized with one
        system administrator ("rootfortests")
"""

from unittest.mock import MagicMock

import pytest

from fuel_permissions.infrastructure.authorization.memory_store import (
    InMemoryPolicyStore,
)
from fuel_permissions.infrastructure.authorization.permissions_engine import (
    PermissionsEngine,
)

TEST_SYSTEM_ADMIN = "rootfortests"


@pytest.fixture
def mock_logger():
    """Logger double recording every call."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def memory_store():
    """Empty in-memory policy store."""
    return InMemoryPolicyStore()


@pytest.fixture
def engine(memory_store, mock_logger):
    """Initialized permissions engine backed by memory_store."""
    permissions = PermissionsEngine(store=memory_store, logger=mock_logger)
    permissions.init(TEST_SYSTEM_ADMIN)
    return permissions
