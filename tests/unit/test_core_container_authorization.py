"""Unit tests for the permissions engine container.

Tests cover:
- init_permissions() builds, loads and stores the singleton
- get_permissions() before init raises
- Double init raises
- Load failure aborts startup
- Policy store backend selection
"""

from unittest.mock import MagicMock, Mock, patch

import pytest

from fuel_permissions.core.container import authorization as container
from fuel_permissions.core.container import infrastructure
from fuel_permissions.core.enums import ErrorCode
from fuel_permissions.core.result import Failure
from fuel_permissions.infrastructure.authorization.memory_store import (
    InMemoryPolicyStore,
)
from fuel_permissions.infrastructure.authorization.permissions_engine import (
    PermissionsEngine,
)
from fuel_permissions.infrastructure.authorization.sqlalchemy_store import (
    SqlAlchemyPolicyStore,
)
from fuel_permissions.infrastructure.errors import DatabaseError


@pytest.fixture(autouse=True)
def clean_container():
    container.reset_permissions()
    infrastructure.get_policy_store.cache_clear()
    infrastructure.get_database.cache_clear()
    yield
    container.reset_permissions()
    infrastructure.get_policy_store.cache_clear()
    infrastructure.get_database.cache_clear()


@pytest.fixture
def logger():
    mock = MagicMock()
    mock.bind.return_value = mock
    return mock


@pytest.mark.unit
class TestInitPermissions:
    """Tests for init_permissions() / get_permissions()."""

    def test_get_before_init_raises(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            container.get_permissions()

    def test_init_installs_singleton(self, logger):
        with (
            patch.object(container, "get_logger", return_value=logger),
            patch.object(
                container, "get_policy_store", return_value=InMemoryPolicyStore()
            ),
            patch.object(container.settings, "system_admins", "root, ops"),
        ):
            engine = container.init_permissions()

        assert isinstance(engine, PermissionsEngine)
        assert container.get_permissions() is engine
        assert engine.system_admins == {"root", "ops"}

    def test_double_init_raises(self, logger):
        with (
            patch.object(container, "get_logger", return_value=logger),
            patch.object(
                container, "get_policy_store", return_value=InMemoryPolicyStore()
            ),
        ):
            container.init_permissions()
            with pytest.raises(RuntimeError, match="already initialized"):
                container.init_permissions()

    def test_load_failure_aborts_startup(self, logger):
        store = Mock()
        store.load_all.return_value = Failure(
            error=DatabaseError(
                code=ErrorCode.STORAGE_FAILURE,
                message="Policy store load_all failed: no such table",
            )
        )
        with (
            patch.object(container, "get_logger", return_value=logger),
            patch.object(container, "get_policy_store", return_value=store),
        ):
            with pytest.raises(RuntimeError, match="Failed to load policy"):
                container.init_permissions()

        logger.critical.assert_called_once()
        with pytest.raises(RuntimeError):
            container.get_permissions()


@pytest.mark.unit
class TestPolicyStoreSelection:
    """Tests for get_policy_store() backend selection."""

    def test_memory_backend(self):
        with patch.object(infrastructure.settings, "policy_store_backend", "memory"):
            store = infrastructure.get_policy_store()

        assert isinstance(store, InMemoryPolicyStore)

    def test_database_backend(self):
        with (
            patch.object(infrastructure.settings, "policy_store_backend", "database"),
            patch.object(infrastructure.settings, "database_url", "sqlite://"),
        ):
            store = infrastructure.get_policy_store()

        assert isinstance(store, SqlAlchemyPolicyStore)
