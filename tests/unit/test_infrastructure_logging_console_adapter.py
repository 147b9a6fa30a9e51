"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer and level selection

Architecture:
- Unit tests with mocked structlog
- Tests protocol compliance
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from fuel_permissions.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "fuel_permissions.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("method", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, method):
        """Test plain levels forward event name and context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, method)("permission_added", subject="alice")

            getattr(mock_logger, method).assert_called_once_with(
                "permission_added", subject="alice"
            )

    def test_error_adds_exception_details(self):
        """Test error() flattens exception type and message into context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error(
                "policy_store_error",
                error=RuntimeError("disk full"),
                operation="permission_added",
            )

            mock_logger.error.assert_called_once_with(
                "policy_store_error",
                operation="permission_added",
                error_type="RuntimeError",
                error_message="disk full",
            )

    def test_critical_without_exception(self):
        """Test critical() without error keeps context unchanged."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("permissions_init_failed", error_code="storage_failure")

            mock_logger.critical.assert_called_once_with(
                "permissions_init_failed", error_code="storage_failure"
            )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        """Test bind() wraps the bound structlog logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(component="permissions_engine")
            bound.info("policy_reloaded")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(component="permissions_engine")
            bound_logger.info.assert_called_once_with("policy_reloaded")

    def test_with_context_is_alias(self):
        """Test with_context() binds like bind()."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(request_id="r-1")

            mock_logger.bind.assert_called_once_with(request_id="r-1")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer(self):
        """Test use_json selects the JSON renderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer(self):
        """Test default selects the human-readable renderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_level_filtering(self):
        """Test level name is mapped to a numeric level."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="warning")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.WARNING
            )
