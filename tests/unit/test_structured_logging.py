"""Tests for structured logging context."""

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.press.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Create a capturing logger for tests."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def test_bind_request_context(capturing_logger):
    """Test binding request_id to log context."""
    bind_request_context("test-request-123")
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == "test-request-123"


def test_bind_request_context_with_none(capturing_logger):
    """Test that None request_id is not bound."""
    bind_request_context(None)
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert "request_id" not in entries[0].kwargs


def test_bind_request_route(capturing_logger):
    bind_request_context("test-request-123", "POST", "/api/v1/artists")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["path"] == "/api/v1/artists"


def test_route_needs_method_and_path(capturing_logger):
    bind_request_context("test-request-123", "GET", None)
    structlog.get_logger().info("test message")

    assert "method" not in capturing_logger.calls[0].kwargs


def test_bind_user_context(capturing_logger):
    """Only the numeric user id is bound."""
    bind_user_context(42)
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert entries[0].kwargs["user_id"] == 42
    assert "user_email" not in entries[0].kwargs


def test_clear_request_context(capturing_logger):
    bind_request_context("test-request-123")
    bind_user_context(42)

    clear_request_context()

    structlog.get_logger().info("test message")
    entries = capturing_logger.calls
    assert "request_id" not in entries[0].kwargs
    assert "user_id" not in entries[0].kwargs


def test_context_accumulation(capturing_logger):
    """Request and user context accumulate across bind calls."""
    bind_request_context("test-request-123")
    bind_user_context(42)

    structlog.get_logger().info("test message")
    entries = capturing_logger.calls
    assert entries[0].kwargs["request_id"] == "test-request-123"
    assert entries[0].kwargs["user_id"] == 42
