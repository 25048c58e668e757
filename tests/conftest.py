"""
Feedback Elicitation Test Configuration

Shared pytest fixtures and configuration for all tests.
"""

import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# =============================================================================
# Environment Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (runs a full MCP round trip)"
    )


# =============================================================================
# Fixtures: Configuration
# =============================================================================

@pytest.fixture
def feedback_config():
    """Default configuration with no environment overrides."""
    from feedback_elicitation.config import FeedbackConfig
    return FeedbackConfig()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every MCP_FEEDBACK_* variable for the duration of a test."""
    for name in (
        "MCP_FEEDBACK_PROMPT",
        "MCP_FEEDBACK_TEMPLATE",
        "MCP_FEEDBACK_REAFFIRM_PRINCIPLES",
        "MCP_FEEDBACK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# =============================================================================
# Fixtures: Sessions
# =============================================================================

@pytest.fixture
def session():
    """A fresh waiting session."""
    from feedback_elicitation.models import FeedbackSession
    return FeedbackSession.create("/tmp/project", "Implemented the login page")


@pytest.fixture
def registry():
    """An empty session registry."""
    from feedback_elicitation.mcp_server.registry import SessionRegistry
    return SessionRegistry()


# =============================================================================
# Fixtures: Elicitation channel
# =============================================================================

@pytest.fixture
def make_channel():
    """
    Factory for fake elicitation channels.

    Pass either a response (returned from elicit) or an exception
    (raised from elicit).
    """
    def _make(response=None, error=None):
        channel = SimpleNamespace()
        if error is not None:
            channel.elicit = AsyncMock(side_effect=error)
        else:
            channel.elicit = AsyncMock(return_value=response)
        return channel

    return _make
