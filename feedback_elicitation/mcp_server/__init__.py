"""
Feedback Elicitation MCP Server

This package provides the Model Context Protocol server exposing the
interactive_feedback tool.

Usage:
    # Run as MCP server
    python -m feedback_elicitation.mcp_server.server

    # Or import for programmatic use
    from feedback_elicitation.mcp_server import (
        FeedbackOrchestrator,
        SessionRegistry,
    )
"""

from .orchestrator import ElicitationChannel, FeedbackOrchestrator, is_timeout_error
from .registry import SessionRegistry

__all__ = [
    "ElicitationChannel",
    "FeedbackOrchestrator",
    "SessionRegistry",
    "is_timeout_error",
]
