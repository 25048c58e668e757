"""
Feedback Elicitation MCP Server

This is the Model Context Protocol server that lets an LLM agent ask its
human for feedback mid-task. Instead of opening a web UI, it sends an MCP
elicitation request and the client renders the form.

TOOLS:
  1. interactive_feedback - Ask the human for feedback on the work so far

Usage:
    # Run as MCP server (stdio)
    python -m feedback_elicitation.mcp_server.server

    # Or import for testing
    from feedback_elicitation.mcp_server.server import mcp
"""

import asyncio
import atexit
import logging
import sys
from typing import Annotated, Any, Dict

from fastmcp import Context, FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from ..config import (
    DEFAULT_PROJECT_DIRECTORY,
    DEFAULT_SUMMARY,
    SERVER_NAME,
    FeedbackConfig,
)
from ..prompt import SERVER_INSTRUCTIONS
from .orchestrator import FeedbackOrchestrator
from .registry import SessionRegistry

# Configure logging
logger = logging.getLogger(__name__)

# Resolved once at startup and shared by every request
config = FeedbackConfig.from_env()
registry = SessionRegistry()
orchestrator = FeedbackOrchestrator(config=config, registry=registry)

# Create FastMCP server
mcp = FastMCP(
    name=SERVER_NAME,
    instructions=SERVER_INSTRUCTIONS,
)


class McpElicitationChannel:
    """Sends elicitation/create requests back to the client of a tool call."""

    def __init__(self, ctx: Context):
        self.ctx = ctx

    async def elicit(
        self,
        message: str,
        requested_schema: Dict[str, Any],
        timeout_ms: int,
    ) -> Any:
        """
        Ask the client to collect data matching requested_schema.

        Raises:
            asyncio.TimeoutError: If the client does not answer within timeout_ms.
            McpError: If the client rejects the request.
        """
        return await asyncio.wait_for(
            self.ctx.session.elicit(
                message=message,
                requestedSchema=requested_schema,
                related_request_id=self.ctx.request_id,
            ),
            timeout=timeout_ms / 1000,
        )


def shutdown() -> None:
    """Drop any sessions still waiting when the process exits."""
    count = registry.clear()
    logger.info(f"Shutting down, cleaned up {count} active sessions")


# Register cleanup at exit
atexit.register(shutdown)


# =============================================================================
# Tool: interactive_feedback
# =============================================================================

@mcp.tool(name="interactive_feedback", description=config.tool_description)
async def interactive_feedback(
    ctx: Context,
    project_directory: Annotated[
        str, Field(description="Project directory path for context")
    ] = DEFAULT_PROJECT_DIRECTORY,
    summary: Annotated[
        str, Field(description="Summary of AI work completed for user review")
    ] = DEFAULT_SUMMARY,
) -> str:
    """Collect feedback from the human through MCP elicitation."""
    response = await orchestrator.handle_feedback_request(
        {"project_directory": project_directory, "summary": summary},
        McpElicitationChannel(ctx),
    )
    if response.is_error:
        raise ToolError(response.text)
    return response.text


# =============================================================================
# Main entry point
# =============================================================================

def main() -> None:
    """Run the server over stdio. Logs go to stderr, stdout carries MCP."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger.info(f"Starting {SERVER_NAME} server")
    mcp.run()


if __name__ == "__main__":
    main()
