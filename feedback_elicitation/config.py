"""
Feedback Elicitation Configuration

Settings are read from environment variables (a local .env file is loaded
first) into a FeedbackConfig, which is built once when the server starts
and passed to the orchestrator. Nothing else reads the environment.

ENVIRONMENT:
  - MCP_FEEDBACK_PROMPT: replaces the tool description shown to the agent
  - MCP_FEEDBACK_TEMPLATE: output template, {{feedback}} is substituted
  - MCP_FEEDBACK_REAFFIRM_PRINCIPLES: "true" to prefix output with the prompt
  - MCP_FEEDBACK_LOG_LEVEL: logging level for the server process
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .prompt import INTERACTIVE_FEEDBACK_PROMPT

# Load environment variables
load_dotenv()

SERVER_NAME = "mcp-feedback-elicitation"

# Clients are given a full day to answer before the request times out
ELICITATION_TIMEOUT_MS = 86_400_000

# Sessions older than this are purged from the registry
SESSION_MAX_AGE_MS = 25 * 60 * 60 * 1000

DEFAULT_PROJECT_DIRECTORY = "."
DEFAULT_SUMMARY = "I have completed the task you requested."

FEEDBACK_PLACEHOLDER = "{{feedback}}"
FEEDBACK_HEADER = "=== User Feedback ==="
PRINCIPLES_HEADER = "=== Principles Reaffirmed ==="
NO_FEEDBACK_TEXT = "No feedback content"


def _env_str(name: str) -> Optional[str]:
    """Read an environment variable, treating blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


@dataclass
class FeedbackConfig:
    """Configuration for the feedback elicitation server."""

    tool_description: str = INTERACTIVE_FEEDBACK_PROMPT
    output_template: Optional[str] = None
    reaffirm_principles: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> FeedbackConfig:
        """Load configuration from environment variables."""
        return cls(
            tool_description=_env_str("MCP_FEEDBACK_PROMPT") or INTERACTIVE_FEEDBACK_PROMPT,
            output_template=_env_str("MCP_FEEDBACK_TEMPLATE"),
            reaffirm_principles=os.getenv(
                "MCP_FEEDBACK_REAFFIRM_PRINCIPLES", "false"
            ).strip().lower() == "true",
            log_level=(_env_str("MCP_FEEDBACK_LOG_LEVEL") or "INFO").strip().upper(),
        )

    def render_output(self, feedback: str) -> str:
        """
        Format feedback text for the calling agent.

        A template containing {{feedback}} has every occurrence replaced;
        otherwise the default header format is used. Empty feedback is
        shown as NO_FEEDBACK_TEXT either way.
        """
        content = feedback or NO_FEEDBACK_TEXT

        if self.output_template and FEEDBACK_PLACEHOLDER in self.output_template:
            text = self.output_template.replace(FEEDBACK_PLACEHOLDER, content)
        else:
            text = f"{FEEDBACK_HEADER}\n{content}"

        if self.reaffirm_principles:
            text = f"{PRINCIPLES_HEADER}\n{self.tool_description}\n\n{text}"
        return text
