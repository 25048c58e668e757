"""
Feedback Elicitation Orchestrator

Runs one interactive_feedback request end to end:

  1. Normalize the tool arguments
  2. Create a FeedbackSession and register it as active
  3. Build the elicitation schema and message from the summary
  4. Send the elicitation through the channel and wait (up to 24h)
  5. Classify the response and format the text for the agent
  6. Remove the session from the registry, whatever happened

The channel wait is the only suspension point, so concurrent requests
proceed independently, each with its own session.
"""

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Protocol

from ..config import ELICITATION_TIMEOUT_MS, FeedbackConfig
from ..models import FeedbackResponse, FeedbackSession, SessionStatus
from ..utils import (
    build_feedback_schema,
    build_prompt_message,
    handle_elicitation_response,
    validate_feedback_params,
)
from .registry import SessionRegistry

logger = logging.getLogger(__name__)

# MCP reports read timeouts with the HTTP 408 code
REQUEST_TIMEOUT_CODE = 408

TIMEOUT_TEXT = (
    "Timeout notice: the MCP request timed out. This usually means the user "
    "interface did not respond in time.\n\n"
    "To continue providing feedback, please call this tool again."
)


class ElicitationChannel(Protocol):
    """Sends one elicitation request to the client and returns its response."""

    async def elicit(
        self,
        message: str,
        requested_schema: Dict[str, Any],
        timeout_ms: int,
    ) -> Any:
        ...


def is_timeout_error(error: BaseException) -> bool:
    """Whether a channel failure means the human simply did not answer in time."""
    if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
        return True
    code = getattr(getattr(error, "error", None), "code", None)
    if code == REQUEST_TIMEOUT_CODE:
        return True
    return "timed out" in str(error).lower()


class FeedbackOrchestrator:
    """
    Coordinates feedback sessions for the interactive_feedback tool.

    Configuration is resolved by the caller and passed in, so the
    orchestrator never reads the process environment itself.
    """

    def __init__(
        self,
        config: Optional[FeedbackConfig] = None,
        registry: Optional[SessionRegistry] = None,
        timeout_ms: int = ELICITATION_TIMEOUT_MS,
    ):
        self.config = config or FeedbackConfig()
        self.registry = registry if registry is not None else SessionRegistry()
        self.timeout_ms = timeout_ms

    async def handle_feedback_request(
        self,
        raw_params: Optional[Mapping[str, Any]],
        channel: ElicitationChannel,
    ) -> FeedbackResponse:
        """
        Collect feedback for one tool call.

        Returns:
            FeedbackResponse whose is_error flag is set only for channel
            failures other than timeouts.
        """
        params = validate_feedback_params(raw_params)
        session = FeedbackSession.create(params.project_directory, params.summary)

        try:
            async with self.registry.track(session):
                schema = build_feedback_schema(params.summary)
                message = build_prompt_message(params.summary)

                logger.info(
                    f"Starting elicitation for session {session.id}, "
                    f"active sessions: {len(self.registry)}"
                )
                elicit_result = await channel.elicit(message, schema, self.timeout_ms)
                logger.info(f"Elicitation completed for session {session.id}")

                result = handle_elicitation_response(elicit_result, session)
                return FeedbackResponse(
                    text=self.config.render_output(result.feedback),
                    is_error=False,
                    session_id=session.id,
                    result=result,
                )

        except Exception as e:
            session.update_status(SessionStatus.ERROR)

            if is_timeout_error(e):
                logger.warning(f"Elicitation timed out for session {session.id}: {e}")
                return FeedbackResponse(text=TIMEOUT_TEXT, is_error=False, session_id=session.id)

            logger.error(
                f"Error in session {session.id} ({type(e).__name__}): {e}",
                exc_info=True,
            )
            return FeedbackResponse(text=f"Error: {e}", is_error=True, session_id=session.id)
