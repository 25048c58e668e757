"""
Pydantic Models for Elicitation Outcomes and Feedback Results

ELICITATION OUTCOME:

  What the MCP client sent back for an elicitation/create request. The
  action is kept as an open string at the boundary; the response handler
  validates it against ElicitationAction.

FEEDBACK RESULT:

  The normalized interpretation of an outcome, with a snapshot of the
  session it belongs to.

FEEDBACK RESPONSE:

  The final text handed back to the calling agent, plus the error flag
  that separates hard failures from informational replies.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .session import SessionStatus


class ElicitationAction(str, Enum):
    """How the human resolved an elicitation request."""

    ACCEPT = "accept"
    DECLINE = "decline"
    CANCEL = "cancel"


class FeedbackAction(str, Enum):
    """Normalized action reported back to the agent."""

    CONTINUE = "continue"
    DECLINED = "declined"
    CANCELLED = "cancelled"
    ERROR = "error"


class ElicitationOutcome(BaseModel):
    """Raw elicitation outcome as received from the client."""

    action: str = Field(description="Outcome tag, normally accept/decline/cancel.")
    content: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Submitted form data; only meaningful for accept.",
    )

    @classmethod
    def from_raw(cls, raw: Any) -> ElicitationOutcome:
        """
        Build an outcome from an MCP ElicitResult, a mapping, or any object
        exposing action/content attributes.

        Raises:
            ValueError: If no action can be found on the raw value.
        """
        if isinstance(raw, ElicitationOutcome):
            return raw
        if isinstance(raw, Mapping):
            action = raw.get("action")
            content = raw.get("content")
        else:
            action = getattr(raw, "action", None)
            content = getattr(raw, "content", None)

        if action is None:
            raise ValueError(f"Elicitation response has no action: {raw!r}")
        if isinstance(action, Enum):
            action = action.value

        return cls(action=str(action), content=dict(content) if content else None)

    def known_action(self) -> Optional[ElicitationAction]:
        """The action as an ElicitationAction, or None if unrecognized."""
        try:
            return ElicitationAction(self.action)
        except ValueError:
            return None


class SessionInfo(BaseModel):
    """Session details embedded in every feedback result."""

    session_id: str
    project_directory: str
    response_time_ms: Optional[int] = None
    status: SessionStatus


class FeedbackResult(BaseModel):
    """Normalized result of one elicitation exchange."""

    success: bool
    feedback: str = ""
    action: FeedbackAction
    session_info: SessionInfo
    message: Optional[str] = None
    error: Optional[str] = None


class FeedbackResponse(BaseModel):
    """Text returned to the calling agent for one interactive_feedback call."""

    text: str
    is_error: bool = False
    session_id: Optional[str] = None
    result: Optional[FeedbackResult] = None
