"""
Feedback Elicitation Models

  - session.py: FeedbackSession, its data snapshot and status
  - feedback.py: elicitation outcomes, feedback results and tool responses

Usage:
    from feedback_elicitation.models import (
        FeedbackSession,
        FeedbackResult,
        SessionStatus,
    )
"""

from .feedback import (
    ElicitationAction,
    ElicitationOutcome,
    FeedbackAction,
    FeedbackResponse,
    FeedbackResult,
    SessionInfo,
)
from .session import (
    FeedbackSession,
    SessionData,
    SessionStatus,
    generate_session_id,
)

__all__ = [
    "ElicitationAction",
    "ElicitationOutcome",
    "FeedbackAction",
    "FeedbackResponse",
    "FeedbackResult",
    "FeedbackSession",
    "SessionData",
    "SessionInfo",
    "SessionStatus",
    "generate_session_id",
]
