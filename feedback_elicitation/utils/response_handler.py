"""
Elicitation Response Handler

Turns the client's answer to an elicitation/create request into a
FeedbackResult and records the outcome on the session.

OUTCOMES:
  - accept: feedback stored on the session, action "continue"
  - decline: session completed, action "declined"
  - cancel: session completed, action "cancelled"
  - anything else: session marked error, action "error"

Classification never raises. A malformed response is logged, the session
is marked as errored and an error result is returned instead.
"""

import logging
from typing import Any, Optional

from ..models import (
    ElicitationAction,
    ElicitationOutcome,
    FeedbackAction,
    FeedbackResult,
    FeedbackSession,
    SessionInfo,
    SessionStatus,
)

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100

ACCEPT_MESSAGE = "User feedback collection complete. Feedback: "
DECLINE_MESSAGE = "User declined to provide feedback."
DECLINE_ERROR = "User declined to provide feedback"
CANCEL_MESSAGE = "User cancelled the feedback operation."
CANCEL_ERROR = "User cancelled the feedback operation"
ERROR_MESSAGE = "An error occurred while processing user feedback."


class UnknownElicitationActionError(ValueError):
    """Raised when an elicitation response carries an unrecognized action."""

    def __init__(self, action: Any):
        self.action = action
        super().__init__(f"Unknown elicitation response action: {action}")


def preview_feedback(feedback: str, limit: int = PREVIEW_LENGTH) -> str:
    """First `limit` characters of feedback, with "..." appended when cut."""
    if len(feedback) > limit:
        return feedback[:limit] + "..."
    return feedback


def _extract_feedback(outcome: ElicitationOutcome) -> str:
    value = (outcome.content or {}).get("feedback")
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _session_info(session: FeedbackSession) -> SessionInfo:
    data = session.get_snapshot()
    return SessionInfo(
        session_id=data.session_id,
        project_directory=data.project_directory,
        response_time_ms=session.get_response_time(),
        status=data.status,
    )


def _result(
    session: FeedbackSession,
    success: bool,
    action: FeedbackAction,
    message: str,
    feedback: str = "",
    error: Optional[str] = None,
) -> FeedbackResult:
    return FeedbackResult(
        success=success,
        feedback=feedback,
        action=action,
        session_info=_session_info(session),
        message=message,
        error=error,
    )


def handle_elicitation_response(elicit_result: Any, session: FeedbackSession) -> FeedbackResult:
    """
    Classify an elicitation response and update the session accordingly.

    Args:
        elicit_result: The client's response - an MCP ElicitResult, a
            mapping, or any object with action/content attributes.
        session: The session the request belongs to.

    Returns:
        FeedbackResult describing the outcome. Only accept is a success.
    """
    try:
        outcome = ElicitationOutcome.from_raw(elicit_result)
        action = outcome.known_action()

        if action is ElicitationAction.ACCEPT:
            feedback = _extract_feedback(outcome)
            session.set_user_feedback(feedback, FeedbackAction.CONTINUE.value)
            return _result(
                session,
                success=True,
                action=FeedbackAction.CONTINUE,
                message=ACCEPT_MESSAGE + preview_feedback(feedback),
                feedback=feedback,
            )

        if action is ElicitationAction.DECLINE:
            session.update_status(SessionStatus.COMPLETED)
            return _result(
                session,
                success=False,
                action=FeedbackAction.DECLINED,
                message=DECLINE_MESSAGE,
                error=DECLINE_ERROR,
            )

        if action is ElicitationAction.CANCEL:
            session.update_status(SessionStatus.COMPLETED)
            return _result(
                session,
                success=False,
                action=FeedbackAction.CANCELLED,
                message=CANCEL_MESSAGE,
                error=CANCEL_ERROR,
            )

        raise UnknownElicitationActionError(outcome.action)

    except Exception as e:
        logger.warning(f"Failed to process elicitation response for session {session.id}: {e}")
        session.update_status(SessionStatus.ERROR)
        return _result(
            session,
            success=False,
            action=FeedbackAction.ERROR,
            message=ERROR_MESSAGE,
            error=str(e),
        )
