"""
Feedback Session Model

A FeedbackSession is the bookkeeping record for one in-flight elicitation
request: who asked (project directory), what was summarized, when it
started and ended, and how the human resolved it.

LIFECYCLE:

  - Created in WAITING status when a feedback request starts
  - Moved to COMPLETED or ERROR exactly once (terminal)
  - end_time is stamped on the first terminal transition and never again

Snapshots returned by get_snapshot() are deep copies, so callers can read
or mutate them freely without touching the live session.
"""

from __future__ import annotations

import logging
import secrets
import string
import time
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

SESSION_ID_PREFIX = "feedback"
SESSION_ID_SUFFIX_LENGTH = 9
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def _now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def generate_session_id() -> str:
    """Generate a session ID of the form feedback_<epoch-ms>_<suffix>."""
    suffix = "".join(
        secrets.choice(_SUFFIX_ALPHABET) for _ in range(SESSION_ID_SUFFIX_LENGTH)
    )
    return f"{SESSION_ID_PREFIX}_{_now_ms()}_{suffix}"


class SessionStatus(str, Enum):
    """Status of a feedback session."""

    WAITING = "waiting"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.COMPLETED, SessionStatus.ERROR)


class SessionData(BaseModel):
    """Plain data view of a feedback session."""

    session_id: str = Field(description="Unique session identifier.")
    project_directory: str = Field(description="Project directory given by the agent.")
    summary: str = Field(description="Work summary shown to the human.")
    start_time: int = Field(description="Creation time, epoch milliseconds.")
    end_time: Optional[int] = Field(
        default=None,
        description="Time of the first terminal transition, epoch milliseconds.",
    )
    status: SessionStatus = SessionStatus.WAITING
    user_feedback: Optional[str] = None
    user_action: Optional[str] = None


class FeedbackSession:
    """Live feedback session owned by the orchestrator for one request."""

    def __init__(self, session_id: str, project_directory: str, summary: str):
        self._data = SessionData(
            session_id=session_id,
            project_directory=project_directory,
            summary=summary,
            start_time=_now_ms(),
            status=SessionStatus.WAITING,
        )

    @classmethod
    def create(
        cls,
        project_directory: str,
        summary: str,
        session_id: Optional[str] = None,
    ) -> FeedbackSession:
        """Create a waiting session, generating an ID when none is given."""
        return cls(session_id or generate_session_id(), project_directory, summary)

    @property
    def id(self) -> str:
        return self._data.session_id

    @property
    def status(self) -> SessionStatus:
        return self._data.status

    @property
    def is_terminal(self) -> bool:
        return self._data.status.is_terminal

    def get_snapshot(self) -> SessionData:
        """Return an independent copy of the session data."""
        return self._data.model_copy(deep=True)

    # Same view under the name used by older callers
    get_data = get_snapshot

    def update_status(self, status: SessionStatus) -> None:
        """
        Move the session to a new status.

        Terminal sessions keep their status and end_time; the first
        terminal transition stamps end_time.
        """
        status = SessionStatus(status)
        if self._data.status.is_terminal:
            if status != self._data.status:
                logger.debug(
                    f"Session {self.id} already {self._data.status.value}, "
                    f"ignoring transition to {status.value}"
                )
            return

        self._data.status = status
        if status.is_terminal and self._data.end_time is None:
            self._data.end_time = _now_ms()

    def set_user_feedback(self, feedback: str, action: Optional[str] = None) -> None:
        """Record the human's feedback and complete the session."""
        self._data.user_feedback = feedback
        self._data.user_action = action
        self.update_status(SessionStatus.COMPLETED)

    def get_response_time(self) -> Optional[int]:
        """Milliseconds between start and end, or None while still waiting."""
        if self._data.end_time is None:
            return None
        return max(0, self._data.end_time - self._data.start_time)

    def __repr__(self) -> str:
        return f"FeedbackSession(id={self.id!r}, status={self._data.status.value!r})"
