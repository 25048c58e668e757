"""
Unit Tests for FeedbackSession

Covers creation state, status transitions, idempotent finalization,
snapshot independence and response time calculation.
"""

from unittest.mock import patch

import pytest

from feedback_elicitation.models import (
    FeedbackSession,
    SessionData,
    SessionStatus,
    generate_session_id,
)
from feedback_elicitation.models import session as session_module
from feedback_elicitation.utils import validate_session_id


# =============================================================================
# Creation
# =============================================================================

class TestSessionCreation:
    """Tests for FeedbackSession.create and session IDs."""

    @pytest.mark.parametrize(
        "project_directory,summary",
        [
            ("/home/user/project", "Added tests"),
            (".", ""),
            ("", ""),
            ("  spaced  ", "line one\nline two\t\x00"),
        ],
    )
    def test_new_session_is_waiting(self, project_directory, summary):
        session = FeedbackSession.create(project_directory, summary)
        data = session.get_snapshot()

        assert data.status == SessionStatus.WAITING
        assert data.end_time is None
        assert data.start_time > 0
        assert data.project_directory == project_directory
        assert data.summary == summary
        assert data.user_feedback is None
        assert data.user_action is None

    def test_explicit_session_id_is_kept(self):
        session = FeedbackSession.create(".", "summary", session_id="feedback_1_abc")
        assert session.id == "feedback_1_abc"
        assert session.get_snapshot().session_id == "feedback_1_abc"

    def test_generated_id_format(self):
        session_id = generate_session_id()
        assert session_id.startswith("feedback_")
        assert validate_session_id(session_id)
        assert len(session_id.rsplit("_", 1)[1]) == 9

    def test_generated_ids_are_unique(self):
        ids = {generate_session_id() for _ in range(500)}
        assert len(ids) == 500

    def test_repr_includes_id_and_status(self, session):
        text = repr(session)
        assert session.id in text
        assert "waiting" in text


# =============================================================================
# Status transitions
# =============================================================================

class TestStatusTransitions:
    """Tests for update_status and set_user_feedback."""

    def test_completed_sets_end_time(self, session):
        session.update_status(SessionStatus.COMPLETED)
        data = session.get_snapshot()

        assert data.status == SessionStatus.COMPLETED
        assert data.end_time is not None
        assert data.end_time >= data.start_time
        assert session.is_terminal

    def test_error_sets_end_time(self, session):
        session.update_status(SessionStatus.ERROR)
        assert session.status == SessionStatus.ERROR
        assert session.get_snapshot().end_time is not None

    def test_accepts_plain_string_status(self, session):
        session.update_status("completed")
        assert session.status == SessionStatus.COMPLETED

    def test_waiting_does_not_set_end_time(self, session):
        session.update_status(SessionStatus.WAITING)
        assert session.get_snapshot().end_time is None
        assert not session.is_terminal

    def test_end_time_is_set_only_once(self):
        with patch.object(session_module, "_now_ms", side_effect=[1000, 1500, 9000]):
            session = FeedbackSession.create(".", "summary", session_id="feedback_1_test")
            session.update_status(SessionStatus.COMPLETED)
            session.update_status(SessionStatus.COMPLETED)

        assert session.get_snapshot().end_time == 1500

    def test_terminal_status_is_not_left(self, session):
        session.update_status(SessionStatus.COMPLETED)
        session.update_status(SessionStatus.WAITING)
        session.update_status(SessionStatus.ERROR)
        assert session.status == SessionStatus.COMPLETED

    def test_set_user_feedback_completes_session(self, session):
        session.set_user_feedback("Looks good", "continue")
        data = session.get_snapshot()

        assert data.status == SessionStatus.COMPLETED
        assert data.user_feedback == "Looks good"
        assert data.user_action == "continue"
        assert data.end_time is not None

    def test_set_user_feedback_twice_keeps_first_end_time(self):
        with patch.object(session_module, "_now_ms", side_effect=[1000, 1200, 5000]):
            session = FeedbackSession.create(".", "summary", session_id="feedback_1_test")
            session.set_user_feedback("first", "continue")
            session.set_user_feedback("second", "continue")

        data = session.get_snapshot()
        assert data.end_time == 1200
        assert session.get_response_time() == 200


# =============================================================================
# Snapshots and response time
# =============================================================================

class TestSnapshots:
    """Tests for get_snapshot and get_response_time."""

    def test_snapshot_is_independent_copy(self, session):
        first = session.get_snapshot()
        first.summary = "mutated"
        first.status = SessionStatus.ERROR
        first.end_time = 42

        second = session.get_snapshot()
        assert second.summary == "Implemented the login page"
        assert second.status == SessionStatus.WAITING
        assert second.end_time is None
        assert session.status == SessionStatus.WAITING

    def test_snapshot_is_session_data(self, session):
        assert isinstance(session.get_snapshot(), SessionData)

    def test_get_data_alias(self, session):
        assert session.get_data() == session.get_snapshot()

    def test_repeated_snapshots_are_equal(self, session):
        assert session.get_snapshot() == session.get_snapshot()

    def test_response_time_none_while_waiting(self, session):
        assert session.get_response_time() is None

    def test_response_time_after_completion(self):
        with patch.object(session_module, "_now_ms", side_effect=[10_000, 12_500]):
            session = FeedbackSession.create(".", "summary", session_id="feedback_1_test")
            session.update_status(SessionStatus.COMPLETED)

        assert session.get_response_time() == 2500

    def test_response_time_never_negative(self):
        with patch.object(session_module, "_now_ms", side_effect=[10_000, 9_000]):
            session = FeedbackSession.create(".", "summary", session_id="feedback_1_test")
            session.update_status(SessionStatus.ERROR)

        assert session.get_response_time() == 0
