"""
Parameter and value validation helpers.

Tool arguments arrive from the calling agent as loosely typed JSON, so
everything here degrades to a sensible default instead of raising.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ..config import DEFAULT_PROJECT_DIRECTORY, DEFAULT_SUMMARY

SESSION_ID_PATTERN = re.compile(r"^feedback_\d+_[a-z0-9]+$")

VALID_USER_ACTIONS = ("continue", "stop", "modify", "clarify")


@dataclass(frozen=True)
class ValidatedFeedbackParams:
    """Normalized interactive_feedback arguments."""

    project_directory: str
    summary: str


def _clean_str(value: Any, default: str) -> str:
    if not isinstance(value, str):
        return default
    value = value.strip()
    return value or default


def validate_feedback_params(params: Optional[Mapping[str, Any]]) -> ValidatedFeedbackParams:
    """
    Normalize raw tool arguments.

    Missing, blank or non-string values fall back to "." for the project
    directory and the default task-completion summary.
    """
    params = params or {}
    return ValidatedFeedbackParams(
        project_directory=_clean_str(
            params.get("project_directory"), DEFAULT_PROJECT_DIRECTORY
        ),
        summary=_clean_str(params.get("summary"), DEFAULT_SUMMARY),
    )


def validate_session_id(session_id: Any) -> bool:
    """Check that a value looks like feedback_<timestamp>_<suffix>."""
    if not isinstance(session_id, str):
        return False
    return SESSION_ID_PATTERN.match(session_id) is not None


def validate_user_feedback(feedback: Any) -> str:
    if not isinstance(feedback, str):
        return ""
    return feedback.strip()


def validate_user_action(action: Any) -> str:
    """Normalize a user action, defaulting to "continue"."""
    if not isinstance(action, str):
        return "continue"
    action = action.strip().lower()
    if action in VALID_USER_ACTIONS:
        return action
    return "continue"


def safe_truncate(value: Any, max_length: int) -> str:
    """Truncate to at most max_length characters, ending with "..." when cut."""
    if not isinstance(value, str):
        return ""
    if len(value) <= max_length:
        return value
    return value[: max(0, max_length - 3)] + "..."
