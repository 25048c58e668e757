"""
Feedback Elicitation Utilities

  - schema_builder.py: JSON schemas for elicitation forms
  - response_handler.py: classification of elicitation responses
  - validation.py: tool argument and value normalization
"""

from .response_handler import handle_elicitation_response, preview_feedback
from .schema_builder import (
    build_confirmation_schema,
    build_feedback_schema,
    build_prompt_message,
    build_simple_feedback_schema,
)
from .validation import (
    ValidatedFeedbackParams,
    safe_truncate,
    validate_feedback_params,
    validate_session_id,
    validate_user_action,
    validate_user_feedback,
)

__all__ = [
    "ValidatedFeedbackParams",
    "build_confirmation_schema",
    "build_feedback_schema",
    "build_prompt_message",
    "build_simple_feedback_schema",
    "handle_elicitation_response",
    "preview_feedback",
    "safe_truncate",
    "validate_feedback_params",
    "validate_session_id",
    "validate_user_action",
    "validate_user_feedback",
]
