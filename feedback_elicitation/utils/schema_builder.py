"""
Elicitation schema builders.

MCP elicitation only allows flat objects of primitive properties, so these
return plain JSON-schema dicts that go straight into the requestedSchema
field of an elicitation/create request. Summaries are embedded verbatim.
"""

from typing import Any, Dict

FEEDBACK_FIELD = "feedback"
FEEDBACK_TITLE = "Your feedback"


def build_feedback_schema(summary: str) -> Dict[str, Any]:
    """Schema for a single required, non-empty feedback string."""
    return {
        "type": "object",
        "properties": {
            FEEDBACK_FIELD: {
                "type": "string",
                "title": FEEDBACK_TITLE,
                "description": (
                    "Based on the following summary of the AI's work, "
                    f"please provide your feedback:\n\n{summary}"
                ),
                "minLength": 1,
            }
        },
        "required": [FEEDBACK_FIELD],
    }


def build_simple_feedback_schema(summary: str) -> Dict[str, Any]:
    """Like build_feedback_schema, but the description is the summary itself."""
    return {
        "type": "object",
        "properties": {
            FEEDBACK_FIELD: {
                "type": "string",
                "title": FEEDBACK_TITLE,
                "description": summary,
                "minLength": 1,
            }
        },
        "required": [FEEDBACK_FIELD],
    }


def build_confirmation_schema(message: str) -> Dict[str, Any]:
    """Schema for a yes/no confirmation."""
    return {
        "type": "object",
        "properties": {
            "confirmed": {
                "type": "boolean",
                "title": "Confirm",
                "description": message,
                "default": False,
            }
        },
        "required": ["confirmed"],
    }


def build_prompt_message(summary: str) -> str:
    """Message shown above the elicitation form."""
    return f"{summary}\n\nPlease provide your feedback:"
