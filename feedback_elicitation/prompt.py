"""
Built-in description of the interactive_feedback tool.

This is what the calling agent reads to decide when to ask for feedback.
It can be replaced through MCP_FEEDBACK_PROMPT (see config.py).
"""

INTERACTIVE_FEEDBACK_PROMPT = """Interactive feedback collection tool for LLM agents.

    USAGE RULES:
    1. During any process, task, or conversation, whether asking, replying, or completing phased tasks, you must call this tool to ask for feedback.
    2. Unless receiving termination instructions, all steps must repeatedly call this tool.
    3. Whenever user feedback is received, if the feedback content is not empty, you must call this tool again and adjust behavior based on the feedback content.
    4. Only when the user explicitly indicates "end" or "no more interaction needed" can you stop calling this tool, and the process is considered complete.
    5. You should summarize what have done, and provide project directory through args to let user know what you have done to provide feedback for next step.

    Args:
        project_directory: Project directory path for context
        summary: Summary of AI work completed for user review

    Returns:
        str: The user's feedback text"""

SERVER_INSTRUCTIONS = (
    "Feedback Elicitation Server - collects human feedback on agent work "
    "through MCP elicitation"
)
