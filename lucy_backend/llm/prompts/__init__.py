"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files so prompt changes show up
clearly in version control.
"""
from lucy_backend.llm.prompts.lucy_prompts import (
    ACTION_CHECK_PROMPT,
    LUCY_SYSTEM_PROMPT,
    SUGGESTIONS_SYSTEM_PROMPT,
    build_system_prompt,
    format_messages,
    get_action_check_user_prompt,
    get_suggestions_user_prompt,
)

__all__ = [
    "ACTION_CHECK_PROMPT",
    "LUCY_SYSTEM_PROMPT",
    "SUGGESTIONS_SYSTEM_PROMPT",
    "build_system_prompt",
    "format_messages",
    "get_action_check_user_prompt",
    "get_suggestions_user_prompt",
]
