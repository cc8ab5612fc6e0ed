"""Prompts do módulo AI."""

from ai.prompts.reply_prompt import (
    REPLY_SYSTEM_BASE,
    format_reply_system_prompt,
    format_reply_user_prompt,
)

__all__ = [
    "REPLY_SYSTEM_BASE",
    "format_reply_system_prompt",
    "format_reply_user_prompt",
]
