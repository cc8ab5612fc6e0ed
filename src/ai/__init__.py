"""Módulo AI do replydesk.

Contratos (ai/models) e prompts (ai/prompts) para rascunho de respostas.
O cliente concreto do provedor fica em app/infra/ai.
"""

from ai.models import ReplyGenerationRequest, ReplyTone
from ai.prompts import format_reply_system_prompt, format_reply_user_prompt

__all__ = [
    "ReplyGenerationRequest",
    "ReplyTone",
    "format_reply_system_prompt",
    "format_reply_user_prompt",
]
