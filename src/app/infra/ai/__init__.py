"""Clientes de IA — implementações de IO do provedor de linguagem."""

from app.infra.ai.openai_client import OpenAIReplyClient

__all__ = [
    "OpenAIReplyClient",
]
