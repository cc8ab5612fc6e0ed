"""Protocolo do provedor de linguagem para rascunho de respostas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.ai_model import AIModelConfig


@dataclass(frozen=True, slots=True)
class GeneratedReply:
    """Rascunho produzido pelo modelo."""

    reply_text: str
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    generation_time_ms: float = 0.0


class ReplyGeneratorProtocol(Protocol):
    async def generate(
        self,
        *,
        model: AIModelConfig,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int | None = None,
    ) -> GeneratedReply:
        """Raises: TransientExternalError."""
        ...
