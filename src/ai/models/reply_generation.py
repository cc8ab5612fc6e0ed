"""Contratos de entrada para rascunho de resposta a comentários."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ReplyTone(Enum):
    """Tons reconhecidos pelo prompt de resposta."""

    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    ENTHUSIASTIC = "enthusiastic"
    HELPFUL = "helpful"


@dataclass(frozen=True, slots=True)
class ReplyGenerationRequest:
    """Dados do comentário usados para montar o prompt.

    Atributos:
        comment_author: Nome do autor do comentário
        comment_text: Texto do comentário
        tone: Tom desejado (valor desconhecido usa tom equilibrado)
        video_title: Título do vídeo (opcional)
        previous_interactions: Resumo das interações anteriores no comentário
        additional_instructions: Instruções livres do dono do canal
        max_tokens: Limite de tokens da resposta (None usa o do modelo)
    """

    comment_author: str
    comment_text: str
    tone: str = ReplyTone.FRIENDLY.value
    video_title: str = ""
    previous_interactions: tuple[str, ...] = field(default_factory=tuple)
    additional_instructions: str | None = None
    max_tokens: int | None = None
