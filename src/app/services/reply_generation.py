"""Rascunho de respostas com modelo de linguagem.

Monta o prompt a partir do comentário armazenado e do histórico do ledger,
delega ao provedor (ReplyGeneratorProtocol) e registra reply_generated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ai.models.reply_generation import ReplyGenerationRequest
from ai.prompts.reply_prompt import format_reply_system_prompt, format_reply_user_prompt
from app.domain.account import DEFAULT_AI_MODEL, DEFAULT_REPLY_TONE
from app.domain.ai_model import DEFAULT_AI_MODELS
from app.domain.interaction import InteractionKind
from utils.errors import NotFound, TransientExternalError, ValidationError

if TYPE_CHECKING:
    from app.domain.ai_model import AIModelConfig
    from app.domain.interaction import InteractionRecord
    from app.protocols.persistence_gateway import PersistenceGatewayProtocol
    from app.protocols.reply_generator import GeneratedReply, ReplyGeneratorProtocol
    from app.services.interaction_ledger import InteractionLedger

logger = logging.getLogger(__name__)


class ReplyGenerationService:
    """Catálogo de modelos e geração de rascunhos."""

    def __init__(
        self,
        generator: ReplyGeneratorProtocol | None,
        gateway: PersistenceGatewayProtocol,
        ledger: InteractionLedger,
    ) -> None:
        self._generator = generator
        self._gateway = gateway
        self._ledger = ledger

    async def seed_default_models(self) -> None:
        """Grava os modelos padrão (sobrescreve configs de mesmo ID)."""
        for config in DEFAULT_AI_MODELS:
            await self._gateway.save_ai_model(config)
        logger.info("ai_models_seeded", extra={"count": len(DEFAULT_AI_MODELS)})

    async def list_models(self) -> list[AIModelConfig]:
        models = await self._gateway.list_ai_models()
        return [m for m in models if m.is_available]

    async def generate_reply(
        self,
        account_id: str,
        comment_id: str,
        *,
        tone: str | None = None,
        additional_instructions: str | None = None,
        model_id: str | None = None,
        video_title: str = "",
        max_tokens: int | None = None,
    ) -> GeneratedReply:
        """Gera rascunho de resposta para um comentário armazenado.

        Raises:
            NotFound: Comentário ou modelo inexistente
            ValidationError: IA desabilitada na conta ou modelo indisponível
            TransientExternalError: Falha do provedor
        """
        if self._generator is None:
            raise TransientExternalError("ai provider is not configured")

        account = await self._gateway.get_account(account_id)
        preferences = account.preferences if account else None
        if preferences is not None and not preferences.enable_ai_replies:
            raise ValidationError("ai replies are disabled for this account")

        comment = await self._gateway.get_comment(comment_id)
        if comment is None:
            raise NotFound(f"comment {comment_id} not found")

        resolved_model_id = model_id or (preferences.ai_model if preferences else DEFAULT_AI_MODEL)
        model = await self._gateway.get_ai_model(resolved_model_id)
        if model is None:
            raise NotFound(f"ai model {resolved_model_id} not found")
        if not model.is_available:
            raise ValidationError(f"ai model {resolved_model_id} is not available")

        resolved_tone = tone or (preferences.reply_tone if preferences else DEFAULT_REPLY_TONE)
        history = await self._ledger.query_by_comment(comment_id)
        request = ReplyGenerationRequest(
            comment_author=comment.author,
            comment_text=comment.text,
            tone=resolved_tone,
            video_title=video_title,
            previous_interactions=tuple(_describe(record) for record in history),
            additional_instructions=additional_instructions,
            max_tokens=max_tokens,
        )

        generated = await self._generator.generate(
            model=model,
            system_prompt=format_reply_system_prompt(request.tone),
            user_prompt=format_reply_user_prompt(request),
            max_tokens=request.max_tokens,
        )

        await self._ledger.record_secondary(
            InteractionKind.REPLY_GENERATED,
            account_id=account_id,
            video_id=comment.video_id,
            comment_id=comment_id,
            data={
                "model": generated.model,
                "tone": resolved_tone,
                "total_tokens": generated.total_tokens,
                "generation_time_ms": generated.generation_time_ms,
            },
        )
        logger.info(
            "reply_generated",
            extra={"account_id": account_id, "comment_id": comment_id, "model": generated.model},
        )
        return generated


def _describe(record: InteractionRecord) -> str:
    when = record.timestamp.strftime("%Y-%m-%d %H:%M")
    return f"{when} {record.kind.value.replace('_', ' ')}"
