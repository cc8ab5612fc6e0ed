"""Publicação de respostas no YouTube.

Não conhece proveniência de IA: a camada de API registra reply_generated
e anexa ai_generated/ai_model na resposta devolvida ao cliente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.interaction import InteractionKind
from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.domain.comment import RemoteReply
    from app.protocols.persistence_gateway import PersistenceGatewayProtocol
    from app.protocols.youtube_api import YouTubeApiProtocol
    from app.services.credential_manager import CredentialManager
    from app.services.interaction_ledger import InteractionLedger

logger = logging.getLogger(__name__)

MAX_REPLY_LENGTH = 10_000


class ReplyPoster:
    """Publica resposta, marca o comentário e registra no ledger."""

    def __init__(
        self,
        credentials: CredentialManager,
        youtube: YouTubeApiProtocol,
        gateway: PersistenceGatewayProtocol,
        ledger: InteractionLedger,
    ) -> None:
        self._credentials = credentials
        self._youtube = youtube
        self._gateway = gateway
        self._ledger = ledger

    async def post_reply(self, account_id: str, comment_id: str, text: str) -> RemoteReply:
        """Publica `text` como resposta ao comentário.

        Repetir a chamada para o mesmo comentário é seguro: o flag
        replied_to permanece True.

        Raises:
            ValidationError: Texto vazio ou longo demais
            ReauthRequired: Credencial precisa de novo login
            TransientExternalError: API recusou ou falhou
            InternalPersistenceError: Falha ao marcar o comentário
        """
        _validate_text(comment_id, text)

        token = await self._credentials.ensure_valid(account_id)
        # Lido antes da publicação: depois dela só a marcação pode falhar
        stored = await self._gateway.get_comment(comment_id)
        reply = await self._youtube.insert_reply(token, comment_id, text)

        marked = await self._gateway.mark_comment_replied(comment_id)
        if not marked:
            logger.warning("reply_comment_not_stored", extra={"comment_id": comment_id})

        await self._ledger.record_secondary(
            InteractionKind.REPLY_POSTED,
            account_id=account_id,
            video_id=stored.video_id if stored else "",
            comment_id=comment_id,
            reply_id=reply.reply_id,
            data={"text_length": len(text)},
        )

        logger.info(
            "reply_posted",
            extra={
                "account_id": account_id,
                "comment_id": comment_id,
                "reply_id": reply.reply_id,
            },
        )
        return reply


def _validate_text(comment_id: str, text: str) -> None:
    if not comment_id:
        raise ValidationError("comment_id is required")
    if not text or not text.strip():
        raise ValidationError("reply text must not be empty")
    if len(text) > MAX_REPLY_LENGTH:
        raise ValidationError(f"reply text exceeds {MAX_REPLY_LENGTH} characters")
