"""Ledger append-only de interações (trilha de auditoria).

Nenhuma operação pública altera ou remove registros existentes.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.interaction import InteractionKind, InteractionRecord
from utils.errors import InternalPersistenceError, ValidationError

if TYPE_CHECKING:
    from app.protocols.persistence_gateway import PersistenceGatewayProtocol

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 100
MAX_HISTORY_LIMIT = 500


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InteractionLedger:
    """Registra e consulta eventos de interação."""

    def __init__(
        self,
        gateway: PersistenceGatewayProtocol,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._gateway = gateway
        self._clock = clock

    async def append(self, record: InteractionRecord) -> InteractionRecord:
        """Grava o registro como está.

        Raises:
            ValidationError: ID já registrado
            InternalPersistenceError: Falha do storage
        """
        await self._gateway.append_interaction(record)
        logger.debug(
            "interaction_appended",
            extra={"kind": record.kind.value, "account_id": record.account_id},
        )
        return record

    async def record(
        self,
        kind: InteractionKind,
        *,
        account_id: str,
        video_id: str,
        comment_id: str,
        reply_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> InteractionRecord:
        """Monta registro com ID e timestamp novos e grava."""
        record = InteractionRecord(
            record_id=uuid.uuid4().hex,
            account_id=account_id,
            video_id=video_id,
            comment_id=comment_id,
            reply_id=reply_id,
            kind=kind,
            timestamp=self._clock(),
            data=dict(data or {}),
        )
        return await self.append(record)

    async def query_by_account(
        self, account_id: str, limit: int = DEFAULT_HISTORY_LIMIT
    ) -> list[InteractionRecord]:
        """Mais recentes primeiro, no máximo `limit` (1..500)."""
        if not 1 <= limit <= MAX_HISTORY_LIMIT:
            raise ValidationError(f"limit must be between 1 and {MAX_HISTORY_LIMIT}")
        records = await self._gateway.query_interactions_by_account(account_id, limit)
        return sorted(records, key=lambda r: r.timestamp, reverse=True)[:limit]

    async def query_by_comment(self, comment_id: str) -> list[InteractionRecord]:
        """Histórico cronológico de um comentário."""
        records = await self._gateway.query_interactions_by_comment(comment_id)
        return sorted(records, key=lambda r: r.timestamp)

    async def record_secondary(
        self,
        kind: InteractionKind,
        *,
        account_id: str,
        video_id: str,
        comment_id: str,
        reply_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> InteractionRecord | None:
        """Grava registro após um efeito remoto já concluído.

        Falha de storage é logada e não propagada: o efeito remoto já
        aconteceu e a operação deve ser reportada como sucesso.
        """
        try:
            return await self.record(
                kind,
                account_id=account_id,
                video_id=video_id,
                comment_id=comment_id,
                reply_id=reply_id,
                data=data,
            )
        except InternalPersistenceError as exc:
            logger.error(
                "interaction_record_failed",
                extra={
                    "kind": kind.value,
                    "account_id": account_id,
                    "comment_id": comment_id,
                    "error_type": type(exc).__name__,
                },
            )
            return None
