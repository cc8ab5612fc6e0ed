"""Registro imutável do ledger de interações."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from app.domain._serialization import dump_datetime, load_datetime


class InteractionKind(Enum):
    """Tipo de evento registrado no ledger."""

    COMMENT_OBSERVED = "comment_observed"
    REPLY_GENERATED = "reply_generated"
    REPLY_POSTED = "reply_posted"


@dataclass(frozen=True, slots=True)
class InteractionRecord:
    """Entrada append-only do ledger.

    Atributos:
        record_id: Identificador único da entrada
        account_id: Conta que originou a ação
        video_id: Vídeo relacionado ("" quando desconhecido)
        comment_id: Comentário relacionado
        reply_id: Resposta publicada (apenas reply_posted)
        kind: Tipo do evento
        timestamp: Instante do evento (chave de ordenação)
        data: Dados do evento (sem tokens)
    """

    record_id: str
    account_id: str
    video_id: str
    comment_id: str
    kind: InteractionKind
    timestamp: datetime
    reply_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "account_id": self.account_id,
            "video_id": self.video_id,
            "comment_id": self.comment_id,
            "reply_id": self.reply_id,
            "kind": self.kind.value,
            "timestamp": dump_datetime(self.timestamp),
            "data": dict(self.data),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InteractionRecord:
        return cls(
            record_id=data["id"],
            account_id=data.get("account_id", ""),
            video_id=data.get("video_id", ""),
            comment_id=data.get("comment_id", ""),
            reply_id=data.get("reply_id"),
            kind=InteractionKind(data["kind"]),
            timestamp=load_datetime(data.get("timestamp")),
            data=dict(data.get("data") or {}),
        )
