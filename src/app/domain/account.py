"""Conta local associada a uma identidade Google/YouTube."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from app.domain._serialization import dump_datetime, load_datetime

DEFAULT_AI_MODEL = "gpt-3.5-turbo"
DEFAULT_REPLY_TONE = "friendly"


@dataclass(slots=True)
class AccountPreferences:
    """Preferências do dono do canal.

    Atributos:
        enable_ai_replies: Se sugestões de resposta por IA estão habilitadas
        ai_model: Modelo padrão para geração de respostas
        reply_tone: Tom padrão (professional, friendly, enthusiastic, helpful)
        enable_notifications: Se notificações estão habilitadas
        polling_interval_seconds: Intervalo sugerido de polling de comentários
    """

    enable_ai_replies: bool = True
    ai_model: str = DEFAULT_AI_MODEL
    reply_tone: str = DEFAULT_REPLY_TONE
    enable_notifications: bool = True
    polling_interval_seconds: int = 60

    def to_dict(self) -> dict[str, Any]:
        return {
            "enable_ai_replies": self.enable_ai_replies,
            "ai_model": self.ai_model,
            "reply_tone": self.reply_tone,
            "enable_notifications": self.enable_notifications,
            "polling_interval_seconds": self.polling_interval_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AccountPreferences:
        return cls(
            enable_ai_replies=bool(data.get("enable_ai_replies", True)),
            ai_model=data.get("ai_model", DEFAULT_AI_MODEL),
            reply_tone=data.get("reply_tone", DEFAULT_REPLY_TONE),
            enable_notifications=bool(data.get("enable_notifications", True)),
            polling_interval_seconds=int(data.get("polling_interval_seconds", 60)),
        )


@dataclass(slots=True)
class Account:
    """Conta do dono do canal.

    Atributos:
        account_id: ID da identidade Google (userinfo.id)
        name: Nome de exibição
        email: Email (opcional)
        picture_url: URL da foto de perfil (opcional)
        channel_id: Canal YouTube resolvido na última sincronização de vídeos
        preferences: Preferências de resposta
    """

    account_id: str
    name: str
    email: str | None = None
    picture_url: str | None = None
    channel_id: str | None = None
    preferences: AccountPreferences = field(default_factory=AccountPreferences)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "name": self.name,
            "email": self.email,
            "picture_url": self.picture_url,
            "channel_id": self.channel_id,
            "preferences": self.preferences.to_dict(),
            "created_at": dump_datetime(self.created_at),
            "updated_at": dump_datetime(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Account:
        return cls(
            account_id=data["account_id"],
            name=data.get("name", ""),
            email=data.get("email"),
            picture_url=data.get("picture_url"),
            channel_id=data.get("channel_id"),
            preferences=AccountPreferences.from_dict(data.get("preferences") or {}),
            created_at=load_datetime(data.get("created_at")),
            updated_at=load_datetime(data.get("updated_at")),
        )
