"""Credencial OAuth de uma conta YouTube.

Existe no máximo uma credencial corrente por conta: salvar uma nova
substitui a anterior.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Any

from app.domain._serialization import dump_datetime, load_datetime


@dataclass(frozen=True, slots=True)
class Credential:
    """Par access/refresh token com expiração.

    Atributos:
        account_id: Conta dona da credencial ("" enquanto não vinculada)
        access_token: Token de acesso atual
        refresh_token: Token de refresh (pode ser vazio)
        expires_at: Instante de expiração do access_token
        token_type: Tipo do token (normalmente "Bearer")
        scopes: Escopos concedidos pelo provedor
    """

    account_id: str
    access_token: str
    refresh_token: str
    expires_at: datetime
    token_type: str = "Bearer"
    scopes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_bound(self) -> bool:
        return bool(self.account_id)

    def bind(self, account_id: str) -> Credential:
        """Retorna cópia vinculada à conta."""
        return replace(self, account_id=account_id)

    def needs_refresh(self, now: datetime, window: timedelta) -> bool:
        """True se expira dentro da janela (limite inclusivo)."""
        return self.expires_at <= now + window

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_at": dump_datetime(self.expires_at),
            "token_type": self.token_type,
            "scopes": list(self.scopes),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Credential:
        return cls(
            account_id=data.get("account_id", ""),
            access_token=data.get("access_token", ""),
            refresh_token=data.get("refresh_token", ""),
            expires_at=load_datetime(data.get("expires_at")),
            token_type=data.get("token_type", "Bearer"),
            scopes=tuple(data.get("scopes", ())),
        )

    def __repr__(self) -> str:
        # Nunca expor tokens em logs/tracebacks
        return (
            f"Credential(account_id={self.account_id!r}, "
            f"expires_at={self.expires_at.isoformat()!r}, scopes={self.scopes!r})"
        )
