"""Modelo de sessão de login local.

Sessão é independente da credencial OAuth: autoriza chamadas a este serviço,
não ao YouTube. Nunca é removida, apenas desativada.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from app.domain._serialization import dump_datetime, load_datetime


@dataclass(frozen=True, slots=True)
class Session:
    """Sessão de login.

    Atributos:
        session_id: Identificador aleatório e não adivinhável
        account_id: Conta autenticada
        created_at: Criação da sessão
        expires_at: Expiração absoluta
        ip_address: IP de origem do login
        user_agent: User-Agent de origem do login
        active: False depois de encerrada
    """

    session_id: str
    account_id: str
    created_at: datetime
    expires_at: datetime
    ip_address: str = "unknown"
    user_agent: str = "unknown"
    active: bool = True

    def is_valid(self, now: datetime) -> bool:
        """Ativa e ainda não expirada; `expires_at == now` já é inválida."""
        return self.active and now < self.expires_at

    def deactivated(self) -> Session:
        return replace(self, active=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "session_id": self.session_id,
            "account_id": self.account_id,
            "created_at": dump_datetime(self.created_at),
            "expires_at": dump_datetime(self.expires_at),
            "ip_address": self.ip_address,
            "user_agent": self.user_agent,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session:
        return cls(
            session_id=data["session_id"],
            account_id=data["account_id"],
            created_at=load_datetime(data.get("created_at")),
            expires_at=load_datetime(data.get("expires_at")),
            ip_address=data.get("ip_address", "unknown"),
            user_agent=data.get("user_agent", "unknown"),
            active=bool(data.get("active", False)),
        )
