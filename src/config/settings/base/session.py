"""Settings de sessão de login."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SessionSettings:
    """Configurações de sessão.

    Attributes:
        ttl_days: Duração absoluta da sessão em dias
        header_name: Header HTTP que carrega o session id
    """

    ttl_days: int = 7
    header_name: str = "x-session-id"

    def validate(self) -> list[str]:
        """Valida configurações de sessão.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.ttl_days <= 0:
            errors.append("SESSION_TTL_DAYS deve ser > 0")

        if not self.header_name:
            errors.append("SESSION_HEADER não pode ser vazio")

        return errors


def _load_session_from_env() -> SessionSettings:
    """Carrega SessionSettings de variáveis de ambiente."""
    return SessionSettings(
        ttl_days=int(os.getenv("SESSION_TTL_DAYS", "7")),
        header_name=os.getenv("SESSION_HEADER", "x-session-id").lower(),
    )


@lru_cache(maxsize=1)
def get_session_settings() -> SessionSettings:
    """Retorna instância cacheada de SessionSettings."""
    return _load_session_from_env()
