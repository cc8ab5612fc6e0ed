"""Settings do backend de persistência.

memory: apenas desenvolvimento/testes (sem persistência entre reinícios).
redis: staging/production; tokens cifrados com Fernet quando há chave.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StorageBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class StorageSettings:
    """Configurações de storage.

    Attributes:
        backend: Backend do PersistenceGateway
        redis_url: URL de conexão Redis
        redis_key_prefix: Prefixo de todas as chaves
        token_encryption_key: Chave Fernet (urlsafe base64, 32 bytes) para tokens
    """

    backend: StorageBackend = "memory"
    redis_url: str = ""
    redis_key_prefix: str = "replydesk"
    token_encryption_key: str = ""

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de storage.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"STORAGE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append("STORAGE_BACKEND=memory proibido em staging/production")

        if self.backend == "redis" and not self.redis_url:
            errors.append("REDIS_URL não configurado mas STORAGE_BACKEND=redis")

        if self.backend == "redis" and not self.token_encryption_key and not base.is_development:
            errors.append("TOKEN_ENCRYPTION_KEY obrigatório em staging/production")

        return errors


def _load_storage_from_env() -> StorageSettings:
    """Carrega StorageSettings de variáveis de ambiente."""
    backend_str = os.getenv("STORAGE_BACKEND", "memory").lower()
    backend: StorageBackend = "redis" if backend_str == "redis" else "memory"
    return StorageSettings(
        backend=backend,
        redis_url=os.getenv("REDIS_URL", ""),
        redis_key_prefix=os.getenv("REDIS_KEY_PREFIX", "replydesk"),
        token_encryption_key=os.getenv("TOKEN_ENCRYPTION_KEY", ""),
    )


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Retorna instância cacheada de StorageSettings."""
    return _load_storage_from_env()
