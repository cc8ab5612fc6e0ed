"""Settings do provedor OpenAI usado no rascunho de respostas."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class OpenAISettings:
    """Acesso ao provedor de chat completions.

    Attributes:
        api_key: Chave da API
        base_url: Endpoint compatível alternativo; vazio usa o oficial
        timeout_seconds: Timeout por chamada
        max_retries: Retries internos do SDK em erro transitório
        enabled: Desligado, /reply/generate responde 502
    """

    api_key: str = ""
    base_url: str = ""
    timeout_seconds: float = 30.0
    max_retries: int = 2
    enabled: bool = True

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.enabled and not self.api_key:
            errors.append("OPENAI_API_KEY ausente com OPENAI_ENABLED=true")
        if self.base_url and not self.base_url.startswith(("http://", "https://")):
            errors.append("OPENAI_BASE_URL deve ser http(s)")
        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")
        if self.max_retries < 0:
            errors.append("OPENAI_MAX_RETRIES deve ser >= 0")

        return errors


def _load_openai_from_env() -> OpenAISettings:
    return OpenAISettings(
        api_key=os.getenv("OPENAI_API_KEY", ""),
        base_url=os.getenv("OPENAI_BASE_URL", ""),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "2")),
        enabled=os.getenv("OPENAI_ENABLED", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_openai_from_env()
