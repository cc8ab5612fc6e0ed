"""Settings base do replydesk: ambiente, identidade do serviço e HTTP."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENV_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações comuns ao serviço HTTP.

    Attributes:
        environment: development|staging|production
        service_name: Nome do serviço nos logs
        debug: Força log em DEBUG
        log_level: Nível de log raiz
        http_host: Interface de bind do uvicorn
        http_port: Porta HTTP
        cors_origins: Origens do frontend aceitas ("*" libera todas)
    """

    environment: Environment = "development"
    service_name: str = "replydesk"
    debug: bool = False
    log_level: str = "INFO"
    http_host: str = "0.0.0.0"
    http_port: int = 8080
    cors_origins: tuple[str, ...] = field(default=("*",))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        if not 0 < self.http_port < 65536:
            errors.append(f"PORT fora do intervalo: {self.http_port}")
        if self.is_production and "*" in self.cors_origins:
            errors.append("CORS_ORIGINS não pode ser '*' em produção")

        return errors


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    return origins or ("*",)


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_ENV_ALIASES.get(os.getenv("ENVIRONMENT", "").lower(), "development"),
        service_name=os.getenv("SERVICE_NAME", "replydesk"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        http_host=os.getenv("HOST", "0.0.0.0"),
        http_port=int(os.getenv("PORT", "8080")),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
