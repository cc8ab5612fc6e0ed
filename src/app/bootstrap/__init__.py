"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings, get_services

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
    services = get_services()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_openai_settings,
    get_session_settings,
    get_storage_settings,
    get_youtube_settings,
)

if TYPE_CHECKING:
    from app.bootstrap.dependencies import Services

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level="DEBUG" if base.debug else base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"youtube: {error}" for error in get_youtube_settings().validate())
    errors.extend(f"session: {error}" for error in get_session_settings().validate())
    errors.extend(f"storage: {error}" for error in get_storage_settings().validate(base))
    errors.extend(f"openai: {error}" for error in get_openai_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_services() -> Services:
    """Obtém o grafo de serviços (singleton)."""
    from app.bootstrap.dependencies import create_services

    return create_services(
        base=get_base_settings(),
        youtube=get_youtube_settings(),
        session=get_session_settings(),
        storage=get_storage_settings(),
        openai=get_openai_settings(),
    )
