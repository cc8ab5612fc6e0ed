"""Métricas registradas como logs estruturados.

Agregação fica a cargo do coletor de logs (ex.: Cloud Logging, Loki).

Métricas:
- latency: duração de operações por componente
- token_usage: consumo de tokens do provedor de linguagem
- sync: volume de itens trazidos por sincronização
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(component: str, operation: str, latency_ms: float) -> None:
    """Registra latência de operação.

    Args:
        component: Componente (ex: "pager", "reply_generation")
        operation: Operação (ex: "comment_threads", "generate")
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": get_correlation_id(),
        },
    )


def record_token_usage(
    component: str,
    model: str,
    prompt_tokens: int,
    completion_tokens: int,
    total_tokens: int,
) -> None:
    """Registra uso de tokens do provedor de linguagem (custo)."""
    logger.info(
        "metric_token_usage",
        extra={
            "metric_type": "token_usage",
            "component": component,
            "model": model,
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": total_tokens,
            "correlation_id": get_correlation_id(),
        },
    )


def record_sync(resource: str, account_id: str, items: int) -> None:
    """Registra o volume de uma sincronização concluída."""
    logger.info(
        "metric_sync",
        extra={
            "metric_type": "sync",
            "resource": resource,
            "account_id": account_id,
            "items": items,
            "correlation_id": get_correlation_id(),
        },
    )
