"""Endpoints de health check (liveness e readiness).

Readiness:
    storage    crítico (memory sempre ok; redis exige PING)
    openai     opcional; sem cliente o rascunho por IA fica indisponível
    ai_models  opcional; catálogo sem modelo disponível degrada
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()

CheckStatus = Literal["ok", "degraded", "failed"]


class HealthResponse(BaseModel):
    """Resposta do liveness probe."""

    status: str
    service: str
    timestamp: str
    version: str = "0.1.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    status: CheckStatus
    latency_ms: float | None = None
    error: str | None = None
    detail: dict[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }
        if self.detail:
            data.update(self.detail)
        return data


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=getattr(request.app.state, "service_name", "replydesk"),
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    state = request.app.state
    storage, openai, models = await asyncio.gather(
        _check_storage(
            getattr(state, "storage_backend", "memory"),
            getattr(state, "redis_client", None),
        ),
        _check_openai(getattr(state, "openai_client", None)),
        _check_ai_models(getattr(state, "services", None)),
    )
    ready = storage.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "storage": storage.as_dict(),
            "openai": openai.as_dict(),
            "ai_models": models.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not ready:
        logger.warning("readiness_failed", extra={"storage_error": storage.error})
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _timed(
    call: Awaitable[Any], *, timeout: float, on_error: CheckStatus
) -> tuple[DependencyCheck | None, Any]:
    """Executa a sonda com timeout; devolve (falha, None) ou (None, resultado)."""
    started_at = time.perf_counter()
    try:
        result = await asyncio.wait_for(call, timeout=timeout)
    except TimeoutError:
        return DependencyCheck(status=on_error, error="timeout"), None
    except Exception as exc:
        return DependencyCheck(status=on_error, error=type(exc).__name__), None
    elapsed = round((time.perf_counter() - started_at) * 1000, 2)
    return None, (elapsed, result)


async def _check_storage(backend: str, redis_client: Any | None) -> DependencyCheck:
    if backend == "memory":
        return DependencyCheck(status="ok", detail={"backend": "memory"})
    if redis_client is None:
        return DependencyCheck(
            status="failed", error="not_configured", detail={"backend": backend}
        )
    failure, outcome = await _timed(redis_client.ping(), timeout=2.0, on_error="failed")
    if failure is not None:
        return failure
    return DependencyCheck(status="ok", latency_ms=outcome[0], detail={"backend": backend})


async def _check_openai(openai_client: Any | None) -> DependencyCheck:
    if openai_client is None:
        return DependencyCheck(status="degraded", error="not_configured")
    failure, outcome = await _timed(openai_client.models.list(), timeout=5.0, on_error="degraded")
    if failure is not None:
        logger.warning("readiness_openai_check_failed", extra={"error_type": failure.error})
        return failure
    return DependencyCheck(status="ok", latency_ms=outcome[0])


async def _check_ai_models(services: Any | None) -> DependencyCheck:
    if services is None:
        return DependencyCheck(status="degraded", error="not_configured")
    failure, outcome = await _timed(
        services.gateway.list_ai_models(), timeout=2.0, on_error="degraded"
    )
    if failure is not None:
        return failure
    elapsed, models = outcome
    available = sum(1 for model in models if model.is_available)
    return DependencyCheck(
        status="ok" if available else "degraded",
        latency_ms=elapsed,
        error=None if available else "no_available_models",
        detail={"available": available},
    )
