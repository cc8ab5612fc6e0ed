"""Mapeamento central de exceções de domínio para respostas HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from utils.errors import (
    AuthExchangeError,
    InternalPersistenceError,
    NotFound,
    ReauthRequired,
    TransientExternalError,
    Unauthorized,
    ValidationError,
)

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

REAUTH_MESSAGE = "please reconnect your account"


async def _unauthorized(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=401, content={"error": "not_authenticated"})


async def _reauth_required(request: Request, exc: Exception) -> JSONResponse:
    logger.info("reauth_required_response", extra={"path": request.url.path})
    return JSONResponse(
        status_code=401,
        content={"error": "reauth_required", "message": REAUTH_MESSAGE},
    )


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "not_found", "message": str(exc)})


async def _validation(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=422, content={"error": "validation_error", "message": str(exc)}
    )


async def _auth_exchange(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=400, content={"error": "auth_exchange_failed", "message": str(exc)}
    )


async def _transient(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(
        "upstream_error_response",
        extra={
            "path": request.url.path,
            "status_code": getattr(exc, "status_code", None),
        },
    )
    return JSONResponse(
        status_code=502, content={"error": "upstream_unavailable", "message": str(exc)}
    )


async def _persistence(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "persistence_error_response",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(status_code=500, content={"error": "internal_error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Registra handlers (Starlette resolve pelo MRO da exceção)."""
    app.add_exception_handler(Unauthorized, _unauthorized)
    app.add_exception_handler(ReauthRequired, _reauth_required)
    app.add_exception_handler(NotFound, _not_found)
    app.add_exception_handler(ValidationError, _validation)
    app.add_exception_handler(AuthExchangeError, _auth_exchange)
    app.add_exception_handler(TransientExternalError, _transient)
    app.add_exception_handler(InternalPersistenceError, _persistence)
