"""Rotas de autenticação (Google OAuth) e sessão."""

from __future__ import annotations

import logging
import secrets

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from api.routes.youtube.dependencies import AuthDep, ServicesDep
from utils.errors import AuthExchangeError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.get("/url")
async def authorization_url(services: ServicesDep) -> dict[str, str]:
    """URL de consentimento com os escopos do YouTube."""
    state = secrets.token_urlsafe(16)
    return {"url": services.credentials.authorization_url(state)}


@router.get("/callback")
async def oauth_callback(
    request: Request,
    services: ServicesDep,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Troca o code, cria conta + sessão e redireciona com o session id."""
    if error:
        logger.warning("oauth_callback_denied", extra={"reason": error})
        raise AuthExchangeError(f"authorization denied: {error}")
    if not code:
        raise ValidationError("missing authorization code")

    client_ip = request.client.host if request.client else None
    result = await services.authenticate.execute(
        code,
        ip_address=client_ip,
        user_agent=request.headers.get("user-agent"),
    )

    target = services.auth_success_redirect
    separator = "&" if "?" in target else "?"
    return RedirectResponse(
        url=f"{target}{separator}session_id={result.session.session_id}",
        status_code=307,
    )


@router.post("/logout")
async def logout(auth: AuthDep, services: ServicesDep) -> dict[str, str]:
    await services.sessions.end(auth.session.session_id)
    return {"status": "ok"}
