"""Dependências FastAPI compartilhadas pelas rotas YouTube."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, Request

from app.bootstrap.dependencies import Services
from utils.errors import Unauthorized

if TYPE_CHECKING:
    from app.domain.account import Account
    from app.sessions.models import Session


@dataclass(frozen=True, slots=True)
class AuthContext:
    session: Session
    account: Account

    @property
    def account_id(self) -> str:
        return self.account.account_id


def get_services(request: Request) -> Services:
    return request.app.state.services


async def require_session(request: Request) -> AuthContext:
    """Valida o header de sessão; ausente ou inválido -> 401."""
    services = get_services(request)
    session_id = request.headers.get(services.session_header)
    resolved = await services.sessions.validate(session_id)
    if resolved is None:
        raise Unauthorized("not_authenticated")
    session, account = resolved
    return AuthContext(session=session, account=account)


ServicesDep = Annotated[Services, Depends(get_services)]
AuthDep = Annotated[AuthContext, Depends(require_session)]
