"""Use case do callback OAuth: conta + credencial + sessão."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.account import Account
from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.protocols.persistence_gateway import PersistenceGatewayProtocol
    from app.protocols.youtube_api import OAuthProviderProtocol
    from app.services.credential_manager import CredentialManager
    from app.sessions.manager import SessionManager
    from app.sessions.models import Session

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuthenticationResult:
    account: Account
    session: Session
    created: bool


class AuthenticateAccountUseCase:
    """Troca o code, resolve a conta e abre sessão.

    Fluxo:
        1. exchange_code -> credencial não vinculada
        2. userinfo com o novo access token
        3. cria ou atualiza a conta (preferências preservadas)
        4. vincula e grava a credencial
        5. cria sessão
    """

    def __init__(
        self,
        credentials: CredentialManager,
        provider: OAuthProviderProtocol,
        gateway: PersistenceGatewayProtocol,
        sessions: SessionManager,
    ) -> None:
        self._credentials = credentials
        self._provider = provider
        self._gateway = gateway
        self._sessions = sessions

    async def execute(
        self,
        code: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> AuthenticationResult:
        """Executa o fluxo completo do callback.

        Raises:
            ValidationError: code ausente
            AuthExchangeError: Provedor recusou o code
            TransientExternalError: Falha de rede/API
        """
        if not code:
            raise ValidationError("authorization code is required")

        credential = await self._credentials.exchange_code(code)
        user_info = await self._provider.get_user_info(credential.access_token)

        now = datetime.now(UTC)
        account = await self._gateway.get_account(user_info.account_id)
        created = account is None
        if account is None:
            account = Account(
                account_id=user_info.account_id,
                name=user_info.name,
                email=user_info.email,
                picture_url=user_info.picture_url,
                created_at=now,
                updated_at=now,
            )
        else:
            account.name = user_info.name
            account.email = user_info.email
            account.picture_url = user_info.picture_url
            account.updated_at = now
        await self._gateway.save_account(account)

        await self._credentials.store(account.account_id, credential)
        session = await self._sessions.create(account.account_id, ip_address, user_agent)

        logger.info(
            "account_authenticated",
            extra={"account_id": account.account_id, "account_created": created},
        )
        return AuthenticationResult(account=account, session=session, created=created)
