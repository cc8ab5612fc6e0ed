"""Cliente Google OAuth 2.0 (authorization code + refresh + userinfo).

Implementa OAuthProviderProtocol. Token endpoint recebe POST
form-encoded; `redirect_uri` é omitido no refresh.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from api.connectors.youtube.http_base import HttpClient, bearer, error_reason
from api.normalizers.youtube.normalizer import normalize_token_grant, normalize_user_info
from utils.errors import AuthExchangeError, ReauthRequired, TransientExternalError

if TYPE_CHECKING:
    from app.protocols.youtube_api import TokenGrant, UserInfo
    from config.settings.youtube import YouTubeSettings

logger = logging.getLogger(__name__)

# Status com que o Google rejeita refresh token revogado/expirado (invalid_grant)
_REFRESH_REJECTED_STATUSES = frozenset({400, 401})


class GoogleOAuthClient:
    """Conector do provedor de identidade Google."""

    def __init__(self, settings: YouTubeSettings, http: HttpClient) -> None:
        self._settings = settings
        self._http = http

    def authorization_url(self, state: str) -> str:
        query = urlencode(
            {
                "client_id": self._settings.client_id,
                "redirect_uri": self._settings.redirect_uri,
                "response_type": "code",
                "scope": " ".join(self._settings.scopes),
                "access_type": "offline",
                "prompt": "consent",
                "state": state,
            }
        )
        return f"{self._settings.auth_url}?{query}"

    async def exchange_code(self, code: str) -> TokenGrant:
        response = await self._http.request(
            "POST",
            self._settings.token_url,
            data={
                "client_id": self._settings.client_id,
                "client_secret": self._settings.client_secret,
                "code": code,
                "grant_type": "authorization_code",
                "redirect_uri": self._settings.redirect_uri,
            },
        )
        # Qualquer não-2xx, inclusive 5xx, é falha da troca
        if not response.is_success:
            reason = error_reason(response)
            logger.warning(
                "oauth_code_exchange_rejected",
                extra={"status_code": response.status_code, "reason": reason},
            )
            raise AuthExchangeError(
                f"authorization code rejected: {reason or response.status_code}",
                status_code=response.status_code,
            )
        return normalize_token_grant(response.json())

    async def refresh_token(self, refresh_token: str) -> TokenGrant:
        response = await self._http.request(
            "POST",
            self._settings.token_url,
            data={
                "client_id": self._settings.client_id,
                "client_secret": self._settings.client_secret,
                "refresh_token": refresh_token,
                "grant_type": "refresh_token",
            },
        )
        if response.status_code in _REFRESH_REJECTED_STATUSES:
            reason = error_reason(response)
            logger.warning(
                "oauth_refresh_rejected",
                extra={"status_code": response.status_code, "reason": reason},
            )
            raise ReauthRequired(f"refresh token rejected: {reason or response.status_code}")
        if not response.is_success:
            raise TransientExternalError(
                "oauth: refresh failed", status_code=response.status_code
            )
        return normalize_token_grant(response.json())

    async def get_user_info(self, access_token: str) -> UserInfo:
        response = await self._http.request(
            "GET", self._settings.userinfo_url, headers=bearer(access_token)
        )
        if not response.is_success:
            raise TransientExternalError(
                "oauth: userinfo failed", status_code=response.status_code
            )
        return normalize_user_info(response.json())
