"""Testes do GoogleOAuthClient com httpx.MockTransport."""

from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from api.connectors.youtube import GoogleOAuthClient, HttpClient
from config.settings.youtube import YouTubeSettings
from utils.errors import AuthExchangeError, ReauthRequired, TransientExternalError

SETTINGS = YouTubeSettings(
    client_id="client-123",
    client_secret="secret-xyz",
    redirect_uri="https://app.example.com/auth/callback",
)


def _client(handler) -> GoogleOAuthClient:
    transport = httpx.MockTransport(handler)
    return GoogleOAuthClient(SETTINGS, HttpClient(client=httpx.AsyncClient(transport=transport)))


def _form(request: httpx.Request) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


class TestAuthorizationUrl:
    """Testes da URL de consentimento."""

    def test_contains_offline_access_and_scopes(self) -> None:
        url = _client(lambda r: httpx.Response(200)).authorization_url("state-1")

        query = parse_qs(urlparse(url).query)
        assert url.startswith(SETTINGS.auth_url)
        assert query["client_id"] == ["client-123"]
        assert query["access_type"] == ["offline"]
        assert query["prompt"] == ["consent"]
        assert query["response_type"] == ["code"]
        assert query["state"] == ["state-1"]
        assert query["scope"] == [" ".join(SETTINGS.scopes)]


class TestExchangeCode:
    """Testes de troca do authorization code."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        seen: list[dict[str, str]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(_form(request))
            return httpx.Response(
                200,
                json={
                    "access_token": "ya29.a",
                    "expires_in": 3599,
                    "refresh_token": "1//r",
                    "scope": "openid email",
                    "token_type": "Bearer",
                },
            )

        grant = await _client(handler).exchange_code("4/code")

        assert grant.access_token == "ya29.a"
        assert grant.refresh_token == "1//r"
        assert seen[0]["grant_type"] == "authorization_code"
        assert seen[0]["redirect_uri"] == SETTINGS.redirect_uri

    @pytest.mark.asyncio
    async def test_invalid_grant_is_auth_exchange_error(self) -> None:
        client = _client(lambda r: httpx.Response(400, json={"error": "invalid_grant"}))

        with pytest.raises(AuthExchangeError, match="invalid_grant"):
            await client.exchange_code("used-code")

    @pytest.mark.asyncio
    async def test_server_error_is_auth_exchange_error(self) -> None:
        client = _client(lambda r: httpx.Response(503))

        with pytest.raises(AuthExchangeError) as exc_info:
            await client.exchange_code("code")

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_exchange_timeout_is_transient(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransientExternalError):
            await _client(handler).exchange_code("code")


class TestRefreshToken:
    """Testes de refresh."""

    @pytest.mark.asyncio
    async def test_refresh_omits_redirect_uri(self) -> None:
        seen: list[dict[str, str]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(_form(request))
            return httpx.Response(200, json={"access_token": "ya29.new", "expires_in": 3600})

        grant = await _client(handler).refresh_token("1//r")

        assert grant.access_token == "ya29.new"
        assert grant.refresh_token is None
        assert seen[0]["grant_type"] == "refresh_token"
        assert "redirect_uri" not in seen[0]

    @pytest.mark.parametrize("status", [400, 401])
    @pytest.mark.asyncio
    async def test_rejected_refresh_requires_reauth(self, status: int) -> None:
        client = _client(lambda r: httpx.Response(status, json={"error": "invalid_grant"}))

        with pytest.raises(ReauthRequired):
            await client.refresh_token("revoked")

    @pytest.mark.asyncio
    async def test_server_error_is_transient(self) -> None:
        client = _client(lambda r: httpx.Response(500))

        with pytest.raises(TransientExternalError):
            await client.refresh_token("1//r")

    @pytest.mark.asyncio
    async def test_timeout_is_transient(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransientExternalError):
            await _client(handler).refresh_token("1//r")


class TestUserInfo:
    """Testes do userinfo."""

    @pytest.mark.asyncio
    async def test_user_info_uses_bearer(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Authorization"] == "Bearer ya29.a"
            return httpx.Response(
                200,
                json={"id": "1077", "name": "Ana", "email": "ana@example.com", "picture": "p"},
            )

        info = await _client(handler).get_user_info("ya29.a")

        assert info.account_id == "1077"
        assert info.picture_url == "p"
