"""Settings de YouTube (Google OAuth 2.0 + YouTube Data API v3).

Valores são passados explicitamente aos conectores e ao CredentialManager;
nenhum componente do core lê variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Endpoints Google
GOOGLE_AUTH_URL: str = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URL: str = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL: str = "https://www.googleapis.com/oauth2/v1/userinfo"
YOUTUBE_API_BASE_URL: str = "https://www.googleapis.com/youtube/v3"

DEFAULT_SCOPES: tuple[str, ...] = (
    "https://www.googleapis.com/auth/youtube.readonly",
    "https://www.googleapis.com/auth/youtube.force-ssl",
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
)


@dataclass(frozen=True)
class YouTubeSettings:
    """Configurações do cliente OAuth e da Data API.

    Attributes:
        client_id: Client ID do app Google
        client_secret: Client Secret do app Google
        redirect_uri: URI de callback registrada no app Google
        scopes: Escopos solicitados na autorização
        auth_url: Endpoint de autorização
        token_url: Token endpoint
        userinfo_url: Endpoint userinfo
        api_base_url: URL base da YouTube Data API
        request_timeout_seconds: Timeout de cada requisição HTTP
        page_size: maxResults por página
        min_page_interval_seconds: Intervalo mínimo entre páginas da mesma coleção
        token_refresh_window_seconds: Antecedência do refresh antes da expiração
        auth_success_redirect: Destino do redirect após login (recebe ?session_id=)
    """

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    scopes: tuple[str, ...] = field(default=DEFAULT_SCOPES)

    auth_url: str = GOOGLE_AUTH_URL
    token_url: str = GOOGLE_TOKEN_URL
    userinfo_url: str = GOOGLE_USERINFO_URL
    api_base_url: str = YOUTUBE_API_BASE_URL

    request_timeout_seconds: float = 30.0
    page_size: int = 100
    min_page_interval_seconds: float = 0.1
    token_refresh_window_seconds: int = 300

    auth_success_redirect: str = "/auth/success"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de YouTube."""
        errors: list[str] = []

        if not self.client_id:
            errors.append("YOUTUBE_OAUTH_CLIENT_ID não configurado")
        if not self.client_secret:
            errors.append("YOUTUBE_OAUTH_CLIENT_SECRET não configurado")
        if not self.redirect_uri:
            errors.append("YOUTUBE_OAUTH_REDIRECT_URI não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("YOUTUBE_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if not 1 <= self.page_size <= 100:
            errors.append("YOUTUBE_PAGE_SIZE deve estar entre 1 e 100")
        if self.min_page_interval_seconds < 0:
            errors.append("YOUTUBE_MIN_PAGE_INTERVAL_SECONDS deve ser >= 0")
        if self.token_refresh_window_seconds < 0:
            errors.append("YOUTUBE_TOKEN_REFRESH_WINDOW_SECONDS deve ser >= 0")

        return errors


def _parse_scopes(raw: str) -> tuple[str, ...]:
    scopes = tuple(s for s in raw.replace(",", " ").split() if s)
    return scopes or DEFAULT_SCOPES


def _load_from_env() -> YouTubeSettings:
    """Carrega YouTubeSettings de variáveis de ambiente."""
    return YouTubeSettings(
        client_id=os.getenv("YOUTUBE_OAUTH_CLIENT_ID", ""),
        client_secret=os.getenv("YOUTUBE_OAUTH_CLIENT_SECRET", ""),
        redirect_uri=os.getenv("YOUTUBE_OAUTH_REDIRECT_URI", ""),
        scopes=_parse_scopes(os.getenv("YOUTUBE_OAUTH_SCOPES", "")),
        api_base_url=os.getenv("YOUTUBE_API_BASE_URL", YOUTUBE_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("YOUTUBE_REQUEST_TIMEOUT_SECONDS", "30")),
        page_size=int(os.getenv("YOUTUBE_PAGE_SIZE", "100")),
        min_page_interval_seconds=float(
            os.getenv("YOUTUBE_MIN_PAGE_INTERVAL_SECONDS", "0.1")
        ),
        token_refresh_window_seconds=int(
            os.getenv("YOUTUBE_TOKEN_REFRESH_WINDOW_SECONDS", "300")
        ),
        auth_success_redirect=os.getenv("AUTH_SUCCESS_REDIRECT", "/auth/success"),
    )


@lru_cache(maxsize=1)
def get_youtube_settings() -> YouTubeSettings:
    """Retorna instância cacheada de YouTubeSettings."""
    return _load_from_env()
