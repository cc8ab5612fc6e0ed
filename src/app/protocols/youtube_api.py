"""Protocolos das APIs remotas do Google (OAuth e YouTube Data API).

Evita dependência direta da camada api: implementações concretas ficam em
api/connectors/youtube e são conectadas em app/bootstrap.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from app.domain.comment import CommentThread, RemoteReply, Video

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """Página de uma coleção paginada por cursor.

    `next_cursor` ausente é o único sinal de última página.
    """

    items: list[T] = field(default_factory=list)
    next_cursor: str | None = None


@dataclass(frozen=True, slots=True)
class TokenGrant:
    """Resposta do token endpoint (campos do protocolo OAuth)."""

    access_token: str
    expires_in: int
    token_type: str = "Bearer"
    scope: str = ""
    refresh_token: str | None = None


@dataclass(frozen=True, slots=True)
class UserInfo:
    """Identidade retornada pelo endpoint userinfo."""

    account_id: str
    name: str
    email: str | None = None
    picture_url: str | None = None


class OAuthProviderProtocol(Protocol):
    """Provedor de identidade (token endpoint + userinfo)."""

    def authorization_url(self, state: str) -> str: ...

    async def exchange_code(self, code: str) -> TokenGrant:
        """Raises: AuthExchangeError, TransientExternalError."""
        ...

    async def refresh_token(self, refresh_token: str) -> TokenGrant:
        """Raises: ReauthRequired, TransientExternalError."""
        ...

    async def get_user_info(self, access_token: str) -> UserInfo: ...


class YouTubeApiProtocol(Protocol):
    """Operações da YouTube Data API usadas pelo core.

    Toda chamada não-2xx ou timeout levanta TransientExternalError.
    """

    async def list_comment_threads(
        self, access_token: str, video_id: str, page_token: str | None
    ) -> Page[CommentThread]: ...

    async def list_replies(
        self, access_token: str, parent_id: str, page_token: str | None
    ) -> Page[RemoteReply]: ...

    async def get_own_channel_id(self, access_token: str) -> str: ...

    async def list_channel_videos(
        self, access_token: str, channel_id: str, page_token: str | None
    ) -> Page[Video]: ...

    async def insert_reply(self, access_token: str, parent_id: str, text: str) -> RemoteReply: ...
