"""Protocolos e contratos do core da aplicação."""

from .persistence_gateway import PersistenceGatewayProtocol
from .reply_generator import GeneratedReply, ReplyGeneratorProtocol
from .youtube_api import (
    OAuthProviderProtocol,
    Page,
    TokenGrant,
    UserInfo,
    YouTubeApiProtocol,
)

__all__ = [
    "GeneratedReply",
    "OAuthProviderProtocol",
    "Page",
    "PersistenceGatewayProtocol",
    "ReplyGeneratorProtocol",
    "TokenGrant",
    "UserInfo",
    "YouTubeApiProtocol",
]
