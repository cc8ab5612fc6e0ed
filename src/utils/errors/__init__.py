"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthExchangeError,
    InfrastructureError,
    InternalPersistenceError,
    NotFound,
    ReauthRequired,
    RedisConnectionError,
    ReplyDeskError,
    TransientExternalError,
    Unauthorized,
    ValidationError,
)

__all__ = [
    "AuthExchangeError",
    "InfrastructureError",
    "InternalPersistenceError",
    "NotFound",
    "ReauthRequired",
    "RedisConnectionError",
    "ReplyDeskError",
    "TransientExternalError",
    "Unauthorized",
    "ValidationError",
]
