"""Agregador de settings do replydesk.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.ai import OpenAISettings, get_openai_settings
from config.settings.base import (
    BaseSettings,
    Environment,
    SessionSettings,
    get_base_settings,
    get_session_settings,
)
from config.settings.infra import StorageBackend, StorageSettings, get_storage_settings
from config.settings.youtube import (
    DEFAULT_SCOPES,
    YouTubeSettings,
    get_youtube_settings,
)

__all__ = [
    "DEFAULT_SCOPES",
    "BaseSettings",
    "Environment",
    "OpenAISettings",
    "SessionSettings",
    "StorageBackend",
    "StorageSettings",
    "YouTubeSettings",
    "get_base_settings",
    "get_openai_settings",
    "get_session_settings",
    "get_storage_settings",
    "get_youtube_settings",
]
