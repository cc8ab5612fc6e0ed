"""Connector YouTube — adapters de borda para Google OAuth e YouTube Data API.

Responsabilidades:
- Troca de authorization code, refresh e userinfo (oauth_client)
- Leitura de comentários, respostas e vídeos; publicação de respostas (data_api_client)
- Transporte HTTP com timeout e sem retry (http_base)

Nota: YouTube não tem webhook para comentários; atualização é por polling.
"""

from api.connectors.youtube.data_api_client import YouTubeDataApiClient
from api.connectors.youtube.http_base import HttpClient, HttpClientConfig
from api.connectors.youtube.oauth_client import GoogleOAuthClient

__all__ = [
    "GoogleOAuthClient",
    "HttpClient",
    "HttpClientConfig",
    "YouTubeDataApiClient",
]
