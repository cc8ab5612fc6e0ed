"""Connectors — adapters de borda para APIs externas.

Estrutura:
- youtube/: Google OAuth 2.0 + YouTube Data API v3
"""

__all__: list[str] = []
