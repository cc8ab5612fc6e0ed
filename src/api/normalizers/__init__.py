"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- youtube/: YouTube Data API v3 e Google OAuth 2.0
"""

__all__: list[str] = []
