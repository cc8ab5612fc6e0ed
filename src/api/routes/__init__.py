"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (auth, vídeos, comentários, respostas, histórico, health)
- Validação inicial de request (headers, query params, body)
- Delegação para serviços e use cases do app
- Mapeamento de erros de domínio para respostas HTTP (errors.py)

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
