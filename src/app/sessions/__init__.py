"""Módulo de sessões de login.

Exporta modelo e gerenciador de sessões.
"""

from app.sessions.manager import DEFAULT_SESSION_TTL, SessionManager
from app.sessions.models import Session

__all__ = [
    "DEFAULT_SESSION_TTL",
    "Session",
    "SessionManager",
]
