"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.credential_manager import CredentialManager
from app.services.interaction_ledger import InteractionLedger
from app.services.reply_generation import ReplyGenerationService
from app.services.reply_poster import ReplyPoster

__all__ = [
    "CredentialManager",
    "InteractionLedger",
    "ReplyGenerationService",
    "ReplyPoster",
]
