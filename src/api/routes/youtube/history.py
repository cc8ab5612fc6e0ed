"""Rotas de consulta ao ledger de interações."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from api.routes.youtube.dependencies import AuthDep, ServicesDep
from app.services.interaction_ledger import DEFAULT_HISTORY_LIMIT

router = APIRouter(prefix="/history")


@router.get("")
async def account_history(
    auth: AuthDep,
    services: ServicesDep,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> list[dict[str, Any]]:
    """Interações da conta, mais recentes primeiro."""
    records = await services.ledger.query_by_account(auth.account_id, limit)
    return [record.to_dict() for record in records]


@router.get("/comments/{comment_id}")
async def comment_history(
    comment_id: str,
    auth: AuthDep,
    services: ServicesDep,
) -> list[dict[str, Any]]:
    """Histórico cronológico de um comentário (apenas da conta)."""
    records = await services.ledger.query_by_comment(comment_id)
    return [r.to_dict() for r in records if r.account_id == auth.account_id]
