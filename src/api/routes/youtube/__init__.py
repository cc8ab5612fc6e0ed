"""Rotas do produto: auth, vídeos, comentários, respostas e histórico."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.youtube.auth import router as auth_router
from api.routes.youtube.comments import router as comments_router
from api.routes.youtube.history import router as history_router
from api.routes.youtube.replies import router as replies_router

router = APIRouter()
router.include_router(auth_router, tags=["auth"])
router.include_router(comments_router, tags=["comments"])
router.include_router(replies_router, tags=["replies"])
router.include_router(history_router, tags=["history"])

__all__ = ["router"]
