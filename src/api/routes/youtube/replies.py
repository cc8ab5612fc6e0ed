"""Rotas de rascunho (IA) e publicação de respostas."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from api.routes.youtube.dependencies import AuthDep, ServicesDep
from api.routes.youtube.schemas import (
    GenerateReplyRequest,
    GenerateReplyResponse,
    PostReplyRequest,
)

router = APIRouter()


@router.get("/ai/models")
async def list_ai_models(auth: AuthDep, services: ServicesDep) -> list[dict[str, Any]]:
    models = await services.reply_generation.list_models()
    return [model.to_dict() for model in models]


@router.post("/reply/generate", response_model=GenerateReplyResponse)
async def generate_reply(
    body: GenerateReplyRequest,
    auth: AuthDep,
    services: ServicesDep,
) -> GenerateReplyResponse:
    generated = await services.reply_generation.generate_reply(
        auth.account_id,
        body.comment_id,
        tone=body.tone,
        additional_instructions=body.additional_instructions,
        model_id=body.model,
        video_title=body.video_title,
        max_tokens=body.max_tokens,
    )
    return GenerateReplyResponse(reply_text=generated.reply_text, model=generated.model)


@router.post("/reply/post")
async def post_reply(
    body: PostReplyRequest,
    auth: AuthDep,
    services: ServicesDep,
) -> dict[str, Any]:
    """Publica a resposta; proveniência de IA é anexada só na resposta HTTP."""
    reply = await services.poster.post_reply(auth.account_id, body.comment_id, body.text)
    if body.ai_generated:
        reply = reply.with_ai_provenance(body.ai_model)
    return reply.to_dict()
