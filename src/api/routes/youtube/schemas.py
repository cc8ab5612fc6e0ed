"""Modelos de request das rotas YouTube."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GenerateReplyRequest(BaseModel):
    comment_id: str = Field(min_length=1)
    tone: str | None = None
    additional_instructions: str | None = Field(default=None, max_length=2000)
    model: str | None = None
    video_title: str = ""
    max_tokens: int | None = Field(default=None, ge=1, le=4096)


class GenerateReplyResponse(BaseModel):
    reply_text: str
    model: str


class PostReplyRequest(BaseModel):
    comment_id: str = Field(min_length=1)
    text: str
    ai_generated: bool = False
    ai_model: str | None = None
