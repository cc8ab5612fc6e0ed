"""Modelos/DTOs para IA."""

from ai.models.reply_generation import ReplyGenerationRequest, ReplyTone

__all__ = [
    "ReplyGenerationRequest",
    "ReplyTone",
]
