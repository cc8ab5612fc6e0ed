"""Prompt de rascunho de resposta a comentários do YouTube.

O texto do comentário entra apenas no prompt do usuário, nunca em logs.
"""

from __future__ import annotations

from ai.models.reply_generation import ReplyGenerationRequest, ReplyTone

REPLY_SYSTEM_BASE = (
    "You are an assistant helping a YouTube content creator respond to comments "
    "on their videos. Your goal is to write thoughtful, authentic replies that "
    "engage with the commenter and foster a positive community. Keep replies "
    "concise, friendly, and conversational. Avoid generic responses."
)

_TONE_INSTRUCTIONS: dict[str, str] = {
    ReplyTone.PROFESSIONAL.value: (
        "Maintain a professional and informative tone. Be helpful and "
        "knowledgeable while remaining approachable."
    ),
    ReplyTone.FRIENDLY.value: (
        "Be warm, casual, and conversational. Use a friendly tone as if "
        "chatting with someone you know well."
    ),
    ReplyTone.ENTHUSIASTIC.value: (
        "Be energetic and excited in your response. Show enthusiasm and "
        "appreciation for the commenter."
    ),
    ReplyTone.HELPFUL.value: (
        "Focus on being as helpful as possible. Provide useful information "
        "and address any questions thoroughly."
    ),
}

_DEFAULT_TONE_INSTRUCTION = "Use a balanced, friendly tone that's authentic and engaging."


def format_reply_system_prompt(tone: str) -> str:
    """Prompt de sistema com a instrução do tom."""
    instruction = _TONE_INSTRUCTIONS.get(tone.lower(), _DEFAULT_TONE_INSTRUCTION)
    return f"{REPLY_SYSTEM_BASE}\n\n{instruction}"


def format_reply_user_prompt(request: ReplyGenerationRequest) -> str:
    """Prompt do usuário com comentário, histórico e instruções extras."""
    if request.video_title:
        parts = [
            "Please write a reply to the following comment on my YouTube video "
            f'titled "{request.video_title}":\n\n'
        ]
    else:
        parts = ["Please write a reply to the following comment on my YouTube video:\n\n"]

    parts.append(f'Comment from {request.comment_author}: "{request.comment_text}"\n\n')

    if request.previous_interactions:
        parts.append("Previous interactions with this commenter:\n")
        parts.extend(f"- {line}\n" for line in request.previous_interactions)
        parts.append("\n")

    if request.additional_instructions:
        parts.append(f"Additional instructions: {request.additional_instructions}\n\n")

    parts.append("Write only the reply text without any additional formatting or explanation.")
    return "".join(parts)
