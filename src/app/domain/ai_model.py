"""Configuração de modelos de linguagem disponíveis para respostas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class AIModelParameters:
    """Parâmetros de geração enviados ao provedor."""

    temperature: float = 0.7
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    max_tokens: int = 1024
    stop: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "temperature": self.temperature,
            "top_p": self.top_p,
            "frequency_penalty": self.frequency_penalty,
            "presence_penalty": self.presence_penalty,
            "max_tokens": self.max_tokens,
            "stop": list(self.stop),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AIModelParameters:
        return cls(
            temperature=float(data.get("temperature", 0.7)),
            top_p=float(data.get("top_p", 1.0)),
            frequency_penalty=float(data.get("frequency_penalty", 0.0)),
            presence_penalty=float(data.get("presence_penalty", 0.0)),
            max_tokens=int(data.get("max_tokens", 1024)),
            stop=tuple(data.get("stop", ())),
        )


@dataclass(frozen=True, slots=True)
class AIModelConfig:
    """Modelo de linguagem configurado."""

    model_id: str
    name: str
    description: str = ""
    max_context_length: int = 4096
    max_response_length: int = 1024
    parameters: AIModelParameters = field(default_factory=AIModelParameters)
    is_available: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "model_id": self.model_id,
            "name": self.name,
            "description": self.description,
            "max_context_length": self.max_context_length,
            "max_response_length": self.max_response_length,
            "parameters": self.parameters.to_dict(),
            "is_available": self.is_available,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AIModelConfig:
        return cls(
            model_id=data["model_id"],
            name=data.get("name", data["model_id"]),
            description=data.get("description", ""),
            max_context_length=int(data.get("max_context_length", 4096)),
            max_response_length=int(data.get("max_response_length", 1024)),
            parameters=AIModelParameters.from_dict(data.get("parameters") or {}),
            is_available=bool(data.get("is_available", True)),
        )


DEFAULT_AI_MODELS: tuple[AIModelConfig, ...] = (
    AIModelConfig(
        model_id="gpt-3.5-turbo",
        name="GPT-3.5 Turbo",
        description="A good balance of quality and speed for most reply generation needs",
        max_context_length=4096,
        max_response_length=1024,
        parameters=AIModelParameters(max_tokens=1024),
    ),
    AIModelConfig(
        model_id="gpt-4",
        name="GPT-4",
        description="Highest quality replies with better understanding of context and nuance",
        max_context_length=8192,
        max_response_length=2048,
        parameters=AIModelParameters(max_tokens=2048),
    ),
)
