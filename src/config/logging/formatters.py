"""Formatters de logging estruturado.

Logs JSON (python-json-logger) com campos obrigatórios:
- correlation_id
- service
- timestamp (asctime)
- level
- logger (name)
- message
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(service)s %(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02T10:30:00",
            "level": "INFO",
            "logger": "app.sync.engine",
            "message": "sync_completed",
            "correlation_id": "4f0c...",
            "service": "replydesk",
            "video_id": "dQw4w9WgXcQ"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )


def create_plain_formatter() -> logging.Formatter:
    """Formatter legível para desenvolvimento local e testes."""
    return logging.Formatter(PLAIN_FORMAT)
