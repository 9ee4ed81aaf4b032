"""Formatters de logging estruturado.

Logs em JSON com campos obrigatórios (correlation_id, service, timestamp,
level, logger, message). Em desenvolvimento há um formatter de texto
para leitura no terminal.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02T10:30:00",
            "level": "INFO",
            "logger": "app.gateway.gateway",
            "message": "upstream_call_completed",
            "correlation_id": "abc-123",
            "service": "conecta_edge",
            "gateway": "verificar_whatsapp"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Formatter de texto simples (uso local e testes)."""
    return logging.Formatter(TEXT_FORMAT)
