"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios:
- timestamp (asctime)
- level
- logger (name)
- message
- service
- environment
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem estável na saída)
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "environment",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "WARNING",
            "logger": "agenda.services.recurrence_planner",
            "message": "Recurrence truncated for monthly",
            "service": "agenda",
            "environment": "development",
            "requested": 5000,
            "produced": 1000
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
