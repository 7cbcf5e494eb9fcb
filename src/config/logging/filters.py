"""Filter de logging para injeção de contexto do processo."""

from __future__ import annotations

import logging


class ServiceContextFilter(logging.Filter):
    """Injeta service e environment em cada record de log.

    Valores passados explicitamente via `extra` são preservados.
    """

    def __init__(self, service_name: str, environment: str = "development") -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta."""
        if not getattr(record, "service", None):
            record.service = self._service_name
        if not getattr(record, "environment", None):
            record.environment = self._environment
        return True
