"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="agenda")
    logger = get_logger(__name__)
"""

from config.logging.config import (
    configure_logging,
    get_logger,
    log_rule_rejected,
    log_truncation,
)
from config.logging.filters import ServiceContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ServiceContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_rule_rejected",
    "log_truncation",
]
