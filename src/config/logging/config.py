"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do processo
    configure_logging(level="INFO", service_name="agenda")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("Série gerada", extra={"produced": 12})

O gerador de datas não loga; quem compõe a chamada injeta o logger.
"""

from __future__ import annotations

import logging

from config.logging.filters import ServiceContextFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import VALID_LOG_LEVELS

DEFAULT_SERVICE_NAME = "agenda"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    environment: str = "development",
) -> None:
    """Configura logging JSON estruturado para o processo.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        environment: Ambiente de execução injetado em cada record.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceContextFilter(service_name, environment))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_truncation(
    logger: logging.Logger,
    repeat_type: str,
    *,
    produced: int,
    requested: int | None = None,
    reason: str | None = None,
) -> None:
    """Registra que uma série recorrente atingiu o teto de segurança.

    Args:
        logger: Logger instance.
        repeat_type: Tipo de repetição (ex: "monthly").
        produced: Quantidade de datas efetivamente emitidas.
        requested: Quantidade pedida (None no modo limitado por data final).
        reason: Motivo do corte (ex: "max_occurrences").
    """
    extra: dict[str, object] = {
        "truncated": True,
        "repeat_type": repeat_type,
        "produced": produced,
    }
    if requested is not None:
        extra["requested"] = requested
    if reason:
        extra["reason"] = reason

    logger.warning(
        "Recurrence truncated for %s",
        repeat_type,
        extra=extra,
    )


def log_rule_rejected(
    logger: logging.Logger,
    error_kind: str,
    *,
    repeat_type: str | None = None,
) -> None:
    """Registra regra rejeitada sem incluir os valores informados."""
    extra: dict[str, object] = {"error_kind": error_kind}
    if repeat_type:
        extra["repeat_type"] = repeat_type

    logger.info(
        "Recurrence rule rejected: %s",
        error_kind,
        extra=extra,
    )
