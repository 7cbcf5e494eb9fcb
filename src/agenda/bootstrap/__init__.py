"""Bootstrap da agenda: inicialização do processo.

Composition root: lê as settings base do ambiente e configura o logging
estruturado a partir delas.

Uso:
    from agenda.bootstrap import initialize_app

    # Na inicialização do processo
    initialize_app()
"""

from __future__ import annotations

import logging

from config.logging import configure_logging
from config.logging.config import DEFAULT_SERVICE_NAME
from config.settings import (
    VALID_LOG_LEVELS,
    BaseSettings,
    get_base_settings,
    get_recurrence_settings,
)

# Nível usado quando LOG_LEVEL é inválido fora de staging/produção
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app(settings: BaseSettings | None = None) -> BaseSettings:
    """Configura logging a partir de BaseSettings e carrega os tetos de recorrência.

    Em `staging`/`production` settings inválidas falham rápido. Em
    `development` o valor inválido é substituído pelo default e registrado
    como warning depois que o logging já está configurado.

    Raises:
        ValueError: settings inválidas em ambiente estrito, ou variáveis
            RECURRENCE_* fora de faixa.
    """
    base = settings or get_base_settings()
    errors = base.validate()
    if errors and base.environment in STRICT_VALIDATION_ENVS:
        raise ValueError(f"Settings inválidas: {'; '.join(errors)}")

    level = base.log_level if base.log_level.upper() in VALID_LOG_LEVELS else DEFAULT_LOG_LEVEL
    configure_logging(
        level=level,
        service_name=base.service_name or DEFAULT_SERVICE_NAME,
        environment=base.environment,
    )
    for error in errors:
        logger.warning("Setting inválida ignorada: %s", error)

    get_recurrence_settings()
    return base


__all__ = ["initialize_app"]
