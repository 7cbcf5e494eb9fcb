"""Settings de geracao de recorrencia e validacao de intervalos de datas.

Os tetos de seguranca sao configuracao de processo: lidos uma vez do
ambiente e nunca alterados em tempo de execucao.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_OCCURRENCES = 1000
DEFAULT_ATTEMPTS_PER_OCCURRENCE = 24
DEFAULT_OCCURRENCE_COUNT = 999
DEFAULT_WARNING_THRESHOLD_YEARS = 100.0


class RecurrenceSettings(BaseModel):
    """Limites usados pelo gerador de datas recorrentes e pelo validador."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    max_occurrences: int = Field(
        default=DEFAULT_MAX_OCCURRENCES,
        ge=1,
        description="Numero maximo absoluto de datas emitidas por chamada.",
    )
    attempts_per_occurrence: int = Field(
        default=DEFAULT_ATTEMPTS_PER_OCCURRENCE,
        ge=1,
        description="Ciclos tentados por ocorrencia pedida antes de truncar.",
    )
    default_occurrence_count: int = Field(
        default=DEFAULT_OCCURRENCE_COUNT,
        ge=0,
        description="Quantidade usada quando a regra nao tem data final.",
    )
    warning_threshold_years: float = Field(
        default=DEFAULT_WARNING_THRESHOLD_YEARS,
        gt=0,
        description="Duracao (anos de 365.25 dias) acima da qual o intervalo gera aviso.",
    )


def _read_int_env(key: str, default: int) -> int:
    """Le inteiro da env tratando string vazia como ausente."""
    raw_value = (os.getenv(key) or "").strip()
    return int(raw_value) if raw_value else default


def _load_recurrence_from_env() -> RecurrenceSettings:
    """Carrega RecurrenceSettings a partir de variaveis de ambiente."""
    threshold = (os.getenv("DATE_RANGE_WARNING_THRESHOLD_YEARS") or "").strip()
    return RecurrenceSettings(
        max_occurrences=_read_int_env("RECURRENCE_MAX_OCCURRENCES", DEFAULT_MAX_OCCURRENCES),
        attempts_per_occurrence=_read_int_env(
            "RECURRENCE_ATTEMPTS_PER_OCCURRENCE", DEFAULT_ATTEMPTS_PER_OCCURRENCE
        ),
        default_occurrence_count=_read_int_env(
            "RECURRENCE_DEFAULT_OCCURRENCE_COUNT", DEFAULT_OCCURRENCE_COUNT
        ),
        warning_threshold_years=float(threshold) if threshold else DEFAULT_WARNING_THRESHOLD_YEARS,
    )


@lru_cache(maxsize=1)
def get_recurrence_settings() -> RecurrenceSettings:
    """Retorna instancia cacheada de RecurrenceSettings."""
    return _load_recurrence_from_env()


__all__ = ["RecurrenceSettings", "get_recurrence_settings"]
