"""Validacao deterministica de intervalos de datas.

Regras, na ordem (cada uma interrompe as seguintes):
1. presenca: inicio antes do fim; None e string vazia contam como ausentes
2. formato: string ISO-8601, `date` ou `datetime`
3. calendario: o dia precisa existir (2023-02-29 e rejeitado, nao "corrigido")
4. ordem: inicio <= fim, comparando instantes absolutos (offset respeitado)
5. aviso (nao bloqueia): intervalo acima do limite em anos de 365.25 dias

Nenhuma excecao escapa: toda falha volta como ValidationResult.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from agenda.domain.recurrence import RecurrenceErrorKind, ValidationResult
from agenda.services._date_helpers import is_missing, to_instant
from config.settings.recurrence import get_recurrence_settings
from utils.errors import InvalidDateInputError

if TYPE_CHECKING:
    from datetime import date

    from config.settings.recurrence import RecurrenceSettings

START_DATE_REQUIRED = "start date required"
END_DATE_REQUIRED = "end date required"
INVALID_START_DATE = "invalid start date format"
INVALID_END_DATE = "invalid end date format"
START_AFTER_END = "start must be before or equal to end"

AVERAGE_YEAR = timedelta(days=365.25)


def validate_date_range(
    start: datetime | date | str | None,
    end: datetime | date | str | None,
    *,
    settings: RecurrenceSettings | None = None,
) -> ValidationResult:
    """Valida o par (inicio, fim).

    Exemplo:
        validate_date_range("2024-01-01", "2024-12-31")
        # ValidationResult(is_valid=True)
        validate_date_range("1900-01-01", "2024-12-31").warning
        # "range exceeds 100 years"
    """
    if is_missing(start):
        return ValidationResult.fail(RecurrenceErrorKind.MISSING_INPUT, START_DATE_REQUIRED)
    if is_missing(end):
        return ValidationResult.fail(RecurrenceErrorKind.MISSING_INPUT, END_DATE_REQUIRED)

    try:
        start_instant = to_instant(start)
    except InvalidDateInputError as exc:
        return ValidationResult.fail(exc.kind, INVALID_START_DATE)
    try:
        end_instant = to_instant(end)
    except InvalidDateInputError as exc:
        return ValidationResult.fail(exc.kind, INVALID_END_DATE)

    if start_instant > end_instant:
        return ValidationResult.fail(RecurrenceErrorKind.INVERTED_RANGE, START_AFTER_END)

    threshold = (settings or get_recurrence_settings()).warning_threshold_years
    if elapsed_years(start_instant, end_instant) > threshold:
        return ValidationResult.valid(warning=f"range exceeds {threshold:g} years")
    return ValidationResult.valid()


def elapsed_years(start: datetime, end: datetime) -> float:
    """Duracao em anos medios (365.25 dias)."""
    return (end - start) / AVERAGE_YEAR


__all__ = [
    "END_DATE_REQUIRED",
    "INVALID_END_DATE",
    "INVALID_START_DATE",
    "START_AFTER_END",
    "START_DATE_REQUIRED",
    "elapsed_years",
    "validate_date_range",
]
