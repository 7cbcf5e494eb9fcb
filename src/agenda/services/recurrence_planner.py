"""Composicao validacao + geracao de uma serie recorrente.

Fluxo:
1. com data final: valida (ancora, data final); erro encerra, aviso segue junto
2. gera por data final, ou por quantidade (pedida ou default de settings)
3. erros de regra viram RecurrencePlan com error/error_kind, nunca excecao
4. truncamento e rejeicao sao registrados no logger injetado
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agenda.domain.recurrence import RecurrencePlan
from agenda.services._date_helpers import is_missing
from agenda.services.date_range_validator import validate_date_range
from agenda.services.recurring_date_generator import generate_occurrences
from config.logging import log_rule_rejected, log_truncation
from config.settings.recurrence import get_recurrence_settings
from utils.errors import RecurrenceError

if TYPE_CHECKING:
    from datetime import date, datetime

    from agenda.domain.recurrence import OccurrenceSeries, RepeatRule, RepeatType
    from config.settings.recurrence import RecurrenceSettings

logger = logging.getLogger(__name__)


def plan_recurrence(
    anchor: date | str,
    repeat_type: RepeatType | str,
    *,
    interval: int = 1,
    end_date: datetime | date | str | None = None,
    count: int | None = None,
    include_anchor: bool = True,
    settings: RecurrenceSettings | None = None,
    log: logging.Logger | None = None,
) -> RecurrencePlan:
    """Resolve o criterio de parada e materializa as datas.

    Sem `end_date` e sem `count`, usa `default_occurrence_count` das settings.
    Informar ambos e erro de regra (modos mutuamente exclusivos).
    """
    active_log = log or logger
    limits = settings or get_recurrence_settings()
    has_end_date = not is_missing(end_date)

    warning: str | None = None
    if has_end_date:
        validation = validate_date_range(anchor, end_date, settings=limits)
        if not validation.is_valid:
            log_rule_rejected(active_log, str(validation.error_kind), repeat_type=str(repeat_type))
            return RecurrencePlan(error=validation.error, error_kind=validation.error_kind)
        warning = validation.warning

    if not has_end_date and count is None:
        count = limits.default_occurrence_count

    try:
        series = generate_occurrences(
            anchor,
            repeat_type,
            interval=interval,
            count=count,
            end_date=end_date if has_end_date else None,
            include_anchor=include_anchor,
            settings=limits,
        )
    except RecurrenceError as exc:
        log_rule_rejected(active_log, str(exc.kind), repeat_type=str(repeat_type))
        return RecurrencePlan(error=str(exc), error_kind=exc.kind)

    if series.truncated:
        log_truncation(
            active_log,
            str(repeat_type),
            produced=len(series.dates),
            requested=series.requested,
            reason=_truncation_reason(series, limits),
        )
    return RecurrencePlan(dates=series.dates, warning=warning, truncated=series.truncated)


def plan_from_rule(
    anchor: date | str,
    rule: RepeatRule,
    *,
    count: int | None = None,
    include_anchor: bool = True,
    settings: RecurrenceSettings | None = None,
    log: logging.Logger | None = None,
) -> RecurrencePlan:
    """Atalho para `plan_recurrence` a partir de um RepeatRule ja validado."""
    return plan_recurrence(
        anchor,
        rule.type,
        interval=rule.interval,
        end_date=rule.end_date,
        count=count if rule.end_date is None else None,
        include_anchor=include_anchor,
        settings=settings,
        log=log,
    )


def _truncation_reason(series: OccurrenceSeries, limits: RecurrenceSettings) -> str:
    if len(series.dates) >= limits.max_occurrences:
        return "max_occurrences"
    return "max_attempts"


__all__ = ["plan_from_rule", "plan_recurrence"]
