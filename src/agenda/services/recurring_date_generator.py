"""Geracao deterministica de datas recorrentes.

Regra de negocio:
- daily/weekly: soma `interval` dias (ou semanas) a cada ciclo
- monthly: dia do mes fixo; meses sem esse dia sao pulados, nunca ajustados
  para o ultimo dia (dia 31 so recorre em meses de 31 dias)
- yearly: mes/dia fixos; anos sem o dia (29/02 fora de bissexto) sao pulados

A expansao usa `dateutil.rrule`, que segue a RFC 5545: datas inexistentes
sao ignoradas e nao contam como ocorrencia. A geracao e dirigida por um
criterio de parada explicito: quantidade exata (`count`) ou data final
inclusiva (`end_date`).

Tetos de seguranca:
- tentativas: `attempts_per_occurrence` ciclos por ocorrencia pedida, aplicado
  como horizonte de data (ancora + N ciclos)
- ocorrencias: `max_occurrences` datas por chamada
Atingir um teto (ou o fim do calendario) trunca a saida e marca
`OccurrenceSeries.truncated`.

Modulo puro: sem log e sem IO. Quem compoe a chamada decide o que registrar.
"""

from __future__ import annotations

from datetime import date, datetime, time
from itertools import islice
from typing import TYPE_CHECKING

from dateutil.relativedelta import relativedelta
from dateutil.rrule import DAILY, MONTHLY, WEEKLY, YEARLY, rrule

from agenda.domain.recurrence import OccurrenceSeries, RecurrenceErrorKind, RepeatType
from agenda.services._date_helpers import format_date, is_missing, to_calendar_date
from config.settings.recurrence import get_recurrence_settings
from utils.errors import InvalidAnchorDateError, InvalidDateInputError, InvalidRecurrenceRuleError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from config.settings.recurrence import RecurrenceSettings

_FREQUENCIES = {
    RepeatType.DAILY: DAILY,
    RepeatType.WEEKLY: WEEKLY,
    RepeatType.MONTHLY: MONTHLY,
    RepeatType.YEARLY: YEARLY,
}

_CYCLE_UNITS = {
    RepeatType.DAILY: "days",
    RepeatType.WEEKLY: "weeks",
    RepeatType.MONTHLY: "months",
    RepeatType.YEARLY: "years",
}


def iter_recurring_dates(
    anchor: date | str,
    repeat_type: RepeatType | str,
    *,
    interval: int = 1,
    include_anchor: bool = True,
) -> Iterator[date]:
    """Itera ocorrencias em ordem crescente, sem limite alem de `date.max`.

    Os parametros sao validados na chamada, nao no primeiro `next()`.
    """
    kind = _coerce_repeat_type(repeat_type)
    _check_interval(interval)
    start = _parse_anchor(anchor)
    rule = _build_rrule(start, kind, interval)
    return (dt.date() for dt in islice(rule, 0 if include_anchor else 1, None))


def generate_occurrences(
    anchor: date | str,
    repeat_type: RepeatType | str,
    *,
    interval: int = 1,
    count: int | None = None,
    end_date: datetime | date | str | None = None,
    include_anchor: bool = True,
    settings: RecurrenceSettings | None = None,
) -> OccurrenceSeries:
    """Gera a serie limitada por `count` ou por `end_date` (exatamente um).

    Raises:
        InvalidRecurrenceRuleError: interval < 1, tipo desconhecido, count
            negativo, ou nenhum/ambos os limites informados.
        InvalidAnchorDateError: ancora fora do formato YYYY-MM-DD ou dia inexistente.
        InvalidDateInputError: data final invalida.
    """
    kind = _coerce_repeat_type(repeat_type)
    _check_interval(interval)
    if (count is None) == (end_date is None):
        raise InvalidRecurrenceRuleError(
            "exactly one of count or end_date is required",
            RecurrenceErrorKind.INVALID_RULE_PARAMETERS,
        )
    start = _parse_anchor(anchor)
    limits = settings or get_recurrence_settings()
    skip = 0 if include_anchor else 1

    if count is not None:
        _check_count(count)
        return _collect_by_count(start, kind, interval, count, skip, limits)
    bound = to_calendar_date(end_date)
    return _collect_until(start, kind, interval, bound, skip, limits)


def generate_recurring_dates(
    anchor: date | str,
    repeat_type: RepeatType | str,
    count: int,
    *,
    interval: int = 1,
    include_anchor: bool = True,
    settings: RecurrenceSettings | None = None,
) -> list[str]:
    """Retorna exatamente `count` datas YYYY-MM-DD (menos se o teto cortar).

    Exemplo:
        generate_recurring_dates("2024-01-31", "monthly", 3)
        # ["2024-01-31", "2024-03-31", "2024-05-31"]
    """
    series = generate_occurrences(
        anchor,
        repeat_type,
        interval=interval,
        count=count,
        include_anchor=include_anchor,
        settings=settings,
    )
    return list(series.dates)


def generate_recurring_dates_until(
    anchor: date | str,
    repeat_type: RepeatType | str,
    end_date: datetime | date | str,
    *,
    interval: int = 1,
    include_anchor: bool = True,
    settings: RecurrenceSettings | None = None,
) -> list[str]:
    """Retorna todas as datas YYYY-MM-DD ate `end_date` (inclusiva)."""
    series = generate_occurrences(
        anchor,
        repeat_type,
        interval=interval,
        end_date=end_date,
        include_anchor=include_anchor,
        settings=settings,
    )
    return list(series.dates)


def _collect_by_count(
    start: date,
    kind: RepeatType,
    interval: int,
    count: int,
    skip: int,
    limits: RecurrenceSettings,
) -> OccurrenceSeries:
    if count == 0:
        return OccurrenceSeries(requested=0)
    limit = min(count, limits.max_occurrences)
    cycles = count * limits.attempts_per_occurrence
    horizon = _horizon(start, kind, interval, cycles - 1 + skip)
    rule = _build_rrule(start, kind, interval, until=horizon)
    dates = tuple(format_date(dt) for dt in islice(rule, skip, skip + limit))
    return OccurrenceSeries(dates=dates, requested=count, truncated=len(dates) < count)


def _collect_until(
    start: date,
    kind: RepeatType,
    interval: int,
    bound: date,
    skip: int,
    limits: RecurrenceSettings,
) -> OccurrenceSeries:
    bound_dt = datetime.combine(bound, time())
    cycles = limits.max_occurrences * limits.attempts_per_occurrence
    horizon = _horizon(start, kind, interval, cycles - 1 + skip)
    rule = _build_rrule(start, kind, interval, until=min(bound_dt, horizon))

    # uma a mais que o teto para saber se havia mais datas
    found = list(islice(rule, skip, skip + limits.max_occurrences + 1))
    truncated = len(found) > limits.max_occurrences
    if not truncated and horizon < bound_dt:
        full = _build_rrule(start, kind, interval, until=bound_dt)
        truncated = full.after(horizon) is not None
    dates = tuple(format_date(dt) for dt in found[: limits.max_occurrences])
    return OccurrenceSeries(dates=dates, end_date=bound, truncated=truncated)


def _build_rrule(
    start: date,
    kind: RepeatType,
    interval: int,
    until: datetime | None = None,
) -> rrule:
    # bymonthday/bymonth vem de dtstart: dia fixo, sem ajuste para fim do mes
    return rrule(
        _FREQUENCIES[kind],
        dtstart=datetime.combine(start, time()),
        interval=interval,
        until=until,
    )


def _horizon(start: date, kind: RepeatType, interval: int, cycles: int) -> datetime:
    """Ultimo instante alcancavel apos `cycles` passos de `interval` unidades."""
    step = relativedelta(**{_CYCLE_UNITS[kind]: interval * cycles})
    try:
        return datetime.combine(start, time()) + step
    except (OverflowError, ValueError):
        # alem de date.max: o proprio rrule para no fim do calendario
        return datetime.max


def _coerce_repeat_type(repeat_type: RepeatType | str) -> RepeatType:
    try:
        return RepeatType(repeat_type)
    except ValueError as exc:
        raise InvalidRecurrenceRuleError(
            f"invalid repeat type: {repeat_type!r}",
            RecurrenceErrorKind.INVALID_RULE_PARAMETERS,
        ) from exc


def _check_interval(interval: int) -> None:
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 1:
        raise InvalidRecurrenceRuleError(
            f"interval must be an integer >= 1, got {interval!r}",
            RecurrenceErrorKind.INVALID_RULE_PARAMETERS,
        )


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidRecurrenceRuleError(
            f"count must be an integer, got {count!r}",
            RecurrenceErrorKind.INVALID_RULE_PARAMETERS,
        )
    if count < 0:
        raise InvalidRecurrenceRuleError(
            "count cannot be negative",
            RecurrenceErrorKind.INVALID_RULE_PARAMETERS,
        )


def _parse_anchor(anchor: date | str) -> date:
    if is_missing(anchor):
        raise InvalidAnchorDateError("anchor date required", RecurrenceErrorKind.MISSING_INPUT)
    try:
        return to_calendar_date(anchor, date_only=True)
    except InvalidDateInputError as exc:
        raise InvalidAnchorDateError(str(exc), exc.kind) from exc


__all__ = [
    "generate_occurrences",
    "generate_recurring_dates",
    "generate_recurring_dates_until",
    "iter_recurring_dates",
]
