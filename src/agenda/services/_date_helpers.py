"""Helpers de parse e aritmetica de calendario (sem IO, sem log)."""

from __future__ import annotations

import calendar
import re
from datetime import MAXYEAR, MINYEAR, UTC, date, datetime

from agenda.domain.recurrence import RecurrenceErrorKind
from utils.errors import InvalidDateInputError

_DATE_ONLY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_ISO_DATETIME_RE = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d{1,6})?)?"
    r"(?:Z|[+-]\d{2}:?\d{2})?)?$"
)


def is_missing(value: object) -> bool:
    """None ou string vazia/so espacos."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def day_exists(year: int, month: int, day: int) -> bool:
    """True quando (year, month, day) e um dia real do calendario gregoriano."""
    if not MINYEAR <= year <= MAXYEAR or not 1 <= month <= 12:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def format_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def to_instant(value: object) -> datetime:
    """Converte DateInput em instante aware comparavel.

    `date` vira meia-noite UTC; datetime sem tz e tratado como UTC. Valores
    aware mantem o proprio offset: converter 0001-01-01T00:00+05:00 para UTC
    cairia antes de `datetime.min`.

    Raises:
        InvalidDateInputError: formato nao reconhecido ou dia inexistente.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if not isinstance(value, str):
        raise InvalidDateInputError(
            f"unsupported date input type: {type(value).__name__}",
            RecurrenceErrorKind.INVALID_FORMAT,
        )

    text = value.strip()
    match = _ISO_DATETIME_RE.match(text)
    if match is None:
        raise InvalidDateInputError(
            "date is not ISO-8601", RecurrenceErrorKind.INVALID_FORMAT
        )
    _check_calendar_fields(int(match["year"]), int(match["month"]), int(match["day"]))
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        # horario fora de faixa (ex: 25:00)
        raise InvalidDateInputError(
            "date is not ISO-8601", RecurrenceErrorKind.INVALID_FORMAT
        ) from exc
    return to_instant(parsed)


def to_calendar_date(value: object, *, date_only: bool = False) -> date:
    """Extrai a data de calendario (campos locais, sem conversao de tz).

    Args:
        value: `date`, `datetime` ou string ISO-8601.
        date_only: exige string no formato estrito YYYY-MM-DD.

    Raises:
        InvalidDateInputError: formato nao reconhecido ou dia inexistente.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateInputError(
            f"unsupported date input type: {type(value).__name__}",
            RecurrenceErrorKind.INVALID_FORMAT,
        )

    text = value.strip()
    match = _DATE_ONLY_RE.match(text) if date_only else _ISO_DATETIME_RE.match(text)
    if match is None:
        expected = "YYYY-MM-DD" if date_only else "ISO-8601"
        raise InvalidDateInputError(
            f"invalid date format, expected {expected}",
            RecurrenceErrorKind.INVALID_FORMAT,
        )
    year, month, day = (int(group) for group in match.groups()[:3])
    _check_calendar_fields(year, month, day)
    return date(year, month, day)


def _check_calendar_fields(year: int, month: int, day: int) -> None:
    # Rejeita em vez de "corrigir" (2023-02-29 nao vira 2023-03-01)
    if not day_exists(year, month, day):
        raise InvalidDateInputError(
            f"{year:04d}-{month:02d}-{day:02d} does not exist in the calendar",
            RecurrenceErrorKind.INVALID_CALENDAR_DATE,
        )
