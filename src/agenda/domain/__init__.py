"""Contratos de dominio da agenda."""

from agenda.domain.event import (
    RECURRING_EVENT_ICON,
    EventDraft,
    EventInstance,
    RecurringEventSeries,
)
from agenda.domain.recurrence import (
    OccurrenceSeries,
    RecurrenceErrorKind,
    RecurrencePlan,
    RepeatRule,
    RepeatType,
    ValidationResult,
)

__all__ = [
    "RECURRING_EVENT_ICON",
    "EventDraft",
    "EventInstance",
    "OccurrenceSeries",
    "RecurrenceErrorKind",
    "RecurrencePlan",
    "RecurringEventSeries",
    "RepeatRule",
    "RepeatType",
    "ValidationResult",
]
