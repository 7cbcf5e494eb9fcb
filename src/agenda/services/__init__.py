"""Serviços da agenda.

Funções puras de validação e geração; a composição com log fica no planner.
"""

from agenda.services.date_range_validator import validate_date_range
from agenda.services.recurrence_planner import plan_from_rule, plan_recurrence
from agenda.services.recurring_date_generator import (
    generate_occurrences,
    generate_recurring_dates,
    generate_recurring_dates_until,
    iter_recurring_dates,
)
from agenda.services.recurring_event_series import expand_recurring_event

__all__ = [
    "expand_recurring_event",
    "generate_occurrences",
    "generate_recurring_dates",
    "generate_recurring_dates_until",
    "iter_recurring_dates",
    "plan_from_rule",
    "plan_recurrence",
    "validate_date_range",
]
