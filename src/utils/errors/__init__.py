"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InvalidAnchorDateError,
    InvalidDateInputError,
    InvalidRecurrenceRuleError,
    RecurrenceError,
)

__all__ = [
    "InvalidAnchorDateError",
    "InvalidDateInputError",
    "InvalidRecurrenceRuleError",
    "RecurrenceError",
]
