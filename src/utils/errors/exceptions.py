"""Exceções de domínio para datas e regras de recorrência inválidas."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agenda.domain.recurrence import RecurrenceErrorKind


class RecurrenceError(ValueError):
    """Base para falhas de construção de uma série recorrente.

    Attributes:
        kind: Categoria estável do erro (independente do texto da mensagem).
    """

    def __init__(self, message: str, kind: RecurrenceErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidRecurrenceRuleError(RecurrenceError):
    """Intervalo, tipo de repetição ou contagem inválidos."""


class InvalidDateInputError(RecurrenceError):
    """Data mal formatada ou inexistente no calendário."""


class InvalidAnchorDateError(InvalidDateInputError):
    """Data âncora da série não é uma data de calendário válida."""
