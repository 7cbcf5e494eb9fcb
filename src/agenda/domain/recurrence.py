"""Modelos de dominio para regras de repeticao e validacao de datas.

Contratos compartilhados entre o validador de intervalos, o gerador de
datas recorrentes e quem compoe os dois.
"""

from __future__ import annotations

from datetime import date  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RepeatType(StrEnum):
    """Unidades de repeticao suportadas."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class RecurrenceErrorKind(StrEnum):
    """Categoria estavel de cada falha; o texto da mensagem pode variar."""

    MISSING_INPUT = "missing_input"
    INVALID_FORMAT = "invalid_format"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"
    INVERTED_RANGE = "inverted_range"
    INVALID_RULE_PARAMETERS = "invalid_rule_parameters"


class RepeatRule(BaseModel):
    """Regra de repeticao de um evento."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: RepeatType = Field(..., description="Unidade de repeticao.")
    interval: int = Field(default=1, ge=1, description="Passo entre ciclos, em unidades.")
    end_date: date | None = Field(
        default=None,
        description="Ultima data possivel da serie (inclusiva).",
    )


class ValidationResult(BaseModel):
    """Resultado da validacao de um intervalo de datas.

    `error` so existe quando invalido; `warning` so quando valido.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: str | None = None
    error_kind: RecurrenceErrorKind | None = None
    warning: str | None = None

    @model_validator(mode="after")
    def _check_exclusive_fields(self) -> Self:
        if self.is_valid and (self.error is not None or self.error_kind is not None):
            raise ValueError("valid result cannot carry an error")
        if not self.is_valid and self.warning is not None:
            raise ValueError("invalid result cannot carry a warning")
        if not self.is_valid and (self.error is None or self.error_kind is None):
            raise ValueError("invalid result requires error and error_kind")
        return self

    @classmethod
    def valid(cls, warning: str | None = None) -> ValidationResult:
        return cls(is_valid=True, warning=warning)

    @classmethod
    def fail(cls, kind: RecurrenceErrorKind, error: str) -> ValidationResult:
        return cls(is_valid=False, error=error, error_kind=kind)

    def to_payload(self) -> dict[str, object]:
        """Formato consumido pela interface: {isValid, error?, warning?}."""
        payload: dict[str, object] = {"isValid": self.is_valid}
        if self.error is not None:
            payload["error"] = self.error
        if self.warning is not None:
            payload["warning"] = self.warning
        return payload


class OccurrenceSeries(BaseModel):
    """Datas emitidas por uma chamada do gerador."""

    model_config = ConfigDict(frozen=True)

    dates: tuple[str, ...] = ()
    requested: int | None = Field(
        default=None,
        description="Quantidade pedida no modo por contagem; None no modo por data final.",
    )
    end_date: date | None = None
    truncated: bool = Field(
        default=False,
        description="True quando um teto de seguranca interrompeu a geracao.",
    )


class RecurrencePlan(BaseModel):
    """Resultado da composicao validacao + geracao, sempre como dado."""

    model_config = ConfigDict(frozen=True)

    dates: tuple[str, ...] = ()
    error: str | None = None
    error_kind: RecurrenceErrorKind | None = None
    warning: str | None = None
    truncated: bool = False

    @property
    def ok(self) -> bool:
        return self.error_kind is None


__all__ = [
    "OccurrenceSeries",
    "RecurrenceErrorKind",
    "RecurrencePlan",
    "RepeatRule",
    "RepeatType",
    "ValidationResult",
]
