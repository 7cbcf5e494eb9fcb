"""Modelos de dominio de eventos de calendario.

`EventDraft` e o que a interface envia ao salvar; `EventInstance` e cada
evento concreto derivado dele, um por data de ocorrencia.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agenda.domain.recurrence import RecurrenceErrorKind, RepeatRule

RECURRING_EVENT_ICON = "🔄"


class EventDraft(BaseModel):
    """Dados de formulario de um evento, com regra de repeticao opcional."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(..., description="Titulo do evento.")
    date: str = Field(..., description="Data da primeira ocorrencia (YYYY-MM-DD).")
    start_time: str = Field(..., description="Horario de inicio (HH:MM).")
    end_time: str = Field(..., description="Horario de fim (HH:MM).")
    description: str = ""
    location: str = ""
    category: str = ""
    notification_minutes: int = Field(default=10, ge=0)
    repeat: RepeatRule | None = Field(
        default=None,
        description="Regra de repeticao; None para evento unico.",
    )


class EventInstance(EventDraft):
    """Evento concreto em uma data da serie."""

    repeat_id: str | None = Field(
        default=None,
        description="Identificador compartilhado por todas as instancias da serie.",
    )
    icon: str | None = None


class RecurringEventSeries(BaseModel):
    """Instancias geradas a partir de um rascunho."""

    model_config = ConfigDict(frozen=True)

    instances: tuple[EventInstance, ...] = ()
    repeat_id: str | None = None
    error: str | None = None
    error_kind: RecurrenceErrorKind | None = None
    warning: str | None = None
    truncated: bool = False

    @property
    def ok(self) -> bool:
        return self.error_kind is None


__all__ = ["RECURRING_EVENT_ICON", "EventDraft", "EventInstance", "RecurringEventSeries"]
