"""Expansao de um evento com regra de repeticao em instancias concretas.

Todas as instancias de uma serie compartilham o mesmo `repeat_id`, o que
permite editar ou remover a serie inteira depois.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from agenda.domain.event import RECURRING_EVENT_ICON, EventInstance, RecurringEventSeries
from agenda.services.recurrence_planner import plan_from_rule

if TYPE_CHECKING:
    from collections.abc import Callable

    from agenda.domain.event import EventDraft
    from config.settings.recurrence import RecurrenceSettings

logger = logging.getLogger(__name__)


def expand_recurring_event(
    draft: EventDraft,
    *,
    count: int | None = None,
    settings: RecurrenceSettings | None = None,
    log: logging.Logger | None = None,
    repeat_id_factory: Callable[[], str] | None = None,
) -> RecurringEventSeries:
    """Retorna as instancias do evento, uma por data de ocorrencia.

    Evento sem regra gera uma unica instancia, sem `repeat_id` nem icone.
    Regra invalida gera serie vazia com `error`/`error_kind` preenchidos.
    """
    if draft.repeat is None:
        return RecurringEventSeries(instances=(EventInstance.model_validate(draft.model_dump()),))

    active_log = log or logger
    plan = plan_from_rule(draft.date, draft.repeat, count=count, settings=settings, log=active_log)
    if not plan.ok:
        return RecurringEventSeries(error=plan.error, error_kind=plan.error_kind)

    repeat_id = (repeat_id_factory or _new_repeat_id)()
    base = draft.model_dump()
    instances = tuple(
        EventInstance.model_validate(
            {**base, "date": occurrence, "repeat_id": repeat_id, "icon": RECURRING_EVENT_ICON}
        )
        for occurrence in plan.dates
    )
    active_log.info(
        "Recurring series expanded",
        extra={
            "repeat_type": str(draft.repeat.type),
            "occurrences": len(instances),
            "truncated": plan.truncated,
        },
    )
    return RecurringEventSeries(
        instances=instances,
        repeat_id=repeat_id,
        warning=plan.warning,
        truncated=plan.truncated,
    )


def _new_repeat_id() -> str:
    return str(uuid.uuid4())


__all__ = ["expand_recurring_event"]
