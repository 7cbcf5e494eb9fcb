"""Agregador de settings da agenda.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Recurrence settings
from config.settings.recurrence import (
    RecurrenceSettings,
    get_recurrence_settings,
)

__all__ = [
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "Environment",
    "RecurrenceSettings",
    "get_base_settings",
    "get_recurrence_settings",
]
