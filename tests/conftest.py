"""Configuração do pytest para o projeto agenda."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import get_base_settings, get_recurrence_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings cacheadas nao vazam entre testes que alteram env."""
    get_base_settings.cache_clear()
    get_recurrence_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_recurrence_settings.cache_clear()
