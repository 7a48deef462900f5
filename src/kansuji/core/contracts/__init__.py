"""
Contract Validation Module

Модуль для валидации JSON контракта структурированного значения Kansuji.
"""

from .validators import (
    KansujiValidator,
    SchemaLoader,
    kansuji_from_json,
    kansuji_to_json,
    validate_kansuji,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "KansujiValidator",
    # Functions
    "validate_kansuji",
    "kansuji_to_json",
    "kansuji_from_json",
]
