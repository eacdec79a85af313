"""
Contract Validation Module

Модуль для валидации JSON контрактов: справочные таблицы и итог расчёта.
"""

from .validators import (
    ContractValidator,
    ReferenceTablesValidator,
    ResolvedResultValidator,
    SchemaLoader,
    validate_resolved_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ReferenceTablesValidator",
    "ResolvedResultValidator",
    # Functions
    "validate_resolved_result",
]
