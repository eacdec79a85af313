"""
Reference data — справочные таблицы и их загрузка.
"""

from .loader import DEFAULT_TABLES_PATH, build_reference_tables, load_reference_tables

__all__ = [
    "DEFAULT_TABLES_PATH",
    "build_reference_tables",
    "load_reference_tables",
]
