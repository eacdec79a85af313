"""
Reference Loader — загрузка справочных таблиц

Порядок загрузки:
1. Чтение JSON документа (по умолчанию — таблицы сульфата кобальта из data/)
2. Проверка контракта reference_tables (JSON Schema)
3. Построение immutable ReferenceTables (проверка монотонности кривых и
   таблицы давления пара)

Любой сбой на этих шагах завершается ReferenceDataError. Результат
создаётся один раз при старте процесса и передаётся компонентам явно.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from src.core.contracts import ReferenceTablesValidator
from src.core.domain.reference_tables import (
    ConcentrationDensityCurve,
    CurvePoint,
    ReferenceTables,
    VaporPressurePoint,
)
from src.core.errors import ReferenceDataError

logger = logging.getLogger(__name__)

DEFAULT_TABLES_PATH: Path = Path(__file__).parent / "data" / "cobalt_sulfate_heptahydrate.json"


def build_reference_tables(data: Dict[str, Any]) -> ReferenceTables:
    """
    Построение ReferenceTables из документа контракта reference_tables.

    Args:
        data: Документ (dict), уже прочитанный из JSON

    Returns:
        Проверенный immutable ReferenceTables

    Raises:
        ReferenceDataError: Если документ нарушает схему или инварианты модели
    """
    violations = [
        f"{error.json_path}: {error.message}"
        for error in ReferenceTablesValidator().iter_errors(data)
    ]
    if violations:
        raise ReferenceDataError(
            f"reference tables violate contract: {'; '.join(violations)}"
        )

    try:
        return ReferenceTables(
            substance=data["substance"],
            curves=tuple(
                ConcentrationDensityCurve(
                    temperature_c=curve["temperature_c"],
                    points=tuple(
                        CurvePoint(concentration_pct=c, density_g_cm3=rho)
                        for c, rho in curve["points"]
                    ),
                )
                for curve in data["curves"]
            ),
            vapor_pressure=tuple(
                VaporPressurePoint(pressure_kpa=p, temperature_c=t)
                for p, t in data["vapor_pressure"]
            ),
        )
    except ValidationError as e:
        raise ReferenceDataError(f"reference tables violate invariants: {e}") from e


def load_reference_tables(path: Path | str | None = None) -> ReferenceTables:
    """
    Загрузка справочных таблиц из JSON файла.

    Args:
        path: Путь к файлу (default: DEFAULT_TABLES_PATH)

    Returns:
        Проверенный immutable ReferenceTables

    Raises:
        ReferenceDataError: Если файл отсутствует или не читается, не
            является JSON в UTF-8 или нарушает контракт
    """
    tables_path = Path(path) if path is not None else DEFAULT_TABLES_PATH

    try:
        with open(tables_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ReferenceDataError(f"reference tables not found: {tables_path}") from e
    except OSError as e:
        raise ReferenceDataError(f"reference tables cannot be read: {tables_path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ReferenceDataError(f"reference tables are not valid JSON: {tables_path}: {e}") from e

    tables = build_reference_tables(data)
    logger.info(
        "Loaded reference tables for %s: %d curves (%s °C), %d vapor pressure points",
        tables.substance,
        len(tables.curves),
        ", ".join(f"{t:g}" for t in tables.reference_temperatures),
        len(tables.vapor_pressure),
    )
    return tables
