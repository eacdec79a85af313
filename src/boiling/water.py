"""
Pure-Water Boiling Point — температура кипения воды по давлению

Линейная интерполяция по таблице давления насыщенного пара. Таблица
покрывает 1–300 кПа, но расчёт принимает только рабочее окно глубокого
вакуума [8, 28] кПа (включительно). Результат округляется до 0.1 °C.
"""

from dataclasses import dataclass

from src.core.domain.reference_tables import ReferenceTables
from src.core.errors import InterpolationLookupError
from src.core.math.interpolation import linear_interpolate
from src.core.math.numerical_safeguards import (
    TEMPERATURE_DECIMALS,
    round_half_away,
    validate_in_range,
)


@dataclass(frozen=True)
class WaterBoilingConfig:
    """Рабочее окно давления (кПа)."""

    pressure_min_kpa: float = 8.0
    pressure_max_kpa: float = 28.0


def boiling_point_for_pressure(
    pressure_kpa: float,
    tables: ReferenceTables,
    config: WaterBoilingConfig | None = None,
) -> float:
    """
    Температура кипения чистой воды при давлении.

    Args:
        pressure_kpa: Давление (кПа)
        tables: Справочные таблицы (таблица давления пара)
        config: Рабочее окно давления (default: WaterBoilingConfig())

    Returns:
        Температура кипения воды (°C), округлённая до 0.1

    Raises:
        DomainRangeError: Давление вне рабочего окна
        InterpolationLookupError: Таблица не окружает давление
    """
    config = config or WaterBoilingConfig()
    validate_in_range(
        pressure_kpa,
        "pressure",
        config.pressure_min_kpa,
        config.pressure_max_kpa,
        unit="kPa",
    )

    table = tables.vapor_pressure
    for lower, upper in zip(table, table[1:]):
        if lower.pressure_kpa <= pressure_kpa <= upper.pressure_kpa:
            tw = linear_interpolate(
                pressure_kpa,
                lower.pressure_kpa,
                lower.temperature_c,
                upper.pressure_kpa,
                upper.temperature_c,
            )
            return round_half_away(tw, TEMPERATURE_DECIMALS)

    raise InterpolationLookupError(
        f"vapor pressure table cannot bracket pressure {pressure_kpa} kPa"
    )
