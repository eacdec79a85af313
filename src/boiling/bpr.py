"""
BPR — повышение температуры кипения раствора

ФОРМУЛЫ:
    bpr_atm = 0.82 × C − 28.7          (C в %, окно [45, 53] %)
    bpr_atm = 8.0, если формула даёт < 8.0 (нижняя граница)

    K = 1 + 0.0015 × (100 − tw)        (коррекция на давление)
    K ∈ [1.04, 1.09]

    bpr = round(bpr_atm × K, 1)
"""

from dataclasses import dataclass

from src.core.math.numerical_safeguards import (
    TEMPERATURE_DECIMALS,
    clamp,
    round_half_away,
    validate_in_range,
)


@dataclass(frozen=True)
class BPRConfig:
    """Коэффициенты эмпирической формулы BPR и коррекции на давление."""

    concentration_min_pct: float = 45.0
    concentration_max_pct: float = 53.0
    slope: float = 0.82
    intercept: float = -28.7
    bpr_floor_c: float = 8.0

    # Коррекция на давление
    correction_per_degree: float = 0.0015
    correction_reference_c: float = 100.0
    correction_min: float = 1.04
    correction_max: float = 1.09


def compute_bpr(concentration_pct: float, config: BPRConfig | None = None) -> float:
    """
    BPR при атмосферном давлении для концентрации раствора.

    Args:
        concentration_pct: Концентрация (%)
        config: Коэффициенты формулы (default: BPRConfig())

    Returns:
        BPR (°C): ровно bpr_floor_c, если формула ниже границы,
        иначе округлённое до 0.1 значение формулы

    Raises:
        DomainRangeError: Концентрация вне окна формулы
    """
    config = config or BPRConfig()
    validate_in_range(
        concentration_pct,
        "concentration",
        config.concentration_min_pct,
        config.concentration_max_pct,
        unit="%",
    )

    bpr = config.slope * concentration_pct + config.intercept
    if bpr < config.bpr_floor_c:
        return config.bpr_floor_c
    return round_half_away(bpr, TEMPERATURE_DECIMALS)


def pressure_correction_coefficient(
    pure_water_boiling_point_c: float, config: BPRConfig | None = None
) -> float:
    """Коэффициент K пересчёта атмосферного BPR на рабочее давление."""
    config = config or BPRConfig()
    k = 1.0 + config.correction_per_degree * (
        config.correction_reference_c - pure_water_boiling_point_c
    )
    return clamp(k, config.correction_min, config.correction_max)


def corrected_bpr(
    atmospheric_bpr_c: float,
    pure_water_boiling_point_c: float,
    config: BPRConfig | None = None,
) -> float:
    """BPR при рабочем давлении, округлённое до 0.1 °C."""
    k = pressure_correction_coefficient(pure_water_boiling_point_c, config)
    return round_half_away(atmospheric_bpr_c * k, TEMPERATURE_DECIMALS)
