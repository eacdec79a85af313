"""
Curve Interpolator — поиск по одной кривой концентрация–плотность

Две симметричные операции над одной ConcentrationDensityCurve:
- density_for_concentration: концентрация → плотность (прямой поиск)
- concentration_for_density: плотность → концентрация (обратный поиск)

Обе операции ограничивают аргумент крайними точками кривой (clamp) вместо
отказа: измерения вблизи границ таблицы дают ближайшую табличную строку.
"""

from src.core.domain.reference_tables import ConcentrationDensityCurve
from src.core.math.interpolation import interpolate_clamped


def density_for_concentration(concentration_pct: float, curve: ConcentrationDensityCurve) -> float:
    """
    Плотность раствора заданной концентрации на кривой.

    Args:
        concentration_pct: Концентрация (%)
        curve: Кривая при опорной температуре

    Returns:
        Плотность (г/см³); за пределами кривой — плотность крайней точки

    Raises:
        InterpolationLookupError: Если кривая не может окружить концентрацию
    """
    return interpolate_clamped(
        concentration_pct,
        curve.concentrations,
        curve.densities,
        what=f"density at {curve.temperature_c:g} °C",
    )


def concentration_for_density(density_g_cm3: float, curve: ConcentrationDensityCurve) -> float:
    """
    Концентрация раствора заданной плотности на кривой.

    Args:
        density_g_cm3: Плотность (г/см³)
        curve: Кривая при опорной температуре

    Returns:
        Концентрация (%); за пределами кривой — концентрация крайней точки

    Raises:
        InterpolationLookupError: Если кривая не может окружить плотность
    """
    return interpolate_clamped(
        density_g_cm3,
        curve.densities,
        curve.concentrations,
        what=f"concentration at {curve.temperature_c:g} °C",
    )
