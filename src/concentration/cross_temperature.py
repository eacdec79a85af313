"""
Cross-Temperature Density Resolver — эквивалентные плотности на опорных кривых

Задача: плотность ρ измерена при произвольной температуре T. Какой была бы
плотность раствора той же (неизвестной) концентрации при каждой из двух
соседних опорных температур t_left и t_right?

АЛГОРИТМ:
1. Соседние опорные кривые (t_left, t_right) — BracketLocator
2. Общий диапазон концентраций:
       [max(minC_left, minC_right), min(maxC_left, maxC_right)]
3. Для каждой концентрации ЛЕВОЙ кривой внутри общего диапазона —
   плотность на правой кривой (прямой поиск) → CrossTemperatureSample
4. Для каждой выборки — линейная интерполяция плотности по температуре
   до T: ρT(c) = interp(T; t_left → ρ_left, t_right → ρ_right)
5. Сортировка пар (c, ρT) по ρT
6. Обратный поиск c0 с ρT(c0) = ρ (clamp на краях + поиск интервала)
7. ρ_left = ρ_left_curve(c0), ρ_right = ρ_right_curve(c0)
8. Округление обоих значений до 3 знаков

Выборки строятся только по узлам левой кривой: концентрации, которые есть
лишь на правой кривой, не участвуют.
"""

import logging
from typing import NamedTuple

from src.concentration.bracket import BracketLocator
from src.concentration.curve import density_for_concentration
from src.core.domain.reference_tables import ReferenceTables
from src.core.errors import InterpolationLookupError
from src.core.math.interpolation import interpolate_clamped, linear_interpolate
from src.core.math.numerical_safeguards import DENSITY_DECIMALS, round_half_away

logger = logging.getLogger(__name__)


class CrossTemperatureSample(NamedTuple):
    """Концентрация и её плотности на двух соседних опорных кривых."""

    concentration_pct: float
    density_left: float
    density_right: float


class BracketDensities(NamedTuple):
    """Эквивалентные плотности (г/см³) при t_left и t_right."""

    density_left: float
    density_right: float


class CrossTemperatureDensityResolver:
    """Пересчёт измеренной плотности на соседние опорные температуры."""

    def __init__(self, tables: ReferenceTables, locator: BracketLocator | None = None):
        self.tables = tables
        self.locator = locator or BracketLocator(tables)

    def resolve_bracket_densities(self, temperature_c: float, density_g_cm3: float) -> BracketDensities:
        """
        Эквивалентные плотности при соседних опорных температурах.

        Args:
            temperature_c: Температура измерения (°C)
            density_g_cm3: Измеренная плотность (г/см³)

        Returns:
            BracketDensities(density_left, density_right), округлённые до 3 знаков

        Raises:
            DomainRangeError: Температура вне табличного диапазона
            InterpolationLookupError: Меньше двух общих выборок или сбой поиска
        """
        bracket = self.locator.find_bracket(temperature_c)
        left, right = bracket.left, bracket.right

        common_min = max(left.min_concentration, right.min_concentration)
        common_max = min(left.max_concentration, right.max_concentration)

        samples = [
            CrossTemperatureSample(
                concentration_pct=point.concentration_pct,
                density_left=point.density_g_cm3,
                density_right=density_for_concentration(point.concentration_pct, right),
            )
            for point in left.points
            if common_min <= point.concentration_pct <= common_max
        ]

        if len(samples) < 2:
            raise InterpolationLookupError(
                f"insufficient concentration-density data to invert between "
                f"{bracket.t_left:g} °C and {bracket.t_right:g} °C: {len(samples)} aligned samples"
            )

        # Теоретическая плотность каждой выборки при температуре измерения
        theoretical = sorted(
            (
                (
                    linear_interpolate(
                        temperature_c,
                        bracket.t_left,
                        sample.density_left,
                        bracket.t_right,
                        sample.density_right,
                    ),
                    sample.concentration_pct,
                )
                for sample in samples
            ),
            key=lambda pair: pair[0],
        )

        concentration = interpolate_clamped(
            density_g_cm3,
            [rho_t for rho_t, _ in theoretical],
            [c for _, c in theoretical],
            what=f"concentration for density {density_g_cm3:.3f} g/cm³",
        )

        density_left = density_for_concentration(concentration, left)
        density_right = density_for_concentration(concentration, right)

        logger.debug(
            "T=%s °C, rho=%s g/cm³: c0=%.4f %%, rho(%g °C)=%.5f, rho(%g °C)=%.5f",
            temperature_c,
            density_g_cm3,
            concentration,
            bracket.t_left,
            density_left,
            bracket.t_right,
            density_right,
        )

        return BracketDensities(
            density_left=round_half_away(density_left, DENSITY_DECIMALS),
            density_right=round_half_away(density_right, DENSITY_DECIMALS),
        )
