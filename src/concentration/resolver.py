"""
Concentration Resolver — концентрация раствора по (T, ρ)

Оркестрация:
1. CrossTemperatureDensityResolver → (ρ_left, ρ_right)
2. BracketLocator → (t_left, t_right)
3. Обратный поиск концентрации на каждой опорной кривой:
       C_left = c_left_curve(ρ_left), C_right = c_right_curve(ρ_right)
4. Интерполяция по температуре до T, округление до 0.1 %

Ошибки подшагов пробрасываются без изменений.
"""

import logging

from src.concentration.bracket import BracketLocator
from src.concentration.cross_temperature import CrossTemperatureDensityResolver
from src.concentration.curve import concentration_for_density
from src.core.domain.reference_tables import ReferenceTables
from src.core.math.interpolation import linear_interpolate
from src.core.math.numerical_safeguards import CONCENTRATION_DECIMALS, round_half_away

logger = logging.getLogger(__name__)


class ConcentrationResolver:
    """Определение концентрации по температуре и плотности."""

    def __init__(self, tables: ReferenceTables):
        self.tables = tables
        self.locator = BracketLocator(tables)
        self.density_resolver = CrossTemperatureDensityResolver(tables, locator=self.locator)

    def resolve_concentration(self, temperature_c: float, density_g_cm3: float) -> float:
        """
        Концентрация раствора (%) при температуре и плотности измерения.

        Raises:
            DomainRangeError: Температура вне табличного диапазона
            InterpolationLookupError: Сбой интерполяции по кривым
        """
        density_left, density_right = self.density_resolver.resolve_bracket_densities(
            temperature_c, density_g_cm3
        )
        bracket = self.locator.find_bracket(temperature_c)

        concentration_left = concentration_for_density(density_left, bracket.left)
        concentration_right = concentration_for_density(density_right, bracket.right)

        concentration = linear_interpolate(
            temperature_c,
            bracket.t_left,
            concentration_left,
            bracket.t_right,
            concentration_right,
        )

        logger.debug(
            "C(%g °C)=%.4f %%, C(%g °C)=%.4f %% -> C(%s °C)=%.4f %%",
            bracket.t_left,
            concentration_left,
            bracket.t_right,
            concentration_right,
            temperature_c,
            concentration,
        )
        return round_half_away(concentration, CONCENTRATION_DECIMALS)
