"""Bracket Locator — поиск соседних опорных температур.

Для температуры T находит пару соседних опорных кривых (t_left, t_right),
таких что t_left <= T <= t_right:
- T вне [min, max] опорных температур → DomainRangeError
- Проверяются пары по возрастанию, возвращается первая подходящая; на
  внутренней опорной температуре это пара, где T — правый конец
  (T=40 → (20, 40))
- T == max → две последние температуры (включающая граница)
"""

import logging
from dataclasses import dataclass

from src.core.domain.reference_tables import ConcentrationDensityCurve, ReferenceTables
from src.core.errors import InterpolationLookupError
from src.core.math.numerical_safeguards import validate_in_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemperatureBracket:
    """Пара соседних опорных кривых, окружающих температуру."""

    left: ConcentrationDensityCurve
    right: ConcentrationDensityCurve

    @property
    def t_left(self) -> float:
        return self.left.temperature_c

    @property
    def t_right(self) -> float:
        return self.right.temperature_c

    def as_tuple(self) -> tuple[float, float]:
        return (self.t_left, self.t_right)


class BracketLocator:
    """Поиск окружающих опорных температур в ReferenceTables."""

    def __init__(self, tables: ReferenceTables):
        self.tables = tables

    def find_bracket(self, temperature_c: float) -> TemperatureBracket:
        """Найти соседние опорные кривые для температуры.

        Args:
            temperature_c: температура (°C)

        Returns:
            TemperatureBracket с t_left <= temperature_c <= t_right

        Raises:
            DomainRangeError: если температура вне табличного диапазона
        """
        curves = self.tables.curves
        validate_in_range(
            temperature_c,
            "temperature",
            self.tables.min_temperature,
            self.tables.max_temperature,
            unit="°C",
        )

        for left, right in zip(curves, curves[1:]):
            if left.temperature_c <= temperature_c <= right.temperature_c:
                bracket = TemperatureBracket(left=left, right=right)
                logger.debug("T=%s °C bracketed by %s", temperature_c, bracket.as_tuple())
                return bracket

        raise InterpolationLookupError(f"cannot bracket temperature {temperature_c} °C")
