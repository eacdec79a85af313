"""Concentration — определение концентрации по температуре и плотности.

- BracketLocator: соседние опорные температуры
- density_for_concentration / concentration_for_density: поиск по одной кривой
- CrossTemperatureDensityResolver: эквивалентные плотности на опорных кривых
- ConcentrationResolver: итоговая концентрация при произвольной T
"""

from .bracket import BracketLocator, TemperatureBracket
from .cross_temperature import (
    BracketDensities,
    CrossTemperatureDensityResolver,
    CrossTemperatureSample,
)
from .curve import concentration_for_density, density_for_concentration
from .resolver import ConcentrationResolver

__all__ = [
    "BracketLocator",
    "TemperatureBracket",
    "density_for_concentration",
    "concentration_for_density",
    "CrossTemperatureSample",
    "BracketDensities",
    "CrossTemperatureDensityResolver",
    "ConcentrationResolver",
]
