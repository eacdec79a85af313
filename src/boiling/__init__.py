"""Boiling — температура кипения воды, BPR и итоговый расчёт.

- boiling_point_for_pressure: кипение чистой воды по давлению
- compute_bpr / pressure_correction_coefficient: BPR и коррекция на давление
- BoilingPointCalculator: конвейер (T, ρ, P) → CalculationOutcome
"""

from .bpr import BPRConfig, compute_bpr, corrected_bpr, pressure_correction_coefficient
from .calculator import BoilingPointCalculator, CalculationOutcome, CalculationStage
from .water import WaterBoilingConfig, boiling_point_for_pressure

__all__ = [
    "WaterBoilingConfig",
    "boiling_point_for_pressure",
    "BPRConfig",
    "compute_bpr",
    "corrected_bpr",
    "pressure_correction_coefficient",
    "BoilingPointCalculator",
    "CalculationOutcome",
    "CalculationStage",
]
