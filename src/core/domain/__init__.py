"""
Domain models and value objects.

Contains reference tables, operator measurements and calculation results.
"""

from src.core.domain.measurement import MeasurementInput, ResolvedResult
from src.core.domain.reference_tables import (
    ConcentrationDensityCurve,
    CurvePoint,
    ReferenceTables,
    VaporPressurePoint,
)

__all__ = [
    # Reference tables
    "CurvePoint",
    "ConcentrationDensityCurve",
    "VaporPressurePoint",
    "ReferenceTables",
    # Measurement / result
    "MeasurementInput",
    "ResolvedResult",
]
