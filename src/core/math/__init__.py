"""
Core math modules

Численные примитивы и табличная интерполяция калькулятора BPR.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    CONCENTRATION_DECIMALS,
    DENSITY_DECIMALS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    TEMPERATURE_DECIMALS,
    # Checks and comparisons
    is_close,
    is_valid_float,
    # Utilities
    clamp,
    round_half_away,
    # Validation
    validate_in_range,
)

# Interpolation
from src.core.math.interpolation import (
    interpolate_clamped,
    linear_interpolate,
)

__all__ = [
    # Numerical Safeguards: Constants
    "CONCENTRATION_DECIMALS",
    "DENSITY_DECIMALS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "TEMPERATURE_DECIMALS",
    # Numerical Safeguards: Checks
    "is_close",
    "is_valid_float",
    # Numerical Safeguards: Utilities
    "clamp",
    "round_half_away",
    # Numerical Safeguards: Validation
    "validate_in_range",
    # Interpolation
    "interpolate_clamped",
    "linear_interpolate",
]
