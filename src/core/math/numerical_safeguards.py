"""
Numerical Safeguards — численные примитивы калькулятора

Модуль содержит общие численные операции, на которые опираются все
ступени расчёта:
- Проверка NaN/Inf
- Сравнение float с учётом машинной точности
- Округление "half away from zero" до заданного числа знаков
- Ограничение значения диапазоном (clamp)
- Валидация диапазона с типизированной ошибкой DomainRangeError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление симметрично относительно нуля: 0.05 → 0.1, -0.05 → -0.1
   (а не banker's rounding встроенного round())
2. NaN никогда не проходит validate_in_range
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from src.core.errors import DomainRangeError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Число знаков для плотности (г/см³)
DENSITY_DECIMALS: Final[int] = 3

# Число знаков для концентрации (%) и температур (°C)
CONCENTRATION_DECIMALS: Final[int] = 1
TEMPERATURE_DECIMALS: Final[int] = 1


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(value: float, decimals: int) -> float:
    """
    Округление до decimals знаков по правилу "half away from zero".

    Все контрольные точки округления калькулятора (плотность до 3 знаков,
    концентрация и температуры до 1 знака) используют эту функцию.

    Args:
        value: Значение для округления
        decimals: Число знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если decimals < 0

    Examples:
        >>> round_half_away(11.07, 1)
        11.1
        >>> round_half_away(1.51179, 3)
        1.512
        >>> round_half_away(-0.25, 1)
        -0.3
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    if not is_valid_float(value):
        return value

    scale = 10.0**decimals
    scaled = value * scale

    if scaled >= 0:
        steps = math.floor(scaled + 0.5)
    else:
        steps = math.ceil(scaled - 0.5)

    return steps / scale


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(1.0696, 1.04, 1.09)
        1.0696
        >>> clamp(1.02, 1.04, 1.09)
        1.04
        >>> clamp(1.12, 1.04, 1.09)
        1.09
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
    unit: str = "",
) -> None:
    """
    Валидация, что значение лежит в замкнутом диапазоне [min_value, max_value].

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)
        unit: Единица измерения для сообщения (optional)

    Raises:
        DomainRangeError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise DomainRangeError(f"{name} must be a finite number, got {value}")

    suffix = f" {unit}" if unit else ""

    if min_value is not None and value < min_value:
        raise DomainRangeError(
            f"{name} must be within [{min_value}, {max_value}]{suffix}, got {value}"
        )

    if max_value is not None and value > max_value:
        raise DomainRangeError(
            f"{name} must be within [{min_value}, {max_value}]{suffix}, got {value}"
        )
