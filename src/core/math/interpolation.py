"""
Interpolation — кусочно-линейная интерполяция по табличным узлам

Два примитива, на которых построены все табличные поиски калькулятора:

- linear_interpolate: интерполяция между двумя известными точками (x0, y0),
  (x1, y1). Вырожденный отрезок x0 == x1 возвращает y0 (без деления на ноль).
  За пределами [x0, x1] выполняет экстраполяцию — ограничение x
  ответственность вызывающего кода.

- interpolate_clamped: поиск по упорядоченной последовательности узлов с
  политикой "clamp на краях + поиск интервала + интерполяция":
    x <= xs[0]  → ys[0]
    x >= xs[-1] → ys[-1]
    иначе       → первый отрезок xs[i] <= x <= xs[i+1]

ИНВАРИАНТЫ:
1. Экстраполяция за пределы таблицы никогда не выполняется в
   interpolate_clamped
2. На узлах таблицы результат совпадает с табличным значением
"""

from collections.abc import Sequence

from src.core.errors import InterpolationLookupError


def linear_interpolate(x: float, x0: float, y0: float, x1: float, y1: float) -> float:
    """
    Линейная интерполяция между (x0, y0) и (x1, y1).

    Examples:
        >>> linear_interpolate(15.0, 10.0, 40.0, 20.0, 60.0)
        50.0
        >>> linear_interpolate(5.0, 3.0, 7.0, 3.0, 9.0)
        7.0
    """
    if x0 == x1:
        return y0
    return y0 + (x - x0) * (y1 - y0) / (x1 - x0)


def interpolate_clamped(
    x: float,
    xs: Sequence[float],
    ys: Sequence[float],
    what: str = "value",
) -> float:
    """
    Интерполяция по упорядоченным (по возрастанию xs) узлам с clamp на краях.

    Args:
        x: Аргумент поиска
        xs: Узлы по оси аргумента (неубывающие)
        ys: Значения в узлах (той же длины)
        what: Имя искомой величины для сообщения об ошибке

    Returns:
        Интерполированное значение y(x)

    Raises:
        InterpolationLookupError: Если узлов меньше двух или ни один
            отрезок не содержит x (например, x — NaN)
    """
    n = len(xs)
    if n < 2 or len(ys) != n:
        raise InterpolationLookupError(
            f"cannot interpolate {what}: need at least 2 aligned points, got {n}"
        )

    if x <= xs[0]:
        return ys[0]
    if x >= xs[-1]:
        return ys[-1]

    for i in range(n - 1):
        if xs[i] <= x <= xs[i + 1]:
            return linear_interpolate(x, xs[i], ys[i], xs[i + 1], ys[i + 1])

    raise InterpolationLookupError(f"cannot bracket {what} for x={x}")
