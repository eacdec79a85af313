"""
Errors — типизированные ошибки расчёта BPR

Все сбои конвейера (концентрация → кипение воды → BPR) представлены
одной иерархией с общим базовым классом BPRError:

- DomainRangeError: вход вне поддерживаемой области
  (температура вне табличного диапазона, давление вне [8, 28] кПа,
  концентрация вне [45, 53] %)
- InterpolationLookupError: интерполяция/инверсия не может найти
  окружающий интервал (обычно повреждённые или слишком разреженные таблицы)
- ReferenceDataError: справочные таблицы не загружаются или нарушают
  инварианты модели

DomainRangeError и ReferenceDataError также наследуют ValueError,
InterpolationLookupError — встроенный LookupError, чтобы вызывающий код
мог ловить их стандартными типами.
"""


class BPRError(Exception):
    """Базовая ошибка калькулятора BPR."""

    pass


class DomainRangeError(BPRError, ValueError):
    """Значение вне поддерживаемой области (RangeError)."""

    pass


class InterpolationLookupError(BPRError, LookupError):
    """Интерполяция не может найти окружающий интервал (LookupError)."""

    pass


class ReferenceDataError(BPRError, ValueError):
    """Справочные таблицы отсутствуют или не соответствуют контракту."""

    pass
