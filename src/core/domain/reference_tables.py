"""
ReferenceTables — справочные таблицы раствора сульфата кобальта

Immutable Pydantic модели, проверяемые при загрузке:
- ConcentrationDensityCurve: кривая концентрация–плотность при одной
  опорной температуре
- VaporPressurePoint: точка таблицы давления насыщенного пара воды
- ReferenceTables: единый конфигурационный объект со всеми кривыми и
  таблицей давления пара; создаётся один раз при старте процесса и
  передаётся компонентам явно

ИНВАРИАНТЫ (проверяются валидаторами):
1. Кривая содержит >= 2 точек, концентрация и плотность строго возрастают
2. Опорные температуры уникальны, кривые упорядочены по температуре
3. В таблице давления пара давление и температура строго возрастают

Кривые адресуются по объявленному полю temperature_c, а не по
float-ключу словаря.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import is_close


# =============================================================================
# CONCENTRATION–DENSITY CURVES
# =============================================================================


class CurvePoint(BaseModel):
    """Точка кривой: концентрация (%) и плотность (г/см³)."""

    concentration_pct: float = Field(..., ge=0, le=100, description="Концентрация (%)")
    density_g_cm3: float = Field(..., gt=0, description="Плотность (г/см³)")

    model_config = {"frozen": True, "allow_inf_nan": False}


class ConcentrationDensityCurve(BaseModel):
    """
    Кривая концентрация–плотность при фиксированной температуре.

    Более высокая концентрация даёт более высокую плотность.
    """

    temperature_c: float = Field(..., description="Опорная температура кривой (°C)")
    points: tuple[CurvePoint, ...] = Field(
        ..., min_length=2, description="Точки кривой по возрастанию концентрации"
    )

    model_config = {"frozen": True, "allow_inf_nan": False}

    @field_validator("points")
    @classmethod
    def validate_monotonic(cls, v: tuple[CurvePoint, ...]) -> tuple[CurvePoint, ...]:
        """Концентрация и плотность должны строго возрастать вместе."""
        for prev, curr in zip(v, v[1:]):
            if curr.concentration_pct <= prev.concentration_pct:
                raise ValueError(
                    f"concentrations must be strictly increasing: "
                    f"{prev.concentration_pct} then {curr.concentration_pct}"
                )
            if curr.density_g_cm3 <= prev.density_g_cm3:
                raise ValueError(
                    f"densities must be strictly increasing: "
                    f"{prev.density_g_cm3} then {curr.density_g_cm3}"
                )
        return v

    @property
    def concentrations(self) -> tuple[float, ...]:
        return tuple(p.concentration_pct for p in self.points)

    @property
    def densities(self) -> tuple[float, ...]:
        return tuple(p.density_g_cm3 for p in self.points)

    @property
    def min_concentration(self) -> float:
        return self.points[0].concentration_pct

    @property
    def max_concentration(self) -> float:
        return self.points[-1].concentration_pct


# =============================================================================
# VAPOR PRESSURE
# =============================================================================


class VaporPressurePoint(BaseModel):
    """Давление насыщенного пара (кПа) и температура кипения чистой воды (°C)."""

    pressure_kpa: float = Field(..., gt=0, description="Давление (кПа)")
    temperature_c: float = Field(..., description="Температура кипения воды (°C)")

    model_config = {"frozen": True, "allow_inf_nan": False}


# =============================================================================
# REFERENCE TABLES
# =============================================================================


class ReferenceTables(BaseModel):
    """
    Полный набор справочных данных для одного вещества.

    Immutable (frozen=True). Содержит:
    - Кривые концентрация–плотность по опорным температурам
    - Таблицу давления пара чистой воды
    """

    substance: str = Field(..., min_length=1, description="Название вещества")
    curves: tuple[ConcentrationDensityCurve, ...] = Field(
        ..., min_length=2, description="Кривые по возрастанию температуры"
    )
    vapor_pressure: tuple[VaporPressurePoint, ...] = Field(
        ..., min_length=2, description="Таблица давления пара по возрастанию давления"
    )

    model_config = {"frozen": True}

    @field_validator("curves")
    @classmethod
    def validate_curves_sorted(
        cls, v: tuple[ConcentrationDensityCurve, ...]
    ) -> tuple[ConcentrationDensityCurve, ...]:
        """Упорядочивание по температуре; совпадающие температуры запрещены (is_close)."""
        ordered = tuple(sorted(v, key=lambda curve: curve.temperature_c))
        for prev, curr in zip(ordered, ordered[1:]):
            if is_close(curr.temperature_c, prev.temperature_c):
                raise ValueError(f"duplicate curve temperature {curr.temperature_c}")
        return ordered

    @field_validator("vapor_pressure")
    @classmethod
    def validate_vapor_pressure_monotonic(
        cls, v: tuple[VaporPressurePoint, ...]
    ) -> tuple[VaporPressurePoint, ...]:
        for prev, curr in zip(v, v[1:]):
            if curr.pressure_kpa <= prev.pressure_kpa:
                raise ValueError(
                    f"pressures must be strictly increasing: "
                    f"{prev.pressure_kpa} then {curr.pressure_kpa}"
                )
            if curr.temperature_c <= prev.temperature_c:
                raise ValueError(
                    f"boiling temperatures must be strictly increasing: "
                    f"{prev.temperature_c} then {curr.temperature_c}"
                )
        return v

    @property
    def reference_temperatures(self) -> tuple[float, ...]:
        """Отсортированный набор опорных температур."""
        return tuple(curve.temperature_c for curve in self.curves)

    @property
    def min_temperature(self) -> float:
        return self.curves[0].temperature_c

    @property
    def max_temperature(self) -> float:
        return self.curves[-1].temperature_c
