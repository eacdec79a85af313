"""
Measurement & Result — входные измерения оператора и итог расчёта

Immutable Pydantic модели:
- MeasurementInput: температура, плотность, давление (проверяются до
  использования: конечные числа, плотность > 0)
- ResolvedResult: итог расчёта (концентрация, кипение воды, BPR,
  фактическая температура кипения раствора)

Проверки областей определения (табличный диапазон температур,
окно давления 8–28 кПа, включая P <= 0, окно концентрации 45–53 %)
выполняются в ядре расчёта и завершаются DomainRangeError, а не ValidationError.
"""

from pydantic import BaseModel, Field


class MeasurementInput(BaseModel):
    """Измерения оператора."""

    temperature_c: float = Field(..., description="Измеренная температура (°C)")
    density_g_cm3: float = Field(..., gt=0, description="Измеренная плотность (г/см³)")
    pressure_kpa: float = Field(..., description="Технологическое давление (кПа)")

    model_config = {"frozen": True, "allow_inf_nan": False}


class ResolvedResult(BaseModel):
    """
    Итог расчёта BPR.

    Все температуры и BPR округлены до 0.1 °C, концентрация до 0.1 %.
    """

    concentration_pct: float = Field(..., description="Концентрация раствора (%)")
    pure_water_boiling_point_c: float = Field(
        ..., description="Температура кипения чистой воды при давлении (°C)"
    )
    atmospheric_bpr_c: float = Field(..., ge=0, description="BPR при атмосферном давлении (°C)")
    pressure_correction: float = Field(
        ..., gt=0, description="Коэффициент коррекции BPR на давление K"
    )
    corrected_bpr_c: float = Field(..., ge=0, description="BPR при рабочем давлении (°C)")
    actual_boiling_temperature_c: float = Field(
        ..., description="Фактическая температура кипения раствора (°C)"
    )

    model_config = {"frozen": True}
