"""Boiling-Point Calculator — итоговый расчёт BPR и температуры кипения.

Конвейер (порядок фиксирован):
1. CONCENTRATION: концентрация по (T, ρ) — ConcentrationResolver
2. WATER_BOILING_POINT: кипение чистой воды по давлению
3. ATMOSPHERIC_BPR: BPR при атмосферном давлении по концентрации
4. Коррекция на давление K, итоговый BPR и фактическая температура кипения

Первая ошибка прерывает конвейер. Результат содержит значения,
рассчитанные до сбоя (C и tw могут быть заполнены при сбое на шаге 3),
вместе с типизированной ошибкой — для диагностического вывода.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.boiling.bpr import (
    BPRConfig,
    compute_bpr,
    corrected_bpr,
    pressure_correction_coefficient,
)
from src.boiling.water import WaterBoilingConfig, boiling_point_for_pressure
from src.concentration.resolver import ConcentrationResolver
from src.core.domain.measurement import MeasurementInput, ResolvedResult
from src.core.domain.reference_tables import ReferenceTables
from src.core.errors import BPRError
from src.core.math.numerical_safeguards import TEMPERATURE_DECIMALS, round_half_away

logger = logging.getLogger(__name__)


class CalculationStage(str, Enum):
    """Ступень конвейера, на которой произошёл сбой."""

    CONCENTRATION = "concentration"
    WATER_BOILING_POINT = "water_boiling_point"
    ATMOSPHERIC_BPR = "atmospheric_bpr"


@dataclass(frozen=True)
class CalculationOutcome:
    """Результат расчёта: полный итог или частичные значения + ошибка."""

    succeeded: bool

    # Значения по ступеням (None: ступень не выполнена)
    concentration_pct: Optional[float] = None
    pure_water_boiling_point_c: Optional[float] = None
    atmospheric_bpr_c: Optional[float] = None
    pressure_correction: Optional[float] = None
    corrected_bpr_c: Optional[float] = None
    actual_boiling_temperature_c: Optional[float] = None

    # Диагностика
    failed_stage: Optional[CalculationStage] = None
    error: Optional[BPRError] = None

    @property
    def result(self) -> ResolvedResult:
        """Полный итог расчёта; при сбое повторно выбрасывает сохранённую ошибку."""
        if not self.succeeded:
            raise self.error
        return ResolvedResult(
            concentration_pct=self.concentration_pct,
            pure_water_boiling_point_c=self.pure_water_boiling_point_c,
            atmospheric_bpr_c=self.atmospheric_bpr_c,
            pressure_correction=self.pressure_correction,
            corrected_bpr_c=self.corrected_bpr_c,
            actual_boiling_temperature_c=self.actual_boiling_temperature_c,
        )

    def as_tuple(self) -> tuple[Optional[float], Optional[float], Optional[float], Optional[float]]:
        """(C, tw, bpr, фактическая температура кипения)."""
        return (
            self.concentration_pct,
            self.pure_water_boiling_point_c,
            self.corrected_bpr_c,
            self.actual_boiling_temperature_c,
        )


class BoilingPointCalculator:
    """Расчёт BPR и фактической температуры кипения раствора.

    Зависимости передаются явно: справочные таблицы и конфигурации формул.
    Калькулятор не хранит состояния между вызовами.
    """

    def __init__(
        self,
        tables: ReferenceTables,
        water_config: Optional[WaterBoilingConfig] = None,
        bpr_config: Optional[BPRConfig] = None,
    ):
        self.tables = tables
        self.water_config = water_config or WaterBoilingConfig()
        self.bpr_config = bpr_config or BPRConfig()
        self.concentration_resolver = ConcentrationResolver(tables)

    def evaluate(self, measurement: MeasurementInput) -> CalculationOutcome:
        """Расчёт по проверенным измерениям оператора."""
        return self.compute_final(
            measurement.temperature_c,
            measurement.density_g_cm3,
            measurement.pressure_kpa,
        )

    def compute_final(
        self,
        temperature_c: float,
        density_g_cm3: float,
        pressure_kpa: float,
    ) -> CalculationOutcome:
        """Полный расчёт по температуре, плотности и давлению.

        Args:
            temperature_c: Температура измерения (°C)
            density_g_cm3: Плотность (г/см³)
            pressure_kpa: Технологическое давление (кПа)

        Returns:
            CalculationOutcome с итогом или частичными значениями и ошибкой
        """
        # 1. Концентрация
        try:
            concentration = self.concentration_resolver.resolve_concentration(
                temperature_c, density_g_cm3
            )
        except BPRError as e:
            return self._failed(CalculationStage.CONCENTRATION, e)

        # 2. Кипение чистой воды
        try:
            tw = boiling_point_for_pressure(pressure_kpa, self.tables, self.water_config)
        except BPRError as e:
            return self._failed(CalculationStage.WATER_BOILING_POINT, e, concentration_pct=concentration)

        # 3. Атмосферный BPR
        try:
            bpr_atm = compute_bpr(concentration, self.bpr_config)
        except BPRError as e:
            return self._failed(
                CalculationStage.ATMOSPHERIC_BPR,
                e,
                concentration_pct=concentration,
                pure_water_boiling_point_c=tw,
            )

        # 4. Коррекция на давление
        k = pressure_correction_coefficient(tw, self.bpr_config)
        bpr = corrected_bpr(bpr_atm, tw, self.bpr_config)
        actual = round_half_away(tw + bpr, TEMPERATURE_DECIMALS)

        logger.debug(
            "C=%.1f %%, tw=%.1f °C, bpr_atm=%.1f °C, K=%.4f, bpr=%.1f °C, T_boil=%.1f °C",
            concentration,
            tw,
            bpr_atm,
            k,
            bpr,
            actual,
        )

        return CalculationOutcome(
            succeeded=True,
            concentration_pct=concentration,
            pure_water_boiling_point_c=tw,
            atmospheric_bpr_c=bpr_atm,
            pressure_correction=k,
            corrected_bpr_c=bpr,
            actual_boiling_temperature_c=actual,
        )

    @staticmethod
    def _failed(stage: CalculationStage, error: BPRError, **partial: float) -> CalculationOutcome:
        logger.warning("Calculation failed at %s stage: %s", stage.value, error)
        return CalculationOutcome(succeeded=False, failed_stage=stage, error=error, **partial)
