"""
Тесты для кипения чистой воды и BPR

Проверяет:
1. boiling_point_for_pressure: табличные узлы, интерполяция, рабочее окно
2. compute_bpr: формула, нижняя граница, окно концентраций
3. pressure_correction_coefficient: K и его ограничение [1.04, 1.09]
4. corrected_bpr: округление до 0.1 °C
"""

import pytest

from src.boiling.bpr import (
    BPRConfig,
    compute_bpr,
    corrected_bpr,
    pressure_correction_coefficient,
)
from src.boiling.water import WaterBoilingConfig, boiling_point_for_pressure
from src.core.errors import DomainRangeError, InterpolationLookupError
from src.core.reference import load_reference_tables


@pytest.fixture(scope="module")
def tables():
    return load_reference_tables()


# =============================================================================
# PURE WATER BOILING POINT
# =============================================================================


class TestBoilingPointForPressure:
    """Тесты для boiling_point_for_pressure"""

    @pytest.mark.parametrize(
        "pressure, expected",
        [
            (8.0, 41.2),
            (10.0, 45.5),
            (15.0, 53.6),
            (20.0, 59.7),
        ],
    )
    def test_tabulated_pressures(self, tables, pressure, expected) -> None:
        assert boiling_point_for_pressure(pressure, tables) == expected

    def test_interpolated_and_rounded(self, tables) -> None:
        """12 кПа: 45.5 + 2/5 × 8.1 = 48.74 → 48.7"""
        assert boiling_point_for_pressure(12.0, tables) == pytest.approx(48.7)

    def test_upper_bound_inclusive(self, tables) -> None:
        """28 кПа: 64.5 + 3/5 × 4.2 = 67.02 → 67.0"""
        assert boiling_point_for_pressure(28.0, tables) == pytest.approx(67.0)

    def test_monotonic(self, tables) -> None:
        values = [boiling_point_for_pressure(8.0 + 0.5 * i, tables) for i in range(41)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("pressure", [7.9, 28.1, 1.0, 101.3])
    def test_outside_window_rejected(self, tables, pressure) -> None:
        with pytest.raises(DomainRangeError, match="pressure must be within"):
            boiling_point_for_pressure(pressure, tables)

    def test_wider_window(self, tables) -> None:
        config = WaterBoilingConfig(pressure_min_kpa=1.0, pressure_max_kpa=300.0)
        assert boiling_point_for_pressure(1.0, tables, config) == 6.7
        assert boiling_point_for_pressure(300.0, tables, config) == 132.9
        assert boiling_point_for_pressure(101.325, tables, config) == pytest.approx(98.4)

    def test_window_beyond_table(self, tables) -> None:
        """Окно шире таблицы: давление принято, но не окружено узлами"""
        config = WaterBoilingConfig(pressure_min_kpa=0.1, pressure_max_kpa=300.0)
        with pytest.raises(InterpolationLookupError, match="cannot bracket pressure"):
            boiling_point_for_pressure(0.5, tables, config)


# =============================================================================
# ATMOSPHERIC BPR
# =============================================================================


class TestComputeBPR:
    """Тесты для compute_bpr"""

    @pytest.mark.parametrize(
        "concentration, expected",
        [
            (45.0, 8.2),
            (48.5, 11.1),
            (50.0, 12.3),
            (53.0, 14.8),
        ],
    )
    def test_formula(self, concentration, expected) -> None:
        assert compute_bpr(concentration) == pytest.approx(expected)

    @pytest.mark.parametrize("concentration", [44.9, 53.1, 0.0, 100.0])
    def test_outside_window_rejected(self, concentration) -> None:
        with pytest.raises(DomainRangeError, match="concentration must be within"):
            compute_bpr(concentration)

    def test_floor_applied(self) -> None:
        """С расширенным окном формула ниже 8.0 → ровно 8.0"""
        config = BPRConfig(concentration_min_pct=40.0)
        assert compute_bpr(44.0, config) == 8.0
        assert compute_bpr(40.0, config) == 8.0

    def test_never_below_floor(self) -> None:
        values = [compute_bpr(45.0 + 0.1 * i) for i in range(80)]
        assert min(values) >= 8.0
        assert all(b >= a for a, b in zip(values, values[1:]))


# =============================================================================
# PRESSURE CORRECTION
# =============================================================================


class TestPressureCorrection:
    """Тесты для pressure_correction_coefficient и corrected_bpr"""

    def test_coefficient(self) -> None:
        """tw=53.6 → K = 1 + 0.0015 × 46.4 = 1.0696"""
        assert pressure_correction_coefficient(53.6) == pytest.approx(1.0696)

    def test_clamped_below(self) -> None:
        assert pressure_correction_coefficient(80.0) == pytest.approx(1.04)

    def test_clamped_above(self) -> None:
        assert pressure_correction_coefficient(30.0) == pytest.approx(1.09)

    @pytest.mark.parametrize("tw", [0.0, 41.2, 53.6, 67.0, 100.0, 132.9])
    def test_coefficient_bounds(self, tw) -> None:
        assert 1.04 <= pressure_correction_coefficient(tw) <= 1.09

    def test_corrected_bpr(self) -> None:
        """11.1 × 1.0696 = 11.8726 → 11.9"""
        assert corrected_bpr(11.1, 53.6) == pytest.approx(11.9)

    def test_corrected_bpr_custom_config(self) -> None:
        config = BPRConfig(correction_min=1.0, correction_max=1.0)
        assert corrected_bpr(12.3, 45.5, config) == pytest.approx(12.3)
