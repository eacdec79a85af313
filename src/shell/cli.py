"""Interactive shell — консольный интерфейс калькулятора BPR.

Запрашивает температуру, плотность и давление (значения, не переданные
аргументами), выполняет расчёт и печатает результат или сообщение об
ошибке вместе с частичными значениями.

Коды возврата:
    0 — расчёт выполнен
    1 — расчёт завершился ошибкой
    2 — некорректный ввод
"""

import argparse
import contextlib
import json
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from pydantic import ValidationError

from src.boiling.calculator import BoilingPointCalculator, CalculationOutcome
from src.core.contracts import validate_resolved_result
from src.core.domain.measurement import MeasurementInput
from src.core.domain.reference_tables import ReferenceTables
from src.core.errors import ReferenceDataError
from src.core.reference import load_reference_tables

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 51

EXIT_OK = 0
EXIT_CALCULATION_FAILED = 1
EXIT_BAD_INPUT = 2


class InputFormatError(ValueError):
    """Ввод оператора не является числом."""

    pass


def parse_number(raw: str) -> float:
    """Разбор числового ввода оператора."""
    try:
        return float(raw.strip())
    except ValueError as e:
        raise InputFormatError(f"invalid number {raw.strip()!r}, please enter a numeric value") from e


def prompt_number(prompt: str, input_fn: Callable[[str], str] = input) -> float:
    return parse_number(input_fn(prompt))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cobalt-bpr",
        description=(
            "Boiling-point rise of concentrated cobalt sulfate solution "
            "under low vacuum (8-28 kPa)."
        ),
    )
    parser.add_argument("-t", "--temperature", type=float, help="measured temperature, °C")
    parser.add_argument("-d", "--density", type=float, help="measured density, g/cm³")
    parser.add_argument("-p", "--pressure", type=float, help="process pressure, kPa")
    parser.add_argument("--tables", help="alternative reference tables JSON file")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("--pause", action="store_true", help="wait for Enter before exiting")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def print_banner(tables: ReferenceTables, out: TextIO) -> None:
    print(
        "=== Cobalt sulfate BPR calculator, low vacuum (8-28 kPa) ===",
        file=out,
    )
    print(
        f"Temperature: any value within {tables.min_temperature:g}-{tables.max_temperature:g} °C; "
        "density: high-concentration range (about 1.330-1.599 g/cm³)",
        file=out,
    )
    print(SEPARATOR, file=out)


def format_outcome(measurement: MeasurementInput, outcome: CalculationOutcome) -> list[str]:
    """Строки отчёта для оператора."""
    lines = []
    if not outcome.succeeded:
        lines.append(f"Calculation failed: {outcome.error}")
        if outcome.concentration_pct is not None:
            lines.append(f"Resolved concentration: {outcome.concentration_pct:.1f} %")
        if outcome.pure_water_boiling_point_c is not None:
            lines.append(f"Pure water boiling point: {outcome.pure_water_boiling_point_c:.1f} °C")
        return lines

    lines.append(SEPARATOR)
    lines.append(
        f"Measured temperature: {measurement.temperature_c:.1f} °C, "
        f"density: {measurement.density_g_cm3:.3f} g/cm³, "
        f"process pressure: {measurement.pressure_kpa:.1f} kPa"
    )
    lines.append(f"Resolved concentration (temperature + density interpolation): {outcome.concentration_pct:.1f} %")
    lines.append(f"Pure water boiling point: {outcome.pure_water_boiling_point_c:.1f} °C")
    lines.append(f"Low-vacuum BPR: {outcome.corrected_bpr_c:.1f} °C")
    lines.append(f"Actual solution boiling temperature: {outcome.actual_boiling_temperature_c:.1f} °C")
    lines.append(SEPARATOR)
    return lines


def outcome_to_contract(measurement: MeasurementInput, outcome: CalculationOutcome) -> dict:
    """Итог расчёта в форме контракта resolved_result (проверяется схемой)."""
    data = {
        "schema_version": "1",
        "input": measurement.model_dump(),
        **outcome.result.model_dump(),
    }
    validate_resolved_result(data)
    return data


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    out = out or sys.stdout
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        tables = load_reference_tables(args.tables)
    except ReferenceDataError as e:
        print(f"Error: {e}", file=out)
        return EXIT_BAD_INPUT

    if not args.json:
        print_banner(tables, out)

    try:
        temperature = args.temperature
        if temperature is None:
            temperature = prompt_number("Measured temperature (°C): ", input_fn)
        density = args.density
        if density is None:
            density = prompt_number("Measured density (g/cm³): ", input_fn)
        pressure = args.pressure
        if pressure is None:
            pressure = prompt_number("Process pressure (kPa): ", input_fn)
        measurement = MeasurementInput(
            temperature_c=temperature,
            density_g_cm3=density,
            pressure_kpa=pressure,
        )
    except (InputFormatError, EOFError) as e:
        print(f"Error: {str(e) or 'no input'}", file=out)
        return EXIT_BAD_INPUT
    except ValidationError as e:
        print(f"Error: invalid measurement: {e.errors()[0]['msg']}", file=out)
        return EXIT_BAD_INPUT

    logger.debug("Measurement: %s", measurement)
    outcome = BoilingPointCalculator(tables).evaluate(measurement)

    if args.json and outcome.succeeded:
        print(json.dumps(outcome_to_contract(measurement, outcome), ensure_ascii=False, indent=2), file=out)
    else:
        for line in format_outcome(measurement, outcome):
            print(line, file=out)

    if args.pause:
        with contextlib.suppress(EOFError):
            input_fn("Press Enter to continue...")

    return EXIT_OK if outcome.succeeded else EXIT_CALCULATION_FAILED
