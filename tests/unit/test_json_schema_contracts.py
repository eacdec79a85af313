"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/pattern/размер пар)
- Интеграция с Pydantic моделями
"""

import copy
import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ReferenceTablesValidator,
    ResolvedResultValidator,
    SchemaLoader,
    validate_resolved_result,
)
from src.core.domain import MeasurementInput, ResolvedResult
from src.core.reference import DEFAULT_TABLES_PATH


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_reference_tables():
    """Таблицы сульфата кобальта из пакета."""
    with open(DEFAULT_TABLES_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def minimal_reference_tables():
    """Минимальные таблицы: две кривые по две точки."""
    return {
        "schema_version": "1",
        "substance": "synthetic",
        "curves": [
            {"temperature_c": 0, "points": [[0, 1.0], [20, 1.2]]},
            {"temperature_c": 10, "points": [[0, 0.9], [20, 1.1]]},
        ],
        "vapor_pressure": [[5.0, 30.0], [30.0, 70.0]],
    }


@pytest.fixture
def valid_resolved_result():
    """Итог расчёта для 48 °C / 1.490 г/см³ / 15 кПа."""
    return {
        "schema_version": "1",
        "input": {
            "temperature_c": 48.0,
            "density_g_cm3": 1.49,
            "pressure_kpa": 15.0,
        },
        "concentration_pct": 48.5,
        "pure_water_boiling_point_c": 53.6,
        "atmospheric_bpr_c": 11.1,
        "pressure_correction": 1.0696,
        "corrected_bpr_c": 11.9,
        "actual_boiling_temperature_c": 65.5,
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    reference_tables_schema = loader.load_schema("reference_tables")
    resolved_result_schema = loader.load_schema("resolved_result")

    assert reference_tables_schema["properties"]["schema_version"]["pattern"] == "^1$"
    assert resolved_result_schema["properties"]["schema_version"]["pattern"] == "^1$"


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("reference_tables")
    schema2 = loader.load_schema("reference_tables")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Файл, не являющийся JSON Schema, отклоняется meta-валидацией."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


def test_schema_loader_requires_directory(tmp_path):
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


# =============================================================================
# TESTS - REFERENCE TABLES VALIDATION
# =============================================================================


def test_reference_tables_validator_accepts_valid_data(valid_reference_tables):
    """Валидация таблиц по умолчанию."""
    validator = ReferenceTablesValidator()
    validator.validate(valid_reference_tables)  # Не должно выбросить исключение
    assert not list(validator.iter_errors(valid_reference_tables))


def test_reference_tables_accepts_minimal_document(minimal_reference_tables):
    """Две кривые по две точки — минимальный валидный документ."""
    ReferenceTablesValidator().validate(minimal_reference_tables)


def test_reference_tables_rejects_missing_required_field(minimal_reference_tables):
    data = minimal_reference_tables.copy()
    del data["curves"]

    with pytest.raises(ValidationError) as exc_info:
        ReferenceTablesValidator().validate(data)
    assert "'curves' is a required property" in str(exc_info.value)


def test_reference_tables_rejects_wrong_version(minimal_reference_tables):
    data = minimal_reference_tables.copy()
    data["schema_version"] = "2"

    with pytest.raises(ValidationError):
        ReferenceTablesValidator().validate(data)


def test_reference_tables_rejects_single_curve(minimal_reference_tables):
    """Для пары соседних температур нужно минимум две кривые."""
    data = copy.deepcopy(minimal_reference_tables)
    data["curves"] = data["curves"][:1]

    with pytest.raises(ValidationError):
        ReferenceTablesValidator().validate(data)


def test_reference_tables_rejects_concentration_above_100(minimal_reference_tables):
    data = copy.deepcopy(minimal_reference_tables)
    data["curves"][0]["points"][1] = [120, 1.2]

    with pytest.raises(ValidationError):
        ReferenceTablesValidator().validate(data)


def test_reference_tables_rejects_zero_density(minimal_reference_tables):
    data = copy.deepcopy(minimal_reference_tables)
    data["curves"][1]["points"][0] = [0, 0]

    with pytest.raises(ValidationError):
        ReferenceTablesValidator().validate(data)


def test_reference_tables_rejects_short_pair(minimal_reference_tables):
    data = copy.deepcopy(minimal_reference_tables)
    data["vapor_pressure"][0] = [5.0]

    with pytest.raises(ValidationError):
        ReferenceTablesValidator().validate(data)


def test_reference_tables_rejects_string_values(minimal_reference_tables):
    data = copy.deepcopy(minimal_reference_tables)
    data["curves"][0]["temperature_c"] = "zero"

    with pytest.raises(ValidationError) as exc_info:
        ReferenceTablesValidator().validate(data)
    assert "is not of type 'number'" in str(exc_info.value)


def test_reference_tables_rejects_unknown_property(minimal_reference_tables):
    data = copy.deepcopy(minimal_reference_tables)
    data["comment"] = "extra"

    with pytest.raises(ValidationError):
        ReferenceTablesValidator().validate(data)


# =============================================================================
# TESTS - RESOLVED RESULT VALIDATION
# =============================================================================


def test_resolved_result_validator_accepts_valid_data(valid_resolved_result):
    validator = ResolvedResultValidator()
    validator.validate(valid_resolved_result)
    assert not list(validator.iter_errors(valid_resolved_result))


def test_resolved_result_validate_function(valid_resolved_result):
    validate_resolved_result(valid_resolved_result)


def test_resolved_result_rejects_missing_input(valid_resolved_result):
    data = valid_resolved_result.copy()
    del data["input"]

    with pytest.raises(ValidationError) as exc_info:
        validate_resolved_result(data)
    assert "'input' is a required property" in str(exc_info.value)


def test_resolved_result_rejects_negative_bpr(valid_resolved_result):
    data = valid_resolved_result.copy()
    data["corrected_bpr_c"] = -0.1

    with pytest.raises(ValidationError):
        validate_resolved_result(data)


def test_resolved_result_rejects_zero_pressure(valid_resolved_result):
    data = copy.deepcopy(valid_resolved_result)
    data["input"]["pressure_kpa"] = 0

    with pytest.raises(ValidationError):
        validate_resolved_result(data)


def test_resolved_result_rejects_null_value(valid_resolved_result):
    """Частичные итоги (None) не являются валидным контрактом."""
    data = valid_resolved_result.copy()
    data["actual_boiling_temperature_c"] = None

    with pytest.raises(ValidationError):
        validate_resolved_result(data)


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_pydantic_models_generate_valid_json():
    """Проверка, что MeasurementInput + ResolvedResult дают валидный контракт."""
    measurement = MeasurementInput(temperature_c=48.0, density_g_cm3=1.49, pressure_kpa=15.0)
    result = ResolvedResult(
        concentration_pct=48.5,
        pure_water_boiling_point_c=53.6,
        atmospheric_bpr_c=11.1,
        pressure_correction=1.0696,
        corrected_bpr_c=11.9,
        actual_boiling_temperature_c=65.5,
    )

    data = {"schema_version": "1", "input": measurement.model_dump(), **result.model_dump()}

    # Валидация через JSON Schema
    validate_resolved_result(data)


def test_iter_errors_returns_all_errors(valid_resolved_result):
    """Проверка, что iter_errors возвращает все ошибки валидации."""
    validator = ResolvedResultValidator()

    data = valid_resolved_result.copy()
    data["concentration_pct"] = 150.0
    data["pressure_correction"] = 0.0
    del data["schema_version"]

    errors = list(validator.iter_errors(data))
    assert len(errors) == 3
