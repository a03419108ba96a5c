"""
Тесты JSON Schema контрактов cross-validation

Проверяет:
1. Загрузку схем и кэширование SchemaLoader
2. reference_record.json: обязательные поля, грамматика, additionalProperties
3. crossval_report.json: структура сводки
4. Pydantic модель ReferenceRecord (immutability, грамматика через контракт)
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.bigint.contracts import (
    CrossValidationReportValidator,
    ReferenceRecordValidator,
    SchemaLoader,
    compiled_validator,
    validate_crossval_report,
    validate_reference_record,
)
from src.crossval.records import ReferenceRecord


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_record() -> dict:
    """Валидная эталонная запись"""
    return {
        "operand1": "150",
        "operand2": "150",
        "expected_sum": "300",
        "expected_difference": "0",
        "expected_product": "22500",
    }


@pytest.fixture
def valid_report() -> dict:
    """Валидная сводка с одной записью"""
    return {
        "total": 1,
        "failed": 0,
        "passed": True,
        "results": [
            {
                "source": "data1.txt",
                "sum_ok": True,
                "difference_ok": True,
                "product_ok": True,
                "passed": True,
                "details": "PASS",
            }
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    def test_load_packaged_schemas(self) -> None:
        """Схемы из package data загружаются"""
        loader = SchemaLoader()
        schema = loader.load_schema("reference_record")
        assert schema["title"] == "Cross-validation reference record"
        assert "crossval_report" not in schema

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает тот же объект"""
        loader = SchemaLoader()
        assert loader.load_schema("crossval_report") is loader.load_schema("crossval_report")

    def test_missing_schema(self) -> None:
        """Несуществующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Несуществующий каталог → RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        """Схема, не прошедшая meta-validation → ValueError"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_available(self) -> None:
        """Список packaged-схем"""
        assert SchemaLoader().available() == ["crossval_report", "reference_record"]

    def test_compiled_validator_shared(self) -> None:
        """Один скомпилированный валидатор на схему"""
        assert compiled_validator("reference_record") is compiled_validator("reference_record")
        assert ReferenceRecordValidator().validator is ReferenceRecordValidator().validator


# =============================================================================
# REFERENCE RECORD CONTRACT
# =============================================================================


class TestReferenceRecordContract:
    """Тесты reference_record.json"""

    def test_valid(self, valid_record: dict) -> None:
        """Валидная запись проходит"""
        validate_reference_record(valid_record)
        assert ReferenceRecordValidator().is_valid(valid_record)

    def test_signed_values_allowed(self, valid_record: dict) -> None:
        """Знаки + и - допускаются"""
        valid_record["operand1"] = "+150"
        valid_record["expected_difference"] = "-0"
        validate_reference_record(valid_record)

    def test_missing_field(self, valid_record: dict) -> None:
        """Отсутствие поля → ValidationError"""
        del valid_record["expected_product"]
        with pytest.raises(ValidationError):
            validate_reference_record(valid_record)

    def test_additional_property(self, valid_record: dict) -> None:
        """Лишнее поле → ValidationError"""
        valid_record["quotient"] = "1"
        with pytest.raises(ValidationError):
            validate_reference_record(valid_record)

    @pytest.mark.parametrize("value", ["", "1.5", "12a", " 1", "--1", "+"])
    def test_decimal_grammar(self, valid_record: dict, value: str) -> None:
        """Значение вне [+-]?[0-9]+ отклоняется"""
        valid_record["operand2"] = value
        assert not ReferenceRecordValidator().is_valid(valid_record)

    def test_non_string_rejected(self, valid_record: dict) -> None:
        """Число вместо строки отклоняется"""
        valid_record["operand1"] = 150
        errors = list(ReferenceRecordValidator().iter_errors(valid_record))
        assert len(errors) == 1
        assert list(errors[0].path) == ["operand1"]

    def test_violations_listed(self, valid_record: dict) -> None:
        """violations: все нарушения с указанием поля"""
        valid_record["operand1"] = "1a"
        valid_record["expected_sum"] = "x"
        valid_record["quotient"] = "1"

        violations = ReferenceRecordValidator().violations(valid_record)

        assert len(violations) == 3
        assert any(item.startswith("operand1: '1a' does not match") for item in violations)
        assert any(item.startswith("expected_sum: ") for item in violations)
        assert any(item.startswith("record: ") and "quotient" in item for item in violations)

    def test_violations_empty_for_valid(self, valid_record: dict) -> None:
        """Валидная запись: нарушений нет"""
        assert ReferenceRecordValidator().violations(valid_record) == []


# =============================================================================
# CROSSVAL REPORT CONTRACT
# =============================================================================


class TestCrossValidationReportContract:
    """Тесты crossval_report.json"""

    def test_valid(self, valid_report: dict) -> None:
        """Валидная сводка проходит"""
        validate_crossval_report(valid_report)

    def test_empty_results(self) -> None:
        """Пустая сводка допустима"""
        validate_crossval_report({"total": 0, "failed": 0, "passed": True, "results": []})

    def test_negative_total(self, valid_report: dict) -> None:
        """total < 0 отклоняется"""
        valid_report["total"] = -1
        assert not CrossValidationReportValidator().is_valid(valid_report)

    def test_result_missing_flag(self, valid_report: dict) -> None:
        """Запись без product_ok отклоняется"""
        del valid_report["results"][0]["product_ok"]
        with pytest.raises(ValidationError):
            validate_crossval_report(valid_report)


# =============================================================================
# PYDANTIC MODEL
# =============================================================================


class TestReferenceRecordModel:
    """Тесты ReferenceRecord"""

    def test_create(self, valid_record: dict) -> None:
        """Создание и доступ к BigInt значениям"""
        record = ReferenceRecord(**valid_record)
        num1, num2 = record.operands()
        assert num1 == 150
        assert num2 == 150
        assert [int(value) for value in record.expected()] == [300, 0, 22500]
        assert record.source is None

    def test_to_lines_order(self, valid_record: dict) -> None:
        """Порядок полей совпадает с форматом файла"""
        record = ReferenceRecord(**valid_record)
        assert record.to_lines() == ["150", "150", "300", "0", "22500"]

    def test_immutability(self, valid_record: dict) -> None:
        """frozen=True запрещает изменение"""
        record = ReferenceRecord(**valid_record)
        with pytest.raises(PydanticValidationError):
            record.operand1 = "1"

    def test_whitespace_stripped(self, valid_record: dict) -> None:
        """Пробелы вокруг значений удаляются до проверки контракта"""
        valid_record["operand1"] = "  150\n"
        record = ReferenceRecord(**valid_record)
        assert record.operand1 == "150"

    def test_grammar_checked_by_contract(self, valid_record: dict) -> None:
        """Поле вне грамматики → ValidationError с текстом контракта"""
        valid_record["expected_sum"] = "3e2"
        with pytest.raises(PydanticValidationError, match="expected_sum: '3e2' does not match"):
            ReferenceRecord(**valid_record)

    def test_all_violations_reported(self, valid_record: dict) -> None:
        """Несколько нарушений перечисляются в одной ошибке"""
        valid_record["operand1"] = "a"
        valid_record["operand2"] = "b"
        with pytest.raises(PydanticValidationError) as excinfo:
            ReferenceRecord(**valid_record)

        message = str(excinfo.value)
        assert "operand1: " in message
        assert "operand2: " in message

    def test_contract_data(self, valid_record: dict) -> None:
        """contract_data не включает source"""
        record = ReferenceRecord(**valid_record, source="data1.txt")
        assert record.contract_data() == valid_record
