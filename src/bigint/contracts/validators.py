"""
JSON Schema Contract Validators

Контракты cross-validation (jsonschema, Draft 2020-12). Контракт является
единственным владельцем грамматики полей: модели и парсеры не дублируют
pattern, а делегируют проверку сюда.

Схемы (package data, src/bigint/contracts/schema/):
- reference_record.json (два операнда и ожидаемые sum/difference/product)
- crossval_report.json (сводка прогона cross-validation)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, ClassVar, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match, relevance

# Каталог схем внутри пакета
PACKAGED_SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-validation.

    По умолчанию читает схемы из package data; другой каталог передаётся
    явно (например, в тестах).
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else PACKAGED_SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available(self) -> list[str]:
        """Имена схем каталога (без расширения), по алфавиту."""
        return sorted(path.stem for path in self.schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self.schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def _packaged_loader() -> SchemaLoader:
    return SchemaLoader()


@lru_cache(maxsize=None)
def compiled_validator(schema_name: str) -> Draft202012Validator:
    """Скомпилированный валидатор packaged-схемы (один на имя схемы)."""
    return Draft202012Validator(_packaged_loader().load_schema(schema_name))


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def format_violation(error: ValidationError) -> str:
    """'operand1: 12a does not match ...'; ошибки корня помечаются 'record'."""
    location = ".".join(str(part) for part in error.absolute_path) or "record"
    return f"{location}: {error.message}"


class ContractValidator:
    """
    Базовый класс контракта.

    Подкласс задаёт schema_name; скомпилированный валидатор общий для всех
    экземпляров.
    """

    schema_name: ClassVar[str]

    def __init__(self):
        self.validator = compiled_validator(self.schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Any) -> None:
        """
        Проверка данных.

        При нескольких нарушениях поднимается наиболее релевантное
        (jsonschema best_match).

        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        return self.validator.iter_errors(data)

    def violations(self, data: Any) -> list[str]:
        """Все нарушения в виде строк, от наиболее релевантного."""
        errors = sorted(self.validator.iter_errors(data), key=relevance, reverse=True)
        return [format_violation(error) for error in errors]


class ReferenceRecordValidator(ContractValidator):
    """Эталонная запись: пять десятичных строк, других ключей нет."""

    schema_name = "reference_record"


class CrossValidationReportValidator(ContractValidator):
    """Сводка прогона cross-validation."""

    schema_name = "crossval_report"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_reference_record(data: Any) -> None:
    """
    Raises:
        ValidationError: Если data не соответствует reference_record
    """
    ReferenceRecordValidator().validate(data)


def validate_crossval_report(data: Any) -> None:
    """
    Raises:
        ValidationError: Если data не соответствует crossval_report
    """
    CrossValidationReportValidator().validate(data)
