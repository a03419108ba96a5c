"""
Reference Records — Эталонные записи для cross-validation

Формат файла (line-oriented, одно поле на строку):
    1. operand1
    2. operand2
    3. expected_sum         (operand1 + operand2)
    4. expected_difference  (operand1 - operand2)
    5. expected_product     (operand1 * operand2)

Пробелы вокруг строк и пустые строки игнорируются; непустых строк должно
быть ровно пять. Грамматику полей проверяет JSON Schema контракт
reference_record; Pydantic модель ReferenceRecord отвечает за типы,
immutability и нормализацию пробелов.
"""

from pathlib import Path
from typing import Final

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from src.bigint.contracts import ReferenceRecordValidator
from src.bigint.domain import BigInt

# Количество полей в эталонном файле
RECORD_FIELD_COUNT: Final[int] = 5

# Порядок полей в файле
RECORD_FIELDS: Final[tuple[str, ...]] = (
    "operand1",
    "operand2",
    "expected_sum",
    "expected_difference",
    "expected_product",
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ReferenceFormatError(ValueError):
    """Эталонный файл не соответствует формату (кодировка, число строк, грамматика полей)."""

    pass


# =============================================================================
# MODEL
# =============================================================================


class ReferenceRecord(BaseModel):
    """
    Эталонная запись: два операнда и ожидаемые результаты.

    Immutable модель (frozen=True). Значения хранятся строками, как в файле;
    BigInt строятся по запросу. Нарушение контракта reference_record
    поднимается как pydantic ValidationError.
    """

    operand1: str = Field(..., description="Первый операнд")
    operand2: str = Field(..., description="Второй операнд")
    expected_sum: str = Field(..., description="operand1 + operand2")
    expected_difference: str = Field(..., description="operand1 - operand2")
    expected_product: str = Field(..., description="operand1 * operand2")
    source: str | None = Field(None, description="Файл, из которого прочитана запись")

    model_config = {"frozen": True}

    @field_validator(*RECORD_FIELDS, mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        """Пробелы вокруг значения игнорируются, как и в файле."""
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def check_contract(self) -> "ReferenceRecord":
        """Проверка полей контрактом reference_record."""
        violations = ReferenceRecordValidator().violations(self.contract_data())
        if violations:
            raise ValueError("; ".join(violations))
        return self

    def contract_data(self) -> dict[str, str]:
        """Поля записи в форме контракта reference_record (без source)."""
        return {name: getattr(self, name) for name in RECORD_FIELDS}

    def operands(self) -> tuple[BigInt, BigInt]:
        """(operand1, operand2) как BigInt."""
        return BigInt(self.operand1), BigInt(self.operand2)

    def expected(self) -> tuple[BigInt, BigInt, BigInt]:
        """(sum, difference, product) как BigInt."""
        return (
            BigInt(self.expected_sum),
            BigInt(self.expected_difference),
            BigInt(self.expected_product),
        )

    def to_lines(self) -> list[str]:
        """Поля в порядке файла."""
        return [getattr(self, name) for name in RECORD_FIELDS]


# =============================================================================
# FILE I/O
# =============================================================================


def parse_reference_lines(lines: list[str], source: str | None = None) -> ReferenceRecord:
    """
    Разбор строк эталонного файла.

    Args:
        lines: Строки файла
        source: Имя источника (для сообщений об ошибках и поля source)

    Returns:
        ReferenceRecord

    Raises:
        ReferenceFormatError: Если непустых строк не ровно пять или поле
            не соответствует контракту reference_record
    """
    values = [line.strip() for line in lines if line.strip()]
    origin = source or "<lines>"

    if len(values) != RECORD_FIELD_COUNT:
        raise ReferenceFormatError(
            f"{origin}: expected {RECORD_FIELD_COUNT} non-empty lines, got {len(values)}"
        )

    try:
        return ReferenceRecord(**dict(zip(RECORD_FIELDS, values)), source=source)
    except ValidationError as e:
        raise ReferenceFormatError(f"{origin}: {_describe(e)}") from e


def _describe(error: ValidationError) -> str:
    # value_error хранит исходное исключение в ctx; его текст без префикса pydantic
    messages = [
        str(detail["ctx"]["error"]) if "error" in detail.get("ctx", {}) else detail["msg"]
        for detail in error.errors()
    ]
    return "; ".join(messages)


def read_reference_file(path: Path, encoding: str = "utf-8") -> ReferenceRecord:
    """
    Чтение эталонного файла.

    Raises:
        FileNotFoundError: Если файл не существует
        ReferenceFormatError: Если файл не декодируется в encoding или
            содержимое не соответствует формату
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        raise ReferenceFormatError(
            f"{path}: not valid {encoding} at byte {e.start}: {e.reason}"
        ) from e

    return parse_reference_lines(lines, source=str(path))


def write_reference_file(path: Path, record: ReferenceRecord, encoding: str = "utf-8") -> None:
    """Запись эталонной записи в файл (одно поле на строку)."""
    with open(path, "w", encoding=encoding) as f:
        for value in record.to_lines():
            f.write(value + "\n")
