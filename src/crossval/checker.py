"""Cross-validation — сверка арифметики BigInt с эталонными файлами.

Для каждой эталонной записи вычисляются:
- operand1 + operand2
- operand1 - operand2
- operand1 * operand2

Результат сравнивается с ожидаемыми значениями через BigInt ==. При
check_formatting=True дополнительно требуется побайтовое совпадение
str(результат) с эталонной строкой.

Порядок проверок для файла:
1. Чтение и валидация записи (ReferenceFormatError пробрасывается)
2. Вычисление sum/difference/product
3. Сравнение с эталоном
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.bigint.contracts import validate_crossval_report
from src.bigint.domain import BigInt
from src.crossval.records import ReferenceRecord, read_reference_file

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CrossValidationResult:
    """Результат сверки одной записи."""

    source: str

    sum_ok: bool
    difference_ok: bool
    product_ok: bool

    # Вычисленные значения (десятичная запись)
    computed_sum: str
    computed_difference: str
    computed_product: str

    # Детали
    details: str

    @property
    def passed(self) -> bool:
        return self.sum_ok and self.difference_ok and self.product_ok

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "sum_ok": self.sum_ok,
            "difference_ok": self.difference_ok,
            "product_ok": self.product_ok,
            "passed": self.passed,
            "details": self.details,
        }


@dataclass(frozen=True)
class CrossValidationReport:
    """Сводка сверки набора файлов."""

    results: tuple[CrossValidationResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failures(self) -> tuple[CrossValidationResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    @property
    def passed(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        """
        Сводка в виде dict, соответствующем контракту crossval_report.

        Raises:
            ValidationError: Если сводка не соответствует схеме
        """
        data = {
            "total": self.total,
            "failed": len(self.failures),
            "passed": self.passed,
            "results": [result.to_dict() for result in self.results],
        }
        validate_crossval_report(data)
        return data


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CrossValidationConfig:
    """Конфигурация cross-validation.

    file_glob выбирает эталонные файлы в каталоге (сортировка по имени).
    """

    file_glob: str = "data*.txt"
    encoding: str = "utf-8"
    check_formatting: bool = True


# =============================================================================
# VALIDATOR
# =============================================================================


class CrossValidator:
    """Сверка BigInt арифметики с эталонными значениями."""

    def __init__(self, config: CrossValidationConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or CrossValidationConfig()

    def evaluate(self, record: ReferenceRecord) -> CrossValidationResult:
        """Сверка одной записи.

        Args:
            record: эталонная запись

        Returns:
            CrossValidationResult с флагами по каждой операции
        """
        num1, num2 = record.operands()
        expected_sum, expected_difference, expected_product = record.expected()

        computed_sum = num1 + num2
        computed_difference = num1 - num2
        computed_product = num1 * num2

        sum_ok = self._matches(computed_sum, expected_sum, record.expected_sum)
        difference_ok = self._matches(
            computed_difference, expected_difference, record.expected_difference
        )
        product_ok = self._matches(computed_product, expected_product, record.expected_product)

        mismatches = [
            name
            for name, ok in (
                ("sum", sum_ok),
                ("difference", difference_ok),
                ("product", product_ok),
            )
            if not ok
        ]
        details = "PASS" if not mismatches else "mismatch: " + ", ".join(mismatches)

        source = record.source or "<record>"
        for name in mismatches:
            logger.warning("%s: %s mismatch", source, name)

        return CrossValidationResult(
            source=source,
            sum_ok=sum_ok,
            difference_ok=difference_ok,
            product_ok=product_ok,
            computed_sum=str(computed_sum),
            computed_difference=str(computed_difference),
            computed_product=str(computed_product),
            details=details,
        )

    def check_file(self, path: Path) -> CrossValidationResult:
        """Чтение эталонного файла и сверка."""
        record = read_reference_file(path, encoding=self.config.encoding)
        result = self.evaluate(record)
        logger.info("Checked %s: %s", path, result.details)
        return result

    def check_directory(self, directory: Path) -> CrossValidationReport:
        """Сверка всех файлов каталога, подходящих под file_glob.

        Raises:
            NotADirectoryError: Если directory не каталог
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise NotADirectoryError(f"Reference directory not found: {directory}")

        paths = sorted(directory.glob(self.config.file_glob))
        logger.info("Cross-validating %d file(s) in %s", len(paths), directory)

        return CrossValidationReport(results=tuple(self.check_file(path) for path in paths))

    def _matches(self, computed: BigInt, expected: BigInt, expected_text: str) -> bool:
        if computed != expected:
            return False
        if self.config.check_formatting:
            return str(computed) == expected_text
        return True
