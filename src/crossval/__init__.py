"""Cross-validation — сверка BigInt с эталонными значениями Python int.

- records: формат эталонного файла и модель ReferenceRecord
- checker: CrossValidator (sum/difference/product)
- data_maker: генерация эталонных файлов
"""

from .checker import (
    CrossValidationConfig,
    CrossValidationReport,
    CrossValidationResult,
    CrossValidator,
)
from .data_maker import (
    ReferenceDataConfig,
    make_reference_record,
    random_operand,
    write_reference_data,
)
from .records import (
    RECORD_FIELD_COUNT,
    ReferenceFormatError,
    ReferenceRecord,
    parse_reference_lines,
    read_reference_file,
    write_reference_file,
)

__all__ = [
    # Checker
    "CrossValidationConfig",
    "CrossValidationReport",
    "CrossValidationResult",
    "CrossValidator",
    # Data maker
    "ReferenceDataConfig",
    "make_reference_record",
    "random_operand",
    "write_reference_data",
    # Records
    "RECORD_FIELD_COUNT",
    "ReferenceFormatError",
    "ReferenceRecord",
    "parse_reference_lines",
    "read_reference_file",
    "write_reference_file",
]
