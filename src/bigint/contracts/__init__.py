"""
Contract Validation Module

Модуль для валидации JSON контрактов cross-validation.
"""

from .validators import (
    ContractValidator,
    CrossValidationReportValidator,
    ReferenceRecordValidator,
    SchemaLoader,
    compiled_validator,
    format_violation,
    validate_crossval_report,
    validate_reference_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ReferenceRecordValidator",
    "CrossValidationReportValidator",
    # Functions
    "compiled_validator",
    "format_violation",
    "validate_reference_record",
    "validate_crossval_report",
]
