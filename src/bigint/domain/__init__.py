"""
Domain models and value objects.

Contains the BigInt value type, its sign, error kinds, the decimal text
codec and the random digit source.
"""

from src.bigint.domain.errors import BigIntError, InvalidArgument, NegativeExponentError
from src.bigint.domain.sign import Sign
from src.bigint.domain.text import format_decimal, parse_decimal
from src.bigint.domain.generator import (
    DigitSource,
    GeneratorConfig,
    RandomDigitSource,
    sample_signed_digits,
)
from src.bigint.domain.bigint import BigInt, random_bigint

__all__ = [
    # Errors
    "BigIntError",
    "InvalidArgument",
    "NegativeExponentError",
    # Sign
    "Sign",
    # Text codec
    "format_decimal",
    "parse_decimal",
    # Generator
    "DigitSource",
    "GeneratorConfig",
    "RandomDigitSource",
    "sample_signed_digits",
    # Value type
    "BigInt",
    "random_bigint",
]
