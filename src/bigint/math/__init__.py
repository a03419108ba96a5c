"""
Digit arithmetic для decimal-bigint

Беззнаковые алгоритмы над векторами десятичных цифр (старшая первой).
"""

# Representation
from src.bigint.math.digits import (
    BASE,
    DIGIT_MAX,
    DIGIT_MIN,
    ZERO_DIGITS,
    compare_magnitudes,
    is_zero_magnitude,
    magnitude_from_int,
    magnitude_to_int,
    strip_leading_zeros,
    validate_digits,
)

# Additive engine
from src.bigint.math.additive import (
    add_magnitudes,
    digit_from_right,
    subtract_magnitudes,
)

# Multiplicative engine
from src.bigint.math.multiplicative import (
    halve_magnitude,
    multiply_by_digit,
    multiply_magnitudes,
    shift_left,
)

__all__ = [
    # Representation: constants
    "BASE",
    "DIGIT_MAX",
    "DIGIT_MIN",
    "ZERO_DIGITS",
    # Representation: functions
    "compare_magnitudes",
    "is_zero_magnitude",
    "magnitude_from_int",
    "magnitude_to_int",
    "strip_leading_zeros",
    "validate_digits",
    # Additive engine
    "add_magnitudes",
    "digit_from_right",
    "subtract_magnitudes",
    # Multiplicative engine
    "halve_magnitude",
    "multiply_by_digit",
    "multiply_magnitudes",
    "shift_left",
]
