"""
Sign — Знак BigInt

Ноль по соглашению всегда положительный (отрицательного нуля нет).
"""

from enum import Enum


class Sign(str, Enum):
    """Знак значения"""

    NEGATIVE = "-"
    POSITIVE = "+"

    @classmethod
    def of(cls, value: int) -> "Sign":
        """Знак Python int (ноль → POSITIVE)"""
        return cls.NEGATIVE if value < 0 else cls.POSITIVE

    @classmethod
    def from_bit(cls, bit: int) -> "Sign":
        """
        Знак из случайного бита.

        0 → NEGATIVE, 1 → POSITIVE.

        Raises:
            ValueError: Если bit не 0 и не 1
        """
        if bit == 0:
            return cls.NEGATIVE
        if bit == 1:
            return cls.POSITIVE
        raise ValueError(f"sign bit must be 0 or 1, got {bit!r}")

    def flipped(self) -> "Sign":
        """Противоположный знак"""
        return Sign.POSITIVE if self is Sign.NEGATIVE else Sign.NEGATIVE

    def product(self, other: "Sign") -> "Sign":
        """Знак произведения: плюс при совпадении знаков, иначе минус"""
        return Sign.POSITIVE if self is other else Sign.NEGATIVE
