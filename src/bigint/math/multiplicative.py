"""
Multiplicative — Умножение магнитуд в столбик

Модуль реализует:
- Умножение магнитуды на одну цифру с переносом (одна строка столбика)
- Сдвиг строки на row десятичных разрядов
- Длинное умножение O(n·m) с накоплением строк через сложение магнитуд
- Деление магнитуды на 2 (для возведения в степень бинарным методом)

АЛГОРИТМ ДЛИННОГО УМНОЖЕНИЯ:
    Для каждой цифры lhs от младшей к старшей (row = 0, 1, 2, ...):
        строка = rhs × цифра, поразрядно справа налево:
            product = a * b + carry
            цифра строки = product % 10, carry = product // 10
        строка сдвигается влево на row разрядов (дописываются row нулей)
        total = total + строка

Karatsuba/FFT сознательно не используются.
"""

from src.bigint.math.additive import add_magnitudes
from src.bigint.math.digits import (
    BASE,
    ZERO_DIGITS,
    is_zero_magnitude,
    strip_leading_zeros,
)


# =============================================================================
# СТРОКИ СТОЛБИКА
# =============================================================================


def multiply_by_digit(digits: list[int], digit: int) -> list[int]:
    """
    Умножение магнитуды на одну десятичную цифру.

    Args:
        digits: Магнитуда (старшая цифра первой)
        digit: Множитель 0-9

    Returns:
        Нормализованная магнитуда digits × digit

    Examples:
        >>> multiply_by_digit([4, 5, 6], 7)
        [3, 1, 9, 2]
        >>> multiply_by_digit([4, 5, 6], 0)
        [0]
    """
    result: list[int] = []
    carry = 0

    for current in reversed(digits):
        product = current * digit + carry
        result.append(product % BASE)
        carry = product // BASE

    # Финальный перенос становится старшими цифрами строки
    while carry > 0:
        result.append(carry % BASE)
        carry //= BASE

    result.reverse()
    return strip_leading_zeros(result)


def shift_left(digits: list[int], places: int) -> list[int]:
    """
    Сдвиг магнитуды на places десятичных разрядов (× 10^places).

    Ноль не сдвигается: [0] остаётся [0].

    Args:
        digits: Магнитуда
        places: Количество дописываемых нулей (>= 0)

    Returns:
        Новая магнитуда

    Raises:
        ValueError: Если places < 0
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if is_zero_magnitude(digits):
        return list(ZERO_DIGITS)

    return list(digits) + [0] * places


# =============================================================================
# ДЛИННОЕ УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(lhs: list[int], rhs: list[int]) -> list[int]:
    """
    Умножение двух магнитуд в столбик.

    Args:
        lhs: Первый множитель (цифры дают строки столбика)
        rhs: Второй множитель

    Returns:
        Нормализованная магнитуда lhs × rhs

    Examples:
        >>> multiply_magnitudes([5], [5])
        [2, 5]
        >>> multiply_magnitudes([1, 2], [3, 4])
        [4, 0, 8]
        >>> multiply_magnitudes([9, 9, 9], [0])
        [0]
    """
    if is_zero_magnitude(lhs) or is_zero_magnitude(rhs):
        return list(ZERO_DIGITS)

    total = list(ZERO_DIGITS)

    for row, digit in enumerate(reversed(lhs)):
        partial = shift_left(multiply_by_digit(rhs, digit), row)
        total = add_magnitudes(total, partial)

    return total


# =============================================================================
# ДЕЛЕНИЕ НА 2
# =============================================================================


def halve_magnitude(digits: list[int]) -> tuple[list[int], int]:
    """
    Деление магнитуды на 2 уголком (от старшей цифры).

    Используется для возведения в степень бинарным методом: показатель
    хранится в десятичном виде, его биты снимаются последовательным
    делением на 2.

    Args:
        digits: Магнитуда

    Returns:
        (quotient, remainder):
            - quotient: нормализованная магнитуда digits // 2
            - remainder: 0 или 1

    Examples:
        >>> halve_magnitude([1, 0])
        ([5], 0)
        >>> halve_magnitude([1, 7])
        ([8], 1)
        >>> halve_magnitude([1])
        ([0], 1)
    """
    quotient: list[int] = []
    remainder = 0

    for digit in digits:
        current = remainder * BASE + digit
        quotient.append(current // 2)
        remainder = current % 2

    return strip_leading_zeros(quotient), remainder
