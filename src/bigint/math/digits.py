"""
Digits — Представление магнитуды в виде вектора десятичных цифр

Модуль задаёт каноническое представление абсолютного значения (магнитуды):
- list[int] десятичных цифр 0-9, старшая цифра первой
- Нормализация (удаление ведущих нулей)
- Сравнение магнитуд
- Конверсия int ↔ вектор цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вектор цифр непустой
2. Нет ведущих нулей, кроме значения ноль (ровно [0])
3. Функции модуля не мутируют входные списки (всегда возвращают новый список)
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления (только десятичная)
BASE: Final[int] = 10

# Допустимый диапазон одной цифры
DIGIT_MIN: Final[int] = 0
DIGIT_MAX: Final[int] = 9

# Каноническая магнитуда нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def is_zero_magnitude(digits: list[int]) -> bool:
    """
    Проверка, что нормализованная магнитуда равна нулю.

    Args:
        digits: Нормализованный вектор цифр

    Returns:
        True если digits == [0]
    """
    return len(digits) == 1 and digits[0] == 0


def strip_leading_zeros(digits: list[int]) -> list[int]:
    """
    Удаление незначащих ведущих нулей.

    Пустой вектор и вектор из одних нулей схлопываются в [0].

    Args:
        digits: Вектор цифр (старшая первой), может содержать ведущие нули

    Returns:
        Новый нормализованный вектор цифр

    Examples:
        >>> strip_leading_zeros([0, 0, 7])
        [7]
        >>> strip_leading_zeros([0, 0, 0])
        [0]
        >>> strip_leading_zeros([])
        [0]
    """
    if not digits:
        return list(ZERO_DIGITS)

    first = 0
    last = len(digits) - 1

    # Последняя цифра остаётся всегда: так ноль схлопывается в [0]
    while first < last and digits[first] == 0:
        first += 1

    return digits[first:]


def validate_digits(digits: list[int], name: str = "digits") -> None:
    """
    Валидация, что вектор состоит только из десятичных цифр.

    Args:
        digits: Проверяемый вектор
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если вектор пустой или содержит значение вне [0, 9]
    """
    if not digits:
        raise ValueError(f"{name} must be non-empty")

    for position, digit in enumerate(digits):
        if not isinstance(digit, int) or isinstance(digit, bool):
            raise ValueError(f"{name}[{position}] must be int, got {digit!r}")
        if digit < DIGIT_MIN or digit > DIGIT_MAX:
            raise ValueError(
                f"{name}[{position}] must be in [{DIGIT_MIN}, {DIGIT_MAX}], got {digit}"
            )


# =============================================================================
# СРАВНЕНИЕ МАГНИТУД
# =============================================================================


def compare_magnitudes(lhs: list[int], rhs: list[int]) -> int:
    """
    Сравнение двух нормализованных магнитуд.

    Алгоритм:
        1. Больше цифр → дальше от нуля
        2. При равной длине решает первая различающаяся цифра (от старшей)

    Args:
        lhs: Первая магнитуда
        rhs: Вторая магнитуда

    Returns:
        -1 если lhs < rhs
         0 если lhs == rhs
        +1 если lhs > rhs

    Examples:
        >>> compare_magnitudes([1, 2, 3], [9, 9])
        1
        >>> compare_magnitudes([2, 0, 0], [2, 0, 1])
        -1
        >>> compare_magnitudes([4, 2], [4, 2])
        0
    """
    if len(lhs) != len(rhs):
        return 1 if len(lhs) > len(rhs) else -1

    for up, dn in zip(lhs, rhs):
        if up > dn:
            return 1
        if up < dn:
            return -1

    return 0


# =============================================================================
# КОНВЕРСИЯ int ↔ ЦИФРЫ
# =============================================================================


def magnitude_from_int(value: int) -> list[int]:
    """
    Разложение |value| на десятичные цифры.

    Цифры снимаются от младшей к старшей (value % 10, value // 10),
    затем разворачиваются в порядок "старшая первой".

    Args:
        value: Любое целое (знак игнорируется)

    Returns:
        Нормализованный вектор цифр |value|

    Examples:
        >>> magnitude_from_int(12345)
        [1, 2, 3, 4, 5]
        >>> magnitude_from_int(-907)
        [9, 0, 7]
        >>> magnitude_from_int(0)
        [0]
    """
    if value == 0:
        return list(ZERO_DIGITS)

    magnitude = abs(value)
    digits: list[int] = []

    while magnitude > 0:
        digits.append(magnitude % BASE)
        magnitude //= BASE

    digits.reverse()
    return digits


def magnitude_to_int(digits: list[int]) -> int:
    """
    Сборка неотрицательного int из вектора цифр (схема Горнера).

    Args:
        digits: Вектор цифр (старшая первой)

    Returns:
        Неотрицательное целое
    """
    value = 0
    for digit in digits:
        value = value * BASE + digit
    return value
