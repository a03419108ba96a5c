"""
Additive — Школьное сложение и вычитание магнитуд

Модуль реализует поразрядные алгоритмы над нормализованными магнитудами:
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow) при условии lhs >= rhs

Знаковая логика (какой алгоритм вызвать, какой знак у результата)
находится в BigInt; здесь только беззнаковые цифры.

АЛГОРИТМЫ:
    Сложение (справа налево):
        sum = a + b + carry
        sum >= 10 → цифра sum - 10, carry = 1
        иначе     → цифра sum, carry = 0

    Вычитание (справа налево):
        sub = a - b - borrow
        sub < 0 → цифра sub + 10, borrow = 1
        иначе   → цифра sub, borrow = 0

Короткий операнд выравнивается по младшему разряду (слева дополняется нулями).
"""

from src.bigint.math.digits import BASE, compare_magnitudes, strip_leading_zeros


# =============================================================================
# ВЫРАВНИВАНИЕ РАЗРЯДОВ
# =============================================================================


def digit_from_right(digits: list[int], position: int) -> int:
    """
    Цифра на позиции position от младшего разряда (1 = единицы).

    За пределами вектора возвращает 0 (неявное дополнение нулями слева).
    """
    if position <= len(digits):
        return digits[-position]
    return 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_magnitudes(lhs: list[int], rhs: list[int]) -> list[int]:
    """
    Сложение двух магнитуд с переносом.

    Проход идёт на один разряд дальше самого длинного операнда, чтобы
    финальный перенос попал в результат; если переноса не было, лишний
    ведущий ноль удаляется при нормализации.

    Args:
        lhs: Первая магнитуда
        rhs: Вторая магнитуда

    Returns:
        Нормализованная магнитуда lhs + rhs

    Examples:
        >>> add_magnitudes([1, 5, 0], [1, 5, 0])
        [3, 0, 0]
        >>> add_magnitudes([9, 9, 9], [1])
        [1, 0, 0, 0]
    """
    width = max(len(lhs), len(rhs)) + 1

    result: list[int] = []
    carry = 0

    for position in range(1, width + 1):
        total = digit_from_right(lhs, position) + digit_from_right(rhs, position) + carry

        if total >= BASE:
            total -= BASE
            carry = 1
        else:
            carry = 0

        result.append(total)

    result.reverse()
    return strip_leading_zeros(result)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract_magnitudes(lhs: list[int], rhs: list[int]) -> list[int]:
    """
    Вычитание магнитуд с заёмом: lhs - rhs при lhs >= rhs.

    Вызывающий код (BigInt) сам меняет операнды местами и выставляет
    отрицательный знак, если вычитаемое больше уменьшаемого.

    Args:
        lhs: Уменьшаемое
        rhs: Вычитаемое (по модулю не больше lhs)

    Returns:
        Нормализованная магнитуда lhs - rhs (ведущие нули удалены,
        равные операнды дают [0])

    Raises:
        ValueError: Если rhs > lhs (результат был бы отрицательным)

    Examples:
        >>> subtract_magnitudes([2, 5, 0], [2, 0, 0])
        [5, 0]
        >>> subtract_magnitudes([1, 0, 0, 0], [1])
        [9, 9, 9]
        >>> subtract_magnitudes([4, 2], [4, 2])
        [0]
    """
    if compare_magnitudes(lhs, rhs) < 0:
        raise ValueError(
            f"Minuend must be >= subtrahend, got {len(lhs)}-digit minuend "
            f"and {len(rhs)}-digit subtrahend"
        )

    result: list[int] = []
    borrow = 0

    for position in range(1, len(lhs) + 1):
        sub = digit_from_right(lhs, position) - digit_from_right(rhs, position) - borrow

        if sub < 0:
            sub += BASE
            borrow = 1
        else:
            borrow = 0

        result.append(sub)

    result.reverse()
    return strip_leading_zeros(result)
