"""
Text — Разбор и форматирование десятичной записи

Грамматика входа: [+-]?[0-9]+
- Необязательный знак только в первой позиции
- Каждый следующий символ: ASCII цифра, конвертируется независимо
- Пробелы не допускаются
- Ведущие нули допускаются (нормализуются в BigInt)

Формат выхода: "-" только для отрицательного ненулевого значения,
затем цифры магнитуды.
"""

from typing import Final

from src.bigint.domain.errors import InvalidArgument
from src.bigint.domain.sign import Sign
from src.bigint.math.digits import is_zero_magnitude

# Таблица символ → цифра (только ASCII, без unicode-цифр)
DIGIT_VALUES: Final[dict[str, int]] = {char: value for value, char in enumerate("0123456789")}

SIGN_PREFIXES: Final[dict[str, Sign]] = {
    "-": Sign.NEGATIVE,
    "+": Sign.POSITIVE,
}


def parse_decimal(text: str) -> tuple[Sign, list[int]]:
    """
    Разбор десятичной строки в (знак, цифры).

    Нормализация не выполняется: "007" даёт [0, 0, 7].

    Args:
        text: Строка вида [+-]?[0-9]+

    Returns:
        (sign, digits); отсутствие знака означает POSITIVE

    Raises:
        InvalidArgument: Если после знака пусто или встречен не-цифровой символ

    Examples:
        >>> parse_decimal("-5544332211")
        (<Sign.NEGATIVE: '-'>, [5, 5, 4, 4, 3, 3, 2, 2, 1, 1])
        >>> parse_decimal("+12")
        (<Sign.POSITIVE: '+'>, [1, 2])
    """
    sign = Sign.POSITIVE
    offset = 0

    if text[:1] in SIGN_PREFIXES:
        sign = SIGN_PREFIXES[text[0]]
        offset = 1

    if len(text) == offset:
        raise InvalidArgument(f"Expected a number, got {text!r}")

    digits: list[int] = []
    for position in range(offset, len(text)):
        char = text[position]
        if char not in DIGIT_VALUES:
            raise InvalidArgument(
                f"Expected a number: invalid character {char!r} "
                f"at position {position} in {text!r}"
            )
        digits.append(DIGIT_VALUES[char])

    return sign, digits


def format_decimal(sign: Sign, digits: list[int]) -> str:
    """
    Форматирование (знак, цифры) в десятичную строку.

    Args:
        sign: Знак
        digits: Нормализованная магнитуда

    Returns:
        Строка без знака "+"; у нуля знака нет
    """
    body = "".join(str(digit) for digit in digits)

    if sign is Sign.NEGATIVE and not is_zero_magnitude(digits):
        return "-" + body
    return body
