"""
Errors — Исключения BigInt

Арифметика тотальна над корректными операндами; исключения возникают
только на границе: разбор строки и возведение в отрицательную степень.
"""


class BigIntError(Exception):
    """Базовое исключение decimal-bigint."""

    pass


class InvalidArgument(BigIntError, ValueError):
    """
    Строка не соответствует грамматике [+-]?[0-9]+.

    Возникает синхронно в конструкторе из строки; частично построенный
    объект не возвращается.
    """

    pass


class NegativeExponentError(BigIntError, ValueError):
    """
    Отрицательный показатель в power().

    Целочисленная степень определена только для показателя >= 0.
    """

    pass
