"""
BigInt — Знаковое целое произвольной точности в десятичном представлении

Значение хранится как пара (sign, digits):
- sign: Sign.NEGATIVE / Sign.POSITIVE
- digits: list[int] десятичных цифр, старшая первой

Модуль содержит знаковую диспетчеризацию: каждая операция сводится к одному
из беззнаковых алгоритмов src.bigint.math (сложение, вычитание, умножение
магнитуд), при необходимости через отрицание операнда.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits непустой
2. Нет ведущих нулей, кроме значения ноль ([0])
3. Ноль всегда POSITIVE (нет отрицательного нуля)
4. In-place операторы (+=, -=, *=) меняют только левый операнд;
   правый операнд никогда не мутируется

ДИСПЕТЧЕРИЗАЦИЯ ЗНАКОВ:
    a += b:
        0 + b          → b
        a + 0          → a
        (-a) + b       → b - a
        a + (-b)       → a - b
        одинаковые     → ±(|a| + |b|)
    a -= b:
        0 - b          → -b
        a - 0          → a
        a - b (a,b>0)  → |a| - |b|, при b > a операнды меняются, знак минус
        прочие         → a + (-b)
    a *= b:
        знак плюс при совпадении знаков, магнитуда считается умножением в столбик
"""

from typing import Final, Union

from src.bigint.domain.errors import NegativeExponentError
from src.bigint.domain.generator import DigitSource, sample_signed_digits
from src.bigint.domain.sign import Sign
from src.bigint.domain.text import format_decimal, parse_decimal
from src.bigint.math.additive import add_magnitudes, subtract_magnitudes
from src.bigint.math.digits import (
    ZERO_DIGITS,
    compare_magnitudes,
    is_zero_magnitude,
    magnitude_from_int,
    magnitude_to_int,
    strip_leading_zeros,
)
from src.bigint.math.multiplicative import halve_magnitude, multiply_magnitudes

BigIntLike = Union["BigInt", int]


class BigInt:
    """
    Знаковое целое произвольной точности.

    Конструирование:
        BigInt()            → 0
        BigInt(-42)         → из Python int
        BigInt("-5544")     → из десятичной строки [+-]?[0-9]+
        BigInt.random(100)  → случайные знак и 100 цифр

    Операторы: унарный минус, +, -, *, ** и их in-place формы,
    ==, !=, <, <=, >, >=. Python int допускается вторым операндом.

    Значение изменяемо только через in-place операторы и методы
    increment/decrement, поэтому тип не хешируемый.
    """

    def __init__(self, value: Union["BigInt", int, str] = 0):
        """
        Args:
            value: BigInt (копия), Python int или десятичная строка

        Raises:
            InvalidArgument: Если строка не соответствует [+-]?[0-9]+
            TypeError: Если тип value не поддерживается
        """
        if isinstance(value, BigInt):
            self._assign(value._sign, value._digits)
        elif isinstance(value, bool):
            raise TypeError("BigInt() argument must be int, str or BigInt, got bool")
        elif isinstance(value, int):
            self._assign(Sign.of(value), magnitude_from_int(value))
        elif isinstance(value, str):
            sign, digits = parse_decimal(value)
            self._assign(sign, digits)
        else:
            raise TypeError(
                f"BigInt() argument must be int, str or BigInt, got {type(value).__name__}"
            )

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Конструирование из Python int."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"value must be int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_string(cls, text: str) -> "BigInt":
        """
        Конструирование из десятичной строки.

        Ведущие нули нормализуются: "007" → 7, "-000" → 0.

        Raises:
            InvalidArgument: Если text не соответствует [+-]?[0-9]+
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        return cls(text)

    @classmethod
    def random(cls, num_digits: int, source: DigitSource | None = None) -> "BigInt":
        """
        Случайное значение: равномерный знак и num_digits равномерных цифр.

        Выборка может начинаться с нулей; результат нормализуется сразу,
        поэтому количество цифр может оказаться меньше num_digits.

        Args:
            num_digits: Количество выбираемых цифр (>= 1)
            source: Источник цифр (default: RandomDigitSource)

        Returns:
            Нормализованный BigInt

        Raises:
            ValueError: Если num_digits < 1
        """
        sign, digits = sample_signed_digits(num_digits, source)
        return cls._from_parts(sign, digits)

    @classmethod
    def _from_parts(cls, sign: Sign, digits: list[int]) -> "BigInt":
        """Внутренний конструктор из готовых (sign, digits) с нормализацией."""
        instance = cls.__new__(cls)
        instance._assign(sign, digits)
        return instance

    def _assign(self, sign: Sign, digits: list[int]) -> None:
        """Замена состояния с нормализацией (единственная точка записи)."""
        normalized = strip_leading_zeros(list(digits))

        if is_zero_magnitude(normalized):
            sign = Sign.POSITIVE

        self._sign = sign
        self._digits = normalized

    def copy(self) -> "BigInt":
        """Независимая копия значения."""
        return BigInt._from_parts(self._sign, self._digits)

    def __copy__(self) -> "BigInt":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return self.copy()

    # =========================================================================
    # ДОСТУП К ПРЕДСТАВЛЕНИЮ
    # =========================================================================

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры магнитуды (старшая первой), копия только для чтения."""
        return tuple(self._digits)

    @property
    def num_digits(self) -> int:
        return len(self._digits)

    @property
    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    @property
    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    def __str__(self) -> str:
        return format_decimal(self._sign, self._digits)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        magnitude = magnitude_to_int(self._digits)
        return -magnitude if self.is_negative else magnitude

    def __bool__(self) -> bool:
        return not self.is_zero

    # =========================================================================
    # COMPARATOR
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        # Сравнение списков: одинаковая длина и поразрядное совпадение
        return self._sign is rhs._sign and self._digits == rhs._digits

    __hash__ = None  # type: ignore[assignment]

    def __gt__(self, other: BigIntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._greater_than(rhs)

    def __ge__(self, other: BigIntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._greater_than(rhs) or self == rhs

    def __lt__(self, other: BigIntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not (self._greater_than(rhs) or self == rhs)

    def __le__(self, other: BigIntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not self._greater_than(rhs)

    def _greater_than(self, rhs: "BigInt") -> bool:
        """
        Строгое self > rhs.

        Положительное больше любого отрицательного. При равных знаках
        сравниваются магнитуды; для отрицательных порядок обратный.
        """
        if self._sign is not rhs._sign:
            return self._sign is Sign.POSITIVE

        order = compare_magnitudes(self._digits, rhs._digits)

        if self._sign is Sign.POSITIVE:
            return order > 0
        return order < 0

    # =========================================================================
    # ADDITIVE ENGINE
    # =========================================================================

    def __neg__(self) -> "BigInt":
        result = self.copy()
        if not result.is_zero:
            result._sign = result._sign.flipped()
        return result

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        return BigInt._from_parts(Sign.POSITIVE, self._digits)

    def __iadd__(self, other: BigIntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._add_in_place(rhs)
        return self

    def __isub__(self, other: BigIntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._subtract_in_place(rhs)
        return self

    def __add__(self, other: BigIntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result._add_in_place(rhs)
        return result

    def __radd__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        result = lhs.copy()
        result._add_in_place(self)
        return result

    def __sub__(self, other: BigIntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result._subtract_in_place(rhs)
        return result

    def __rsub__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        result = lhs.copy()
        result._subtract_in_place(self)
        return result

    def _add_in_place(self, rhs: "BigInt") -> None:
        """self = self + rhs; rhs только читается."""
        if self.is_zero:
            self._assign(rhs._sign, rhs._digits)
            return

        if rhs.is_zero:
            return

        if self._sign is Sign.NEGATIVE and rhs._sign is Sign.POSITIVE:
            # (-a) + b = b - a
            result = rhs.copy()
            result._subtract_in_place(-self)
            self._assign(result._sign, result._digits)
            return

        if self._sign is Sign.POSITIVE and rhs._sign is Sign.NEGATIVE:
            # a + (-b) = a - b
            self._subtract_in_place(-rhs)
            return

        self._assign(self._sign, add_magnitudes(self._digits, rhs._digits))

    def _subtract_in_place(self, rhs: "BigInt") -> None:
        """self = self - rhs; rhs только читается."""
        if self.is_zero:
            negated = -rhs
            self._assign(negated._sign, negated._digits)
            return

        if rhs.is_zero:
            return

        if self._sign is Sign.POSITIVE and rhs._sign is Sign.POSITIVE:
            minuend = self._digits
            subtrahend = rhs._digits
            sign = Sign.POSITIVE

            # Перестановка локальных ссылок, вызывающий код её не видит
            if rhs > self:
                minuend, subtrahend = subtrahend, minuend
                sign = Sign.NEGATIVE

            self._assign(sign, subtract_magnitudes(minuend, subtrahend))
            return

        # a - (-b), (-a) - (-b), (-a) - b сводятся к a + (-b)
        self._add_in_place(-rhs)

    def increment(self) -> "BigInt":
        """Префиксный инкремент (++a): прибавляет 1, возвращает self."""
        self._add_in_place(_ONE)
        return self

    def post_increment(self) -> "BigInt":
        """Постфиксный инкремент (a++): прибавляет 1, возвращает прежнее значение."""
        previous = self.copy()
        self._add_in_place(_ONE)
        return previous

    def decrement(self) -> "BigInt":
        """Префиксный декремент (--a): вычитает 1, возвращает self."""
        self._subtract_in_place(_ONE)
        return self

    def post_decrement(self) -> "BigInt":
        """Постфиксный декремент (a--): вычитает 1, возвращает прежнее значение."""
        previous = self.copy()
        self._subtract_in_place(_ONE)
        return previous

    # =========================================================================
    # MULTIPLICATIVE ENGINE
    # =========================================================================

    def __imul__(self, other: BigIntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._multiply_in_place(rhs)
        return self

    def __mul__(self, other: BigIntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result._multiply_in_place(rhs)
        return result

    def __rmul__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        result = lhs.copy()
        result._multiply_in_place(self)
        return result

    def _multiply_in_place(self, rhs: "BigInt") -> None:
        """self = self * rhs; rhs только читается (допустимо rhs is self)."""
        if self.is_zero or rhs.is_zero:
            self._assign(Sign.POSITIVE, list(ZERO_DIGITS))
            return

        sign = self._sign.product(rhs._sign)
        self._assign(sign, multiply_magnitudes(self._digits, rhs._digits))

    def power(self, exponent: BigIntLike) -> "BigInt":
        """
        Возведение в целую неотрицательную степень.

        Бинарный метод: биты показателя снимаются делением его десятичной
        магнитуды на 2, основание последовательно возводится в квадрат.
        Результат совпадает с exponent-кратным умножением единицы на self.

        Args:
            exponent: Показатель (BigInt или Python int), >= 0

        Returns:
            self ** exponent (x ** 0 == 1 для любого x, включая 0)

        Raises:
            NegativeExponentError: Если exponent < 0
            TypeError: Если exponent не BigInt и не int
        """
        power_of = _coerce(exponent)
        if power_of is None:
            raise TypeError(f"exponent must be BigInt or int, got {type(exponent).__name__}")

        if power_of.is_negative:
            raise NegativeExponentError(
                f"exponent must be non-negative, got {power_of}"
            )

        result = BigInt(1)
        base = self.copy()
        remaining = list(power_of._digits)

        while not is_zero_magnitude(remaining):
            remaining, bit = halve_magnitude(remaining)

            if bit:
                result._multiply_in_place(base)

            if not is_zero_magnitude(remaining):
                base._multiply_in_place(base)

        return result

    def __pow__(self, exponent: BigIntLike, modulo: None = None) -> "BigInt":
        if modulo is not None:
            return NotImplemented
        if _coerce(exponent) is None:
            return NotImplemented
        return self.power(exponent)

    def __rpow__(self, base: int) -> "BigInt":
        lhs = _coerce(base)
        if lhs is None:
            return NotImplemented
        return lhs.power(self)


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: object) -> BigInt | None:
    """
    Приведение операнда к BigInt.

    Returns:
        BigInt для BigInt (тот же объект) или Python int (новый объект);
        None для остальных типов (включая bool)
    """
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt(value)
    return None


_ONE: Final[BigInt] = BigInt(1)


def random_bigint(num_digits: int, source: DigitSource | None = None) -> BigInt:
    """
    Случайный BigInt с num_digits выбранными цифрами.

    Эквивалент BigInt.random(num_digits, source).
    """
    return BigInt.random(num_digits, source)
