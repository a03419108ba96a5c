"""
Тесты конструирования и форматирования BigInt

Проверяет:
1. Конструктор по умолчанию (ноль)
2. Конструирование из Python int (включая значения за пределами int64)
3. Конструирование из строки и InvalidArgument
4. Нормализацию ведущих нулей и отрицательного нуля
5. Форматирование (str/repr/int) и доступ к представлению
"""

import copy

import pytest

from src.bigint.domain import BigInt, InvalidArgument, Sign


class TestDefaultConstructor:
    """Тесты конструктора по умолчанию"""

    def test_default_is_zero(self) -> None:
        """BigInt() равен нулю"""
        value = BigInt()
        assert str(value) == "0"
        assert value.is_zero
        assert value.sign is Sign.POSITIVE
        assert value.digits == (0,)


class TestIntConstructor:
    """Тесты конструирования из int"""

    def test_positive(self) -> None:
        """Положительное int64"""
        assert str(BigInt(12345678987654321)) == "12345678987654321"

    def test_negative(self) -> None:
        """Отрицательное int64"""
        value = BigInt(-12345678987654321)
        assert str(value) == "-12345678987654321"
        assert value.is_negative

    def test_zero(self) -> None:
        """Ноль"""
        assert str(BigInt(0)) == "0"
        assert BigInt(0) == BigInt()

    def test_int64_bounds(self) -> None:
        """Границы int64"""
        assert str(BigInt(9223372036854775807)) == "9223372036854775807"
        assert str(BigInt(-9223372036854775808)) == "-9223372036854775808"

    def test_beyond_int64(self) -> None:
        """Python int за пределами int64"""
        assert str(BigInt(10**30)) == "1" + "0" * 30

    def test_from_int_classmethod(self) -> None:
        """from_int эквивалентен конструктору"""
        assert BigInt.from_int(-42) == BigInt(-42)

    def test_bool_rejected(self) -> None:
        """bool не принимается как int"""
        with pytest.raises(TypeError, match="got bool"):
            BigInt(True)

        with pytest.raises(TypeError):
            BigInt.from_int(False)

    def test_unsupported_type_rejected(self) -> None:
        """Прочие типы вызывают TypeError"""
        with pytest.raises(TypeError, match="got float"):
            BigInt(1.5)

        with pytest.raises(TypeError):
            BigInt(None)


class TestStringConstructor:
    """Тесты конструирования из строки"""

    def test_positive(self) -> None:
        """5544332211 печатается как есть"""
        assert str(BigInt("5544332211")) == "5544332211"

    def test_negative(self) -> None:
        """-5544332211 печатается как есть"""
        assert str(BigInt("-5544332211")) == "-5544332211"

    def test_explicit_plus(self) -> None:
        """Знак + допускается и не печатается"""
        assert str(BigInt("+5544332211")) == "5544332211"

    def test_invalid_characters_raise(self) -> None:
        """Не-цифровой символ вызывает InvalidArgument"""
        with pytest.raises(InvalidArgument, match="Expected a number"):
            BigInt("-5544aa22b1")

    def test_invalid_argument_position_reported(self) -> None:
        """Сообщение указывает символ и позицию"""
        with pytest.raises(InvalidArgument, match=r"'a' at position 5"):
            BigInt("-5544aa22b1")

    @pytest.mark.parametrize("text", ["", "+", "-", " 12", "12 ", "1_000", "--1", "+-1", "1.0", "１２"])
    def test_grammar_violations(self, text: str) -> None:
        """Всё, что не [+-]?[0-9]+, отклоняется"""
        with pytest.raises(InvalidArgument):
            BigInt(text)

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgument совместим с ValueError"""
        with pytest.raises(ValueError):
            BigInt("abc")

    def test_leading_zeros_normalized(self) -> None:
        """Ведущие нули нормализуются"""
        assert str(BigInt("007")) == "7"
        assert BigInt("007") == BigInt("7")
        assert BigInt("-00120").digits == (1, 2, 0)

    @pytest.mark.parametrize("text", ["0", "-0", "+0", "000", "-000"])
    def test_zero_has_no_sign(self, text: str) -> None:
        """Ноль всегда без знака"""
        value = BigInt(text)
        assert str(value) == "0"
        assert value.sign is Sign.POSITIVE
        assert value == BigInt()

    def test_from_string_classmethod(self) -> None:
        """from_string эквивалентен конструктору"""
        assert BigInt.from_string("-123") == BigInt(-123)

        with pytest.raises(TypeError):
            BigInt.from_string(123)

    def test_beyond_int64(self) -> None:
        """Строка длиннее int64"""
        text = "9223372036854775807000"
        assert str(BigInt(text)) == text
        assert int(BigInt(text)) == 9223372036854775807000


class TestRepresentation:
    """Тесты доступа к представлению и копирования"""

    def test_digits_most_significant_first(self) -> None:
        """Цифры хранятся старшей первой"""
        assert BigInt(-907).digits == (9, 0, 7)
        assert BigInt(-907).num_digits == 3

    def test_repr(self) -> None:
        """repr воспроизводит значение"""
        assert repr(BigInt(-42)) == "BigInt('-42')"

    def test_int_conversion(self) -> None:
        """int() возвращает Python int со знаком"""
        assert int(BigInt("-5544332211")) == -5544332211
        assert int(BigInt()) == 0

    def test_bool(self) -> None:
        """Ноль ложен, остальные истинны"""
        assert not BigInt()
        assert BigInt(-1)

    def test_copy_constructor_is_independent(self) -> None:
        """BigInt(BigInt) создаёт независимую копию"""
        original = BigInt(150)
        clone = BigInt(original)
        clone += 1
        assert original == 150
        assert clone == 151

    def test_copy_module(self) -> None:
        """copy.copy и copy.deepcopy независимы от оригинала"""
        original = BigInt(10)
        shallow = copy.copy(original)
        deep = copy.deepcopy(original)
        original *= 3
        assert shallow == 10
        assert deep == 10

    def test_unhashable(self) -> None:
        """Изменяемый тип не хешируется"""
        with pytest.raises(TypeError):
            hash(BigInt(1))

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("5544332211", "5544332211"),
            ("+5544332211", "5544332211"),
            ("-0005544332211", "-5544332211"),
            ("1" * 200, "1" * 200),
        ],
    )
    def test_roundtrip(self, text: str, expected: str) -> None:
        """Инвариант: строка → BigInt → строка с нормализацией знака/нулей"""
        assert str(BigInt(text)) == expected
