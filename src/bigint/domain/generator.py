"""
Generator — Источник случайных цифр для BigInt.random

Источник выдаёт независимые равномерные значения:
- digit() ∈ [0, 9]
- sign_bit() ∈ {0, 1} (0 → минус, 1 → плюс)

Сборка BigInt из выборки (и нормализация ведущих нулей) выполняется
в BigInt.random.
"""

import logging
import random
from dataclasses import dataclass
from typing import Protocol

from src.bigint.domain.sign import Sign
from src.bigint.math.digits import DIGIT_MAX, DIGIT_MIN, validate_digits

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GeneratorConfig:
    """Конфигурация генератора.

    seed=None означает недетерминированную инициализацию (системная энтропия).
    """

    seed: int | None = None


# =============================================================================
# DIGIT SOURCE
# =============================================================================


class DigitSource(Protocol):
    """Контракт источника случайных цифр."""

    def digit(self) -> int:
        ...

    def sign_bit(self) -> int:
        ...


class RandomDigitSource:
    """Источник цифр на random.Random (Mersenne Twister)."""

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Args:
            config: конфигурация генератора (опционально, используется default)
        """
        self.config = config or GeneratorConfig()
        self._rng = random.Random(self.config.seed)

    def digit(self) -> int:
        return self._rng.randint(DIGIT_MIN, DIGIT_MAX)

    def sign_bit(self) -> int:
        return self._rng.randint(0, 1)


# =============================================================================
# SAMPLING
# =============================================================================


def sample_signed_digits(
    num_digits: int,
    source: DigitSource | None = None,
) -> tuple[Sign, list[int]]:
    """
    Выборка знака и num_digits цифр (старшая первой).

    Результат может содержать ведущие нули: нормализует вызывающий код.

    Args:
        num_digits: Количество цифр (>= 1)
        source: Источник цифр (default: RandomDigitSource с системной энтропией)

    Returns:
        (sign, digits)

    Raises:
        ValueError: Если num_digits < 1 или источник вернул значение вне диапазона
    """
    if not isinstance(num_digits, int) or isinstance(num_digits, bool):
        raise ValueError(f"num_digits must be int, got {num_digits!r}")

    if num_digits < 1:
        raise ValueError(f"num_digits must be >= 1, got {num_digits}")

    if source is None:
        source = RandomDigitSource()

    logger.debug("Sampling random bigint with %d digits", num_digits)

    sign = Sign.from_bit(source.sign_bit())
    digits = [source.digit() for _ in range(num_digits)]
    validate_digits(digits, name="sampled digits")

    return sign, digits
