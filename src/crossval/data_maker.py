"""
Reference Data Maker — генерация эталонных файлов

Эталонные значения вычисляются встроенным Python int, независимо от BigInt.
Каждый файл data{i}.txt содержит два случайных операнда заданной длины
(случайный знак, старшая цифра ненулевая) и их sum/difference/product.
"""

import logging
import random
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from src.crossval.records import ReferenceRecord, write_reference_file

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


@dataclass(frozen=True)
class ReferenceDataConfig:
    """Конфигурация генерации эталонных данных."""

    count: int = 5
    digits: int = 100
    seed: int | None = None
    file_prefix: str = "data"


@contextmanager
def int_str_digits_at_least(digits: int) -> Iterator[None]:
    """
    Временно поднимает лимит преобразования int <-> str до digits цифр.

    Текущий лимит не снижается (0 означает 'без лимита'); прежнее
    значение восстанавливается на выходе.
    """
    previous = sys.get_int_max_str_digits()
    if previous == 0 or previous >= digits:
        yield
        return

    sys.set_int_max_str_digits(digits)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def random_operand(rng: random.Random, length: int, is_neg: bool = False) -> str:
    """Случайная десятичная строка из length цифр без ведущего нуля."""
    n = [DIGITS[rng.randint(0, 9)] for _ in range(length)]
    while n[0] == "0" and length > 1:
        n[0] = DIGITS[rng.randint(0, 9)]

    s = "-" if is_neg and n != ["0"] else ""
    return s + "".join(n)


def make_reference_record(operand1: int, operand2: int) -> ReferenceRecord:
    """Эталонная запись для пары Python int."""
    return ReferenceRecord(
        operand1=str(operand1),
        operand2=str(operand2),
        expected_sum=str(operand1 + operand2),
        expected_difference=str(operand1 - operand2),
        expected_product=str(operand1 * operand2),
    )


def write_reference_data(
    directory: Path,
    config: ReferenceDataConfig | None = None,
) -> list[Path]:
    """
    Запись config.count эталонных файлов в directory.

    Args:
        directory: Каталог назначения (создаётся при отсутствии)
        config: Конфигурация (default: 5 файлов по 100 цифр)

    Returns:
        Пути созданных файлов (file_prefix1.txt ... file_prefixN.txt)

    Raises:
        ValueError: Если count < 1 или digits < 1
    """
    config = config or ReferenceDataConfig()

    if config.count < 1:
        raise ValueError(f"count must be >= 1, got {config.count}")
    if config.digits < 1:
        raise ValueError(f"digits must be >= 1, got {config.digits}")

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    rng = random.Random(config.seed)
    paths: list[Path] = []

    # Произведение: до 2 * digits цифр
    with int_str_digits_at_least(2 * config.digits):
        for i in range(1, config.count + 1):
            operand1 = int(random_operand(rng, config.digits, is_neg=rng.randint(0, 1) == 0))
            operand2 = int(random_operand(rng, config.digits, is_neg=rng.randint(0, 1) == 0))

            path = directory / f"{config.file_prefix}{i}.txt"
            write_reference_file(path, make_reference_record(operand1, operand2))
            paths.append(path)

    logger.info(
        "Wrote %d reference file(s) with %d-digit operands to %s",
        len(paths),
        config.digits,
        directory,
    )
    return paths
