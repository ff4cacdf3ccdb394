"""
Check Digits — алгоритм контрольных цифр CNPJ

Взвешенная сумма по модулю 11:
- Веса берутся из таблицы WEIGHTS, выровненной по правой границе диапазона
  (цифре в позиции end-1 всегда соответствует вес 2)
- rem = sum % 11
- Контрольная цифра: 0 если rem < 2, иначе 11 - rem

Первая контрольная цифра считается по позициям [0, 12), вторая — по [0, 13).
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Таблица весов (13 элементов)
WEIGHTS: Final[tuple[int, ...]] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

# Модуль взвешенной суммы
CHECK_MODULUS: Final[int] = 11

# Количество цифр базового номера (без контрольных цифр)
BASE_LENGTH: Final[int] = 12

# Полная длина CNPJ (база + 2 контрольные цифры)
CNPJ_LENGTH: Final[int] = BASE_LENGTH + 2


# =============================================================================
# КОНТРОЛЬНАЯ ЦИФРА
# =============================================================================


def get_check_digit(
    digits: Sequence[int],
    start: int = 0,
    end: int | None = None,
) -> int:
    """
    Вычисление контрольной цифры по диапазону [start, end).

    Позиция i использует вес WEIGHTS[13 - end + i].

    Args:
        digits: Последовательность цифр
        start: Начало диапазона (включительно, default: 0)
        end: Конец диапазона (не включительно, default: len(digits))

    Returns:
        Контрольная цифра в [0, 9]

    Raises:
        ValueError: Если для диапазона нет весов или он выходит за границы digits

    Examples:
        >>> get_check_digit([1, 1, 4, 4, 4, 7, 7, 7, 0, 0, 0, 1])
        6
        >>> get_check_digit([1, 1, 4, 4, 4, 7, 7, 7, 0, 0, 0, 1, 6])
        1
    """
    if end is None:
        end = len(digits)

    if end > len(WEIGHTS):
        raise ValueError(
            f"Check digit range end {end} exceeds weight table size {len(WEIGHTS)}"
        )
    if end > len(digits):
        raise ValueError(f"Check digit range end {end} exceeds digit count {len(digits)}")
    if not 0 <= start <= end:
        raise ValueError(f"Check digit range start {start} outside [0, {end}]")

    offset = len(WEIGHTS) - end
    acc = 0
    for i in range(start, end):
        acc += digits[i] * WEIGHTS[offset + i]

    rem = acc % CHECK_MODULUS
    return 0 if rem < 2 else CHECK_MODULUS - rem


def append_check_digits(base: Sequence[int]) -> list[int]:
    """
    Дополнение базового номера двумя контрольными цифрами.

    Args:
        base: 12 цифр базового номера

    Returns:
        Новый список из 14 цифр

    Raises:
        ValueError: Если длина base не равна BASE_LENGTH
    """
    if len(base) != BASE_LENGTH:
        raise ValueError(f"Base must have {BASE_LENGTH} digits, got {len(base)}")

    digits = list(base)
    digits.append(get_check_digit(digits, 0, BASE_LENGTH))
    digits.append(get_check_digit(digits, 0, BASE_LENGTH + 1))
    return digits
