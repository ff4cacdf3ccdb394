"""
Digits — приведение чисел к десятичным цифрам

Модуль обеспечивает единообразное преобразование произвольных чисел в цифры CNPJ:
- Отсев NaN/Inf (такие значения не могут быть цифрой)
- Отбрасывание дробной части (truncate toward zero)
- Взятие разряда единиц по модулю 10

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат to_digit всегда целое число в [0, 9]
2. NaN/Inf никогда не превращаются в цифру
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления для цифр CNPJ
RADIX: Final[int] = 10


# =============================================================================
# NaN/Inf ПРОВЕРКА
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли число валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение (int или float)

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)


# =============================================================================
# ПРИВЕДЕНИЕ К ЦИФРЕ
# =============================================================================


def to_digit(value: float) -> int:
    """
    Приведение числа к цифре [0, 9].

    Дробная часть отбрасывается, затем берётся разряд единиц модуля числа.

    Args:
        value: Конечное число

    Returns:
        Цифра в диапазоне [0, 9]

    Raises:
        ValueError: Если значение NaN или Inf

    Examples:
        >>> to_digit(6.9)
        6
        >>> to_digit(94)
        4
        >>> to_digit(-11.5)
        1
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot convert non-finite value to a digit: {value}")

    if isinstance(value, numbers.Integral):
        return abs(int(value)) % RADIX
    return abs(math.trunc(value)) % RADIX


def normalize_index(index: int, length: int) -> int | None:
    """
    Нормализация индекса с поддержкой отрицательных значений.

    Отрицательный индекс отсчитывается от конца последовательности,
    как в стандартной индексации Python.

    Args:
        index: Индекс (может быть отрицательным)
        length: Длина последовательности

    Returns:
        Индекс в [0, length) или None, если индекс вне диапазона
    """
    position = index + length if index < 0 else index
    if 0 <= position < length:
        return position
    return None
