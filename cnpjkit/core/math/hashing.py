"""
Hashing — детерминированный хеш последовательностей целых чисел

Хеш зависит только от элементов последовательности и seed. Seed выводится
из имени типа через CRC32, поэтому он стабилен между процессами.
"""

import zlib
from typing import Iterable


def get_seed(name: str) -> int:
    """
    Seed для хеширования значений данного типа.

    Args:
        name: Имя типа (например, 'CNPJ')

    Returns:
        Неотрицательное 32-битное целое
    """
    return zlib.crc32(name.encode("utf-8"))


def hash_sequence(values: Iterable[int], seed: int) -> int:
    """
    Хеш последовательности целых чисел с seed.

    Равные последовательности при одинаковом seed всегда дают равный хеш.
    Коллизии допустимы.

    Args:
        values: Последовательность целых чисел
        seed: Seed типа (см. get_seed)

    Returns:
        Хеш-код
    """
    return hash((seed, *values))
