"""
Core math modules для cnpjkit

Приведение цифр, алгоритм контрольных цифр и хеширование последовательностей.
"""

# Digits
from cnpjkit.core.math.digits import (
    RADIX,
    is_valid_float,
    normalize_index,
    to_digit,
)

# Check Digits
from cnpjkit.core.math.check_digits import (
    BASE_LENGTH,
    CHECK_MODULUS,
    CNPJ_LENGTH,
    WEIGHTS,
    append_check_digits,
    get_check_digit,
)

# Hashing
from cnpjkit.core.math.hashing import get_seed, hash_sequence

__all__ = [
    # Digits — Constants
    "RADIX",
    # Digits — Functions
    "is_valid_float",
    "normalize_index",
    "to_digit",
    # Check Digits — Constants
    "BASE_LENGTH",
    "CHECK_MODULUS",
    "CNPJ_LENGTH",
    "WEIGHTS",
    # Check Digits — Functions
    "append_check_digits",
    "get_check_digit",
    # Hashing
    "get_seed",
    "hash_sequence",
]
