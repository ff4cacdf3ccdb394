"""
cnpjkit — immutable CNPJ value type.

Normalizes digit sequences and free-form strings, classifies validity with the
CNPJ check digit algorithm and renders the display and serialized forms.
"""

from cnpjkit.core.domain import (
    CNPJ,
    CNPJIndexError,
    Evaluable,
    ValidCNPJ,
    ValidityState,
    is_equal,
)

__version__ = "0.1.0"

__all__ = [
    "CNPJ",
    "CNPJIndexError",
    "Evaluable",
    "ValidCNPJ",
    "ValidityState",
    "is_equal",
]
