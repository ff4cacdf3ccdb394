"""
Domain models and value objects.

Contains the CNPJ value type, its validity state and the pydantic types built on it.
"""

from cnpjkit.core.domain.cnpj import CNPJ, FORMAT_GROUPS, SEED
from cnpjkit.core.domain.evaluable import Evaluable, is_equal
from cnpjkit.core.domain.exceptions import CNPJIndexError
from cnpjkit.core.domain.types import ValidCNPJ, require_valid
from cnpjkit.core.domain.validity import ValidityState

__all__ = [
    # CNPJ value type
    "CNPJ",
    "FORMAT_GROUPS",
    "SEED",
    # Validity
    "ValidityState",
    # Pydantic types
    "ValidCNPJ",
    "require_valid",
    # Equality protocol
    "Evaluable",
    "is_equal",
    # Exceptions
    "CNPJIndexError",
]
