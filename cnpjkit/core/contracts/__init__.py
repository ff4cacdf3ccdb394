"""
Contract Validation Module

Модуль для валидации JSON контрактов cnpjkit.
"""

from .validators import (
    CNPJValidator,
    ContractValidator,
    SchemaLoader,
    validate_cnpj,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CNPJValidator",
    # Functions
    "validate_cnpj",
]
