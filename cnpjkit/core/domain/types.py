"""
Pydantic типы на основе CNPJ.

ValidCNPJ принимает только CNPJ, проходящие check_validity():

    class Company(BaseModel):
        cnpj: ValidCNPJ
"""

from typing import Annotated

from pydantic import AfterValidator

from cnpjkit.core.domain.cnpj import CNPJ


def require_valid(value: CNPJ) -> CNPJ:
    """
    Проверка, что CNPJ полностью валиден.

    Raises:
        ValueError: Если установлен хотя бы один флаг валидности
    """
    validity = value.get_validity()
    if not validity.valid:
        raise ValueError(
            f"CNPJ '{value.format()}' is not valid ({', '.join(validity.reasons())})"
        )
    return value


ValidCNPJ = Annotated[CNPJ, AfterValidator(require_valid)]
