"""
ValidityState — Модель состояния валидности CNPJ

Immutable Pydantic модель с тремя независимыми флагами:
- value_missing: цифр нет
- too_short: от 1 до 13 цифр
- type_mismatch: 14 цифр, но все одинаковые или контрольные цифры не совпадают

Сериализуется с camelCase алиасами (valueMissing, tooShort, typeMismatch).
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ValidityState(BaseModel):
    """
    Состояние валидности CNPJ.

    На практике флаги взаимоисключающие (разные условия по длине).
    """

    value_missing: bool = Field(..., description="Нет ни одной цифры")
    too_short: bool = Field(..., description="Количество цифр в [1, 13]")
    type_mismatch: bool = Field(
        ..., description="14 цифр, но алгоритм контрольных цифр не проходит"
    )

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @property
    def valid(self) -> bool:
        """True если ни один флаг не установлен."""
        return not (self.value_missing or self.too_short or self.type_mismatch)

    def reasons(self) -> list[str]:
        """
        Имена установленных флагов (camelCase).

        Returns:
            Список алиасов флагов, пустой для валидного CNPJ
        """
        flags = self.model_dump(by_alias=True)
        return [name for name, is_set in flags.items() if is_set]
