"""
JSON Schema Contract Validators

Модуль для валидации сериализованных данных согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema.

Схемы (cnpjkit/core/contracts/schema/):
- cnpj.json — каноническая форма CNPJ (строка из 0..14 цифр)
"""

import json
import re
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы находятся в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Any] = {}

    def load_schema(self, schema_name: str) -> Any:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'cnpj')

        Returns:
            Загруженная схема

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл содержит невалидную JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()

# Каноническая форма CNPJ: строка целиком из 0..14 ASCII-цифр
_CANONICAL = re.compile(r"[0-9]{0,14}")


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (default: глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class CNPJValidator(ContractValidator):
    """
    Валидатор канонической формы CNPJ (schema/cnpj.json).

    pattern в JSON Schema проверяется через re.search, где $ допускает
    завершающий перевод строки, поэтому строка дополнительно сверяется
    целиком.
    """

    def __init__(self):
        super().__init__("cnpj")

    def validate(self, data: Any) -> None:
        super().validate(data)
        if not _CANONICAL.fullmatch(data):
            raise ValidationError(f"{data!r} is not a canonical CNPJ string")


_CNPJ_VALIDATOR = CNPJValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_cnpj(data: Any) -> None:
    """
    Валидация канонической формы CNPJ.

    Args:
        data: Данные для валидации (ожидается строка из 0..14 цифр)

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _CNPJ_VALIDATOR.validate(data)
