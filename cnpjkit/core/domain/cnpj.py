"""
CNPJ — Immutable value type для номера CNPJ

Номер хранится как кортеж из 0..14 цифр. Экземпляр никогда не изменяется:
with_digit возвращает новый экземпляр (или тот же, если цифра не меняется).

Хеш-код вычисляется один раз при создании и зависит только от цифр и
seed типа, поэтому равные экземпляры всегда имеют равный хеш.

Пустой CNPJ всегда представлен единственным экземпляром CNPJ.Nil.
"""

import itertools
import random
import re
import unicodedata
import warnings
from typing import Any, ClassVar, Final, Iterable, Iterator, Sequence

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from cnpjkit.core.contracts.validators import validate_cnpj
from cnpjkit.core.domain.exceptions import CNPJIndexError
from cnpjkit.core.domain.validity import ValidityState
from cnpjkit.core.math.check_digits import (
    BASE_LENGTH,
    CNPJ_LENGTH,
    append_check_digits,
)
from cnpjkit.core.math.check_digits import get_check_digit as _get_check_digit
from cnpjkit.core.math.digits import RADIX, is_valid_float, normalize_index, to_digit
from cnpjkit.core.math.hashing import get_seed, hash_sequence
from cnpjkit.core.observability.logging import get_logger_for_component

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Seed хеширования для всех экземпляров CNPJ
SEED: Final[int] = get_seed("CNPJ")

# Компонент для структурных логов
LOG_COMPONENT: Final[str] = "domain"

# Группы форматирования: (разделитель, начало, конец, минимальная длина)
# Разделитель и группа добавляются, только если цифр не меньше минимальной длины.
FORMAT_GROUPS: Final[tuple[tuple[str, int, int, int], ...]] = (
    (".", 2, 5, 2),
    (".", 5, 8, 5),
    ("/", 8, 12, 8),
    ("-", 12, 14, 13),
)

# Всё, что не является ASCII-цифрой
_NON_DIGITS = re.compile(r"[^0-9]")

_NIL: "CNPJ | None" = None


def _coerce_digits(values: Iterable[float]) -> tuple[int, ...]:
    """Первые 14 конечных значений, приведённые к цифрам."""

    def finite(items: Iterable[float]) -> Iterator[float]:
        for item in items:
            if is_valid_float(item):
                yield item
            else:
                get_logger_for_component(LOG_COMPONENT).debug(
                    "cnpj_non_finite_value_skipped", value=repr(item)
                )

    return tuple(to_digit(value) for value in itertools.islice(finite(values), CNPJ_LENGTH))


# =============================================================================
# CNPJ VALUE TYPE
# =============================================================================


class CNPJ:
    """
    Неизменяемый номер CNPJ.

    Создание:
    - CNPJ(digits): из последовательности чисел (дробная часть отбрасывается,
      берётся разряд единиц, NaN/Inf пропускаются, не более 14 значений)
    - CNPJ.from_string(text): из произвольной строки (всё, кроме цифр, игнорируется)
    - CNPJ.from_json(value): из канонической сериализованной формы
    - CNPJ.create(): случайный валидный CNPJ
    - cnpj.with_digit(index, digit): копия с заменённой цифрой

    Некорректный или неполный ввод не вызывает ошибок: состояние описывается
    флагами get_validity().
    """

    __slots__ = ("_digits", "_hash")

    Nil: ClassVar["CNPJ"]

    _digits: tuple[int, ...]
    _hash: int

    def __new__(cls, digits: Iterable[float] = ()) -> "CNPJ":
        numbers = _coerce_digits(digits)
        if not numbers and _NIL is not None:
            return _NIL
        return cls._from_digits(numbers)

    @classmethod
    def _from_digits(cls, digits: tuple[int, ...]) -> "CNPJ":
        """Создание экземпляра из уже нормализованных цифр."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "_digits", digits)
        object.__setattr__(instance, "_hash", hash_sequence(digits, SEED))
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._digits,))

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> "CNPJ":
        """
        Создание CNPJ из строки, форматированной или нет.

        Строка нормализуется (NFD), затем из неё удаляется всё, кроме ASCII-цифр.
        Если цифр меньше 14, возвращается неполный CNPJ; если цифр нет — CNPJ.Nil.

        Args:
            text: Произвольная строка (например, '11.444.777/0001-61')

        Returns:
            Экземпляр CNPJ
        """
        stripped = _NON_DIGITS.sub("", unicodedata.normalize("NFD", text))
        if not stripped:
            return cls.Nil
        return cls(int(char) for char in stripped[:CNPJ_LENGTH])

    @classmethod
    def from_json(cls, value: str) -> "CNPJ":
        """
        Создание CNPJ из канонической формы (результат to_json).

        Args:
            value: Строка из 0..14 цифр без разделителей

        Returns:
            Экземпляр CNPJ

        Raises:
            jsonschema.ValidationError: Если значение не соответствует контракту
        """
        validate_cnpj(value)
        return cls.from_string(value)

    @classmethod
    def create(cls, rng: random.Random | None = None) -> "CNPJ":
        """
        Создание случайного валидного CNPJ.

        12 случайных цифр дополняются двумя контрольными цифрами. Наборы из
        одинаковых цифр отбрасываются, поэтому результат всегда проходит
        check_validity().

        Args:
            rng: Генератор случайных чисел (default: модуль random)

        Returns:
            Валидный экземпляр CNPJ
        """
        source = rng if rng is not None else random
        while True:
            base = [source.randint(0, RADIX - 1) for _ in range(BASE_LENGTH)]
            instance = cls(append_check_digits(base))
            if instance.check_validity():
                get_logger_for_component(LOG_COMPONENT).debug(
                    "cnpj_created", cnpj=instance.to_json()
                )
                return instance

    @staticmethod
    def get_check_digit(
        digits: Sequence[int],
        start: int = 0,
        end: int | None = None,
    ) -> int:
        """Контрольная цифра по диапазону [start, end) (см. cnpjkit.core.math)."""
        return _get_check_digit(digits, start, end)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, other: Any) -> bool:
        """
        Сравнение по содержимому.

        Args:
            other: Любое значение

        Returns:
            True если other — CNPJ с теми же цифрами в том же порядке
        """
        return self is other or (
            isinstance(other, CNPJ)
            and self._hash == other._hash
            and self._digits == other._digits
        )

    def hash_code(self) -> int:
        """Хеш-код, согласованный с equals."""
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNPJ):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self._hash

    # -------------------------------------------------------------------------
    # Доступ к цифрам
    # -------------------------------------------------------------------------

    def at(self, index: int) -> int | None:
        """
        Цифра в позиции index (отрицательный индекс отсчитывается с конца).

        Returns:
            Цифра или None, если индекс вне диапазона
        """
        position = normalize_index(index, len(self._digits))
        if position is None:
            return None
        return self._digits[position]

    def with_digit(self, index: int, digit: float) -> "CNPJ":
        """
        Копия CNPJ с заменённой цифрой.

        Длина не меняется. Если цифра совпадает с текущей, возвращается
        тот же экземпляр.

        Args:
            index: Позиция (отрицательный индекс отсчитывается с конца)
            digit: Новое значение (приводится как в конструкторе)

        Returns:
            Экземпляр CNPJ

        Raises:
            CNPJIndexError: Если индекс вне диапазона
            ValueError: Если digit равен NaN или Inf
        """
        position = normalize_index(index, len(self._digits))
        if position is None:
            raise CNPJIndexError(index, len(self._digits))

        value = to_digit(digit)
        if self._digits[position] == value:
            return self

        digits = self._digits[:position] + (value,) + self._digits[position + 1 :]
        return self._from_digits(digits)

    def __getitem__(self, index: Any) -> Any:
        return self._digits[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    @property
    def length(self) -> int:
        """Количество цифр."""
        return len(self._digits)

    @property
    def size(self) -> int:
        """Количество цифр. Устарело: используйте length."""
        warnings.warn(
            "CNPJ.size is deprecated, use CNPJ.length instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return len(self._digits)

    # -------------------------------------------------------------------------
    # Валидность
    # -------------------------------------------------------------------------

    def get_validity(self) -> ValidityState:
        """
        Состояние валидности CNPJ.

        - value_missing: цифр нет
        - too_short: от 1 до 13 цифр
        - type_mismatch: 14 цифр, но все цифры одинаковые или
          контрольные цифры не совпадают

        Returns:
            ValidityState
        """
        digits = self._digits
        count = len(digits)

        type_mismatch = count == CNPJ_LENGTH and (
            len(set(digits)) == 1
            or _get_check_digit(digits, 0, BASE_LENGTH) != digits[BASE_LENGTH]
            or _get_check_digit(digits, 0, BASE_LENGTH + 1) != digits[BASE_LENGTH + 1]
        )

        return ValidityState(
            value_missing=count == 0,
            too_short=0 < count < CNPJ_LENGTH,
            type_mismatch=type_mismatch,
        )

    def check_validity(self) -> bool:
        """
        Проверка валидности: 14 цифр, не все одинаковые, обе контрольные
        цифры совпадают.

        Returns:
            True если CNPJ валиден
        """
        return self.get_validity().valid

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """
        Форматирование по шаблону '##.###.###/####-##'.

        Неполный CNPJ даёт префикс шаблона (например, '11.444.' для 5 цифр).
        """
        text = "".join(map(str, self._digits))
        output = text[:2]
        for separator, start, end, required in FORMAT_GROUPS:
            if len(text) < required:
                break
            output += separator + text[start:end]
        return output

    def to_json(self) -> str:
        """Каноническая форма: все цифры без разделителей."""
        return "".join(map(str, self._digits))

    def to_array(self) -> list[int]:
        """Новый список с цифрами CNPJ."""
        return list(self._digits)

    def __str__(self) -> str:
        return f"[{type(self).__name__}: {self.format()}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_string({self.to_json()!r})"

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.from_string),
            ]
        )
        from_numbers = core_schema.chain_schema(
            [
                core_schema.list_schema(
                    core_schema.union_schema(
                        [
                            core_schema.int_schema(),
                            core_schema.float_schema(allow_inf_nan=True),
                        ]
                    )
                ),
                core_schema.no_info_plain_validator_function(cls),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str, from_numbers]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_json(),
                return_schema=core_schema.str_schema(),
                when_used="json",
            ),
        )


_NIL = CNPJ._from_digits(())
CNPJ.Nil = _NIL
