"""
Evaluable — протокол глубокого сравнения значений

Значение, реализующее Evaluable, сравнивается по содержимому (equals)
и сообщает согласованный хеш-код (hash_code): из a.equals(b) следует
a.hash_code() == b.hash_code().
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Evaluable(Protocol):
    """Значение с семантикой сравнения по содержимому."""

    def equals(self, other: Any) -> bool: ...

    def hash_code(self) -> int: ...


def is_equal(a: Any, b: Any) -> bool:
    """
    Сравнение двух значений с учётом Evaluable.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        True если значения идентичны или равны по содержимому
    """
    if a is b:
        return True
    if isinstance(a, Evaluable):
        return a.equals(b)
    return a == b
