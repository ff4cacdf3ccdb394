"""
Исключения доменного уровня cnpjkit.
"""


class CNPJIndexError(IndexError):
    """
    Индекс цифры вне диапазона [-length, length).

    Возникает при попытке заменить цифру несуществующей позиции.
    """

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Digit index {index} out of range for CNPJ of length {length}")
