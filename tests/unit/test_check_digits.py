"""
Тесты для core math модулей: check_digits, digits, hashing

Проверяет:
1. Таблицу весов и выравнивание по правой границе диапазона
2. Контрольные цифры на известных номерах
3. Валидацию диапазонов
4. Приведение чисел к цифрам и нормализацию индексов
5. Детерминизм хеширования
"""

import math
import zlib

import pytest

from cnpjkit.core.math import (
    BASE_LENGTH,
    CNPJ_LENGTH,
    WEIGHTS,
    append_check_digits,
    get_check_digit,
    get_seed,
    hash_sequence,
    is_valid_float,
    normalize_index,
    to_digit,
)

# =============================================================================
# CHECK DIGITS
# =============================================================================


class TestGetCheckDigit:
    """Тесты для get_check_digit"""

    def test_weight_table(self) -> None:
        """Таблица весов из 13 элементов, последний вес — 2"""
        assert WEIGHTS == (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
        assert len(WEIGHTS) == BASE_LENGTH + 1
        assert CNPJ_LENGTH == 14

    def test_first_check_digit(self) -> None:
        """Первая контрольная цифра по [0, 12)"""
        assert get_check_digit([1, 1, 4, 4, 4, 7, 7, 7, 0, 0, 0, 1]) == 6

    def test_second_check_digit(self) -> None:
        """Вторая контрольная цифра по [0, 13)"""
        assert get_check_digit([1, 1, 4, 4, 4, 7, 7, 7, 0, 0, 0, 1, 6]) == 1

    def test_range_inside_longer_sequence(self) -> None:
        """end ограничивает диапазон внутри более длинной последовательности"""
        digits = [1, 1, 4, 4, 4, 7, 7, 7, 0, 0, 0, 1, 6, 1]
        assert get_check_digit(digits, 0, 12) == 6
        assert get_check_digit(digits, 0, 13) == 1

    def test_last_position_uses_weight_two(self) -> None:
        """Цифре в позиции end-1 соответствует вес 2"""
        # 1 * 2 = 2 -> rem 2 -> 11 - 2 = 9
        assert get_check_digit([0, 0, 1]) == 9
        assert get_check_digit([1]) == 9

    def test_small_remainder_maps_to_zero(self) -> None:
        """rem < 2 даёт контрольную цифру 0"""
        # rem 0
        assert get_check_digit([0] * 12) == 0
        # 6 * 2 = 12 -> rem 1
        assert get_check_digit([6]) == 0

    def test_start_skips_leading_positions(self) -> None:
        """start исключает начальные позиции из суммы"""
        digits = [9, 0, 1]
        assert get_check_digit(digits, 1, 3) == get_check_digit([0, 0, 1])

    def test_empty_range(self) -> None:
        """Пустой диапазон даёт 0"""
        assert get_check_digit([]) == 0
        assert get_check_digit([1, 2, 3], 2, 2) == 0

    @pytest.mark.parametrize(
        ("digits", "start", "end"),
        [
            ([0] * 14, 0, 14),
            ([0] * 5, 0, 6),
            ([0] * 5, 3, 2),
            ([0] * 5, -1, 5),
        ],
    )
    def test_invalid_range(self, digits: list[int], start: int, end: int) -> None:
        """Диапазон без весов или вне последовательности вызывает ValueError"""
        with pytest.raises(ValueError):
            get_check_digit(digits, start, end)


class TestAppendCheckDigits:
    """Тесты для append_check_digits"""

    def test_appends_both_digits(self) -> None:
        """Базовый номер дополняется двумя контрольными цифрами"""
        base = [1, 1, 4, 4, 4, 7, 7, 7, 0, 0, 0, 1]
        assert append_check_digits(base) == base + [6, 1]

    def test_input_not_mutated(self) -> None:
        """Исходный список не изменяется"""
        base = [1, 1, 4, 4, 4, 7, 7, 7, 0, 0, 0, 1]
        append_check_digits(base)
        assert len(base) == BASE_LENGTH

    @pytest.mark.parametrize("length", [0, 11, 13, 14])
    def test_wrong_base_length(self, length: int) -> None:
        """Базовый номер не из 12 цифр вызывает ValueError"""
        with pytest.raises(ValueError):
            append_check_digits([1] * length)


# =============================================================================
# DIGITS
# =============================================================================


class TestToDigit:
    """Тесты для to_digit"""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, 0),
            (9, 9),
            (1.9, 1),
            (6.9, 6),
            (11, 1),
            (94, 4),
            (100, 0),
            (11.9, 1),
            (-1, 1),
            (-11.5, 1),
            (-0.5, 0),
            (1e20, 0),
            (True, 1),
            (12345678901234567, 7),
        ],
    )
    def test_coercion(self, value: float, expected: int) -> None:
        """Отбрасывание дробной части и разряд единиц"""
        assert to_digit(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(10**400 + 7, 7), (-(10**400) - 3, 3), (2**1100, 6)],
    )
    def test_integers_beyond_float_range(self, value: int, expected: int) -> None:
        """Целые вне диапазона float приводятся без OverflowError"""
        assert to_digit(value) == expected

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, value: float) -> None:
        """NaN/Inf вызывают ValueError"""
        with pytest.raises(ValueError):
            to_digit(value)

    def test_is_valid_float(self) -> None:
        """Конечные значения валидны, NaN/Inf — нет"""
        assert is_valid_float(1.5)
        assert is_valid_float(0)
        assert is_valid_float(10**400)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(-math.inf)


class TestNormalizeIndex:
    """Тесты для normalize_index"""

    @pytest.mark.parametrize(
        ("index", "length", "expected"),
        [
            (0, 14, 0),
            (13, 14, 13),
            (-1, 14, 13),
            (-14, 14, 0),
            (14, 14, None),
            (-15, 14, None),
            (0, 0, None),
            (-1, 0, None),
        ],
    )
    def test_normalize(self, index: int, length: int, expected: int | None) -> None:
        """Отрицательные индексы отсчитываются с конца, вне диапазона — None"""
        assert normalize_index(index, length) == expected


# =============================================================================
# HASHING
# =============================================================================


class TestHashing:
    """Тесты для get_seed / hash_sequence"""

    def test_seed_is_stable(self) -> None:
        """Seed детерминирован и не зависит от процесса"""
        assert get_seed("CNPJ") == zlib.crc32(b"CNPJ")
        assert get_seed("CNPJ") == get_seed("CNPJ")
        assert get_seed("CNPJ") != get_seed("CPF")

    def test_equal_sequences_equal_hash(self) -> None:
        """Равные последовательности дают равный хеш"""
        seed = get_seed("CNPJ")
        assert hash_sequence([1, 1, 4], seed) == hash_sequence((1, 1, 4), seed)
        assert hash_sequence(iter([1, 1, 4]), seed) == hash_sequence([1, 1, 4], seed)

    def test_seed_changes_hash(self) -> None:
        """Хеш зависит от seed"""
        assert hash_sequence([1, 1, 4], 1) != hash_sequence([1, 1, 4], 2)

    def test_order_matters(self) -> None:
        """Хеш зависит от порядка элементов"""
        seed = get_seed("CNPJ")
        assert hash_sequence([1, 4], seed) != hash_sequence([4, 1], seed)
