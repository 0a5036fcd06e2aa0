"""
Тесты для Machine — эмуляция машинной арифметики

Проверяет:
1. Wrapping инструкции
2. Усечение частного и знак остатка
3. Сдвиги
4. Предикаты экстремальных значений через wraparound
"""

import pytest

from safeint.core.domain.int_types import INT8, INT64, INT_TYPES, UINT8, UINT64, IntType
from safeint.core.math.machine import (
    add_wrapping,
    is_even,
    is_max,
    is_min,
    is_minus_one,
    mul_wrapping,
    neg_wrapping,
    quo,
    rem,
    shl,
    shr,
    sub_wrapping,
)
from tests.reference import bounds, trunc_div, trunc_rem


class TestWrappingInstructions:
    """Тесты для wrapping инструкций"""

    def test_add_wraps(self) -> None:
        assert add_wrapping(INT8, 127, 1) == -128
        assert add_wrapping(UINT8, 255, 1) == 0

    def test_sub_wraps(self) -> None:
        assert sub_wrapping(INT8, -128, 1) == 127
        assert sub_wrapping(UINT8, 0, 1) == 255

    def test_mul_wraps(self) -> None:
        assert mul_wrapping(INT8, 16, 16) == 0
        assert mul_wrapping(INT8, -128, -1) == -128

    def test_neg_of_minimum_is_minimum(self) -> None:
        """Смена знака минимума переполняется обратно в минимум"""
        assert neg_wrapping(INT8, -128) == -128
        assert neg_wrapping(INT64, -(2**63)) == -(2**63)


class TestTruncatingDivision:
    """Тесты для quo и rem"""

    @pytest.mark.parametrize(
        "dividend, divisor",
        [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (-128, 3), (127, -128)],
    )
    def test_matches_reference(self, dividend: int, divisor: int) -> None:
        """Частное усекается к нулю, остаток имеет знак делимого"""
        assert quo(INT8, dividend, divisor) == trunc_div(dividend, divisor)
        assert rem(INT8, dividend, divisor) == trunc_rem(dividend, divisor)

    def test_minimum_by_minus_one(self) -> None:
        """Частное переполняется в минимум, остаток равен нулю"""
        assert quo(INT8, -128, -1) == -128
        assert rem(INT8, -128, -1) == 0


class TestShifts:
    """Тесты для shl и shr"""

    def test_shl_drops_high_bits(self) -> None:
        assert shl(INT8, 1, 7) == -128
        assert shl(UINT8, 3, 7) == 128
        assert shl(UINT8, 1, 8) == 0
        assert shl(INT64, 1, 100) == 0

    def test_shr_arithmetic_for_signed(self) -> None:
        assert shr(INT8, -128, 1) == -64
        assert shr(INT8, -1, 20) == -1
        assert shr(UINT8, 128, 7) == 1


class TestExtremalPredicates:
    """Тесты для is_min, is_max, is_minus_one, is_even"""

    @pytest.mark.parametrize("int_type", INT_TYPES, ids=str)
    def test_min_and_max(self, int_type: IntType) -> None:
        """Экстремумы определяются через переход границы"""
        minimum, maximum = bounds(int_type)
        assert is_min(int_type, minimum)
        assert not is_min(int_type, minimum + 1)
        assert is_max(int_type, maximum)
        assert not is_max(int_type, maximum - 1)

    def test_exhaustive_int8(self) -> None:
        """Единственный минимум и единственный максимум на всём домене"""
        for int_type in (INT8, UINT8):
            minimum, maximum = bounds(int_type)
            values = range(minimum, maximum + 1)
            assert [v for v in values if is_min(int_type, v)] == [minimum]
            assert [v for v in values if is_max(int_type, v)] == [maximum]

    def test_minus_one(self) -> None:
        assert is_minus_one(-1)
        assert not is_minus_one(1)
        assert not is_minus_one(-2)
        assert not is_minus_one(UINT64.wrap(-1))

    def test_even(self) -> None:
        assert is_even(0)
        assert is_even(-128)
        assert not is_even(-1)
