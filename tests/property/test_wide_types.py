"""
Property тесты для 16/32/64-битных типов

Полный перебор возможен только для 8-битных типов, поэтому для широких типов
операнды генерируются hypothesis с уклоном к экстремальным значениям.
"""

import pytest
from hypothesis import assume, example, given, settings
from hypothesis import strategies as st

from safeint import (
    FLOAT32,
    FLOAT64,
    INT16,
    INT32,
    INT64,
    INT_TYPES,
    UINT16,
    UINT32,
    UINT64,
    IntType,
    add,
    add_div,
    add_div_rem,
    add_m,
    add_one_sub_div,
    add_sub,
    add_sub_div,
    distance,
    div,
    ftoi,
    mul,
    mul_m,
    sub,
    sub_div,
    sub_div_rem,
    sub_m,
)
from tests.reference import bounds, expected, outcome, trunc_div, trunc_rem

WIDE_TYPES = (INT16, INT32, INT64, UINT16, UINT32, UINT64)


@st.composite
def operands(draw, int_type: IntType, count: int) -> list[int]:
    minimum, maximum = bounds(int_type)
    edges = sorted({minimum, minimum + 1, -1 if int_type.signed else 1, 0, 1, maximum - 1, maximum})
    value = st.one_of(
        st.integers(min_value=minimum, max_value=maximum),
        st.sampled_from(edges),
    )
    return draw(st.lists(value, min_size=count, max_size=count))


def _typed(count: int):
    return st.sampled_from(WIDE_TYPES).flatmap(
        lambda int_type: st.tuples(st.just(int_type), operands(int_type, count))
    )


@pytest.mark.fuzzing
@settings(max_examples=500)
@given(case=_typed(2))
def test_binary_primitives(case: tuple[IntType, list[int]]) -> None:
    int_type, (a, b) = case
    assert outcome(add, int_type, a, b) == expected(int_type, a + b)
    assert outcome(sub, int_type, a, b) == expected(int_type, a - b)
    assert outcome(mul, int_type, a, b) == expected(int_type, a * b)
    assert distance(int_type, a, b) == abs(a - b)
    if b != 0:
        assert outcome(div, int_type, a, b) == expected(int_type, trunc_div(a, b))


@pytest.mark.fuzzing
@settings(max_examples=500)
@given(case=_typed(3))
@example(case=(INT64, [2**63 - 1, 2**63 - 1, 3]))
@example(case=(INT64, [-(2**63), -(2**63), -(2**63)]))
@example(case=(UINT64, [2**64 - 1, 2**64 - 1, 2**64 - 1]))
def test_sum_and_difference_division(case: tuple[IntType, list[int]]) -> None:
    int_type, (a, b, d) = case
    assume(d != 0)
    assert outcome(add_div, int_type, a, b, d) == expected(int_type, trunc_div(a + b, d))
    assert add_div_rem(int_type, a, b, d) == trunc_rem(a + b, d)
    assert outcome(sub_div, int_type, a, b, d) == expected(int_type, trunc_div(a - b, d))
    assert outcome(sub_div_rem, int_type, a, b, d) == expected(int_type, trunc_rem(a - b, d))
    assert outcome(add_one_sub_div, int_type, a, b, d) == expected(
        int_type, trunc_div(1 + a - b, d)
    )


@pytest.mark.fuzzing
@settings(max_examples=500)
@given(case=_typed(4))
@example(case=(INT32, [2**31 - 1, 2**31 - 1, -(2**31), 4]))
def test_add_sub_div(case: tuple[IntType, list[int]]) -> None:
    int_type, (a, b, c, d) = case
    assume(d != 0)
    assert outcome(add_sub, int_type, a, b, c) == expected(int_type, a + b - c)
    assert outcome(add_sub_div, int_type, a, b, c, d) == expected(
        int_type, trunc_div(a + b - c, d)
    )


@pytest.mark.fuzzing
@settings(max_examples=300)
@given(case=_typed(5))
def test_variadic(case: tuple[IntType, list[int]]) -> None:
    int_type, values = case
    first, *rest = values
    product = 1
    for value in values:
        product *= value
    assert outcome(add_m, int_type, *values) == expected(int_type, sum(values))
    assert outcome(sub_m, int_type, first, *rest) == expected(int_type, first - sum(rest))
    assert outcome(mul_m, int_type, *values) == expected(int_type, product)


@pytest.mark.fuzzing
@settings(max_examples=300)
@given(number=st.floats(min_value=-(2.0**64), max_value=2.0**64, allow_nan=False))
@pytest.mark.parametrize("int_type", [INT32, INT64, UINT32, UINT64], ids=str)
def test_ftoi_matches_truncation(int_type: IntType, number: float) -> None:
    """Конверсия float64 совпадает с усечением к нулю и проверкой диапазона"""
    assert outcome(ftoi, int_type, FLOAT64, number) == expected(int_type, int(number))


@pytest.mark.fuzzing
@settings(max_examples=300)
@given(number=st.floats(width=32, allow_nan=False, allow_infinity=False))
@example(number=2147483520.0)
@example(number=-(2.0**63))
@example(number=2.0**64)
@pytest.mark.parametrize("int_type", INT_TYPES, ids=str)
def test_ftoi_float32_matches_truncation(int_type: IntType, number: float) -> None:
    """Конверсия float32 во все целые типы совпадает с усечением и проверкой диапазона"""
    assert outcome(ftoi, int_type, FLOAT32, number) == expected(int_type, int(number))
