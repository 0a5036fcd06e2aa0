"""
Reference — эталонная арифметика бесконечной точности для тестов

Границы типов вычисляются независимо от библиотеки (степени двойки), деление
усекается к нулю. Ожидаемый исход операции — точное значение, если оно
помещается в тип, иначе None (ожидается IntegerOverflow).
"""

from safeint import IntegerOverflow, IntType


def bounds(int_type: IntType) -> tuple[int, int]:
    if int_type.signed:
        return -(2 ** (int_type.bits - 1)), 2 ** (int_type.bits - 1) - 1
    return 0, 2**int_type.bits - 1


def trunc_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def trunc_rem(dividend: int, divisor: int) -> int:
    return dividend - divisor * trunc_div(dividend, divisor)


def expected(int_type: IntType, exact: int) -> int | None:
    minimum, maximum = bounds(int_type)
    if minimum <= exact <= maximum:
        return exact
    return None


def outcome(operation, *args) -> int | None:
    """Результат операции или None при IntegerOverflow."""
    try:
        return operation(*args)
    except IntegerOverflow:
        return None


def boundary_values(int_type: IntType, stride: int) -> list[int]:
    """Значения типа с шагом stride плюс окрестности экстремумов и нуля."""
    minimum, maximum = bounds(int_type)
    values = set(range(minimum, maximum + 1, stride))
    for edge in (minimum, 0, maximum):
        values.update(v for v in range(edge - 2, edge + 3) if minimum <= v <= maximum)
    if int_type.signed:
        values.update((-1, minimum // 2, maximum // 2))
    return sorted(values)
