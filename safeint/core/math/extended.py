"""
Extended — Операции над несколькими операндами

Модуль строит операции над 3 и N операндами только из попарных primitives,
без более широкого аккумулятора:
- add3 / sub3 / mul3 / add_sub: перебор порядков вычисления
- add_m / sub_m / mul_m / div_m: переупорядочивание операндов перед
  вычислением, отказ на первом переполнении
- pow10 / pow: возведение в степень

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение сообщается только если точный результат не помещается в тип
   (порядок вычисления подбирается так, чтобы промежуточные значения не
   переполнялись раньше итога)
2. Входные последовательности не модифицируются
3. Вариативные операции без аргументов → MissingArguments
"""

import bisect
from typing import Callable, Final

from safeint.core.domain.int_types import UINT64, IntType
from safeint.core.errors import DivisionByZero, IntegerOverflow, MissingArguments
from safeint.core.math.machine import is_even, is_minus_one
from safeint.core.math.primitives import add, div, itoi, mul, negate, sub

# Степени десяти, представимые в uint64
POW10_TABLE: Final[tuple[int, ...]] = tuple(10**power for power in range(20))


def _first_success(attempts: tuple[Callable[[], int], ...]) -> int:
    """Первый порядок вычисления, завершившийся без переполнения."""
    for attempt in attempts:
        try:
            return attempt()
        except IntegerOverflow:
            continue

    raise IntegerOverflow()


# =============================================================================
# ТРИ ОПЕРАНДА
# =============================================================================


def add3(int_type: IntType, first: int, second: int, third: int) -> int:
    """
    Сложение трёх целых с проверкой переполнения.

    Перебираются все группировки: (a+b)+c, (a+c)+b, a+(b+c).

    Raises:
        IntegerOverflow: Если сумма не помещается в тип
    """
    int_type.ensure_operands(first, second, third)

    return _first_success((
        lambda: add(int_type, add(int_type, first, second), third),
        lambda: add(int_type, add(int_type, first, third), second),
        lambda: add(int_type, first, add(int_type, second, third)),
    ))


def sub3(int_type: IntType, minuend: int, subtrahend: int, deductible: int) -> int:
    """
    Вычитание двух целых из уменьшаемого: minuend - subtrahend - deductible.

    Raises:
        IntegerOverflow: Если разность не помещается в тип
    """
    int_type.ensure_operands(minuend, subtrahend, deductible)

    return _first_success((
        lambda: sub(int_type, sub(int_type, minuend, subtrahend), deductible),
        lambda: sub(int_type, sub(int_type, minuend, deductible), subtrahend),
        lambda: sub(int_type, minuend, add(int_type, subtrahend, deductible)),
    ))


def mul3(int_type: IntType, first: int, second: int, third: int) -> int:
    """
    Умножение трёх целых с проверкой переполнения.

    Raises:
        IntegerOverflow: Если произведение не помещается в тип
    """
    int_type.ensure_operands(first, second, third)

    return _first_success((
        lambda: mul(int_type, mul(int_type, first, second), third),
        lambda: mul(int_type, mul(int_type, first, third), second),
        lambda: mul(int_type, first, mul(int_type, second, third)),
    ))


def add_sub(int_type: IntType, first: int, second: int, subtrahend: int) -> int:
    """
    Вычисление first + second - subtrahend.

    Порядки вычисления: (a+b)-c, (a-c)+b, (b-c)+a, a-(c-b), b-(c-a).
    Последние два нужны беззнаковым типам, когда сумма переполняется, а
    вычитаемое больше каждого из слагаемых (uint8: 200 + 200 - 250).

    Raises:
        IntegerOverflow: Если результат не помещается в тип
    """
    int_type.ensure_operands(first, second, subtrahend)

    return _first_success((
        lambda: sub(int_type, add(int_type, first, second), subtrahend),
        lambda: add(int_type, sub(int_type, first, subtrahend), second),
        lambda: add(int_type, sub(int_type, second, subtrahend), first),
        lambda: sub(int_type, first, sub(int_type, subtrahend, second)),
        lambda: sub(int_type, second, sub(int_type, subtrahend, first)),
    ))


# =============================================================================
# N ОПЕРАНДОВ
# =============================================================================


def add_m(int_type: IntType, *addends: int) -> int:
    """
    Сложение произвольного числа целых.

    Операнды сортируются, затем многократно складываются текущие наименьший и
    наибольший, промежуточная сумма вставляется обратно с сохранением порядка.
    Сумма чисел разных знаков не переполняется, а при одинаковых знаках
    переполнение промежуточной суммы означает переполнение итога.

    Raises:
        MissingArguments: Если слагаемых нет
        IntegerOverflow: Если сумма не помещается в тип

    Examples:
        >>> add_m(INT8, 127, 1, -2)
        126
    """
    if not addends:
        raise MissingArguments()

    int_type.ensure_operands(*addends)

    pending = sorted(addends)

    while len(pending) > 1:
        interim = add(int_type, pending.pop(0), pending.pop())
        bisect.insort(pending, interim)

    return pending[0]


def sub_m(int_type: IntType, minuend: int, *subtrahends: int) -> int:
    """
    Вычитание произвольного числа целых из уменьшаемого.

    На каждом шаге вычитается то из оставшихся вычитаемых, которое даёт
    наибольший промежуточный результат без переполнения. Положительное и
    отрицательное вычитаемое не могут переполниться одновременно, поэтому шаг
    невозможен только когда все оставшиеся сдвигают результат в одну сторону.

    Raises:
        IntegerOverflow: Если разность не помещается в тип
    """
    int_type.ensure_operands(minuend, *subtrahends)

    pending = list(subtrahends)
    diff = minuend

    while pending:
        chosen: tuple[int, int] | None = None

        for index, subtrahend in enumerate(pending):
            try:
                interim = sub(int_type, diff, subtrahend)
            except IntegerOverflow:
                continue

            if chosen is None or interim > chosen[1]:
                chosen = (index, interim)

        if chosen is None:
            raise IntegerOverflow()

        index, diff = chosen
        del pending[index]

    return diff


def _factor_order(factor: int) -> tuple[int, int]:
    """
    Ключ сортировки множителей.

    Отрицательные идут первыми по возрастанию модуля, чтобы пары отрицательных
    давали положительные промежуточные произведения, затем неотрицательные по
    возрастанию.
    """
    if factor < 0:
        return (0, -factor)
    return (1, factor)


def mul_m(int_type: IntType, *factors: int) -> int:
    """
    Умножение произвольного числа целых.

    Raises:
        MissingArguments: Если множителей нет
        IntegerOverflow: Если произведение не помещается в тип
    """
    if not factors:
        raise MissingArguments()

    int_type.ensure_operands(*factors)

    if 0 in factors:
        return 0

    ordered = sorted(factors, key=_factor_order)

    product = ordered[0]
    for factor in ordered[1:]:
        product = mul(int_type, product, factor)

    return product


def div_m(int_type: IntType, dividend: int, *divisors: int) -> int:
    """
    Последовательное деление на произвольное число делителей.

    Деление на -1 — чистая смена знака, поэтому делители -1 подсчитываются,
    а не применяются: парные взаимно уничтожаются, непарный инвертирует итоговое
    частное (переполнение только если частное равно минимуму).

    Raises:
        DivisionByZero: Если любой из делителей равен нулю
        IntegerOverflow: Если результат не помещается в тип

    Examples:
        >>> div_m(INT8, -128, -1, -1, 2)
        -64
    """
    int_type.ensure_operands(dividend, *divisors)

    if 0 in divisors:
        raise DivisionByZero()

    quotient = dividend
    minus_ones = 0

    for divisor in divisors:
        if is_minus_one(divisor):
            minus_ones += 1
            continue

        quotient = div(int_type, quotient, divisor)

    if is_even(minus_ones):
        return quotient

    return negate(int_type, quotient)


# =============================================================================
# СТЕПЕНИ
# =============================================================================


def pow10(int_type: IntType, power: int) -> int:
    """
    10 в степени power.

    Отрицательная степень даёт дробь, усечённую к нулю.

    Raises:
        IntegerOverflow: Если результат не помещается в тип
    """
    if power < 0:
        return 0

    if power >= len(POW10_TABLE):
        raise IntegerOverflow()

    return itoi(int_type, UINT64, POW10_TABLE[power])


def pow(int_type: IntType, base: int, exponent: int) -> int:
    """
    base в степени exponent с проверкой переполнения на каждом умножении.

    Отрицательная степень даёт дробь, усечённую к нулю, кроме оснований 1 и -1.
    Для |base| >= 2 переполнение наступает не позже чем через bits умножений.

    Raises:
        DivisionByZero: Если base == 0 и exponent < 0
        IntegerOverflow: Если результат не помещается в тип

    Examples:
        >>> pow(INT8, -2, 7)
        -128
        >>> pow(INT8, -1, -3)
        -1
    """
    int_type.ensure_operands(base)

    if exponent == 0 or base == 1:
        return 1

    if base == 0:
        if exponent < 0:
            raise DivisionByZero()
        return 0

    if is_minus_one(base):
        return 1 if is_even(exponent) else -1

    if exponent < 0:
        return 0

    powered = base
    for _ in range(1, exponent):
        powered = mul(int_type, powered, base)

    return powered
