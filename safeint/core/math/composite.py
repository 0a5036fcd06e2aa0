"""
Composite — Составные выражения с семантикой бесконечной точности

Модуль вычисляет выражения вида (a ± b) / c, (a ± b) % c, (a + b - c) / d,
(1 + a - b) / c так, как если бы они вычислялись в бесконечной точности с
единственным усечением к нулю и проверкой диапазона в конце — даже если
промежуточная сумма или разность не помещается в тип.

АЛГОРИТМ (add_div при переполнении суммы):
    Переполнение суммы возможно только при одинаковых знаках слагаемых.
    Точная сумма S лежит за экстремальным значением типа (extremal = максимум
    для положительных, минимум для отрицательных), поэтому раскладывается на
    две представимые части:

        excess = first - (extremal - second)          # S = extremal + excess
        quotient = extremal / c + excess / c + (extremal % c + excess % c) / c

    Это деление «в столбик»: слишком большое делимое делится по частям.
    Все частные и остатки одного знака, поэтому усечение по частям совпадает
    с усечением целого.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. DivisionByZero проверяется первым и имеет приоритет над переполнением
2. IntegerOverflow только если точный результат не помещается в тип
3. Модуль не выполняет непроверенной арифметики: только вызовы primitives
"""

import logging

from safeint.core.domain.int_types import IntType
from safeint.core.errors import DivisionByZero, IntegerOverflow
from safeint.core.math.extended import add_sub
from safeint.core.math.machine import is_min
from safeint.core.math.primitives import add, div, negate, rem, sub

logger = logging.getLogger(__name__)


# =============================================================================
# РАЗЛОЖЕНИЕ ПЕРЕПОЛНЕННОЙ СУММЫ
# =============================================================================


def _split_overflowed_sum(int_type: IntType, first: int, second: int) -> tuple[int, int]:
    """
    Разложение переполненной суммы first + second на extremal + excess.

    Слагаемые одного знака, поэтому extremal - second не переполняется, а
    excess лежит между нулём и extremal.
    """
    extremal = int_type.maximum if first > 0 else int_type.minimum
    excess = sub(int_type, first, sub(int_type, extremal, second))
    return extremal, excess


def _overflowed_sum_quotient(int_type: IntType, first: int, second: int, divisor: int) -> int:
    """Частное переполненной суммы first + second на divisor."""
    if first > 0 and is_min(int_type, divisor):
        # Модуль минимума на единицу больше максимума: переполненная
        # положительная сумма лежит в [|min|, 2 * max], частное всегда -1
        return -1

    extremal, excess = _split_overflowed_sum(int_type, first, second)

    # Для отрицательной суммы и divisor == -1 переполнение здесь истинное
    extremal_quotient = div(int_type, extremal, divisor)
    excess_quotient = div(int_type, excess, divisor)

    remainders = add(
        int_type,
        rem(int_type, extremal, divisor),
        rem(int_type, excess, divisor),
    )

    interim = add(int_type, extremal_quotient, excess_quotient)
    return add(int_type, interim, div(int_type, remainders, divisor))


def _overflowed_sum_remainder(int_type: IntType, first: int, second: int, divisor: int) -> int:
    """Остаток от деления переполненной суммы first + second на divisor."""
    extremal, excess = _split_overflowed_sum(int_type, first, second)

    if first > 0 and is_min(int_type, divisor):
        # S = max + excess, |min| = max + 1, частное -1
        return sub(int_type, excess, 1)

    remainders = add(
        int_type,
        rem(int_type, extremal, divisor),
        rem(int_type, excess, divisor),
    )

    return rem(int_type, remainders, divisor)


# =============================================================================
# (a + b) / c
# =============================================================================


def add_div(int_type: IntType, first: int, second: int, divisor: int) -> int:
    """
    Частное от деления суммы двух целых на делитель.

    Сначала пробуется прямой путь div(add(a, b), c); при переполнении суммы
    частное вычисляется разложением суммы на две представимые части.

    Args:
        int_type: Тип операндов и результата
        first: Первое слагаемое
        second: Второе слагаемое
        divisor: Делитель

    Returns:
        trunc((first + second) / divisor) в бесконечной точности

    Raises:
        DivisionByZero: Если divisor == 0
        IntegerOverflow: Если точное частное не помещается в тип

    Examples:
        >>> add_div(INT8, 100, 100, 3)
        66
        >>> add_div(INT8, -100, -100, -128)
        1
    """
    int_type.ensure_operands(first, second, divisor)

    if divisor == 0:
        raise DivisionByZero()

    try:
        total = add(int_type, first, second)
    except IntegerOverflow:
        logger.debug(
            "add_div(%s, %s, %s) sum overflowed %s, decomposing",
            first, second, divisor, int_type,
            extra={"operation": "add_div", "int_type": int_type.name},
        )
        return _overflowed_sum_quotient(int_type, first, second, divisor)

    return div(int_type, total, divisor)


def add_div_rem(int_type: IntType, first: int, second: int, divisor: int) -> int:
    """
    Остаток от деления суммы двух целых на делитель.

    Отдельная точка входа, а не производная от add_div: восстановление остатка
    через частное потребовало бы умножения и вычитания, которые снова могут
    переполниться.

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> add_div_rem(INT8, 100, 100, 3)
        2
    """
    int_type.ensure_operands(first, second, divisor)

    if divisor == 0:
        raise DivisionByZero()

    try:
        total = add(int_type, first, second)
    except IntegerOverflow:
        return _overflowed_sum_remainder(int_type, first, second, divisor)

    return rem(int_type, total, divisor)


# =============================================================================
# (a - b) / c
# =============================================================================


def _magnitude(int_type: IntType, divisor: int) -> int:
    """Модуль делителя, отличного от минимума."""
    return negate(int_type, divisor) if divisor < 0 else divisor


def sub_div(int_type: IntType, minuend: int, subtrahend: int, divisor: int) -> int:
    """
    Частное от деления разности двух целых на делитель.

    При переполнении разности:
    - беззнаковые: точная разность отрицательна, представимо только нулевое
      частное (|разность| < divisor)
    - знаковые: операнды разных знаков, разность переписывается как сумма
      minuend + (-subtrahend) и считается через add_div
    - subtrahend == минимум: -subtrahend не представимо, поэтому делимое
      сдвигается на |divisor| к нулю, а частное корректируется на sign(divisor)

    Raises:
        DivisionByZero: Если divisor == 0
        IntegerOverflow: Если точное частное не помещается в тип

    Examples:
        >>> sub_div(INT8, 100, -100, 2)
        100
        >>> sub_div(UINT8, 3, 10, 8)
        0
    """
    int_type.ensure_operands(minuend, subtrahend, divisor)

    if divisor == 0:
        raise DivisionByZero()

    try:
        diff = sub(int_type, minuend, subtrahend)
    except IntegerOverflow:
        pass
    else:
        return div(int_type, diff, divisor)

    logger.debug(
        "sub_div(%s, %s, %s) difference overflowed %s, decomposing",
        minuend, subtrahend, divisor, int_type,
        extra={"operation": "sub_div", "int_type": int_type.name},
    )

    if not int_type.signed:
        if div(int_type, sub(int_type, subtrahend, minuend), divisor) == 0:
            return 0
        raise IntegerOverflow()

    if not is_min(int_type, subtrahend):
        return add_div(int_type, minuend, negate(int_type, subtrahend), divisor)

    # subtrahend равен минимуму, minuend >= 0, разность в [|min|, 2 * max + 1]
    if is_min(int_type, divisor):
        return -1

    magnitude = _magnitude(int_type, divisor)
    shifted = sub_div(int_type, minuend, add(int_type, subtrahend, magnitude), divisor)
    return add(int_type, shifted, 1 if divisor > 0 else -1)


def sub_div_rem(int_type: IntType, minuend: int, subtrahend: int, divisor: int) -> int:
    """
    Остаток от деления разности двух целых на делитель.

    Raises:
        DivisionByZero: Если divisor == 0
        IntegerOverflow: Если остаток беззнаковой отрицательной разности не равен
            нулю (отрицательный остаток не представим)
    """
    int_type.ensure_operands(minuend, subtrahend, divisor)

    if divisor == 0:
        raise DivisionByZero()

    try:
        diff = sub(int_type, minuend, subtrahend)
    except IntegerOverflow:
        pass
    else:
        return rem(int_type, diff, divisor)

    if not int_type.signed:
        if rem(int_type, sub(int_type, subtrahend, minuend), divisor) == 0:
            return 0
        raise IntegerOverflow()

    if not is_min(int_type, subtrahend):
        return add_div_rem(int_type, minuend, negate(int_type, subtrahend), divisor)

    if is_min(int_type, divisor):
        # Разность minuend + |min|, частное -1, остаток minuend
        return minuend

    # Сдвиг положительного делимого на |divisor| не меняет остаток
    magnitude = _magnitude(int_type, divisor)
    return sub_div_rem(int_type, minuend, add(int_type, subtrahend, magnitude), divisor)


# =============================================================================
# (a + b - c) / d
# =============================================================================


def add_sub_div(
    int_type: IntType,
    first: int,
    second: int,
    subtrahend: int,
    divisor: int,
) -> int:
    """
    Частное от деления first + second - subtrahend на делитель.

    Порядок вычисления:
    1. Все прямые группировки add_sub (сложение и вычитание коммутируют
       перед делением); если точный результат помещается в тип, одна из них
       успешна
    2. Успешная пара операндов + третий операнд через add_div / sub_div
    3. Если все пары переполняются (a, b одного знака, c противоположного):
       (a + b) / d раскладывается на частное и остаток, остаток объединяется
       с -c через sub_div

    Raises:
        DivisionByZero: Если divisor == 0
        IntegerOverflow: Если точное частное не помещается в тип

    Examples:
        >>> add_sub_div(INT8, 127, 127, -128, 4)
        95
    """
    int_type.ensure_operands(first, second, subtrahend, divisor)

    if divisor == 0:
        raise DivisionByZero()

    try:
        combined = add_sub(int_type, first, second, subtrahend)
    except IntegerOverflow:
        pass
    else:
        return div(int_type, combined, divisor)

    logger.debug(
        "add_sub_div(%s, %s, %s, %s) direct orderings overflowed %s, decomposing",
        first, second, subtrahend, divisor, int_type,
        extra={"operation": "add_sub_div", "int_type": int_type.name},
    )

    try:
        total = add(int_type, first, second)
    except IntegerOverflow:
        pass
    else:
        return sub_div(int_type, total, subtrahend, divisor)

    for kept, other in ((first, second), (second, first)):
        try:
            partial = sub(int_type, kept, subtrahend)
        except IntegerOverflow:
            continue
        return add_div(int_type, partial, other, divisor)

    # S = a + b (переполнена), E = S - c; знаки остатка S и -c совпадают,
    # поэтому trunc(E / d) = trunc(S / d) + trunc((S % d - c) / d)
    quotient = add_div(int_type, first, second, divisor)
    remainder = add_div_rem(int_type, first, second, divisor)
    return add(int_type, quotient, sub_div(int_type, remainder, subtrahend, divisor))


def add_one_sub_div(int_type: IntType, minuend: int, subtrahend: int, divisor: int) -> int:
    """
    Частное от деления 1 + minuend - subtrahend на делитель.

    Типичное применение — число элементов интервала, делённое на шаг.

    Raises:
        DivisionByZero: Если divisor == 0
        IntegerOverflow: Если точное частное не помещается в тип

    Examples:
        >>> add_one_sub_div(INT8, 127, -128, 3)
        85
    """
    int_type.ensure_operands(minuend, subtrahend, divisor)

    return add_sub_div(int_type, 1, minuend, subtrahend, divisor)
