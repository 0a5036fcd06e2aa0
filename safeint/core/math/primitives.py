"""
Primitives — Базовые операции с проверкой переполнения

Модуль предоставляет операции над операндами одного IntType, которые либо
возвращают точный результат, либо выбрасывают исключение:
- Сложение, вычитание, умножение, деление, остаток, смена знака, сдвиг
- Конверсии целое ↔ целое, целое → float, float → целое
- Модуль и расстояние в беззнаковом типе той же разрядности

Все проверки выполняются над результатом машинной инструкции (wraparound),
а не сравнением неограниченного результата с диапазоном.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Успешный результат всегда равен точному математическому результату
2. DivisionByZero проверяется до любых других проверок деления
3. Все операции детерминированы и не имеют состояния
"""

import math

from safeint.config import FTOI_TOLERANCE_MAX, FTOI_TOLERANCE_MIN, get_settings
from safeint.core.domain.int_types import FloatType, IntType
from safeint.core.errors import (
    DivisionByZero,
    IntegerOverflow,
    NegativeShift,
    NotANumber,
    PrecisionLoss,
)
from safeint.core.math.machine import (
    add_wrapping,
    is_min,
    is_minus_one,
    mul_wrapping,
    neg_wrapping,
    quo,
    shl,
    shr,
    sub_wrapping,
)
from safeint.core.math.machine import rem as truncated_rem

# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add(int_type: IntType, first: int, second: int) -> int:
    """
    Сложение двух целых с проверкой переполнения.

    При сложении возможно не более одного переполнения, поэтому достаточно
    сравнить сумму с одним из слагаемых:
    - беззнаковые: переполнение iff sum < first
    - знаковые: только при одинаковых знаках слагаемых; для положительных
      сумма оказывается меньше first, для отрицательных — больше

    Args:
        int_type: Тип операндов и результата
        first: Первое слагаемое
        second: Второе слагаемое

    Returns:
        Точная сумма

    Raises:
        IntegerOverflow: Если сумма не помещается в тип

    Examples:
        >>> add(INT8, 124, 3)
        127
        >>> add(INT8, 125, 3)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        IntegerOverflow: overflow
    """
    int_type.ensure_operands(first, second)

    total = add_wrapping(int_type, first, second)

    if not int_type.signed:
        if total < first:
            raise IntegerOverflow()
        return total

    # При сложении чисел разных знаков переполнение невозможно
    if first > 0 and second > 0 and total < first:
        raise IntegerOverflow()
    if first < 0 and second < 0 and total > first:
        raise IntegerOverflow()

    return total


def sub(int_type: IntType, minuend: int, subtrahend: int) -> int:
    """
    Вычитание с проверкой переполнения.

    Вычитаемое не инвертируется (-subtrahend переполняется для минимума),
    вместо этого разность сравнивается с уменьшаемым:
    - subtrahend > 0: переполнение iff diff > minuend
    - subtrahend < 0: переполнение iff diff < minuend

    Raises:
        IntegerOverflow: Если разность не помещается в тип
    """
    int_type.ensure_operands(minuend, subtrahend)

    diff = sub_wrapping(int_type, minuend, subtrahend)

    if subtrahend > 0 and diff > minuend:
        raise IntegerOverflow()
    if subtrahend < 0 and diff < minuend:
        raise IntegerOverflow()

    return diff


# =============================================================================
# УМНОЖЕНИЕ, ДЕЛЕНИЕ, СМЕНА ЗНАКА
# =============================================================================


def mul(int_type: IntType, first: int, second: int) -> int:
    """
    Умножение с проверкой переполнения.

    При умножении возможно многократное переполнение, поэтому нужны обе
    проверки:
    1. Знак произведения (только знаковые): first ^ second ^ product < 0
       означает невозможную комбинацию знаков, в том числе minimum * -1
    2. Обратное деление: product / second != first ловит переполнение по
       модулю с «правильным» знаком

    Raises:
        IntegerOverflow: Если произведение не помещается в тип

    Examples:
        >>> mul(INT8, -64, 2)
        -128
        >>> mul(INT8, -128, -1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        IntegerOverflow: overflow
    """
    int_type.ensure_operands(first, second)

    if first == 0 or second == 0:
        return 0

    product = mul_wrapping(int_type, first, second)

    # Проверка знака выполняется первой: после неё product / second
    # не может оказаться делением минимума на -1
    if int_type.signed and (first ^ second ^ product) < 0:
        raise IntegerOverflow()

    if quo(int_type, product, second) != first:
        raise IntegerOverflow()

    return product


def div(int_type: IntType, dividend: int, divisor: int) -> int:
    """
    Деление с усечением к нулю.

    Единственный случай переполнения при делении — минимум, делённый на -1:
    смена знака минимума не помещается в тип.

    Raises:
        DivisionByZero: Если divisor == 0
        IntegerOverflow: Если dividend — минимум знакового типа, divisor == -1

    Examples:
        >>> div(INT8, -128, -2)
        64
        >>> div(INT8, -7, 2)
        -3
    """
    int_type.ensure_operands(dividend, divisor)

    if divisor == 0:
        raise DivisionByZero()

    if int_type.signed and is_min(int_type, dividend) and is_minus_one(divisor):
        raise IntegerOverflow()

    return quo(int_type, dividend, divisor)


def rem(int_type: IntType, dividend: int, divisor: int) -> int:
    """
    Остаток от деления с усечением к нулю (знак делимого).

    Не переполняется: rem(INT8, -128, -1) == 0.

    Raises:
        DivisionByZero: Если divisor == 0
    """
    int_type.ensure_operands(dividend, divisor)

    if divisor == 0:
        raise DivisionByZero()

    return truncated_rem(int_type, dividend, divisor)


def negate(int_type: IntType, number: int) -> int:
    """
    Смена знака с проверкой переполнения.

    Для знакового типа отказ только на минимуме. Для беззнакового типа
    без переполнения можно инвертировать только ноль.

    Raises:
        IntegerOverflow: Если -number не помещается в тип
    """
    int_type.ensure_operands(number)

    if not int_type.signed:
        if number != 0:
            raise IntegerOverflow()
        return 0

    if is_min(int_type, number):
        raise IntegerOverflow()

    return neg_wrapping(int_type, number)


def shift(int_type: IntType, number: int, count: int) -> int:
    """
    Сдвиг влево на count разрядов с проверкой переполнения.

    Сдвиг влево и обратный сдвиг вправо должны вернуть исходное число,
    иначе значащие разряды (или знак) вытеснены за разрядную сетку.

    Args:
        int_type: Тип операнда
        number: Сдвигаемое число
        count: Количество разрядов (неотрицательное)

    Raises:
        NegativeShift: Если count < 0
        IntegerOverflow: Если сдвиг теряет значащие разряды

    Examples:
        >>> shift(INT8, 3, 5)
        96
        >>> shift(INT8, -1, 7)
        -128
    """
    int_type.ensure_operands(number)

    if count < 0:
        raise NegativeShift(f"shift count is negative: {count}")

    shifted = shl(int_type, number, count)

    if shr(int_type, shifted, count) != number:
        raise IntegerOverflow()

    return shifted


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def itoi(to_type: IntType, from_type: IntType, number: int) -> int:
    """
    Конверсия целого одного типа в целое другого типа.

    Конверсия туда и обратно должна вернуть исходное число; дополнительно
    проверяется смена знака (int8 -1 → uint16 65535 → int8 -1 проходит round
    trip, но является переполнением).

    Args:
        to_type: Целевой тип
        from_type: Исходный тип
        number: Значение исходного типа

    Raises:
        IntegerOverflow: Если значение не представимо в целевом типе

    Examples:
        >>> itoi(UINT8, INT16, 200)
        200
    """
    from_type.ensure_operands(number)

    converted = to_type.wrap(number)

    if converted < 0 and number > 0:
        raise IntegerOverflow()
    if converted > 0 and number < 0:
        raise IntegerOverflow()

    if from_type.wrap(converted) != number:
        raise IntegerOverflow()

    return converted


def itof(float_type: FloatType, int_type: IntType, number: int) -> float:
    """
    Конверсия целого в число с плавающей точкой без потери точности.

    Значение может быть в диапазоне float, но не представимо точно (например,
    2**24 + 1 для float32), поэтому отказ — PrecisionLoss, а не переполнение.

    Raises:
        PrecisionLoss: Если обратная конверсия не возвращает исходное число

    Examples:
        >>> itof(FLOAT32, INT32, 16777216)
        16777216.0
    """
    int_type.ensure_operands(number)

    converted = float_type.from_int(number)
    reverted = int_type.wrap(int(converted))

    if reverted != number:
        raise PrecisionLoss()

    return converted


def ftoi(
    int_type: IntType,
    float_type: FloatType,
    number: float,
    tolerance: float | None = None,
) -> int:
    """
    Конверсия числа с плавающей точкой в целое с усечением к нулю.

    Дробная часть отбрасывается. Усечённое значение приводится к типу с
    wraparound и конвертируется обратно: для значений в диапазоне отличие от
    исходного меньше единицы, для вышедших за диапазон — кратно 2**bits.

    Args:
        int_type: Целевой целый тип
        float_type: Исходный float тип
        number: Конвертируемое значение
        tolerance: Допустимое отличие обратной конверсии
            (default: Settings.ftoi_tolerance)

    Raises:
        ValueError: Если явный tolerance вне (1, 256]
        NotANumber: Если number является NaN
        IntegerOverflow: Если значение (или ±inf) вне диапазона типа

    Examples:
        >>> ftoi(INT8, FLOAT64, -127.9)
        -127
    """
    if tolerance is None:
        tolerance = get_settings().ftoi_tolerance
    elif not FTOI_TOLERANCE_MIN < tolerance <= FTOI_TOLERANCE_MAX:
        raise ValueError(
            f"tolerance must be in ({FTOI_TOLERANCE_MIN}, {FTOI_TOLERANCE_MAX}], "
            f"got {tolerance}"
        )

    if math.isnan(number):
        raise NotANumber()

    if math.isinf(number):
        raise IntegerOverflow()

    converted = int_type.wrap(math.trunc(number))
    reverted = float_type.from_int(converted)

    if abs(number - reverted) >= tolerance:
        raise IntegerOverflow()

    return converted


# =============================================================================
# МОДУЛЬ И РАССТОЯНИЕ
# =============================================================================


def abs_unsigned(int_type: IntType, number: int) -> int:
    """
    Модуль числа как значение беззнакового типа той же разрядности.

    Для отрицательных сначала вычисляется -(number + 1), что не переполняется
    даже для минимума, затем добавляется единица уже в беззнаковом типе.
    """
    int_type.ensure_operands(number)

    unsigned_type = int_type.unsigned()

    if number < 0:
        complement = neg_wrapping(int_type, add_wrapping(int_type, number, 1))
        return add_wrapping(unsigned_type, complement, 1)

    return number


def distance(int_type: IntType, first: int, second: int) -> int:
    """
    Расстояние |first - second| как значение беззнакового типа той же разрядности.

    Никогда не переполняется: максимальное расстояние (от минимума до
    максимума) равно максимуму беззнакового типа.
    """
    int_type.ensure_operands(first, second)

    unsigned_type = int_type.unsigned()
    first_abs = abs_unsigned(int_type, first)
    second_abs = abs_unsigned(int_type, second)

    # Числа разных знаков: расстояние равно сумме модулей
    if (first ^ second) < 0:
        return add_wrapping(unsigned_type, first_abs, second_abs)

    if first_abs > second_abs:
        return sub_wrapping(unsigned_type, first_abs, second_abs)

    return sub_wrapping(unsigned_type, second_abs, first_abs)
