"""
Machine — Эмуляция машинной арифметики фиксированной разрядности

Каждая функция выполняет одну машинную инструкцию над значениями IntType:
результат приводится к типу с wraparound, деление усекается к нулю. Проверки
переполнения строятся поверх этих инструкций так же, как на машине с
дополнительным кодом.

Модуль НЕ проверяет переполнение — это задача primitives. Вызывающий код
отвечает за то, что делитель не равен нулю.
"""

from safeint.core.domain.int_types import IntType

# =============================================================================
# WRAPPING ИНСТРУКЦИИ
# =============================================================================


def add_wrapping(int_type: IntType, first: int, second: int) -> int:
    """Сложение с wraparound."""
    return int_type.wrap(first + second)


def sub_wrapping(int_type: IntType, minuend: int, subtrahend: int) -> int:
    """Вычитание с wraparound."""
    return int_type.wrap(minuend - subtrahend)


def mul_wrapping(int_type: IntType, first: int, second: int) -> int:
    """Умножение с wraparound."""
    return int_type.wrap(first * second)


def neg_wrapping(int_type: IntType, number: int) -> int:
    """Смена знака с wraparound (минимум остаётся минимумом)."""
    return int_type.wrap(-number)


def quo(int_type: IntType, dividend: int, divisor: int) -> int:
    """
    Частное с усечением к нулю и wraparound.

    В отличие от `//` (floor) усекает к нулю: quo(INT8, -7, 2) == -3.
    Частное минимума на -1 переполняется обратно в минимум.
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return int_type.wrap(quotient)


def rem(int_type: IntType, dividend: int, divisor: int) -> int:
    """
    Остаток от деления с усечением к нулю.

    Знак остатка совпадает со знаком делимого: rem(INT8, -7, 2) == -1.
    Остаток никогда не переполняется (минимум % -1 == 0).
    """
    remainder = abs(dividend) % abs(divisor)
    if dividend < 0:
        remainder = -remainder
    return int_type.wrap(remainder)


def shl(int_type: IntType, number: int, count: int) -> int:
    """Сдвиг влево с потерей старших разрядов; count >= bits даёт 0."""
    if count >= int_type.bits:
        return 0
    return int_type.wrap(number << count)


def shr(int_type: IntType, number: int, count: int) -> int:
    """Сдвиг вправо: арифметический для знаковых, логический для беззнаковых."""
    return int_type.wrap(number >> count)


# =============================================================================
# ПРЕДИКАТЫ ЭКСТРЕМАЛЬНЫХ ЗНАЧЕНИЙ
# =============================================================================


def is_min(int_type: IntType, number: int) -> bool:
    """
    Является ли number минимумом типа.

    Уменьшение минимума на единицу переходит через границу в положительную
    область; для любого другого неположительного числа результат отрицательный.
    """
    if number > 0:
        return False
    return sub_wrapping(int_type, number, 1) > 0


def is_max(int_type: IntType, number: int) -> bool:
    """Является ли number максимумом типа (увеличение переходит в <= 0)."""
    if number <= 0:
        return False
    return add_wrapping(int_type, number, 1) <= 0


def is_minus_one(number: int) -> bool:
    if number >= 0:
        return False
    return number + 1 == 0


def is_even(number: int) -> bool:
    return number % 2 == 0
