"""
Errors — Таксономия ошибок безопасной целочисленной арифметики

Все арифметические отказы детерминированы и являются чистой функцией входов:
повтор вызова с теми же аргументами бессмысленен.

Иерархия:
- SafeArithmeticError (ArithmeticError) — базовый класс арифметических отказов,
  несёт ErrorKind для тегированного Result
- IterStepError (ValueError) — ошибки программиста при задании шага итерации,
  НЕ являются арифметическими отказами
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид арифметического отказа"""

    OVERFLOW = "overflow"
    DIVISION_BY_ZERO = "division_by_zero"
    NAN = "nan"
    PRECISION_LOSS = "precision_loss"
    MISSING_ARGUMENTS = "missing_arguments"
    NEGATIVE_SHIFT = "negative_shift"


# =============================================================================
# АРИФМЕТИЧЕСКИЕ ОТКАЗЫ
# =============================================================================


class SafeArithmeticError(ArithmeticError):
    """
    Базовый класс отказов безопасной арифметики.

    Подклассы также наследуют близкое по смыслу встроенное исключение, поэтому
    `except OverflowError` или `except ZeroDivisionError` продолжают работать.
    """

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.value.replace("_", " "))


class IntegerOverflow(SafeArithmeticError, OverflowError):
    """Точный результат не помещается в диапазон целевого типа."""

    kind = ErrorKind.OVERFLOW


class DivisionByZero(SafeArithmeticError, ZeroDivisionError):
    """Делитель равен нулю."""

    kind = ErrorKind.DIVISION_BY_ZERO


class NotANumber(SafeArithmeticError, ValueError):
    """Число с плавающей точкой является NaN."""

    kind = ErrorKind.NAN


class PrecisionLoss(SafeArithmeticError):
    """Значение в диапазоне, но не представимо точно в целевом float типе."""

    kind = ErrorKind.PRECISION_LOSS


class MissingArguments(SafeArithmeticError, TypeError):
    """Вариативная операция вызвана без аргументов."""

    kind = ErrorKind.MISSING_ARGUMENTS


class NegativeShift(SafeArithmeticError, ValueError):
    """Отрицательное количество разрядов сдвига."""

    kind = ErrorKind.NEGATIVE_SHIFT


ERRORS_BY_KIND: dict[ErrorKind, type[SafeArithmeticError]] = {
    error.kind: error
    for error in (
        IntegerOverflow,
        DivisionByZero,
        NotANumber,
        PrecisionLoss,
        MissingArguments,
        NegativeShift,
    )
}


# =============================================================================
# ОШИБКИ ИТЕРАЦИИ
# =============================================================================


class IterStepError(ValueError):
    """
    Недопустимый шаг итерации.

    Только положительный шаг гарантирует продвижение итератора, поэтому нулевой
    или отрицательный шаг считается ошибкой программиста и выбрасывается сразу
    при создании итератора.
    """


class IterStepZero(IterStepError):
    """Шаг итерации равен нулю."""

    def __init__(self) -> None:
        super().__init__("iterator step is zero")


class IterStepNegative(IterStepError):
    """Шаг итерации отрицательный."""

    def __init__(self, step: int) -> None:
        super().__init__(f"iterator step is negative: {step}")
        self.step = step
