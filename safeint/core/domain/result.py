"""
Result — Тегированный результат операции

Операции библиотеки выбрасывают исключения (идиома Python). Для кода, которому
удобнее значение-или-ошибка, checked() превращает вызов любой операции в
Result. При отказе слот значения всегда содержит ноль типа — никогда не
частичный или неопределённый результат.
"""

import logging
from typing import Any, Callable

from pydantic import BaseModel, Field, model_validator

from safeint.core.errors import ERRORS_BY_KIND, ErrorKind, SafeArithmeticError

logger = logging.getLogger(__name__)


class Result(BaseModel):
    """
    Результат операции: значение либо вид отказа.

    Immutable модель (frozen=True).
    """

    value: int | float = Field(0, description="Значение (ноль при отказе)")
    error: ErrorKind | None = Field(None, description="Вид отказа или None")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_zero_on_error(self) -> "Result":
        """При отказе значение обязано быть нулём."""
        if self.error is not None and self.value != 0:
            raise ValueError(f"failed result must hold zero, got {self.value}")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int | float:
        """
        Значение успешного результата.

        Raises:
            SafeArithmeticError: Подкласс, соответствующий виду отказа
        """
        if self.error is not None:
            raise ERRORS_BY_KIND[self.error]()
        return self.value


def checked(
    operation: Callable[..., int | float],
    *args: Any,
    zero: int | float = 0,
    **kwargs: Any,
) -> Result:
    """
    Выполнение операции с упаковкой результата в Result.

    Перехватываются только арифметические отказы (SafeArithmeticError); ошибки
    программиста (TypeError/ValueError от невалидных операндов, IterStepError)
    пропагируют.

    Args:
        operation: Операция библиотеки (например, add_div)
        *args: Позиционные аргументы операции
        zero: Нулевое значение слота при отказе (0.0 для itof)
        **kwargs: Именованные аргументы операции

    Examples:
        >>> checked(add, INT8, 125, 3)
        Result(value=0, error=<ErrorKind.OVERFLOW: 'overflow'>)
    """
    try:
        value = operation(*args, **kwargs)
    except SafeArithmeticError as exc:
        logger.debug(
            "Operation %s failed: %s",
            getattr(operation, "__name__", repr(operation)),
            exc,
            extra={"operation": getattr(operation, "__name__", None), "error_kind": exc.kind.value},
        )
        return Result(value=zero, error=exc.kind)

    return Result(value=value)
