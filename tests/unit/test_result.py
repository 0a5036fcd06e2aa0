"""
Тесты для Result и таксономии ошибок

Проверяет:
1. Ноль в слоте значения при отказе
2. checked() перехватывает только арифметические отказы
3. Совместимость ошибок со встроенными исключениями
"""

import logging

import pytest
from pydantic import ValidationError

from safeint import (
    FLOAT32,
    INT8,
    INT32,
    UINT8,
    add,
    add_div,
    add_m,
    div,
    ftoi,
    itof,
    shift,
    step,
)
from safeint.core.domain.result import Result, checked
from safeint.core.errors import (
    ERRORS_BY_KIND,
    DivisionByZero,
    ErrorKind,
    IntegerOverflow,
    IterStepError,
    MissingArguments,
    NegativeShift,
    NotANumber,
    PrecisionLoss,
    SafeArithmeticError,
)


class TestResultModel:
    """Тесты для модели Result"""

    def test_success(self) -> None:
        result = Result(value=42)
        assert result.ok
        assert result.unwrap() == 42

    def test_failure_holds_zero(self) -> None:
        result = Result(error=ErrorKind.OVERFLOW)
        assert not result.ok
        assert result.value == 0

    def test_failure_with_value_rejected(self) -> None:
        """Частичный результат при отказе недопустим"""
        with pytest.raises(ValidationError):
            Result(value=1, error=ErrorKind.OVERFLOW)

    def test_unwrap_raises_matching_error(self) -> None:
        with pytest.raises(DivisionByZero):
            Result(error=ErrorKind.DIVISION_BY_ZERO).unwrap()
        with pytest.raises(IntegerOverflow):
            Result(error=ErrorKind.OVERFLOW).unwrap()

    def test_frozen(self) -> None:
        result = Result(value=1)
        with pytest.raises(ValidationError):
            result.value = 2  # type: ignore[misc]


class TestChecked:
    """Тесты для checked"""

    def test_success(self) -> None:
        assert checked(add_div, INT8, 100, 100, 3) == Result(value=66)

    @pytest.mark.parametrize(
        "call, kind",
        [
            ((add, INT8, 125, 3), ErrorKind.OVERFLOW),
            ((div, UINT8, 1, 0), ErrorKind.DIVISION_BY_ZERO),
            ((add_m, INT8), ErrorKind.MISSING_ARGUMENTS),
            ((shift, INT8, 1, -1), ErrorKind.NEGATIVE_SHIFT),
        ],
    )
    def test_failure_kinds(self, call: tuple, kind: ErrorKind) -> None:
        """Вид отказа сохраняется, значение обнуляется"""
        result = checked(*call)
        assert result.error is kind
        assert result.value == 0

    def test_float_zero(self) -> None:
        result = checked(itof, FLOAT32, INT32, 16777217, zero=0.0)
        assert result.error is ErrorKind.PRECISION_LOSS
        assert result.value == 0.0

    def test_keyword_arguments(self) -> None:
        result = checked(ftoi, INT8, FLOAT32, 128.0, tolerance=2.0)
        assert result.error is ErrorKind.OVERFLOW

    def test_programmer_errors_propagate(self) -> None:
        """Невалидные операнды и шаги не превращаются в Result"""
        with pytest.raises(ValueError):
            checked(add, INT8, 128, 0)
        with pytest.raises(IterStepError):
            checked(step, INT8, 0, 1, 0)
        with pytest.raises(ValueError, match="tolerance"):
            checked(ftoi, INT8, FLOAT32, 128.0, tolerance=1000.0)

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="safeint"):
            checked(add, INT8, 125, 3)

        records = [r for r in caplog.records if getattr(r, "operation", None) == "add"]
        assert records
        assert records[0].error_kind == "overflow"


class TestErrorTaxonomy:
    """Тесты для иерархии ошибок"""

    def test_every_kind_mapped(self) -> None:
        assert set(ERRORS_BY_KIND) == set(ErrorKind)
        for kind, error in ERRORS_BY_KIND.items():
            assert error.kind is kind

    @pytest.mark.parametrize(
        "error, builtin",
        [
            (IntegerOverflow, OverflowError),
            (DivisionByZero, ZeroDivisionError),
            (NotANumber, ValueError),
            (MissingArguments, TypeError),
            (NegativeShift, ValueError),
            (PrecisionLoss, ArithmeticError),
        ],
    )
    def test_builtin_compatibility(self, error: type, builtin: type) -> None:
        assert issubclass(error, SafeArithmeticError)
        assert issubclass(error, builtin)

    def test_default_messages(self) -> None:
        assert str(IntegerOverflow()) == "overflow"
        assert str(DivisionByZero()) == "division by zero"
        assert str(PrecisionLoss("custom")) == "custom"

    def test_step_errors_not_arithmetic(self) -> None:
        assert not issubclass(IterStepError, SafeArithmeticError)
