"""
safeint — overflow-safe fixed-width integer arithmetic.

Operations over 8/16/32/64-bit signed and unsigned integer types that raise
instead of silently wrapping whenever the exact result is not representable,
including composite expressions evaluated with infinite-precision semantics.

Example:
    >>> from safeint import INT8, add_div
    >>> add_div(INT8, 100, 100, 3)
    66
"""

from safeint.config import Settings, get_settings
from safeint.core.domain import (
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    INT_TYPES,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    FloatType,
    IntType,
    Result,
    bit_width,
    checked,
    int_range,
)
from safeint.core.errors import (
    DivisionByZero,
    ErrorKind,
    IntegerOverflow,
    IterStepError,
    IterStepNegative,
    IterStepZero,
    MissingArguments,
    NegativeShift,
    NotANumber,
    PrecisionLoss,
    SafeArithmeticError,
)
from safeint.core.math import (
    abs_unsigned,
    add,
    add3,
    add_div,
    add_div_rem,
    add_m,
    add_one_sub_div,
    add_sub,
    add_sub_div,
    distance,
    div,
    div_m,
    ftoi,
    itof,
    itoi,
    mul,
    mul3,
    mul_m,
    negate,
    pow,
    pow10,
    rem,
    shift,
    sub,
    sub3,
    sub_div,
    sub_div_rem,
    sub_m,
)
from safeint.iteration import (
    dec,
    dec_step,
    inc,
    inc_step,
    iter_range,
    iter_size,
    iter_step_size,
    step,
)
from safeint.observability import setup_logging

__all__ = [
    # Types
    "IntType",
    "FloatType",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "INT_TYPES",
    "FLOAT32",
    "FLOAT64",
    "int_range",
    "bit_width",
    # Results and errors
    "Result",
    "checked",
    "ErrorKind",
    "SafeArithmeticError",
    "IntegerOverflow",
    "DivisionByZero",
    "NotANumber",
    "PrecisionLoss",
    "MissingArguments",
    "NegativeShift",
    "IterStepError",
    "IterStepZero",
    "IterStepNegative",
    # Primitives
    "add",
    "sub",
    "mul",
    "div",
    "rem",
    "negate",
    "shift",
    "itoi",
    "itof",
    "ftoi",
    "abs_unsigned",
    "distance",
    # Extended
    "add3",
    "sub3",
    "mul3",
    "add_sub",
    "add_m",
    "sub_m",
    "mul_m",
    "div_m",
    "pow10",
    "pow",
    # Composite
    "add_div",
    "add_div_rem",
    "sub_div",
    "sub_div_rem",
    "add_sub_div",
    "add_one_sub_div",
    # Iteration
    "iter_range",
    "inc",
    "dec",
    "step",
    "inc_step",
    "dec_step",
    "iter_size",
    "iter_step_size",
    # Configuration and logging
    "Settings",
    "get_settings",
    "setup_logging",
]
