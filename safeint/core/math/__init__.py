"""
Core math modules для safeint

Операции фиксированной разрядности с проверкой переполнения.
"""

# Primitives
from safeint.core.math.primitives import (
    abs_unsigned,
    add,
    distance,
    div,
    ftoi,
    itof,
    itoi,
    mul,
    negate,
    rem,
    shift,
    sub,
)

# Extended
from safeint.core.math.extended import (
    POW10_TABLE,
    add3,
    add_m,
    add_sub,
    div_m,
    mul3,
    mul_m,
    pow,
    pow10,
    sub3,
    sub_m,
)

# Composite
from safeint.core.math.composite import (
    add_div,
    add_div_rem,
    add_one_sub_div,
    add_sub_div,
    sub_div,
    sub_div_rem,
)

__all__ = [
    # Primitives: Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "rem",
    "negate",
    "shift",
    # Primitives: Conversions
    "itoi",
    "itof",
    "ftoi",
    # Primitives: Magnitude
    "abs_unsigned",
    "distance",
    # Extended: Constants
    "POW10_TABLE",
    # Extended: Functions
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
    # Composite: Functions
    "add_div",
    "add_div_rem",
    "sub_div",
    "sub_div_rem",
    "add_sub_div",
    "add_one_sub_div",
]
