"""
Domain models and value objects.

Contains integer/float type descriptions and the tagged operation Result.
"""

from safeint.core.domain.int_types import (
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
    bit_width,
    int_range,
)
from safeint.core.domain.result import Result, checked

__all__ = [
    # Int types module
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
    # Result module
    "Result",
    "checked",
]
