"""Safe range iteration over fixed-width integer types."""

from .ranges import (
    dec,
    dec_step,
    inc,
    inc_step,
    iter_range,
    iter_size,
    iter_step_size,
    step,
)

__all__ = [
    "iter_range",
    "inc",
    "dec",
    "step",
    "inc_step",
    "dec_step",
    "iter_size",
    "iter_step_size",
]
