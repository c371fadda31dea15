"""
Math modules для snugint

Предусловия арифметики фиксированной ширины (без вычисления результата).
"""

from src.snugint.math.overflow_checks import (
    check_addition,
    check_division,
    check_multiplication,
    check_subtraction,
    divide,
    is_unsigned_range,
    truncating_div,
)

__all__ = [
    # Preconditions
    "check_addition",
    "check_subtraction",
    "check_multiplication",
    "check_division",
    # Helpers
    "divide",
    "is_unsigned_range",
    "truncating_div",
]
