"""
Domain models для snugint

Дескрипторы целочисленных типов фиксированной ширины.
"""

from src.snugint.domain.integer_types import (
    INT8,
    INT16,
    INT32,
    INT64,
    INTEGER_TYPES,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntegerType,
    get_integer_type,
)

__all__ = [
    # Model
    "IntegerType",
    # Predefined types
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    # Registry
    "INTEGER_TYPES",
    "get_integer_type",
]
