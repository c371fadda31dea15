"""
snugint: Целые фиксированной ширины с проверкой переполнения

Арифметика SafeInteger проверяет предусловия ДО вычисления и возбуждает
различимое исключение вместо молчаливого wrap-around.
"""

# Faults
from src.snugint.errors import (
    FAULT_EXCEPTIONS,
    AdditionOverflow,
    AdditionUnderflow,
    DivisionByZero,
    FaultKind,
    MultiplicationOverflow,
    MultiplicationUnderflow,
    SafeIntegerError,
    SizeMismatch,
    SubtractionOverflow,
    SubtractionUnderflow,
    TypeMismatch,
    fault_for,
)

# Integer types
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

# SafeInteger
from src.snugint.safe_integer import (
    ArithmeticResult,
    Int8,
    Int16,
    Int32,
    Int64,
    SafeInteger,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    checked_add,
    checked_div,
    checked_mult,
    checked_sub,
    safe_add,
    safe_div,
    safe_mult,
    safe_sub,
)

# Streams
from src.snugint.streams import read_safe_integer, write_safe_integer

__all__ = [
    # Faults
    "FaultKind",
    "SafeIntegerError",
    "AdditionOverflow",
    "AdditionUnderflow",
    "SubtractionOverflow",
    "SubtractionUnderflow",
    "MultiplicationOverflow",
    "MultiplicationUnderflow",
    "SizeMismatch",
    "TypeMismatch",
    "DivisionByZero",
    "FAULT_EXCEPTIONS",
    "fault_for",
    # Integer types
    "IntegerType",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "INTEGER_TYPES",
    "get_integer_type",
    # SafeInteger
    "SafeInteger",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    # Checked operations
    "safe_add",
    "safe_sub",
    "safe_mult",
    "safe_div",
    "ArithmeticResult",
    "checked_add",
    "checked_sub",
    "checked_mult",
    "checked_div",
    # Streams
    "read_safe_integer",
    "write_safe_integer",
]
