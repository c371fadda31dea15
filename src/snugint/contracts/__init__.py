"""
Contract Validation Module

Валидация JSON контрактов snugint.
"""

from .validators import (
    ContractValidator,
    SafeIntegerValidator,
    SchemaLoader,
    validate_safe_integer_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SafeIntegerValidator",
    # Functions
    "validate_safe_integer_payload",
]
