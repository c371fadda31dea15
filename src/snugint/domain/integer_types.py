"""
IntegerType: Дескрипторы целочисленных типов фиксированной ширины

Python int не ограничен по размеру, поэтому "нижележащий тип" SafeInteger
задаётся явным immutable дескриптором: ширина в битах, знаковость и
производные границы [min, max].

Дескрипторы:
- Знаковые: INT8, INT16, INT32, INT64 (дополнительный код)
- Беззнаковые: UINT8, UINT16, UINT32, UINT64
- Произвольный диапазон: IntegerType.from_bounds(...)

ВАЖНО: вырожденный дескриптор (min == max) допустим как данные, но любая
попытка построить SafeInteger поверх него завершается TypeMismatch.
"""

from typing import Final

from pydantic import BaseModel, Field

from src.snugint.errors import TypeMismatch


# =============================================================================
# INTEGER TYPE MODEL
# =============================================================================


class IntegerType(BaseModel):
    """
    Дескриптор целочисленного типа фиксированной ширины.

    Immutable модель (frozen=True): дескриптор используется как ключ
    кэша wrapper-классов и не должен изменяться после создания.
    """

    name: str = Field(..., min_length=1, description="Имя типа (например, 'int32')")
    bits: int = Field(..., gt=0, description="Ширина в битах")
    signed: bool = Field(..., description="Знаковый тип (дополнительный код)")

    # Явные границы (для типов с нестандартным диапазоном)
    min_value: int | None = Field(default=None, description="Явный минимум (optional)")
    max_value: int | None = Field(default=None, description="Явный максимум (optional)")

    model_config = {"frozen": True}  # Immutable

    @property
    def min(self) -> int:
        """Минимальное представимое значение."""
        if self.min_value is not None:
            return self.min_value
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max(self) -> int:
        """Максимальное представимое значение."""
        if self.max_value is not None:
            return self.max_value
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def is_degenerate(self) -> bool:
        """True если у типа нет различимых min/max."""
        return self.min >= self.max

    def contains(self, value: int) -> bool:
        """Проверка min <= value <= max."""
        return self.min <= value <= self.max

    @classmethod
    def from_bounds(cls, name: str, min_value: int, max_value: int) -> "IntegerType":
        """
        Дескриптор с произвольным диапазоном [min_value, max_value].

        Ширина вычисляется как минимальное число бит, вмещающее диапазон.

        Args:
            name: Имя типа
            min_value: Минимум диапазона
            max_value: Максимум диапазона

        Returns:
            Новый IntegerType

        Examples:
            >>> IntegerType.from_bounds("percent", 0, 100).max
            100
        """
        signed = min_value < 0
        magnitude = max(abs(min_value), abs(max_value), 1)
        bits = magnitude.bit_length() + (1 if signed else 0)
        return cls(
            name=name,
            bits=bits,
            signed=signed,
            min_value=min_value,
            max_value=max_value,
        )

    def __str__(self) -> str:
        return self.name


# =============================================================================
# PREDEFINED TYPES
# =============================================================================

INT8: Final[IntegerType] = IntegerType(name="int8", bits=8, signed=True)
INT16: Final[IntegerType] = IntegerType(name="int16", bits=16, signed=True)
INT32: Final[IntegerType] = IntegerType(name="int32", bits=32, signed=True)
INT64: Final[IntegerType] = IntegerType(name="int64", bits=64, signed=True)

UINT8: Final[IntegerType] = IntegerType(name="uint8", bits=8, signed=False)
UINT16: Final[IntegerType] = IntegerType(name="uint16", bits=16, signed=False)
UINT32: Final[IntegerType] = IntegerType(name="uint32", bits=32, signed=False)
UINT64: Final[IntegerType] = IntegerType(name="uint64", bits=64, signed=False)


# =============================================================================
# REGISTRY
# =============================================================================

INTEGER_TYPES: Final[dict[str, IntegerType]] = {
    t.name: t for t in (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64)
}

# C-имена типов (LP64)
_C_ALIASES: Final[dict[str, str]] = {
    "int8_t": "int8",
    "int16_t": "int16",
    "int32_t": "int32",
    "int64_t": "int64",
    "uint8_t": "uint8",
    "uint16_t": "uint16",
    "uint32_t": "uint32",
    "uint64_t": "uint64",
    "signed char": "int8",
    "char": "int8",
    "unsigned char": "uint8",
    "short": "int16",
    "unsigned short": "uint16",
    "int": "int32",
    "unsigned int": "uint32",
    "unsigned": "uint32",
    "long": "int64",
    "unsigned long": "uint64",
    "long long": "int64",
    "unsigned long long": "uint64",
}


def get_integer_type(name: str) -> IntegerType:
    """
    Поиск дескриптора по имени.

    Принимает канонические имена ('int32') и C-имена ('int32_t', 'unsigned int').

    Args:
        name: Имя типа

    Returns:
        Зарегистрированный IntegerType

    Raises:
        TypeMismatch: Если тип неизвестен
    """
    key = " ".join(name.strip().lower().split())
    key = _C_ALIASES.get(key, key)
    try:
        return INTEGER_TYPES[key]
    except KeyError:
        raise TypeMismatch(f"Unknown integer type: {name!r}") from None
