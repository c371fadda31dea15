"""
SafeInteger: Целое фиксированной ширины с проверкой переполнения

Обёртка над целым значением, привязанная к IntegerType. Каждая
арифметическая операция проверяет предусловие ДО изменения состояния и
вместо молчаливого wrap-around возбуждает различимое исключение.

Формы операндов:
- SafeInteger ⊕ SafeInteger
- SafeInteger ⊕ int
- int ⊕ SafeInteger

Все три формы нормализуются одной функцией (_coerce_pair) и попадают в одну
проверяющую функцию на операцию (safe_add / safe_sub / safe_mult / safe_div).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. min < max для типа (иначе TypeMismatch при конструировании)
2. min <= value <= max после каждой успешной операции
3. Отказ не изменяет ни один операнд (all-or-nothing)
4. Сравнения и вставка в поток ничего не проверяют
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, NamedTuple, Optional, SupportsIndex, TextIO, Union

from src.snugint.contracts import validate_safe_integer_payload
from src.snugint.domain.integer_types import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntegerType,
    get_integer_type,
)
from src.snugint.errors import (
    AdditionOverflow,
    FaultKind,
    SafeIntegerError,
    SizeMismatch,
    SubtractionUnderflow,
    TypeMismatch,
    fault_for,
)
from src.snugint.math.overflow_checks import (
    check_addition,
    check_division,
    check_multiplication,
    check_subtraction,
    divide,
)
from src.snugint.streams import read_safe_integer, write_safe_integer

Operand = Union["SafeInteger", SupportsIndex]


# =============================================================================
# SAFE INTEGER
# =============================================================================


class SafeInteger:
    """
    Целое значение, привязанное к IntegerType, с проверяемой арифметикой.

    Базовый класс не привязан к типу; используйте SafeInteger.of(int_type)
    или готовые классы Int8 ... UInt64.

    Examples:
        >>> Int8(120) + 7
        Int8(127)
        >>> Int8(120) + 10  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        AdditionOverflow: ...
    """

    __slots__ = ("_value", "_min", "_max")

    int_type: ClassVar[Optional[IntegerType]] = None

    def __init__(self, item: Operand = 0):
        int_type = self._require_int_type()
        self._min = int_type.min
        self._max = int_type.max

        if isinstance(item, SafeInteger) and item.int_type == int_type:
            self._value = item._value
        else:
            self._value = self._convert(item)

    # -------------------------------------------------------------------------
    # Type binding
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, int_type: IntegerType) -> type["SafeInteger"]:
        """
        Класс SafeInteger, привязанный к int_type (кэшируется).

        Args:
            int_type: Дескриптор целочисленного типа

        Returns:
            Подкласс SafeInteger с int_type = int_type
        """
        bound = _BOUND_CLASSES.get(int_type)
        if bound is None:
            bound = type(
                f"SafeInteger[{int_type.name}]",
                (SafeInteger,),
                {"__slots__": (), "int_type": int_type},
            )
            _BOUND_CLASSES[int_type] = bound
        return bound

    @classmethod
    def _require_int_type(cls) -> IntegerType:
        # Guard совместимости типа: границы должны различаться
        int_type = cls.int_type
        if int_type is None:
            raise TypeMismatch(
                f"{cls.__name__} is not bound to an integer type, use SafeInteger.of(...)"
            )
        if int_type.is_degenerate:
            raise TypeMismatch(
                f"Integer type {int_type.name!r} has no distinguishable range "
                f"(min={int_type.min}, max={int_type.max})"
            )
        return int_type

    @classmethod
    def _convert(cls, item: Any) -> int:
        """
        Конвертирующий guard: целое значение → value в [min, max].

        Raises:
            TypeMismatch: Если item не является целым
            SizeMismatch: Если item вне [min, max]
        """
        int_type = cls._require_int_type()
        try:
            value = operator.index(item)
        except TypeError:
            raise TypeMismatch(
                f"{type(item).__name__} is not an integral type: {item!r}"
            ) from None

        if value > int_type.max or value < int_type.min:
            raise SizeMismatch(
                f"Value {value} does not fit {int_type.name} "
                f"[{int_type.min}, {int_type.max}]"
            )
        return value

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def value(self) -> int:
        """Текущее значение."""
        return self._value

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    def get_value(self) -> int:
        return self._value

    def copy(self) -> "SafeInteger":
        return type(self)(self)

    # -------------------------------------------------------------------------
    # Assignment
    # -------------------------------------------------------------------------

    def assign(self, other: Operand) -> "SafeInteger":
        """
        Присваивание на месте.

        SafeInteger того же типа копируется без повторной проверки.
        Любое другое целое проходит конвертирующий guard.

        Raises:
            TypeMismatch: Если other не является целым
            SizeMismatch: Если other вне [min, max]
        """
        if isinstance(other, SafeInteger) and other.int_type == self.int_type:
            self._value = other._value
            self._min = other._min
            self._max = other._max
        else:
            self._value = self._convert(other)
        return self

    def __iadd__(self, other: Operand) -> "SafeInteger":
        self._value = safe_add(self, other)._value
        return self

    def __isub__(self, other: Operand) -> "SafeInteger":
        self._value = safe_sub(self, other)._value
        return self

    def __imul__(self, other: Operand) -> "SafeInteger":
        self._value = safe_mult(self, other)._value
        return self

    def __itruediv__(self, other: Operand) -> "SafeInteger":
        self._value = safe_div(self, other)._value
        return self

    __ifloordiv__ = __itruediv__

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> "SafeInteger":
        return safe_add(self, other)

    def __radd__(self, other: Operand) -> "SafeInteger":
        return safe_add(other, self)

    def __sub__(self, other: Operand) -> "SafeInteger":
        return safe_sub(self, other)

    def __rsub__(self, other: Operand) -> "SafeInteger":
        return safe_sub(other, self)

    def __mul__(self, other: Operand) -> "SafeInteger":
        return safe_mult(self, other)

    def __rmul__(self, other: Operand) -> "SafeInteger":
        return safe_mult(other, self)

    def __truediv__(self, other: Operand) -> "SafeInteger":
        return safe_div(self, other)

    def __rtruediv__(self, other: Operand) -> "SafeInteger":
        return safe_div(other, self)

    # Деление целого типа одно: усечение к нулю
    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    # -------------------------------------------------------------------------
    # Increment / decrement
    # -------------------------------------------------------------------------

    def increment(self) -> "SafeInteger":
        """
        Префиксный инкремент: value += 1, возвращает self.

        Raises:
            AdditionOverflow: Если value == max (value не изменяется)
        """
        if self._value == self._max:
            raise AdditionOverflow(
                f"Increment of {self._value} would exceed max {self._max}"
            )
        self._value += 1
        return self

    def decrement(self) -> "SafeInteger":
        """
        Префиксный декремент: value -= 1, возвращает self.

        Raises:
            SubtractionUnderflow: Если value == min (value не изменяется)
        """
        if self._value == self._min:
            raise SubtractionUnderflow(
                f"Decrement of {self._value} would fall below min {self._min}"
            )
        self._value -= 1
        return self

    def post_increment(self) -> "SafeInteger":
        """Постфиксный инкремент: возвращает копию значения ДО изменения."""
        snapshot = self.copy()
        self.increment()
        return snapshot

    def post_decrement(self) -> "SafeInteger":
        """Постфиксный декремент: возвращает копию значения ДО изменения."""
        snapshot = self.copy()
        self.decrement()
        return snapshot

    # -------------------------------------------------------------------------
    # Comparison (unchecked)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        raw = _raw_value(other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value == raw

    def __ne__(self, other: object) -> bool:
        raw = _raw_value(other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value != raw

    def __lt__(self, other: Operand) -> bool:
        raw = _raw_value(other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value < raw

    def __le__(self, other: Operand) -> bool:
        raw = _raw_value(other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value <= raw

    def __gt__(self, other: Operand) -> bool:
        raw = _raw_value(other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value > raw

    def __ge__(self, other: Operand) -> bool:
        raw = _raw_value(other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value >= raw

    # Изменяемый тип значения
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    # -------------------------------------------------------------------------
    # Streams
    # -------------------------------------------------------------------------

    def write_to(self, stream: TextIO) -> TextIO:
        """Вставка десятичного value в текстовый поток."""
        return write_safe_integer(stream, self)

    def read_from(self, stream: TextIO) -> "SafeInteger":
        """Извлечение очередного целого из потока (с проверкой диапазона)."""
        return read_safe_integer(stream, self)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация по контракту safe_integer.json."""
        int_type = self._require_int_type()
        return {
            "type": int_type.name,
            "bits": int_type.bits,
            "signed": int_type.signed,
            "value": self._value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SafeInteger":
        """
        Десериализация по контракту safe_integer.json.

        Для непривязанного SafeInteger тип ищется в реестре по имени.

        Raises:
            ValidationError: Если данные не соответствуют схеме
            TypeMismatch: Если тип неизвестен или не совпадает с классом
            SizeMismatch: Если value вне диапазона типа
        """
        validate_safe_integer_payload(data)

        target = cls if cls.int_type is not None else cls.of(get_integer_type(data["type"]))
        int_type = target._require_int_type()
        if (data["type"], data["bits"], data["signed"]) != (
            int_type.name,
            int_type.bits,
            int_type.signed,
        ):
            raise TypeMismatch(
                f"Payload type {data['type']!r} ({data['bits']} bits, "
                f"signed={data['signed']}) does not match {int_type.name!r}"
            )
        return target(data["value"])


# Кэш привязанных классов: IntegerType → подкласс
_BOUND_CLASSES: Dict[IntegerType, type[SafeInteger]] = {}


# =============================================================================
# PREDEFINED WRAPPERS
# =============================================================================


class Int8(SafeInteger):
    __slots__ = ()
    int_type = INT8


class Int16(SafeInteger):
    __slots__ = ()
    int_type = INT16


class Int32(SafeInteger):
    __slots__ = ()
    int_type = INT32


class Int64(SafeInteger):
    __slots__ = ()
    int_type = INT64


class UInt8(SafeInteger):
    __slots__ = ()
    int_type = UINT8


class UInt16(SafeInteger):
    __slots__ = ()
    int_type = UINT16


class UInt32(SafeInteger):
    __slots__ = ()
    int_type = UINT32


class UInt64(SafeInteger):
    __slots__ = ()
    int_type = UINT64


for _cls in (Int8, Int16, Int32, Int64, UInt8, UInt16, UInt32, UInt64):
    _BOUND_CLASSES[_cls.int_type] = _cls
del _cls


# =============================================================================
# OPERAND NORMALIZATION
# =============================================================================


def _raw_value(other: object) -> Any:
    if isinstance(other, SafeInteger):
        return other._value
    try:
        return operator.index(other)  # type: ignore[arg-type]
    except TypeError:
        return NotImplemented


def _coerce_pair(left: Operand, right: Operand) -> tuple[SafeInteger, SafeInteger]:
    """
    Приведение пары операндов к двум SafeInteger одного типа.

    Сырой операнд конвертируется во временный SafeInteger класса второго
    операнда (через guard конструктора).

    Raises:
        TypeMismatch: Если ни один операнд не SafeInteger, типы различаются,
            или сырой операнд не является целым
        SizeMismatch: Если сырой операнд вне диапазона
    """
    if isinstance(left, SafeInteger):
        if isinstance(right, SafeInteger):
            if left.int_type != right.int_type:
                raise TypeMismatch(
                    f"Cannot mix {left.int_type} and {right.int_type} in one operation"
                )
            return left, right
        return left, type(left)(right)

    if isinstance(right, SafeInteger):
        return type(right)(left), right

    raise TypeMismatch("At least one operand must be a SafeInteger")


# =============================================================================
# CHECKED OPERATIONS
# =============================================================================


class _Operation(NamedTuple):
    name: str
    symbol: str
    check: Callable[[int, int, int, int], Optional[FaultKind]]
    compute: Callable[[int, int], int]


_ADD = _Operation("addition", "+", check_addition, operator.add)
_SUB = _Operation("subtraction", "-", check_subtraction, operator.sub)
_MULT = _Operation("multiplication", "*", check_multiplication, operator.mul)
_DIV = _Operation("division", "/", check_division, divide)


def _apply(op: _Operation, left: Operand, right: Operand) -> SafeInteger:
    a, b = _coerce_pair(left, right)
    fault = op.check(a._value, b._value, a._min, a._max)
    if fault is not None:
        raise fault_for(
            fault,
            f"{a.int_type} {op.name} prevented: {a._value} {op.symbol} {b._value} "
            f"leaves [{a._min}, {a._max}] ({fault.value})",
        )
    # Конвертирующий конструктор: последняя линия защиты
    return type(a)(op.compute(a._value, b._value))


def safe_add(left: Operand, right: Operand) -> SafeInteger:
    """
    Проверяемое сложение.

    Raises:
        AdditionOverflow: Если оба операнда > 0 и сумма превысила бы max
        AdditionUnderflow: Если оба операнда < 0 и сумма опустилась бы ниже min
    """
    return _apply(_ADD, left, right)


def safe_sub(left: Operand, right: Operand) -> SafeInteger:
    """
    Проверяемое вычитание.

    Raises:
        SubtractionOverflow: Если вычитание отрицательного превысило бы max
        SubtractionUnderflow: Если разность опустилась бы ниже min
            (для беззнаковых: right > left)
    """
    return _apply(_SUB, left, right)


def safe_mult(left: Operand, right: Operand) -> SafeInteger:
    """
    Проверяемое умножение (квадранты знаков).

    Raises:
        MultiplicationOverflow: Если произведение одного знака превысило бы max
        MultiplicationUnderflow: Если произведение разных знаков опустилось бы ниже min
    """
    return _apply(_MULT, left, right)


def safe_div(left: Operand, right: Operand) -> SafeInteger:
    """
    Проверяемое деление с усечением к нулю.

    Raises:
        DivisionByZero: Если делитель равен нулю
        SizeMismatch: Если частное не помещается в тип (знаковый min / -1)
    """
    return _apply(_DIV, left, right)


# =============================================================================
# RESULT API
# =============================================================================


@dataclass(frozen=True)
class ArithmeticResult:
    """Результат проверяемой операции без исключения."""

    ok: bool
    value: Optional[SafeInteger]
    fault: Optional[FaultKind]

    # Диагностика
    details: str


def _as_result(func: Callable[[Operand, Operand], SafeInteger], left: Operand, right: Operand) -> ArithmeticResult:
    try:
        value = func(left, right)
    except SafeIntegerError as e:
        return ArithmeticResult(ok=False, value=None, fault=e.kind, details=str(e))
    return ArithmeticResult(ok=True, value=value, fault=None, details="")


def checked_add(left: Operand, right: Operand) -> ArithmeticResult:
    return _as_result(safe_add, left, right)


def checked_sub(left: Operand, right: Operand) -> ArithmeticResult:
    return _as_result(safe_sub, left, right)


def checked_mult(left: Operand, right: Operand) -> ArithmeticResult:
    return _as_result(safe_mult, left, right)


def checked_div(left: Operand, right: Operand) -> ArithmeticResult:
    return _as_result(safe_div, left, right)
