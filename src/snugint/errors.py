"""
Faults: Таксономия ошибок SafeInteger

Каждая ошибка арифметики или конверсии имеет свой вид (FaultKind) и свой
класс исключения, чтобы вызывающий код мог различать причины отказа.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Исключение создаётся заново при каждом отказе (нет глобальных singleton-объектов)
2. Исключение возбуждается ДО любой мутации состояния (all-or-nothing)
3. Ядро ничего не логирует: отказ сообщается только через исключение
"""

from enum import Enum
from typing import Final


# =============================================================================
# FAULT KINDS
# =============================================================================


class FaultKind(str, Enum):
    """Вид отказа арифметической операции или конверсии."""

    ADDITION_OVERFLOW = "addition_overflow"
    ADDITION_UNDERFLOW = "addition_underflow"
    SUBTRACTION_OVERFLOW = "subtraction_overflow"
    SUBTRACTION_UNDERFLOW = "subtraction_underflow"
    MULTIPLICATION_OVERFLOW = "multiplication_overflow"
    MULTIPLICATION_UNDERFLOW = "multiplication_underflow"
    SIZE_MISMATCH = "size_mismatch"
    TYPE_MISMATCH = "type_mismatch"
    DIVISION_BY_ZERO = "division_by_zero"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SafeIntegerError(ArithmeticError):
    """
    Базовый класс всех отказов SafeInteger.

    Атрибут `kind` позволяет сопоставлять отказ с FaultKind без
    проверки конкретного класса исключения.
    """

    kind: FaultKind
    default_message = "SafeInteger operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class AdditionOverflow(SafeIntegerError):
    """Сумма двух положительных операндов превысила бы max (или инкремент на max)."""

    kind = FaultKind.ADDITION_OVERFLOW
    default_message = "addition operation prevented, OVERFLOW would have occurred"


class AdditionUnderflow(SafeIntegerError):
    """Сумма двух отрицательных операндов опустилась бы ниже min."""

    kind = FaultKind.ADDITION_UNDERFLOW
    default_message = "addition operation prevented, UNDERFLOW would have occurred"


class SubtractionOverflow(SafeIntegerError):
    """Вычитание отрицательного из неотрицательного превысило бы max."""

    kind = FaultKind.SUBTRACTION_OVERFLOW
    default_message = "subtraction operation prevented, OVERFLOW would have occurred"


class SubtractionUnderflow(SafeIntegerError):
    """Разность опустилась бы ниже min (или декремент на min)."""

    kind = FaultKind.SUBTRACTION_UNDERFLOW
    default_message = "subtraction operation prevented, UNDERFLOW would have occurred"


class MultiplicationOverflow(SafeIntegerError):
    """Произведение операндов одного знака превысило бы max."""

    kind = FaultKind.MULTIPLICATION_OVERFLOW
    default_message = "multiplication operation prevented, OVERFLOW would have occurred"


class MultiplicationUnderflow(SafeIntegerError):
    """Произведение операндов разных знаков опустилось бы ниже min."""

    kind = FaultKind.MULTIPLICATION_UNDERFLOW
    default_message = "multiplication operation prevented, UNDERFLOW would have occurred"


class SizeMismatch(SafeIntegerError, ValueError):
    """Конвертируемое значение лежит вне [min, max] целевого типа."""

    kind = FaultKind.SIZE_MISMATCH
    default_message = "size mismatch, value does not fit the integer type"


class TypeMismatch(SafeIntegerError, TypeError):
    """
    Тип несовместим с SafeInteger.

    Возбуждается, когда у типа нет различимых min/max (min == max),
    когда значение не является целым, или при смешивании разных типов.
    """

    kind = FaultKind.TYPE_MISMATCH
    default_message = "type mismatch, operation failure"


class DivisionByZero(SafeIntegerError, ZeroDivisionError):
    """Делитель равен нулю."""

    kind = FaultKind.DIVISION_BY_ZERO
    default_message = "division operation prevented, divisor is zero"


# =============================================================================
# KIND → EXCEPTION
# =============================================================================

FAULT_EXCEPTIONS: Final[dict[FaultKind, type[SafeIntegerError]]] = {
    FaultKind.ADDITION_OVERFLOW: AdditionOverflow,
    FaultKind.ADDITION_UNDERFLOW: AdditionUnderflow,
    FaultKind.SUBTRACTION_OVERFLOW: SubtractionOverflow,
    FaultKind.SUBTRACTION_UNDERFLOW: SubtractionUnderflow,
    FaultKind.MULTIPLICATION_OVERFLOW: MultiplicationOverflow,
    FaultKind.MULTIPLICATION_UNDERFLOW: MultiplicationUnderflow,
    FaultKind.SIZE_MISMATCH: SizeMismatch,
    FaultKind.TYPE_MISMATCH: TypeMismatch,
    FaultKind.DIVISION_BY_ZERO: DivisionByZero,
}


def fault_for(kind: FaultKind, message: str | None = None) -> SafeIntegerError:
    """
    Новый экземпляр исключения для вида отказа.

    Args:
        kind: Вид отказа
        message: Диагностическое сообщение (optional)

    Returns:
        Экземпляр соответствующего подкласса SafeIntegerError
    """
    return FAULT_EXCEPTIONS[kind](message)
