"""
Overflow Checks: Предусловия арифметики фиксированной ширины

Модуль решает, приведёт ли операция к выходу за [lo, hi], ДО вычисления
результата. Сравнения переставлены алгебраически (hi - left < right вместо
left + right > hi), чтобы в машине фиксированной ширины сама проверка не
вызывала переполнение, которое она охраняет.

Все функции чистые: принимают значения операндов и границы типа,
возвращают FaultKind или None (операция безопасна).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды уже лежат в [lo, hi]
2. Проверка не вычисляет сумму/разность/произведение операндов
3. Ноль как операнд никогда не вызывает отказ сложения и умножения
4. Для беззнаковых типов (lo >= 0) вычитание отказывает iff right > left
"""

from src.snugint.errors import FaultKind


# =============================================================================
# HELPERS
# =============================================================================


def truncating_div(a: int, b: int) -> int:
    """
    Целочисленное деление с округлением к нулю.

    Семантика машинного деления (C/C++), а не floor-деления Python.

    Args:
        a: Делимое
        b: Делитель (не ноль)

    Returns:
        Частное, округлённое к нулю

    Raises:
        ZeroDivisionError: Если b == 0

    Examples:
        >>> truncating_div(7, 2)
        3
        >>> truncating_div(-7, 2)
        -3
        >>> truncating_div(-128, 3)
        -42
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


def is_unsigned_range(lo: int) -> bool:
    """True если диапазон не содержит отрицательных значений."""
    return lo >= 0


# =============================================================================
# ADDITION
# =============================================================================


def check_addition(left: int, right: int, lo: int, hi: int) -> FaultKind | None:
    """
    Предусловие сложения left + right.

    - Оба > 0: overflow iff hi - left < right
    - Оба < 0: underflow iff lo - left > right
    - Разные знаки или ноль: сумма ограничена операндами, проверка не нужна

    Examples:
        >>> check_addition(120, 10, -128, 127)
        <FaultKind.ADDITION_OVERFLOW: 'addition_overflow'>
        >>> check_addition(-120, -10, -128, 127) is FaultKind.ADDITION_UNDERFLOW
        True
        >>> check_addition(120, -10, -128, 127) is None
        True
    """
    if left > 0 and right > 0:
        if hi - left < right:
            return FaultKind.ADDITION_OVERFLOW
    elif left < 0 and right < 0:
        if lo - left > right:
            return FaultKind.ADDITION_UNDERFLOW
    return None


# =============================================================================
# SUBTRACTION
# =============================================================================


def check_subtraction(left: int, right: int, lo: int, hi: int) -> FaultKind | None:
    """
    Предусловие вычитания left - right.

    Беззнаковый диапазон (lo >= 0): отрицательных значений нет, поэтому
    единственный отказ: underflow при left - lo < right (для lo == 0 это
    right > left).

    Знаковый диапазон:
    - right < 0 (вычитание отрицательного увеличивает результат):
      overflow iff hi - left < -right
    - right > 0 (вычитание положительного уменьшает результат):
      underflow iff left - lo < right
    - right == 0: результат равен left

    Тест по знаку right (а не по квадранту left > 0) ловит 0 - min,
    который в дополнительном коде не представим.

    Examples:
        >>> check_subtraction(1, 10, 0, 2**32 - 1)
        <FaultKind.SUBTRACTION_UNDERFLOW: 'subtraction_underflow'>
        >>> check_subtraction(100, -100, -128, 127)
        <FaultKind.SUBTRACTION_OVERFLOW: 'subtraction_overflow'>
        >>> check_subtraction(-100, 100, -128, 127)
        <FaultKind.SUBTRACTION_UNDERFLOW: 'subtraction_underflow'>
        >>> check_subtraction(0, -128, -128, 127)
        <FaultKind.SUBTRACTION_OVERFLOW: 'subtraction_overflow'>
    """
    if is_unsigned_range(lo):
        if left - lo < right:
            return FaultKind.SUBTRACTION_UNDERFLOW
        return None

    if right < 0:
        # left - right > left: выход только за hi
        if hi - left < -right:
            return FaultKind.SUBTRACTION_OVERFLOW
    elif right > 0:
        # left - right < left: выход только за lo
        if left - lo < right:
            return FaultKind.SUBTRACTION_UNDERFLOW
    return None


# =============================================================================
# MULTIPLICATION
# =============================================================================


def check_multiplication(left: int, right: int, lo: int, hi: int) -> FaultKind | None:
    """
    Предусловие умножения left * right по квадрантам знаков.

    | left | right | тест                                          |
    |------|-------|-----------------------------------------------|
    |  +   |   +   | overflow  iff left > hi / right               |
    |  +   |   -   | underflow iff right < lo / left               |
    |  -   |   +   | underflow iff left < lo / right               |
    |  -   |   -   | overflow  iff left != 0 and right < hi / left |

    Деление границы: усечение к нулю (машинная семантика).
    Ноль в любом операнде даёт ноль, отказа нет.

    Examples:
        >>> check_multiplication(100, 2, -128, 127)
        <FaultKind.MULTIPLICATION_OVERFLOW: 'multiplication_overflow'>
        >>> check_multiplication(3, -43, -128, 127)
        <FaultKind.MULTIPLICATION_UNDERFLOW: 'multiplication_underflow'>
        >>> check_multiplication(-2, 64, -128, 127) is None
        True
    """
    if left == 0 or right == 0:
        return None

    if left > 0:
        if right > 0:
            if left > truncating_div(hi, right):
                return FaultKind.MULTIPLICATION_OVERFLOW
        else:
            if right < truncating_div(lo, left):
                return FaultKind.MULTIPLICATION_UNDERFLOW
    else:
        if right > 0:
            if left < truncating_div(lo, right):
                return FaultKind.MULTIPLICATION_UNDERFLOW
        else:
            if left != 0 and right < truncating_div(hi, left):
                return FaultKind.MULTIPLICATION_OVERFLOW
    return None


# =============================================================================
# DIVISION
# =============================================================================


def check_division(left: int, right: int, lo: int, hi: int) -> FaultKind | None:
    """
    Предусловие деления left / right.

    Частное по модулю не превосходит делимого, кроме знакового lo / -1;
    этот случай ловит конвертирующий конструктор (SizeMismatch).
    Здесь проверяется только нулевой делитель.
    """
    if right == 0:
        return FaultKind.DIVISION_BY_ZERO
    return None


def divide(left: int, right: int) -> int:
    """Частное left / right с усечением к нулю."""
    return truncating_div(left, right)
