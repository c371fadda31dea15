"""
Тесты для модуля Overflow Checks

Проверяет:
1. Предусловия сложения (оба знака, ноль, границы)
2. Предусловия вычитания (знаковые и беззнаковые диапазоны)
3. Квадранты знаков умножения
4. Нулевой делитель
5. Деление с усечением к нулю
"""

import pytest

from src.snugint.errors import FaultKind
from src.snugint.math.overflow_checks import (
    check_addition,
    check_division,
    check_multiplication,
    check_subtraction,
    divide,
    is_unsigned_range,
    truncating_div,
)

I8 = (-128, 127)
U8 = (0, 255)
U32 = (0, 2**32 - 1)


# =============================================================================
# HELPERS
# =============================================================================


class TestTruncatingDiv:
    """Тесты для truncating_div"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
            (0, 5, 0),
            (-128, 3, -42),
            (127, -2, -63),
        ],
    )
    def test_rounds_toward_zero(self, a: int, b: int, expected: int) -> None:
        """Частное округляется к нулю, а не вниз"""
        assert truncating_div(a, b) == expected

    def test_differs_from_floor_division(self) -> None:
        """Для отрицательных частных результат отличается от //"""
        assert truncating_div(-7, 2) != -7 // 2

    def test_zero_divisor_raises(self) -> None:
        """Деление на ноль не маскируется"""
        with pytest.raises(ZeroDivisionError):
            truncating_div(1, 0)

    def test_divide_alias(self) -> None:
        """divide использует усечение к нулю"""
        assert divide(-9, 4) == -2

    def test_is_unsigned_range(self) -> None:
        """Диапазон без отрицательных значений считается беззнаковым"""
        assert is_unsigned_range(0)
        assert is_unsigned_range(10)
        assert not is_unsigned_range(-1)


# =============================================================================
# ADDITION
# =============================================================================


class TestCheckAddition:
    """Тесты для check_addition"""

    def test_positive_overflow(self) -> None:
        """120 + 10 не помещается в int8"""
        assert check_addition(120, 10, *I8) is FaultKind.ADDITION_OVERFLOW

    def test_positive_exact_max(self) -> None:
        """120 + 7 == 127 допустимо"""
        assert check_addition(120, 7, *I8) is None

    def test_negative_underflow(self) -> None:
        """-120 + -10 не помещается в int8"""
        assert check_addition(-120, -10, *I8) is FaultKind.ADDITION_UNDERFLOW

    def test_negative_exact_min(self) -> None:
        """-120 + -8 == -128 допустимо"""
        assert check_addition(-120, -8, *I8) is None

    @pytest.mark.parametrize("left, right", [(127, -128), (-128, 127), (0, 127), (-128, 0), (0, 0)])
    def test_mixed_signs_and_zero_never_fail(self, left: int, right: int) -> None:
        """Разные знаки или ноль не выводят сумму за границы"""
        assert check_addition(left, right, *I8) is None

    def test_unsigned_overflow(self) -> None:
        """255 + 1 не помещается в uint8"""
        assert check_addition(255, 1, *U8) is FaultKind.ADDITION_OVERFLOW


# =============================================================================
# SUBTRACTION
# =============================================================================


class TestCheckSubtraction:
    """Тесты для check_subtraction"""

    def test_positive_minus_negative_overflow(self) -> None:
        """100 - (-100) превышает max int8"""
        assert check_subtraction(100, -100, *I8) is FaultKind.SUBTRACTION_OVERFLOW

    def test_positive_minus_negative_exact_max(self) -> None:
        """100 - (-27) == 127 допустимо"""
        assert check_subtraction(100, -27, *I8) is None

    def test_negative_minus_positive_underflow(self) -> None:
        """-100 - 100 ниже min int8"""
        assert check_subtraction(-100, 100, *I8) is FaultKind.SUBTRACTION_UNDERFLOW

    def test_negative_minus_positive_exact_min(self) -> None:
        """-100 - 28 == -128 допустимо"""
        assert check_subtraction(-100, 28, *I8) is None

    def test_zero_minus_min_overflow(self) -> None:
        """0 - (-128) == 128 не представимо в int8"""
        assert check_subtraction(0, -128, *I8) is FaultKind.SUBTRACTION_OVERFLOW

    def test_minus_one_minus_min(self) -> None:
        """-1 - (-128) == 127 допустимо"""
        assert check_subtraction(-1, -128, *I8) is None

    @pytest.mark.parametrize("left, right", [(127, 127), (-128, -128), (5, 100), (-5, -100), (0, 0), (50, 0)])
    def test_same_sign_never_fails(self, left: int, right: int) -> None:
        """Одинаковые знаки не выводят разность за границы int8"""
        assert check_subtraction(left, right, *I8) is None

    def test_unsigned_underflow(self) -> None:
        """1 - 10 в uint32 даёт underflow, а не 4294967287"""
        assert check_subtraction(1, 10, *U32) is FaultKind.SUBTRACTION_UNDERFLOW

    def test_unsigned_equal_operands(self) -> None:
        """10 - 10 == 0 допустимо"""
        assert check_subtraction(10, 10, *U32) is None

    def test_unsigned_zero_minus_one(self) -> None:
        """0 - 1 в uint8 даёт underflow"""
        assert check_subtraction(0, 1, *U8) is FaultKind.SUBTRACTION_UNDERFLOW

    def test_custom_unsigned_range(self) -> None:
        """Диапазон [10, 20]: 15 - 6 == 9 ниже min"""
        assert check_subtraction(15, 6, 10, 20) is FaultKind.SUBTRACTION_UNDERFLOW
        assert check_subtraction(15, 5, 10, 20) is None


# =============================================================================
# MULTIPLICATION
# =============================================================================


class TestCheckMultiplication:
    """Тесты для check_multiplication (квадранты знаков)"""

    def test_positive_positive_overflow(self) -> None:
        """100 * 2 превышает max int8"""
        assert check_multiplication(100, 2, *I8) is FaultKind.MULTIPLICATION_OVERFLOW

    def test_positive_positive_exact(self) -> None:
        """63 * 2 == 126 допустимо, 64 * 2 == 128 нет"""
        assert check_multiplication(63, 2, *I8) is None
        assert check_multiplication(64, 2, *I8) is FaultKind.MULTIPLICATION_OVERFLOW

    def test_positive_negative_underflow(self) -> None:
        """3 * -43 == -129 ниже min int8"""
        assert check_multiplication(3, -43, *I8) is FaultKind.MULTIPLICATION_UNDERFLOW

    def test_positive_negative_exact_min(self) -> None:
        """2 * -64 == -128 допустимо"""
        assert check_multiplication(2, -64, *I8) is None

    def test_negative_positive_underflow(self) -> None:
        """-43 * 3 == -129 ниже min int8"""
        assert check_multiplication(-43, 3, *I8) is FaultKind.MULTIPLICATION_UNDERFLOW

    def test_negative_positive_exact_min(self) -> None:
        """-2 * 64 == -128 допустимо"""
        assert check_multiplication(-2, 64, *I8) is None

    def test_negative_negative_overflow(self) -> None:
        """-2 * -64 == 128 превышает max int8"""
        assert check_multiplication(-2, -64, *I8) is FaultKind.MULTIPLICATION_OVERFLOW

    def test_negative_negative_exact(self) -> None:
        """-2 * -63 == 126 допустимо"""
        assert check_multiplication(-2, -63, *I8) is None

    def test_min_times_minus_one_overflow(self) -> None:
        """-128 * -1 == 128 не представимо"""
        assert check_multiplication(-128, -1, *I8) is FaultKind.MULTIPLICATION_OVERFLOW

    @pytest.mark.parametrize("left, right", [(0, -128), (-128, 0), (0, 127), (127, 0), (0, 0)])
    def test_zero_operand_never_fails(self, left: int, right: int) -> None:
        """Ноль в любом операнде даёт ноль"""
        assert check_multiplication(left, right, *I8) is None

    def test_unsigned_overflow(self) -> None:
        """16 * 16 == 256 превышает max uint8"""
        assert check_multiplication(16, 16, *U8) is FaultKind.MULTIPLICATION_OVERFLOW
        assert check_multiplication(15, 17, *U8) is None


# =============================================================================
# DIVISION
# =============================================================================


class TestCheckDivision:
    """Тесты для check_division"""

    def test_zero_divisor(self) -> None:
        """Нулевой делитель"""
        assert check_division(10, 0, *I8) is FaultKind.DIVISION_BY_ZERO

    def test_nonzero_divisor(self) -> None:
        """Ненулевой делитель проверку проходит"""
        assert check_division(10, 3, *I8) is None
        assert check_division(-128, -1, *I8) is None
