"""
Тесты для таксономии ошибок SafeInteger

Проверяет:
1. Каждый FaultKind имеет собственный класс исключения
2. Совместимость со стандартными иерархиями Python
3. Отсутствие singleton-объектов (новый экземпляр на каждый отказ)
"""

import pytest

from src.snugint.errors import (
    FAULT_EXCEPTIONS,
    AdditionOverflow,
    DivisionByZero,
    FaultKind,
    SafeIntegerError,
    SizeMismatch,
    TypeMismatch,
    fault_for,
)


class TestFaultKinds:
    """Тесты для FaultKind и FAULT_EXCEPTIONS"""

    def test_nine_kinds(self) -> None:
        """Девять различимых видов отказа"""
        assert len(FaultKind) == 9

    def test_every_kind_has_exception(self) -> None:
        """Каждому виду соответствует свой класс"""
        assert set(FAULT_EXCEPTIONS) == set(FaultKind)
        assert len(set(FAULT_EXCEPTIONS.values())) == len(FaultKind)

    @pytest.mark.parametrize("kind", list(FaultKind))
    def test_exception_kind_matches(self, kind: FaultKind) -> None:
        """Атрибут kind исключения совпадает с ключом таблицы"""
        assert FAULT_EXCEPTIONS[kind].kind is kind

    def test_kind_is_str_enum(self) -> None:
        """FaultKind сериализуется как строка"""
        assert FaultKind.ADDITION_OVERFLOW == "addition_overflow"


class TestFaultExceptions:
    """Тесты для классов исключений"""

    @pytest.mark.parametrize("kind", list(FaultKind))
    def test_all_are_arithmetic_errors(self, kind: FaultKind) -> None:
        """Все отказы ловятся как SafeIntegerError и ArithmeticError"""
        exc = fault_for(kind)
        assert isinstance(exc, SafeIntegerError)
        assert isinstance(exc, ArithmeticError)

    def test_stdlib_compatibility(self) -> None:
        """Специализированные отказы совместимы со стандартными исключениями"""
        assert issubclass(SizeMismatch, ValueError)
        assert issubclass(TypeMismatch, TypeError)
        assert issubclass(DivisionByZero, ZeroDivisionError)

    def test_default_message(self) -> None:
        """Сообщение по умолчанию описывает отказ"""
        assert "OVERFLOW" in str(AdditionOverflow())

    def test_custom_message(self) -> None:
        """Переданное сообщение сохраняется"""
        exc = fault_for(FaultKind.SIZE_MISMATCH, "300 does not fit int8")
        assert isinstance(exc, SizeMismatch)
        assert str(exc) == "300 does not fit int8"

    def test_fresh_instance_per_fault(self) -> None:
        """Нет глобальных singleton-объектов"""
        assert fault_for(FaultKind.TYPE_MISMATCH) is not fault_for(FaultKind.TYPE_MISMATCH)
