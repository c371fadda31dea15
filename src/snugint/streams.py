"""
Streams: Текстовая вставка и извлечение SafeInteger

Вставка пишет десятичное представление value в текстовый поток.
Извлечение читает очередной токен (разделитель: пробельные символы),
разбирает его как целое по основанию 10 и пропускает через тот же
конвертирующий guard, что и конструктор. Обхода проверки диапазона нет.

Модуль работает с любым объектом с интерфейсом SafeInteger
(value / assign / конструктор от int), поэтому не импортирует сам класс.
"""

import logging
from typing import Any, TextIO

from src.snugint.errors import SizeMismatch, TypeMismatch

logger = logging.getLogger(__name__)


# =============================================================================
# TOKENIZER
# =============================================================================


def read_token(stream: TextIO) -> str:
    """
    Чтение очередного токена из текстового потока.

    Ведущие пробельные символы пропускаются; токен заканчивается на первом
    пробельном символе (он поглощается) или на конце потока.

    Args:
        stream: Текстовый поток

    Returns:
        Токен (пустая строка, если поток исчерпан)
    """
    chars: list[str] = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    return "".join(chars)


def parse_integer(token: str) -> int:
    """
    Разбор токена как десятичного целого.

    Args:
        token: Токен (допускается знак '+' или '-')

    Returns:
        Целое значение

    Raises:
        TypeMismatch: Если токен пустой или не является целым

    Examples:
        >>> parse_integer("-42")
        -42
        >>> parse_integer("+7")
        7
    """
    if not token:
        raise TypeMismatch("Stream exhausted, no integer token to extract")

    digits = token[1:] if token[0] in "+-" else token
    if not digits.isdigit() or not digits.isascii():
        raise TypeMismatch(f"Token {token!r} is not a base-10 integer")

    return int(token, 10)


# =============================================================================
# INSERTION / EXTRACTION
# =============================================================================


def write_safe_integer(stream: TextIO, item: Any) -> TextIO:
    """
    Вставка: запись десятичного представления item.value в поток.

    Args:
        stream: Текстовый поток
        item: SafeInteger

    Returns:
        Тот же поток (для цепочек вызовов)
    """
    stream.write(str(item.value))
    return stream


def read_safe_integer(stream: TextIO, target: Any) -> Any:
    """
    Извлечение: чтение очередного целого из потока с проверкой диапазона.

    Для класса SafeInteger в target возвращается новый экземпляр.
    Экземпляр в target обновляется только после успешной проверки.

    Args:
        stream: Текстовый поток
        target: Класс SafeInteger или его экземпляр

    Returns:
        Новый или обновлённый SafeInteger

    Raises:
        TypeMismatch: Если токен не является целым или поток исчерпан
        SizeMismatch: Если значение вне [min, max] типа target
    """
    token = read_token(stream)
    try:
        value = parse_integer(token)
        if isinstance(target, type):
            return target(value)
        target.assign(value)
        return target
    except TypeMismatch:
        logger.debug("Rejected stream token %r: not an integer", token)
        raise
    except SizeMismatch:
        logger.debug("Rejected stream token %r: out of range for %s", token, target)
        raise
