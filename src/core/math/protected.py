"""
Protected Strings — Разбиение и сборка protected строк

Protected строка = unprotected строка + контрольные символы.

Модуль содержит чистые функции, общие для всех алгоритмов:
- split_tail: отделение последних n символов (контрольных) от payload
- append: присоединение контрольных символов к payload

Длина считается в code points (семантика Python str), поэтому функции
корректны для многобайтовых символов.
"""

from typing import Tuple

from src.core.domain.errors import InvalidProtectedString


def split_tail(text: str, n: int) -> Tuple[str, str]:
    """
    Разбиение строки на (head, tail), где tail — последние n символов.

    Args:
        text: Protected строка
        n: Количество контрольных символов (>= 1)

    Returns:
        Кортеж (head, tail); head + tail == text

    Raises:
        InvalidProtectedString: Если text короче n символов
        ValueError: Если n < 1

    Examples:
        >>> split_tail("helloworld", 5)
        ('hello', 'world')
        >>> split_tail("5", 1)
        ('', '5')
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")

    if len(text) < n:
        raise InvalidProtectedString(text)

    return text[:-n], text[-n:]


def append(payload: str, suffix: str) -> str:
    """
    Присоединение контрольных символов к payload.

    Чистая конкатенация, никогда не завершается ошибкой.

    Examples:
        >>> append("hello", "world")
        'helloworld'
    """
    return payload + suffix
