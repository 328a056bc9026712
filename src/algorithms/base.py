"""CheckDigitAlgorithm — общий контракт алгоритмов контрольных символов.

Три операции, одинаковые для всех алгоритмов:
- compute(unprotected)  → контрольные символы
- generate(unprotected) → unprotected + контрольные символы
- validate(protected)   → True/False

generate и validate реализованы здесь поверх compute и split_tail/append.
Конкретный алгоритм задаёт только compute и check_length.
"""

from abc import ABC, abstractmethod

from src.core.math.protected import append, split_tail


class CheckDigitAlgorithm(ABC):
    """Базовый класс алгоритма контрольных символов.

    Reportable ошибки поднимаются как подклассы CheckDigitError:
    - InvalidProtectedString (validate: строка короче check_length)
    - UnknownSymbolInString (strict-декодирование)
    """

    # Количество контрольных символов, добавляемых к payload
    check_length: int = 1

    @abstractmethod
    def compute(self, unprotected: str) -> str:
        """Вычисление контрольных символов для unprotected строки.

        В отличие от generate() возвращает только контрольные символы.
        """

    def generate(self, unprotected: str) -> str:
        """Protected строка: unprotected + вычисленные контрольные символы.

        Конкатенация без повторной валидации.
        """
        return append(unprotected, self.compute(unprotected))

    def validate(self, protected: str) -> bool:
        """Проверка protected строки.

        Returns:
            True если контрольные символы совпадают с вычисленными по head

        Raises:
            InvalidProtectedString: Если protected короче check_length
            UnknownSymbolInString: Если compute(head) в strict-режиме
                встретил неизвестный символ
        """
        head, tail = split_tail(protected, self.check_length)
        return self.compute(head) == tail
