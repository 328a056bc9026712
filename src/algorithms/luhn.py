"""Luhn — алгоритм контрольной цифры mod 10.

Эталонная реализация над десятичным алфавитом "0123456789".

Рекуррентная формула (справа налево, позиции 0, 1, 2, …):
    d'_i = luhn_double(d_i)  если i чётная
    d'_i = d_i               если i нечётная
    sum  = Σ d'_i mod 10
    check = (10 - sum) mod 10

Детектирует все одиночные ошибки цифр и большинство перестановок соседних
цифр (кроме 09 ↔ 90). Не является криптографической защитой.
"""

import logging
from dataclasses import dataclass, field
from typing import Final, List

from src.algorithms.base import CheckDigitAlgorithm
from src.core.math.symbol_map import SymbolMap, ValueWidth

logger = logging.getLogger(__name__)


# Десятичный алфавит Luhn: символы 0..9 ↔ значения 0..9
LUHN_CHARSET: Final[str] = "0123456789"

# Модуль контрольной суммы
LUHN_MODULUS: Final[int] = 10


def luhn_double(digit: int) -> int:
    """
    Удвоение цифры с суммированием десятичных разрядов результата.

    Examples:
        >>> luhn_double(4)
        8
        >>> luhn_double(7)  # 14 → 1 + 4
        5
    """
    doubled = digit * 2
    return doubled - 9 if doubled > 9 else doubled


def luhn_sum(digits: List[int]) -> int:
    """
    Сумма Luhn по модулю 10 для последовательности цифр.

    Обход от последней цифры к первой; цифры на чётных позициях
    (0 — самая правая) удваиваются.
    """
    total = 0
    for i, digit in enumerate(reversed(digits)):
        total = (total + (luhn_double(digit) if i % 2 == 0 else digit)) % LUHN_MODULUS
    return total


@dataclass(frozen=True)
class LuhnAlgorithm(CheckDigitAlgorithm):
    """Luhn алгоритм с одной контрольной цифрой.

    Attributes:
        lossy: True — символы вне "0123456789" пропускаются (дефисы, пробелы);
            False — вызывают UnknownSymbolInString

    Immutable и stateless: один экземпляр безопасно разделяется между потоками.
    """

    lossy: bool = True
    symbol_map: SymbolMap = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "symbol_map", SymbolMap.build_sequential(LUHN_CHARSET, ValueWidth.U8)
        )
        logger.debug("Created LuhnAlgorithm (lossy=%s)", self.lossy)

    def compute(self, unprotected: str) -> str:
        """Контрольная цифра Luhn для unprotected строки.

        Пустая строка (или строка без цифр в lossy-режиме) даёт "0".

        Raises:
            UnknownSymbolInString: В strict-режиме для первого символа вне алфавита

        Examples:
            >>> LuhnAlgorithm().compute("7992739871")
            '3'
        """
        if self.lossy:
            digits = self.symbol_map.decode_lossy(unprotected)
        else:
            digits = self.symbol_map.decode_strict(unprotected)

        check = (LUHN_MODULUS - luhn_sum(digits)) % LUHN_MODULUS
        return self.symbol_map.encode([check])
