"""Algorithms — алгоритмы контрольных символов.

- CheckDigitAlgorithm: общий контракт {compute, generate, validate}
- LuhnAlgorithm: эталонный Luhn mod 10 над десятичным алфавитом
- Registry: фабрики и построение по конфигурации
"""

from .base import CheckDigitAlgorithm
from .luhn import LUHN_CHARSET, LUHN_MODULUS, LuhnAlgorithm, luhn_double, luhn_sum
from .registry import available_algorithms, create_algorithm, luhn

__all__ = [
    "CheckDigitAlgorithm",
    "LuhnAlgorithm",
    "LUHN_CHARSET",
    "LUHN_MODULUS",
    "luhn_double",
    "luhn_sum",
    "luhn",
    "available_algorithms",
    "create_algorithm",
]
