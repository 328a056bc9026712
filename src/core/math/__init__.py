"""
Core math modules

Примитивы отображения символов и работы с protected строками.
"""

# Symbol Map
from src.core.math.symbol_map import SymbolMap, ValueWidth

# Protected Strings
from src.core.math.protected import append, split_tail

__all__ = [
    # Symbol Map — Types
    "SymbolMap",
    "ValueWidth",
    # Protected Strings — Functions
    "split_tail",
    "append",
]
