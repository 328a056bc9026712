"""
Errors — Таксономия ошибок вычисления контрольных символов

Два семейства исключений:

1. CheckDigitError — reportable ошибки входных данных. Возникают при обработке
   пользовательских строк и предназначены для перехвата вызывающим кодом:
   - InvalidProtectedString: protected строка короче требуемого числа
     контрольных символов
   - UnknownSymbolInString: strict-декодирование встретило символ вне алфавита

2. SymbolMapFault — фатальная ошибка программиста (некорректная статическая
   конфигурация SymbolMap или encode неизвестного значения). НЕ является
   подклассом CheckDigitError: `except CheckDigitError` никогда её не скрывает.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки поднимаются немедленно, не повторяются и не подавляются
2. Каждая reportable ошибка несёт исходный фрагмент строки (fragment)
3. Lossy-декодирование никогда не поднимает UnknownSymbolInString
"""


# =============================================================================
# REPORTABLE ERRORS
# =============================================================================


class CheckDigitError(Exception):
    """
    Базовый класс reportable ошибок алгоритмов контрольных символов.

    Attributes:
        fragment: Фрагмент входной строки, вызвавший ошибку
    """

    def __init__(self, fragment: str, message: str):
        super().__init__(message)
        self.fragment = fragment

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.fragment == other.fragment

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.fragment))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.fragment!r})"


class InvalidProtectedString(CheckDigitError):
    """
    Protected строка слишком короткая, чтобы содержать контрольные символы.

    Несёт исходную protected строку целиком.
    """

    def __init__(self, protected: str):
        super().__init__(protected, f"invalid protected string '{protected}'")


class UnknownSymbolInString(CheckDigitError):
    """
    Strict-декодирование встретило символ, отсутствующий в SymbolMap.

    Несёт первый неизвестный символ (как str, чтобы многобайтовые символы
    оставались печатаемыми).
    """

    def __init__(self, symbol: str):
        super().__init__(symbol, f"unknown character '{symbol}' in string")


# =============================================================================
# FATAL ERRORS
# =============================================================================


class SymbolMapFault(Exception):
    """
    Фатальная ошибка конфигурации или использования SymbolMap.

    Возникает при:
    - Несовпадении длин последовательностей символов и значений
    - Дубликатах символов или значений
    - Значениях вне диапазона объявленной ширины (ValueWidth)
    - encode() значения, которого нет в карте

    Означает ошибку в вызывающем коде, а не в пользовательских данных.
    Не предназначена для перехвата.
    """
