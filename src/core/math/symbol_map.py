"""
SymbolMap — Биективное отображение символов в числовые значения

Модуль позволяет арифметике контрольных сумм работать над произвольным
алфавитом, а не только над десятичными цифрами:
- symbol → value (декодирование строки в последовательность чисел)
- value → symbol (кодирование результата обратно в отображаемые символы)
- strict и lossy политики для символов вне алфавита

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отображение биективно: каждый символ ↔ ровно одно значение
2. Нарушение биективности при построении → SymbolMapFault (фатально)
3. Значения — беззнаковые целые в пределах объявленной ширины (ValueWidth)
4. Экземпляр immutable после построения
5. Длина строк считается в code points, а не в байтах
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence, Tuple

from src.core.domain.errors import SymbolMapFault, UnknownSymbolInString

logger = logging.getLogger(__name__)


# =============================================================================
# VALUE WIDTH
# =============================================================================


class ValueWidth(int, Enum):
    """
    Ширина беззнакового числового типа значений карты (в битах).

    Ограничивает допустимый диапазон значений: [0, 2**bits).
    """

    U8 = 8
    U16 = 16
    U32 = 32

    @property
    def max_value(self) -> int:
        """Максимальное значение, представимое данной шириной"""
        return (1 << self.value) - 1


# =============================================================================
# SYMBOL MAP
# =============================================================================


@dataclass(frozen=True, eq=False)
class SymbolMap:
    """
    Bidirectional map между символами и беззнаковыми целыми значениями.

    Строится один раз из статической конфигурации (build / build_sequential),
    затем многократно используется для конверсии строка ⇄ значения.

    Attributes:
        symbols: Алфавит в порядке построения
        values: Значения, соответствующие symbols позиционно
        width: Ширина числового типа значений

    Raises:
        SymbolMapFault: Если последовательности разной длины, содержат
            дубликаты или значения выходят за пределы width
    """

    symbols: str
    values: Tuple[int, ...]
    width: ValueWidth = ValueWidth.U32

    _symbol_to_value: Mapping[str, int] = field(
        init=False, repr=False, compare=False
    )
    _value_to_symbol: Mapping[int, str] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        try:
            width = ValueWidth(self.width)
        except ValueError as e:
            raise SymbolMapFault(f"unsupported value width {self.width!r}") from e

        values = tuple(self.values)
        symbol_count = len(self.symbols)

        if len(values) != symbol_count:
            raise SymbolMapFault(
                f"symbols and values must have the same length "
                f"({symbol_count} != {len(values)})"
            )

        for value in values:
            if isinstance(value, bool) or not isinstance(value, int):
                raise SymbolMapFault(f"value {value!r} is not an integer")
            if value < 0 or value > width.max_value:
                raise SymbolMapFault(
                    f"value {value} does not fit into {width.value}-bit "
                    f"unsigned width"
                )

        symbol_to_value = dict(zip(self.symbols, values))
        value_to_symbol = dict(zip(values, self.symbols))

        if len(symbol_to_value) != symbol_count:
            raise SymbolMapFault(
                f"every symbol in {self.symbols!r} must be unique"
            )
        if len(value_to_symbol) != symbol_count:
            raise SymbolMapFault(f"every value in {values!r} must be unique")

        # frozen dataclass: присваивание только через object.__setattr__
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "width", width)
        object.__setattr__(
            self, "_symbol_to_value", MappingProxyType(symbol_to_value)
        )
        object.__setattr__(
            self, "_value_to_symbol", MappingProxyType(value_to_symbol)
        )

        logger.debug(
            "Built SymbolMap of %d symbols (%d-bit values)",
            symbol_count,
            self.width.value,
        )

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def build(
        cls,
        symbols: str,
        values: Iterable[int],
        width: ValueWidth = ValueWidth.U32,
    ) -> "SymbolMap":
        """
        Построение карты из алфавита и явной последовательности значений.

        Вызывается со статической конфигурацией, никогда с недоверенным вводом.

        Args:
            symbols: Алфавит (каждый code point — отдельный символ)
            values: Значения, позиционно соответствующие символам
            width: Ширина числового типа (default: U32)

        Returns:
            Новый SymbolMap

        Raises:
            SymbolMapFault: Разные длины, дубликаты или значения вне width

        Examples:
            >>> SymbolMap.build("ABCD", [5, 6, 7, 8]).encode([7, 6])
            'CB'
        """
        return cls(symbols=symbols, values=tuple(values), width=width)

    @classmethod
    def build_sequential(
        cls, symbols: str, width: ValueWidth = ValueWidth.U8
    ) -> "SymbolMap":
        """
        Построение карты со значениями 0, 1, 2, … в порядке символов.

        Args:
            symbols: Алфавит без дубликатов
            width: Ширина числового типа (default: U8)

        Returns:
            Новый SymbolMap

        Raises:
            SymbolMapFault: Дубликаты символов или алфавит длиннее, чем
                позволяет width

        Examples:
            >>> SymbolMap.build_sequential("0123").decode_strict("310")
            [3, 1, 0]
        """
        return cls.build(symbols, range(len(symbols)), width)

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def decode_strict(self, text: str) -> List[int]:
        """
        Конверсия строки в последовательность значений (strict).

        Args:
            text: Входная строка

        Returns:
            Значения всех символов в порядке следования

        Raises:
            UnknownSymbolInString: Для первого символа вне алфавита
        """
        decoded = []
        for symbol in text:
            value = self._symbol_to_value.get(symbol)
            if value is None:
                raise UnknownSymbolInString(symbol)
            decoded.append(value)
        return decoded

    def decode_lossy(self, text: str) -> List[int]:
        """
        Конверсия строки в последовательность значений (lossy).

        Символы вне алфавита молча пропускаются (дефисы, пробелы и т.п.).
        Никогда не поднимает исключений.
        """
        return [
            self._symbol_to_value[symbol]
            for symbol in text
            if symbol in self._symbol_to_value
        ]

    def encode(self, values: Sequence[int]) -> str:
        """
        Конверсия последовательности значений обратно в строку символов.

        Args:
            values: Значения, ранее полученные из этой же карты

        Returns:
            Конкатенация соответствующих символов

        Raises:
            SymbolMapFault: Если значение отсутствует в карте (ошибка
                использования, а не входных данных)
        """
        try:
            return "".join(self._value_to_symbol[value] for value in values)
        except KeyError as e:
            raise SymbolMapFault(f"value {e.args[0]!r} is not in the map") from e

    # -------------------------------------------------------------------------
    # Протокол контейнера
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._symbol_to_value)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbol_to_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolMap):
            return NotImplemented
        return (
            self.width == other.width
            and dict(self._symbol_to_value) == dict(other._symbol_to_value)
        )

    def __hash__(self) -> int:
        return hash((self.width, frozenset(self._symbol_to_value.items())))
