"""
AlgorithmTester — общий harness для проверки алгоритмов контрольных символов.

Прогоняет таблицы valid/invalid случаев против любого CheckDigitAlgorithm:
- valid: (protected, unprotected, check_chars) — validate/compute/generate
  должны согласованно подтверждать случай
- invalid: protected строки, для которых validate возвращает False
"""

from typing import Iterable, Tuple

from src.algorithms import CheckDigitAlgorithm


class AlgorithmTester:
    """Проверка трёх операций алгоритма по таблицам случаев."""

    def __init__(self, algorithm: CheckDigitAlgorithm):
        self.algorithm = algorithm

    def execute(
        self,
        valid_cases: Iterable[Tuple[str, str, str]],
        invalid_cases: Iterable[str],
    ) -> None:
        for protected, unprotected, check_chars in valid_cases:
            self.check_valid(protected, unprotected, check_chars)
        for protected in invalid_cases:
            self.check_invalid(protected)

    def check_valid(self, protected: str, unprotected: str, check_chars: str) -> None:
        assert self.algorithm.validate(protected) is True, protected
        assert self.algorithm.compute(unprotected) == check_chars, unprotected
        assert self.algorithm.generate(unprotected) == protected, unprotected

    def check_invalid(self, protected: str) -> None:
        assert self.algorithm.validate(protected) is False, protected
