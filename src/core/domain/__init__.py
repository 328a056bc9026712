"""
Domain models and value objects.

Contains the error taxonomy and the algorithm configuration model.
"""

from src.core.domain.algorithm_config import AlgorithmConfig, AlgorithmName
from src.core.domain.errors import (
    CheckDigitError,
    InvalidProtectedString,
    SymbolMapFault,
    UnknownSymbolInString,
)

__all__ = [
    # Errors
    "CheckDigitError",
    "InvalidProtectedString",
    "UnknownSymbolInString",
    "SymbolMapFault",
    # Algorithm config model
    "AlgorithmConfig",
    "AlgorithmName",
]
