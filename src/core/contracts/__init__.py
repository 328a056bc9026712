"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигурации алгоритмов.
"""

from .validators import (
    ALGORITHM_CONFIG_SCHEMA,
    load_schema,
    validate_algorithm_config,
)

__all__ = [
    # Constants
    "ALGORITHM_CONFIG_SCHEMA",
    # Functions
    "load_schema",
    "validate_algorithm_config",
]
