"""
JSON Schema Contract Validators

Валидация конфигурационных документов алгоритмов по JSON Schema.

Схема поставляется как package data (src/core/contracts/schema/) и читается
через importlib.resources только при первой валидации: импорт алгоритмов не
зависит от наличия схемы.

Схемы:
- algorithm_config.json (конфигурация алгоритма контрольных символов)
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

# Файл схемы конфигурации алгоритма внутри пакета
ALGORITHM_CONFIG_SCHEMA: Final[str] = "algorithm_config.json"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(filename: str) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema из package data.

    Результат кэшируется: файл читается один раз за процесс.

    Args:
        filename: Имя файла в schema/ (например, 'algorithm_config.json')

    Returns:
        Загруженная схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_file = resources.files(__package__).joinpath("schema", filename)
    if not schema_file.is_file():
        raise FileNotFoundError(f"Schema not found: {filename}")

    schema = json.loads(schema_file.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {filename}: {e}")

    return schema


@lru_cache(maxsize=None)
def _algorithm_config_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(ALGORITHM_CONFIG_SCHEMA))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_algorithm_config(data: Dict[str, Any]) -> None:
    """
    Валидация algorithm_config данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _algorithm_config_validator().validate(data)
