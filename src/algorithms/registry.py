"""Registry — построение алгоритмов по имени и конфигурации.

Два входа:
- luhn(lossy=True): фабрика эталонного Luhn (без аргументов — default)
- create_algorithm(config): построение из AlgorithmConfig или dict

dict проходит два слоя валидации:
1. JSON Schema (schema/algorithm_config.json из package data) → jsonschema.ValidationError
2. Pydantic AlgorithmConfig → pydantic.ValidationError
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Type, Union

from src.algorithms.base import CheckDigitAlgorithm
from src.algorithms.luhn import LuhnAlgorithm
from src.core.contracts import validate_algorithm_config
from src.core.domain.algorithm_config import AlgorithmConfig, AlgorithmName

logger = logging.getLogger(__name__)


# Имя алгоритма → класс реализации (immutable после импорта)
_ALGORITHMS: Mapping[AlgorithmName, Type[CheckDigitAlgorithm]] = MappingProxyType(
    {
        AlgorithmName.LUHN: LuhnAlgorithm,
    }
)


def luhn(lossy: bool = True) -> LuhnAlgorithm:
    """Новый экземпляр Luhn алгоритма над алфавитом "0123456789".

    Examples:
        >>> luhn().generate("7992739871")
        '79927398713'
    """
    return LuhnAlgorithm(lossy=lossy)


def available_algorithms() -> List[str]:
    """Имена зарегистрированных алгоритмов."""
    return [name.value for name in _ALGORITHMS]


def create_algorithm(
    config: Union[AlgorithmConfig, Dict[str, Any]]
) -> CheckDigitAlgorithm:
    """Построение алгоритма по конфигурации.

    Args:
        config: AlgorithmConfig или dict, соответствующий algorithm_config.json

    Returns:
        Новый экземпляр алгоритма

    Raises:
        jsonschema.ValidationError: dict не соответствует схеме
        pydantic.ValidationError: dict не проходит валидацию модели
    """
    if not isinstance(config, AlgorithmConfig):
        validate_algorithm_config(config)
        config = AlgorithmConfig.model_validate(config)

    algorithm_cls = _ALGORITHMS[config.algorithm]
    logger.debug(
        "Creating %s algorithm (lossy=%s)", config.algorithm.value, config.lossy
    )
    return algorithm_cls(lossy=config.lossy)
