"""
AlgorithmConfig — Модель конфигурации алгоритма контрольных символов

Immutable Pydantic модель, описывающая, какой алгоритм построить и с какой
политикой декодирования. Полная совместимость с JSON Schema
(src/core/contracts/schema/algorithm_config.json).
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class AlgorithmName(str, Enum):
    """Идентификатор алгоритма контрольных символов"""

    LUHN = "luhn"


# =============================================================================
# ALGORITHM CONFIG MODEL
# =============================================================================


class AlgorithmConfig(BaseModel):
    """
    Конфигурация алгоритма контрольных символов.

    Immutable модель (frozen=True). Содержит:
    - Версию схемы (schema_version)
    - Имя алгоритма (algorithm)
    - Политику декодирования (lossy): True — неизвестные символы
      пропускаются, False — вызывают UnknownSymbolInString
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    algorithm: AlgorithmName = Field(..., description="Имя алгоритма (luhn)")
    lossy: bool = Field(
        True, description="Пропускать символы вне алфавита вместо ошибки"
    )

    model_config = {"frozen": True}
