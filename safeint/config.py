"""
Config — Настройки библиотеки из переменных окружения

Настройки читаются pydantic-settings из переменных с префиксом SAFEINT_
(например, SAFEINT_FTOI_TOLERANCE=1.5) и необязательного файла .env.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. get_settings() кешируется (lru_cache): один экземпляр на процесс
2. Арифметика только читает настройки и никогда их не изменяет
3. Допуск ftoi лежит в (FTOI_TOLERANCE_MIN, FTOI_TOLERANCE_MAX]
"""

from functools import lru_cache
from typing import Final

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Значения в диапазоне отличаются от обратной конверсии меньше чем на единицу,
# а вышедшие за диапазон отличаются на кратное 2**bits, то есть минимум на 2**8
FTOI_TOLERANCE_MIN: Final[float] = 1.0
FTOI_TOLERANCE_MAX: Final[float] = 256.0


class Settings(BaseSettings):
    """Настройки библиотеки."""

    model_config = SettingsConfigDict(
        env_prefix="SAFEINT_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Конверсия float -> целое
    ftoi_tolerance: float = Field(2.0, gt=FTOI_TOLERANCE_MIN, le=FTOI_TOLERANCE_MAX)

    # Логирование
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Проверка формата логов."""
        if v not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
