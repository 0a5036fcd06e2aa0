"""
Observability — Структурированное логирование для приложений, использующих safeint

Модуль предоставляет:
- JSONFormatter: запись лога как JSON объект с дополнительными полями
- setup_logging: подключение обработчика к логгеру пакета "safeint"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая запись содержит timestamp, level, logger и message
2. Дополнительные поля (operation, error_kind, int_type) выводятся, если заданы
3. Библиотека сама не вызывает setup_logging; повторный вызов заменяет
   ранее установленный обработчик, а не добавляет второй
"""

import json
import logging
from datetime import datetime, timezone

from safeint.config import get_settings

EXTRA_FIELDS = ("operation", "error_kind", "int_type")

# Имя обработчика, устанавливаемого setup_logging
HANDLER_NAME = "safeint"


class JSONFormatter(logging.Formatter):
    """Форматирование записей лога в JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """
    Настройка логгера пакета "safeint".

    Args:
        level: Уровень логирования (default: Settings.log_level)
        fmt: "json" или "text" (default: Settings.log_format)

    Returns:
        Установленный обработчик
    """
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))

    package_logger = logging.getLogger("safeint")
    for installed in list(package_logger.handlers):
        if installed.get_name() == HANDLER_NAME:
            package_logger.removeHandler(installed)
            installed.close()

    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
