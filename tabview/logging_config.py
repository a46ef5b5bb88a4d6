from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "tabview"

# Dash's dev server logs every callback POST at INFO
_NOISY_LOGGERS = ("werkzeug",)


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv("TABVIEW_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the table browser.

    Format: force_format ("json" or "plain"), else env TABVIEW_LOG_FORMAT,
    else "json". JSON records carry a static ``service`` field and short
    ``level``/``logger`` keys, so engine context passed through ``extra=``
    (table, field, page) sits next to them.

    Level: the argument, else env TABVIEW_LOG_LEVEL, else INFO. Unknown
    level names fall back to INFO.
    """

    if force_format is not None:
        format_mode = force_format
    else:
        format_mode = os.getenv("TABVIEW_LOG_FORMAT", "json").lower()

    logger = logging.getLogger()
    logger.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(
            f"%(asctime)s [%(levelname)s] {SERVICE_NAME} %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
            static_fields={"service": SERVICE_NAME},
        )

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, logger.level))
