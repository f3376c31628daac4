"""JSON-line logging for the ppmkit logger tree.

Library modules log to ``ppmkit.<area>`` loggers and attach structured
fields through ``extra``; only the fields in ``RECORD_FIELDS`` are copied
into the JSON payload.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import LoggingConfig, config_root


ROOT_LOGGER = "ppmkit"
LOG_FILE = "ppmkit.log"
RECORD_FIELDS = ("event", "path", "kind", "width", "height")


def log_dir() -> Path:
    path = config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in RECORD_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(settings: LoggingConfig | None = None, directory: Path | None = None) -> logging.Logger:
    """Attach the rotating JSON file handler (and optional console) once."""
    settings = settings or LoggingConfig()
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, settings.level.upper(), logging.INFO))
    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=str((directory or log_dir()) / LOG_FILE),
        when="midnight",
        backupCount=max(2, settings.keep_log_files),
        encoding="utf-8",
    )
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)

    if settings.console:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(console)

    logger.info("logging configured", extra={"event": "logging_configured"})
    return logger


def shutdown_logging() -> None:
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def get_logger(area: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{area}" if area else ROOT_LOGGER)
