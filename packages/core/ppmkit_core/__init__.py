"""Core app services for settings and logging."""

from .config import AppConfig, CanvasDefaults, LoggingConfig, config_path, load_config, save_config
from .logging_setup import JsonFormatter, configure_logging, get_logger, shutdown_logging

__all__ = [
    "AppConfig",
    "CanvasDefaults",
    "JsonFormatter",
    "LoggingConfig",
    "config_path",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
    "shutdown_logging",
]
