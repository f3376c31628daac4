"""Persistent ppmkit settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1
MAX_DIMENSION = 4096
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class CanvasDefaults:
    width: int = 64
    height: int = 64
    pattern: str = "quadrants"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    keep_log_files: int = 7
    console: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    canvas: CanvasDefaults = field(default_factory=CanvasDefaults)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "ppmkit"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "ppmkit"
    return Path.home() / ".config" / "ppmkit"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _normalize_canvas(cfg: AppConfig, patterns: tuple[str, ...]) -> None:
    defaults = CanvasDefaults()
    cfg.canvas.width = max(1, min(MAX_DIMENSION, _as_int(cfg.canvas.width, defaults.width)))
    cfg.canvas.height = max(1, min(MAX_DIMENSION, _as_int(cfg.canvas.height, defaults.height)))
    if not isinstance(cfg.canvas.pattern, str) or cfg.canvas.pattern not in patterns:
        cfg.canvas.pattern = "quadrants"


def _normalize_logging(cfg: AppConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in LOG_LEVELS else "INFO"
    cfg.logging.keep_log_files = max(2, _as_int(cfg.logging.keep_log_files, LoggingConfig().keep_log_files))
    cfg.logging.console = bool(cfg.logging.console)


def load_config(path: Path | None = None, patterns: tuple[str, ...] | None = None) -> AppConfig:
    """Load settings, falling back to defaults for a missing or unreadable file.

    ``patterns`` lists the accepted pattern names; when omitted the stored
    pattern is kept as-is.
    """
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_as_int(raw.get("config_version"), CONFIG_VERSION),
        canvas=_merge(CanvasDefaults, raw.get("canvas", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_canvas(cfg, patterns or (cfg.canvas.pattern,))
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
