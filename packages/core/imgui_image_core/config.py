"""Binding settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class WidgetConfig:
    debug_checks: bool = __debug__
    legacy_label: str = "#image"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    console: bool = True
    to_file: bool = False
    keep_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    widgets: WidgetConfig = field(default_factory=WidgetConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "ImguiImage"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "ImguiImage"
    return Path.home() / ".config" / "imgui_image"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _normalize_logging(cfg: AppConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in LOG_LEVELS else "INFO"
    cfg.logging.keep_files = max(2, _as_int(cfg.logging.keep_files, LoggingConfig().keep_files))
    cfg.logging.console = bool(cfg.logging.console)
    cfg.logging.to_file = bool(cfg.logging.to_file)


def _normalize_widgets(cfg: AppConfig) -> None:
    cfg.widgets.debug_checks = bool(cfg.widgets.debug_checks)
    if not isinstance(cfg.widgets.legacy_label, str) or not cfg.widgets.legacy_label:
        cfg.widgets.legacy_label = WidgetConfig().legacy_label


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logging.getLogger("imgui_image.config").warning(
            "unreadable config, using defaults", extra={"event": "config_unreadable"}
        )
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_as_int(raw.get("config_version"), CONFIG_VERSION),
        widgets=_merge(WidgetConfig, raw.get("widgets", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_widgets(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
