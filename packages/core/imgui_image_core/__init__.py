"""Core services for settings and logging."""

from .config import AppConfig, LoggingConfig, WidgetConfig, load_config, save_config
from .logging_setup import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "WidgetConfig",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
]
