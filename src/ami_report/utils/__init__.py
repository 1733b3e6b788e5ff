# utils/__init__.py

from .logger import setup_logger, set_log_level
from .exceptions import (
    AMIReportError,
    CLIError,
    ConfigError,
    EmptyResultError,
    ProviderError,
)
from .config import AppConfig, ConfigManager
from .session import SessionManager

__all__ = [
    "setup_logger",
    "set_log_level",
    "AMIReportError",
    "CLIError",
    "ConfigError",
    "EmptyResultError",
    "ProviderError",
    "AppConfig",
    "ConfigManager",
    "SessionManager",
]
