# utils/logger.py
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


def _console_level(level: str) -> int:
    # Console stays quiet below WARNING unless debugging; stdout carries the report
    return logging.DEBUG if level.upper() == "DEBUG" else logging.WARNING


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Setup logger with a quiet stderr console and an optional rotating log file"""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Prevent duplicate handlers
    if not logger.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(_console_level(level))
        logger.addHandler(stream_handler)

        if log_file:
            logs_dir = Path("logs")
            log_path = logs_dir / log_file

            try:
                logs_dir.mkdir(exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    log_path,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                )
                file_handler.setFormatter(formatter)
                file_handler.setLevel(logging.DEBUG)  # All levels to file
                logger.addHandler(file_handler)

            except (OSError, PermissionError) as e:
                logger.warning(
                    f"Failed to create log file {log_path}: {e}. Logging to console only."
                )

        # Prevent propagation to root logger to avoid duplicate messages
        logger.propagate = False

    return logger


def set_log_level(level: str) -> None:
    """Apply a level to every logger, and its console handler, created for this package."""
    resolved = getattr(logging, level.upper(), logging.INFO)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("ami_report") and isinstance(logger, logging.Logger):
            logger.setLevel(resolved)
            for handler in logger.handlers:
                if type(handler) is logging.StreamHandler:
                    handler.setLevel(_console_level(level))
