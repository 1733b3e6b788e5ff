#!/usr/bin/env python3
"""
utils/config.py

Configuration management for the AMI report.
Loads the optional YAML settings file and resolves it, together with
environment variables and CLI overrides, into one immutable AppConfig.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ami_report.core.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_READ_TIMEOUT,
    REPORT_FORMATS,
)
from ami_report.utils.exceptions import ConfigError
from ami_report.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Resolved settings for a single report run."""

    region: Optional[str] = None
    profile: Optional[str] = None
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    read_timeout: int = DEFAULT_READ_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    sort_output: bool = False
    output_format: str = "json"
    log_level: str = "INFO"
    log_file: Optional[str] = None


class ConfigManager:
    """
    Simple configuration manager.

    Features:
    - YAML configuration loading
    - Environment variable override support
    - CLI override support through build_app_config
    """

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize ConfigManager.

        Args:
            config_file: Explicit settings file. Falls back to $AMI_REPORT_CONFIG,
                then configs/settings.yaml (or .yml) under the working directory.
        """
        if config_file is None and os.environ.get(CONFIG_ENV_VAR):
            config_file = Path(os.environ[CONFIG_ENV_VAR])

        if config_file is not None:
            self.settings_file = Path(config_file)
            self.explicit = True
        else:
            config_dir = Path.cwd() / DEFAULT_CONFIG_DIR
            yml_file = config_dir / "settings.yml"
            yaml_file = config_dir / "settings.yaml"
            self.settings_file = yml_file if yml_file.exists() else yaml_file
            self.explicit = False

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load a YAML file, raising ConfigError when it cannot be used.
        """
        if not file_path.exists():
            if self.explicit:
                raise ConfigError(f"Config file not found: {file_path}")
            logger.debug(f"No settings file at {file_path}, using defaults")
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"error loading configuration from {file_path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                f"error loading configuration from {file_path}: expected a mapping at the top level"
            )
        return content

    def load_settings(self) -> Dict[str, Any]:
        """
        Load application settings.
        """
        return self._load_yaml_file(self.settings_file)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration as a cached property."""
        if not hasattr(self, "_cached_config"):
            self._cached_config = self.load_settings()
        return self._cached_config

    def reload_config(self) -> None:
        """Force reload of configuration from file."""
        if hasattr(self, "_cached_config"):
            delattr(self, "_cached_config")

    def get_value(
        self, key_path: str, default: Any = None, env_var: Optional[str] = None
    ) -> Any:
        """
        Get configuration value with dot notation support and environment variable override.
        """
        if env_var and os.environ.get(env_var):
            return os.environ[env_var]

        keys = key_path.split(".")
        current = self.config

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def get_aws_region(self) -> Optional[str]:
        """Get AWS region with environment variable override support.

        None leaves the region to the boto3 profile and shared config files.
        """
        for env_var in ("AWS_REGION", "AWS_DEFAULT_REGION"):
            if os.environ.get(env_var):
                return os.environ[env_var]
        return self.get_value("aws.region", None)

    def get_aws_profile(self) -> Optional[str]:
        """Get the named AWS profile, if any."""
        return self.get_value("aws.profile", None, env_var="AWS_PROFILE")

    def get_logging_level(self) -> str:
        """Get logging level."""
        return self.get_value("logging.level", "INFO", env_var="LOG_LEVEL")

    def _get_int(self, key_path: str, default: int) -> int:
        value = self.get_value(key_path, default)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"invalid value for {key_path}: {value!r}") from e

    def build_app_config(self, **overrides: Any) -> AppConfig:
        """Resolve settings into an AppConfig. Overrides set to None are ignored."""
        values = {
            "region": self.get_aws_region(),
            "profile": self.get_aws_profile(),
            "connect_timeout": self._get_int("aws.connect_timeout", DEFAULT_CONNECT_TIMEOUT),
            "read_timeout": self._get_int("aws.read_timeout", DEFAULT_READ_TIMEOUT),
            "max_attempts": self._get_int("aws.max_attempts", DEFAULT_MAX_ATTEMPTS),
            "sort_output": bool(self.get_value("report.sort", False)),
            "output_format": str(self.get_value("report.format", "json")).lower(),
            "log_level": str(self.get_logging_level()).upper(),
            "log_file": self.get_value("logging.file", None),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        if values["output_format"] not in REPORT_FORMATS:
            raise ConfigError(
                f"unsupported report format {values['output_format']!r}, expected one of {', '.join(REPORT_FORMATS)}"
            )

        return AppConfig(**values)
