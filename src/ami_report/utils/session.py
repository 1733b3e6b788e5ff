#!/usr/bin/env python3
"""
utils/session.py

Session management utilities for AWS interactions.

Builds the boto3 Session and the botocore client configuration from an
AppConfig, failing early with ConfigError when the ambient AWS
configuration cannot be resolved.
"""

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from .config import AppConfig
from .exceptions import ConfigError
from .logger import setup_logger

logger = setup_logger(__name__)


class SessionManager:
    """Manages AWS sessions and client configuration."""

    @classmethod
    def get_session(cls, config: AppConfig) -> boto3.Session:
        """Create a boto3 Session for the configured profile and region."""
        try:
            session = boto3.Session(profile_name=config.profile, region_name=config.region)
        except BotoCoreError as e:
            raise ConfigError(f"error loading AWS configuration: {e}") from e

        if not session.region_name:
            raise ConfigError("error loading AWS configuration: no region configured")

        try:
            credentials = session.get_credentials()
        except BotoCoreError as e:
            raise ConfigError(f"error loading AWS configuration: {e}") from e
        if credentials is None:
            raise ConfigError("error loading AWS configuration: unable to locate credentials")

        logger.debug(
            f"Using AWS session for region {session.region_name} (profile: {config.profile or 'default chain'})"
        )
        return session

    @classmethod
    def get_client_config(cls, config: AppConfig) -> Config:
        """Timeouts and SDK retry attempts for EC2 clients."""
        return Config(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            retries={"max_attempts": config.max_attempts, "mode": "standard"},
        )
