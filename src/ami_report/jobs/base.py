"""Base job class for AMI report operations."""

from abc import ABC, abstractmethod
from typing import Any
import uuid

import boto3

from ami_report.utils.config import AppConfig
from ami_report.utils.logger import setup_logger
from ami_report.utils.session import SessionManager


class BaseJob(ABC):
    """Base class for report jobs.

    The AppConfig is resolved once by the caller and handed to the job;
    jobs never read settings on their own.
    """

    def __init__(self, config: AppConfig):
        """Initialize the job with configuration."""
        self.config = config
        self.correlation_id = str(uuid.uuid4())[:8]  # Short correlation ID for tracking

        self.logger = setup_logger(
            name=self.__class__.__module__,
            log_file=config.log_file,
            level=config.log_level,
        )

    def create_aws_session(self) -> boto3.Session:
        """Create the AWS session for the configured profile and region."""
        session = SessionManager.get_session(self.config)
        self.logger.info(
            f"[{self.correlation_id}] Created AWS session in {session.region_name}"
            + (f" with profile {self.config.profile}" if self.config.profile else "")
        )
        return session

    @abstractmethod
    def execute(self, **kwargs) -> Any:
        """Execute the job with given parameters."""
        pass
