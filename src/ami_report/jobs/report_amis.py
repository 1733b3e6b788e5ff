#!/usr/bin/env python3

from typing import List, Optional

from ami_report.core.aws.ec2 import EC2Manager, create_ec2_manager
from ami_report.core.constants import NO_AMIS_MESSAGE, NO_INSTANCES_MESSAGE
from ami_report.core.models.ami import AMIGroup
from ami_report.core.processors.ami_aggregator import (
    AggregationMetrics,
    gather_by_image,
    sort_groups,
)
from ami_report.jobs.base import BaseJob
from ami_report.utils.config import AppConfig
from ami_report.utils.exceptions import EmptyResultError, ProviderError
from ami_report.utils.session import SessionManager


class ReportAMIsJob(BaseJob):
    """List the region's instances and group them by the AMI they run."""

    def __init__(self, config: AppConfig, ec2_manager: Optional[EC2Manager] = None):
        super().__init__(config)
        self._ec2_manager = ec2_manager
        self.metrics = AggregationMetrics()

    @property
    def ec2_manager(self) -> EC2Manager:
        if self._ec2_manager is None:
            session = self.create_aws_session()
            self._ec2_manager = create_ec2_manager(
                session,
                self.config.region,
                SessionManager.get_client_config(self.config),
            )
        return self._ec2_manager

    def execute(self, **kwargs) -> List[AMIGroup]:
        """Build the per-AMI report.

        Raises:
            ConfigError: AWS configuration could not be resolved
            ProviderError: an EC2 call failed
            EmptyResultError: there was nothing to report
        """
        sort_output = kwargs.get("sort_output", self.config.sort_output)
        manager = self.ec2_manager

        self.logger.info(f"[{self.correlation_id}] Listing instances in {manager.region}")
        instances = manager.describe_instances()
        if not instances:
            raise EmptyResultError(NO_INSTANCES_MESSAGE)
        self.logger.info(f"[{self.correlation_id}] Found {len(instances)} instance(s)")

        try:
            groups = gather_by_image(instances, manager.ami(), self.logger, self.metrics)
        except ProviderError as e:
            raise ProviderError(f"failed to gather AMI info: {e}") from e

        if not groups:
            raise EmptyResultError(NO_AMIS_MESSAGE)

        if sort_output:
            groups = sort_groups(groups)
        return groups
