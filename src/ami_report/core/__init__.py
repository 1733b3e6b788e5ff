"""Core AMI report modules."""

from .aws import AMIManager, EC2Manager, ImageResolver, create_ec2_manager
from .models import AMIGroup, ImageInfo, InstanceInfo
from .processors import (
    AggregationMetrics,
    CSVReportGenerator,
    gather_by_image,
    render_json,
    sort_groups,
)

__all__ = [
    # AWS Managers
    "AMIManager",
    "EC2Manager",
    "ImageResolver",
    "create_ec2_manager",
    # Models
    "AMIGroup",
    "ImageInfo",
    "InstanceInfo",
    # Processors
    "AggregationMetrics",
    "CSVReportGenerator",
    "gather_by_image",
    "render_json",
    "sort_groups",
]
