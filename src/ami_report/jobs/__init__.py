"""AMI report jobs package."""

from .base import BaseJob
from .report_amis import ReportAMIsJob

__all__ = [
    "BaseJob",
    "ReportAMIsJob",
]
