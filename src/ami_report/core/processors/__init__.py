"""Core processors for the AMI report."""

from .ami_aggregator import AggregationMetrics, gather_by_image, sort_groups
from .report_generator import (
    CSVReportGenerator,
    flatten_groups,
    render_json,
    write_json_report,
)

__all__ = [
    "AggregationMetrics",
    "CSVReportGenerator",
    "flatten_groups",
    "gather_by_image",
    "render_json",
    "sort_groups",
    "write_json_report",
]
