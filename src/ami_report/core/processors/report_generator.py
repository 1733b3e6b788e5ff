#!/usr/bin/env python3
"""Report rendering for AMI groups."""

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ami_report.core.constants import CSV_FIELDNAMES, JSON_INDENT
from ami_report.core.models.ami import AMIGroup
from ami_report.utils.exceptions import AMIReportError
from ami_report.utils.logger import setup_logger


def render_json(groups: List[AMIGroup], indent: int = JSON_INDENT) -> str:
    """Pretty-printed JSON array of the groups."""
    return json.dumps([group.to_dict() for group in groups], indent=indent, ensure_ascii=False)


def flatten_groups(groups: List[AMIGroup]) -> List[Dict[str, Any]]:
    """One row per (image, instance) pair."""
    rows = []
    for group in groups:
        for instance_id in group.instance_ids:
            rows.append(
                {
                    "AMI": group.image_id,
                    "ImageName": group.image.name,
                    "ImageDescription": group.image.description,
                    "ImageLocation": group.image.location,
                    "OwnerID": group.image.owner_id,
                    "InstanceId": instance_id,
                }
            )
    return rows


class CSVReportGenerator:
    """Simple CSV report generator."""

    def __init__(self, fieldnames: Optional[List[str]] = None):
        """Initialize the CSV report generator."""
        self.fieldnames = fieldnames or CSV_FIELDNAMES
        self.logger = setup_logger(__name__)

    def generate_report(self, groups: List[AMIGroup], output_path: str) -> Path:
        """Write the groups as CSV and return the written path."""
        path = Path(output_path)
        if path.suffix != ".csv":
            path = path.with_suffix(".csv")

        rows = flatten_groups(groups)
        try:
            if path.parent != Path("."):
                path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", newline="", encoding="utf-8") as csvfile:
                writer = csv.DictWriter(csvfile, fieldnames=self.fieldnames)
                writer.writeheader()
                writer.writerows(rows)
        except OSError as e:
            self.logger.debug(f"Error generating CSV report: {e}")
            raise AMIReportError(f"failed to write CSV report to {path}: {e}") from e

        self.logger.info(f"CSV report generated: {path} ({len(rows)} records)")
        return path


def write_json_report(groups: List[AMIGroup], output_path: str) -> Path:
    """Write the JSON document to a file."""
    path = Path(output_path)
    try:
        path.write_text(render_json(groups) + "\n", encoding="utf-8")
    except OSError as e:
        raise AMIReportError(f"failed to write JSON report to {path}: {e}") from e
    return path
