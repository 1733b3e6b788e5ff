#!/usr/bin/env python3
"""Group instances by the AMI they were launched from."""

import time
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional
import logging

from ami_report.core.aws.ec2 import ImageResolver
from ami_report.core.models.ami import AMIGroup, ImageInfo
from ami_report.core.models.server import InstanceInfo
from ami_report.utils.logger import setup_logger


@dataclass
class AggregationMetrics:
    """Simple metrics for aggregation tracking."""

    total_instances: int = 0
    image_lookups: int = 0
    duplicate_instances: int = 0
    duration: float = 0.0


def gather_by_image(
    instances: Iterable[InstanceInfo],
    resolver: ImageResolver,
    logger: Optional[logging.Logger] = None,
    metrics: Optional[AggregationMetrics] = None,
) -> List[AMIGroup]:
    """Group instances by image id, resolving each distinct image once.

    Groups are returned in order of first appearance of their image id.
    Instances without an image id are grouped under the empty string.
    A resolver failure propagates immediately and no groups are returned.

    Args:
        instances: Instances in the order the provider listed them
        resolver: Image lookup used once per distinct image id
        logger: Logger instance
        metrics: Optional metrics object filled in during the run

    Returns:
        List of AMI groups
    """
    logger = logger or setup_logger(__name__)
    metrics = metrics if metrics is not None else AggregationMetrics()
    started = time.time()
    groups: Dict[str, AMIGroup] = {}

    for instance in instances:
        metrics.total_instances += 1
        image_id = instance.image_id

        group = groups.get(image_id)
        if group is not None:
            if not group.add_instance(instance.instance_id):
                metrics.duplicate_instances += 1
                logger.debug(f"Instance {instance.instance_id} already listed under {image_id!r}")
            continue

        if not image_id:
            logger.warning(f"Instance {instance.instance_id} has no image id, grouping under ''")

        images = resolver.get_image(image_id)
        metrics.image_lookups += 1
        if not images:
            logger.warning(f"No image metadata found for {image_id!r}")

        groups[image_id] = AMIGroup(
            image_id=image_id,
            image=images[0] if images else ImageInfo(),
            instance_ids=[instance.instance_id],
        )

    metrics.duration = time.time() - started
    logger.info(
        f"Grouped {metrics.total_instances} instance(s) under {len(groups)} image(s) "
        f"with {metrics.image_lookups} lookup(s) in {metrics.duration:.2f}s"
    )
    return list(groups.values())


def sort_groups(groups: List[AMIGroup]) -> List[AMIGroup]:
    """Order groups by image id."""
    return sorted(groups, key=lambda group: group.image_id)
