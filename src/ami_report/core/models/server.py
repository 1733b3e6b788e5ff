"""Simple Server Data Models

Simple data models for the EC2 instances the report groups by image."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class InstanceInfo:
    """Snapshot of one EC2 instance as returned by DescribeInstances."""
    instance_id: str
    image_id: str = ""
    instance_type: str = ""
    private_dns_name: str = ""
    private_ip: Optional[str] = None

    @classmethod
    def from_aws_instance(cls, instance: Dict[str, Any]) -> "InstanceInfo":
        """Create InstanceInfo from AWS instance data."""
        return cls(
            instance_id=instance.get("InstanceId", ""),
            image_id=instance.get("ImageId") or "",
            instance_type=instance.get("InstanceType", ""),
            private_dns_name=instance.get("PrivateDnsName", ""),
            private_ip=instance.get("PrivateIpAddress"),
        )
