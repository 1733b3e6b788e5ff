"""Simple EC2 Manager for the AMI report."""

from abc import ABC, abstractmethod
from typing import List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ami_report.core.models.ami import ImageInfo
from ami_report.core.models.server import InstanceInfo
from ami_report.utils.exceptions import ProviderError
from ami_report.utils.logger import setup_logger


class ImageResolver(ABC):
    """Looks up catalog metadata for a single AMI id."""

    @abstractmethod
    def get_image(self, image_id: str) -> List[ImageInfo]:
        """Return the images matching image_id; an empty list means not found."""
        pass


class AMIManager(ImageResolver):
    """Resolves AMI metadata with one DescribeImages call per id."""

    def __init__(self, ec2_client):
        self.ec2_client = ec2_client
        self.logger = setup_logger(__name__)

    def get_image(self, image_id: str) -> List[ImageInfo]:
        """Describe a single AMI."""
        try:
            response = self.ec2_client.describe_images(ImageIds=[image_id])
        except (ClientError, BotoCoreError) as e:
            self.logger.debug(f"Error describing image {image_id}: {e}")
            raise ProviderError(f"failed to describe image {image_id}: {e}") from e

        images = [ImageInfo.from_aws_image(image) for image in response.get("Images", [])]
        self.logger.debug(f"DescribeImages {image_id}: {len(images)} image(s) found")
        return images


class EC2Manager:
    """Simple AWS EC2 resource manager."""

    def __init__(
        self,
        session: boto3.Session,
        region: Optional[str] = None,
        client_config: Optional[Config] = None,
    ):
        """Initialize EC2Manager."""
        self.session = session
        self.region = region or session.region_name
        self.ec2_client = session.client("ec2", region_name=self.region, config=client_config)
        self.logger = setup_logger(__name__)

    def describe_instances(self) -> List[InstanceInfo]:
        """Describe every instance visible in the region with a single unfiltered call."""
        try:
            response = self.ec2_client.describe_instances()
        except (ClientError, BotoCoreError) as e:
            self.logger.debug(f"Error describing instances: {e}")
            raise ProviderError(f"failed to get instances: {e}") from e

        instances = []
        for reservation in response.get("Reservations", []):
            for instance in reservation.get("Instances", []):
                instances.append(InstanceInfo.from_aws_instance(instance))

        self.logger.debug(
            f"DescribeInstances in {self.region}: {len(instances)} instance(s) "
            f"in {len(response.get('Reservations', []))} reservation(s)"
        )
        return instances

    def ami(self) -> AMIManager:
        """Image resolver sharing this manager's client."""
        return AMIManager(self.ec2_client)


def create_ec2_manager(
    session: boto3.Session,
    region: Optional[str] = None,
    client_config: Optional[Config] = None,
) -> EC2Manager:
    """Create EC2Manager instance."""
    return EC2Manager(session, region, client_config)
