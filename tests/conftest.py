"""Shared fixtures for the AMI report tests."""

import logging
from typing import Dict, List, Optional

import boto3
import pytest
from botocore.stub import Stubber

from ami_report.core.aws.ec2 import EC2Manager, ImageResolver
from ami_report.core.models.ami import ImageInfo
from ami_report.core.models.server import InstanceInfo
from ami_report.utils.exceptions import ProviderError


class FakeResolver(ImageResolver):
    """In-memory image catalog that records every lookup."""

    def __init__(
        self,
        images: Optional[Dict[str, ImageInfo]] = None,
        fail_on: Optional[List[str]] = None,
    ) -> None:
        self.images = images or {}
        self.fail_on = set(fail_on or [])
        self.calls: List[str] = []

    def get_image(self, image_id: str) -> List[ImageInfo]:
        self.calls.append(image_id)
        if image_id in self.fail_on:
            raise ProviderError(f"failed to describe image {image_id}: boom")
        if image_id in self.images:
            return [self.images[image_id]]
        return []


def make_instance(instance_id: str, image_id: str = "img-1") -> InstanceInfo:
    return InstanceInfo(
        instance_id=instance_id,
        image_id=image_id,
        instance_type="t3.micro",
        private_dns_name=f"{instance_id}.internal",
        private_ip="10.0.0.1",
    )


def aws_instance(instance_id: str, image_id: str = "fakeAmiID") -> Dict[str, str]:
    return {
        "ImageId": image_id,
        "InstanceId": instance_id,
        "InstanceType": "a1.2xlarge",
        "PrivateDnsName": "fakePrivateDNS",
        "PrivateIpAddress": "fakePrivateIP",
    }


def aws_image(name: str = "fakeImageName") -> Dict[str, str]:
    return {
        "Description": "fakeImageDescription",
        "Name": name,
        "ImageLocation": "fakeImageLocation",
        "OwnerId": "fakeOwnerID",
    }


@pytest.fixture
def aws_session() -> boto3.Session:
    return boto3.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        aws_session_token="testing",
        region_name="us-east-1",
    )


@pytest.fixture
def ec2_manager(aws_session) -> EC2Manager:
    return EC2Manager(aws_session)


@pytest.fixture
def ec2_stubber(ec2_manager):
    with Stubber(ec2_manager.ec2_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def isolated_aws_env(monkeypatch, tmp_path):
    """Point boto3 at empty config files and clear ambient AWS settings."""
    for var in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "AWS_PROFILE",
        "AWS_DEFAULT_PROFILE",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
        "AWS_CONTAINER_CREDENTIALS_FULL_URI",
        "AWS_WEB_IDENTITY_TOKEN_FILE",
        "AMI_REPORT_CONFIG",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws_config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws_credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def fresh_loggers():
    """Drop package log handlers so each test binds them to its own stderr."""
    yield
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("ami_report") and isinstance(logger, logging.Logger):
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
