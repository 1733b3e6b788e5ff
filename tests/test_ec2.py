"""Tests for ami_report.core.aws.ec2 against a stubbed EC2 client."""

import pytest

from ami_report.core.aws.ec2 import AMIManager, ImageResolver, create_ec2_manager
from ami_report.core.models.ami import ImageInfo
from ami_report.utils.exceptions import ProviderError

from conftest import aws_image, aws_instance


class TestDescribeInstances:
    """Instance listing flattens reservations into InstanceInfo records."""

    def test_get_instances(self, ec2_manager, ec2_stubber) -> None:
        ec2_stubber.add_response(
            "describe_instances",
            {"Reservations": [{"Instances": [aws_instance("fakeInstanceID", "fakeImageID")]}]},
            {},
        )

        instances = ec2_manager.describe_instances()

        assert len(instances) == 1
        instance = instances[0]
        assert instance.image_id == "fakeImageID"
        assert instance.instance_id == "fakeInstanceID"
        assert instance.instance_type == "a1.2xlarge"
        assert instance.private_dns_name == "fakePrivateDNS"
        assert instance.private_ip == "fakePrivateIP"

    def test_flattens_reservations_in_order(self, ec2_manager, ec2_stubber) -> None:
        ec2_stubber.add_response(
            "describe_instances",
            {
                "Reservations": [
                    {"Instances": [aws_instance("i-1"), aws_instance("i-2")]},
                    {"Instances": [aws_instance("i-3")]},
                ]
            },
            {},
        )

        instances = ec2_manager.describe_instances()

        assert [i.instance_id for i in instances] == ["i-1", "i-2", "i-3"]

    def test_no_reservations(self, ec2_manager, ec2_stubber) -> None:
        ec2_stubber.add_response("describe_instances", {"Reservations": []}, {})

        assert ec2_manager.describe_instances() == []

    def test_client_error_raises_provider_error(self, ec2_manager, ec2_stubber) -> None:
        ec2_stubber.add_client_error(
            "describe_instances",
            service_error_code="UnauthorizedOperation",
            service_message="You are not authorized to perform this operation.",
        )

        with pytest.raises(ProviderError, match="failed to get instances"):
            ec2_manager.describe_instances()


class TestGetImage:
    """Image lookups issue one DescribeImages call per id."""

    def test_get_ami_info(self, ec2_manager, ec2_stubber) -> None:
        ec2_stubber.add_response(
            "describe_images",
            {"Images": [aws_image()]},
            {"ImageIds": ["fakeAmiID"]},
        )

        images = ec2_manager.ami().get_image("fakeAmiID")

        assert images == [
            ImageInfo(
                description="fakeImageDescription",
                name="fakeImageName",
                location="fakeImageLocation",
                owner_id="fakeOwnerID",
            )
        ]

    def test_no_matching_image_is_not_an_error(self, ec2_manager, ec2_stubber) -> None:
        ec2_stubber.add_response("describe_images", {"Images": []}, {"ImageIds": ["ami-gone"]})

        assert ec2_manager.ami().get_image("ami-gone") == []

    def test_client_error_raises_provider_error(self, ec2_manager, ec2_stubber) -> None:
        ec2_stubber.add_client_error(
            "describe_images",
            service_error_code="InvalidAMIID.Malformed",
            service_message="Invalid id",
            expected_params={"ImageIds": ["bad"]},
        )

        with pytest.raises(ProviderError, match="failed to describe image bad"):
            ec2_manager.ami().get_image("bad")

    def test_ami_manager_is_an_image_resolver(self, ec2_manager) -> None:
        resolver = ec2_manager.ami()

        assert isinstance(resolver, AMIManager)
        assert isinstance(resolver, ImageResolver)
        assert resolver.ec2_client is ec2_manager.ec2_client


def test_create_ec2_manager_uses_session_region(aws_session) -> None:
    manager = create_ec2_manager(aws_session)

    assert manager.region == "us-east-1"
    assert manager.ec2_client.meta.region_name == "us-east-1"


def test_create_ec2_manager_region_override(aws_session) -> None:
    manager = create_ec2_manager(aws_session, "eu-west-1")

    assert manager.ec2_client.meta.region_name == "eu-west-1"
