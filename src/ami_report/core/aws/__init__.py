"""AWS core modules."""

from .ec2 import AMIManager, EC2Manager, ImageResolver, create_ec2_manager

__all__ = [
    "AMIManager",
    "EC2Manager",
    "ImageResolver",
    "create_ec2_manager",
]
