"""Simple data models for AWS resources."""

# Server models
from .server import (
    InstanceInfo,
)

# AMI models
from .ami import (
    AMIGroup,
    ImageInfo,
)

__all__ = [
    # Server models
    "InstanceInfo",
    # AMI models
    "AMIGroup",
    "ImageInfo",
]
