"""AMI Report - group EC2 instances by the AMI they were launched from."""

__version__ = "1.0.0"
