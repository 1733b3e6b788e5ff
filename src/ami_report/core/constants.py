#!/usr/bin/env python3
"""Core constants for the AMI report."""

# AWS Service Constants
DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 60
DEFAULT_MAX_ATTEMPTS = 3

# Report Format Constants
JSON_INDENT = 4
REPORT_FORMATS = ("json", "csv")
CSV_FIELDNAMES = [
    "AMI",
    "ImageName",
    "ImageDescription",
    "ImageLocation",
    "OwnerID",
    "InstanceId",
]

# Messages
SPINNER_MESSAGE = "Gather information about all of the instances in the current region.: "
NO_INSTANCES_MESSAGE = "no running instances were found"
NO_AMIS_MESSAGE = "no Amazon Machine Images (AMIs) were found for the running instances"

# Configuration Constants
CONFIG_ENV_VAR = "AMI_REPORT_CONFIG"
DEFAULT_CONFIG_DIR = "configs"
DEFAULT_LOG_FILE = "ami_report.log"
