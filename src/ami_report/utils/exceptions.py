"""Exception classes for the AMI report.

Every failure the report can hit is an AMIReportError so the CLI can
report it once and exit non-zero.
"""


class AMIReportError(Exception):
    """Base exception for AMI report failures."""

    pass


class ConfigError(AMIReportError):
    """Settings, profile, region or credentials could not be resolved."""

    pass


class ProviderError(AMIReportError):
    """A call to the EC2 API failed."""

    pass


class EmptyResultError(AMIReportError):
    """The account had nothing to report on."""

    pass


class CLIError(AMIReportError):
    """Custom exception for CLI-related errors."""

    pass
