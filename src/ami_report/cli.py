#!/usr/bin/env python3
"""
AMI Report - CLI
Report which AMIs the instances of an AWS region were launched from
"""

from pathlib import Path

import click

from ami_report import __version__
from ami_report.core.constants import REPORT_FORMATS, SPINNER_MESSAGE
from ami_report.jobs.report_amis import ReportAMIsJob
from ami_report.utils.config import ConfigManager
from ami_report.utils.decorators import handle_output, report_errors
from ami_report.utils.exceptions import CLIError
from ami_report.utils.logger import set_log_level, setup_logger
from ami_report.utils.progress import spinner


def setup_logging(level: str = "INFO", log_file=None):
    set_log_level(level)
    return setup_logger("ami_report.cli", log_file, level)


@click.group()
def cli():
    """AMI Report - group running EC2 instances by their AMI"""


@cli.command()
@click.option("--region", help="AWS region (defaults to AWS_REGION, settings, then the AWS profile)")
@click.option("--profile", help="Named AWS profile")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML settings file",
)
@click.option("--sort", "sort_output", is_flag=True, help="Sort groups by AMI id")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(REPORT_FORMATS, case_sensitive=False),
    help="Report format (default: json)",
)
@click.option("--output", type=click.Path(dir_okay=False), help="Output file path")
@click.option("--no-spinner", is_flag=True, help="Do not show the progress spinner")
@click.option("--verbose", is_flag=True, help="Enable verbose output")
@report_errors
def report(region, profile, config_file, sort_output, output_format, output, no_spinner, verbose):
    """Group the region's instances by AMI and print the report as JSON"""
    config = ConfigManager(config_file).build_app_config(
        region=region,
        profile=profile,
        sort_output=sort_output or None,
        output_format=output_format.lower() if output_format else None,
        log_level="DEBUG" if verbose else None,
    )
    if config.output_format == "csv" and not output:
        raise CLIError("--format csv requires --output")

    logger = setup_logging(config.log_level, config.log_file)
    job = ReportAMIsJob(config)
    logger.debug(f"[{job.correlation_id}] Starting report in {config.region}")

    with spinner(SPINNER_MESSAGE, enabled=not no_spinner):
        groups = job.execute()

    handle_output(groups, config.output_format, output, job.correlation_id)


@cli.command()
def version():
    """Show version information"""
    click.echo(f"AMI Report {__version__}")
    click.echo("Group EC2 instances by the AMI they were launched from")


def main():
    cli()


if __name__ == "__main__":
    main()
