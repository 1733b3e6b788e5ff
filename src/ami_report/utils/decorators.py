"""Error and output handling shared by CLI commands."""

from functools import wraps
from typing import Callable, List, Optional

import click

from ami_report.core.models.ami import AMIGroup
from ami_report.core.processors.report_generator import (
    CSVReportGenerator,
    render_json,
    write_json_report,
)
from ami_report.utils.exceptions import AMIReportError
from ami_report.utils.logger import setup_logger


def handle_operation_error(operation_name: str, error: Exception) -> None:
    """Centralized error handling for operations.

    Args:
        operation_name: Name of the operation that failed
        error: Exception that occurred
    """
    click.echo(f"Error: {error}", err=True)

    logger = setup_logger("ami_report.errors")
    logger.debug(
        f"Error in {operation_name}: {error}",
        extra={"operation": operation_name, "error_type": type(error).__name__},
    )


def handle_output(
    groups: List[AMIGroup],
    output_format: str = "json",
    output_path: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """Print the report on stdout or save it to output_path."""
    logger = setup_logger("ami_report.output")

    if output_format == "csv":
        path = CSVReportGenerator().generate_report(groups, output_path)
        click.echo(f"Results saved to {path}", err=True)
        logger.info(f"[{correlation_id or 'N/A'}] Results saved to {path}")
    elif output_path:
        path = write_json_report(groups, output_path)
        click.echo(f"Results saved to {path}", err=True)
        logger.info(f"[{correlation_id or 'N/A'}] Results saved to {path}")
    else:
        click.echo(render_json(groups))


def report_errors(func: Callable) -> Callable:
    """Report AMIReportError once on stderr and exit with status 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AMIReportError as e:
            handle_operation_error(func.__name__, e)
            raise SystemExit(1)
        except KeyboardInterrupt:
            click.echo("Operation cancelled by user.", err=True)
            raise SystemExit(130)

    return wrapper
