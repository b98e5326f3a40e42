"""Report CLI commands.

This module provides the report command group:
- capacity: Print per-worker and cluster-wide storage capacity

Filters are mutually exclusive. Passing more than one is a usage error
and aborts before the master is contacted.
"""

import logging
import sys

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from capacity_report.capacity import CapacityCommand, get_usage
from capacity_report.client import MasterClient
from capacity_report.config import DEFAULT_MASTER_ENDPOINT, DEFAULT_TIMEOUT_S, ClientConfig
from capacity_report.exceptions import InvalidArgumentError

report_app = typer.Typer(help="Report cluster information")

err_console = Console(stderr=True)


@report_app.command("capacity")
def report_capacity(
    live: bool = typer.Option(False, "--live", help="Live workers"),
    lost: bool = typer.Option(False, "--lost", help="Lost workers"),
    workers: str = typer.Option(
        None,
        "--workers",
        "-w",
        help='Specified workers, host names or ip addresses separated by ","',
    ),
    master: str = typer.Option(
        DEFAULT_MASTER_ENDPOINT,
        "--master",
        envvar="MASTER_ENDPOINT",
        help="Master web endpoint (e.g., http://master:19999)",
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT_S, "--timeout", envvar="MASTER_TIMEOUT", help="Request timeout in seconds"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Report cluster capacity information.

    With no filter, capacity information of all workers is printed.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = ClientConfig(master_endpoint=master, timeout_s=timeout)
    with config.create_http_client() as http:
        command = CapacityCommand(MasterClient(http=http), sys.stdout)
        try:
            # Filters are resolved before the first request
            command.run(live=live, lost=lost, workers=workers)
        except InvalidArgumentError as e:
            err_console.print(f"[red]Error:[/red] {escape(e.reason)}")
            err_console.print(get_usage(), markup=False, highlight=False)
            raise typer.Exit(1)
        except httpx.HTTPError as e:
            err_console.print(f"[red]Error:[/red] failed to fetch worker report: {escape(str(e))}")
            raise typer.Exit(1)
        except ValidationError as e:
            err_console.print(f"[red]Error:[/red] malformed worker report: {escape(str(e))}")
            raise typer.Exit(1)
