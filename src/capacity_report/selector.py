"""
Worker selector resolution.

Turns the mutually exclusive report filters (live, lost, or an explicit
worker list) into the WorkerSelector sent to the master.
"""

from capacity_report.exceptions import InvalidArgumentError
from capacity_report.types import CAPACITY_FIELDS, WorkerRange, WorkerSelector


def parse_addresses(address_string: str) -> frozenset[str]:
    """Split a comma-separated worker list, dropping blanks."""
    return frozenset(
        address.strip() for address in address_string.split(",") if address.strip()
    )


def resolve_selector(
    live: bool = False,
    lost: bool = False,
    workers: str | None = None,
) -> WorkerSelector:
    """
    Build the selector for a capacity report.

    At most one filter may be given. With no filter the report covers all
    workers.

    Args:
        live: Only report live workers.
        lost: Only report lost workers.
        workers: Comma-separated host names or IP addresses.

    Returns:
        WorkerSelector requesting every capacity field.

    Raises:
        InvalidArgumentError: More than one filter was given, or the worker
            list contains no addresses.
    """
    given = sum([live, lost, workers is not None])
    if given > 1:
        raise InvalidArgumentError("Too many arguments passed in.")

    if live:
        return WorkerSelector(range=WorkerRange.LIVE, fields=CAPACITY_FIELDS)
    if lost:
        return WorkerSelector(range=WorkerRange.LOST, fields=CAPACITY_FIELDS)
    if workers is not None:
        addresses = parse_addresses(workers)
        if not addresses:
            raise InvalidArgumentError("No worker addresses given.")
        # Addresses are only consulted by the master for SPECIFIED
        return WorkerSelector(
            range=WorkerRange.SPECIFIED,
            addresses=addresses,
            fields=CAPACITY_FIELDS,
        )
    return WorkerSelector.defaults()
