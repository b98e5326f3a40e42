"""
Capacity report command.

CapacityCommand wires the pieces of one report run together:

    selector -> WorkerReportSource.get_worker_report() -> collect() -> render()

and writes the rendered text to its output stream in a single write.
A failed fetch propagates before anything is written.
"""

import logging
from collections.abc import Sequence
from typing import Protocol, TextIO, runtime_checkable

from capacity_report.collector import DISPLAY_TIERS, collect
from capacity_report.reporter import render
from capacity_report.selector import resolve_selector
from capacity_report.types import TierName, WorkerRecord, WorkerSelector

logger = logging.getLogger(__name__)


@runtime_checkable
class WorkerReportSource(Protocol):
    """
    Protocol for anything that can list worker capacity records.

    MasterClient is the production implementation; tests use in-memory
    sources.
    """

    def get_worker_report(self, selector: WorkerSelector) -> list[WorkerRecord]:
        """Return the workers matching selector."""
        ...


class CapacityCommand:
    """
    Prints cluster capacity information.

    Attributes:
        source: Where worker records come from.
        stream: Text stream the report is written to.
        display_tiers: Tiers shown as per-worker table columns.
    """

    def __init__(
        self,
        source: WorkerReportSource,
        stream: TextIO,
        display_tiers: Sequence[TierName] = DISPLAY_TIERS,
    ) -> None:
        self.source = source
        self.stream = stream
        self.display_tiers = tuple(display_tiers)

    def run(
        self,
        live: bool = False,
        lost: bool = False,
        workers: str | None = None,
    ) -> int:
        """
        Resolve filters and print the capacity report.

        Returns:
            0 on success.

        Raises:
            InvalidArgumentError: More than one filter given. Raised before
                the master is contacted.
        """
        selector = resolve_selector(live=live, lost=lost, workers=workers)
        self.generate_capacity_report(selector)
        return 0

    def build_report(self, selector: WorkerSelector) -> str:
        """Fetch workers and render the report text."""
        records = self.source.get_worker_report(selector)
        result = collect(records, selector, self.display_tiers)
        return render(result.rows, result.totals, selector, self.display_tiers)

    def generate_capacity_report(self, selector: WorkerSelector) -> None:
        """Fetch, aggregate and write the report for selector."""
        logger.info(f"Generating capacity report for {selector.scope_name} workers")
        report = self.build_report(selector)
        self.stream.write(report + "\n")


def get_usage() -> str:
    """Usage text for the capacity report."""
    return (
        "fsadmin report capacity [filter arg]\n"
        "Report cluster capacity information.\n"
        "Where [filter arg] is an optional argument. If no arguments passed in, "
        "capacity information of all workers will be printed out.\n"
        "[filter arg] can be one of the following:\n"
        "    --live                   Live workers\n"
        "    --lost                   Lost workers\n"
        "    --workers <worker_names> Specified workers, "
        'host names or ip addresses separated by ","\n'
    )
