"""
Capacity Report Library

Aggregates per-worker storage statistics into a cluster-wide capacity
report. This package provides:

- Data Types: WorkerRecord, WorkerSelector, ReportRow, AggregateState
- Collector: sorts workers and accumulates per-tier totals
- Reporter: renders the summary block and per-worker table
- MasterClient: httpx client for the master worker report API
- CLI: Typer-based ``fsadmin report capacity`` command
"""

__version__ = "0.1.0"

# Re-export public types for convenient imports
from capacity_report.capacity import CapacityCommand, WorkerReportSource, get_usage
from capacity_report.client import MasterClient
from capacity_report.collector import DISPLAY_TIERS, build_row, collect
from capacity_report.config import ClientConfig
from capacity_report.exceptions import InvalidArgumentError
from capacity_report.format import get_size_from_bytes, percentage
from capacity_report.reporter import ReportWriter, render
from capacity_report.selector import resolve_selector
from capacity_report.types import (
    AggregateState,
    CollectResult,
    ReportRow,
    TierName,
    WorkerInfoField,
    WorkerRange,
    WorkerRecord,
    WorkerSelector,
)

__all__ = [
    "__version__",
    # Data Types
    "AggregateState",
    "CollectResult",
    "ReportRow",
    "TierName",
    "WorkerInfoField",
    "WorkerRange",
    "WorkerRecord",
    "WorkerSelector",
    # Pipeline
    "DISPLAY_TIERS",
    "build_row",
    "collect",
    "render",
    "ReportWriter",
    "resolve_selector",
    # Formatting
    "get_size_from_bytes",
    "percentage",
    # Command and data source
    "CapacityCommand",
    "WorkerReportSource",
    "get_usage",
    "MasterClient",
    "ClientConfig",
    # Errors
    "InvalidArgumentError",
]
