"""
Shared data types for the capacity report.

This module defines the structures that flow through one report run:
worker selection (WorkerRange, WorkerSelector), the raw per-worker input
(WorkerRecord) and the collector's output (ReportRow, AggregateState).

All types are frozen dataclasses. Pydantic models are reserved for parsing
master API responses (see capacity_report.api_types).
"""

from dataclasses import dataclass, field
from enum import Enum

from capacity_report.format import percentage

# Type aliases for common patterns
TierName = str
"""Name of a storage tier, e.g. "MEM", "SSD", "HDD". Open-ended."""


class WorkerRange(str, Enum):
    """
    Scope of workers a report covers.

    The lower-cased value is shown in the summary header, e.g.
    "Capacity information for live workers".
    """

    ALL = "ALL"
    LIVE = "LIVE"
    LOST = "LOST"
    SPECIFIED = "SPECIFIED"


class WorkerInfoField(str, Enum):
    """Worker info fields that can be requested from the master."""

    ADDRESS = "ADDRESS"
    CAPACITY_BYTES = "CAPACITY_BYTES"
    CAPACITY_BYTES_ON_TIERS = "CAPACITY_BYTES_ON_TIERS"
    LAST_CONTACT_SEC = "LAST_CONTACT_SEC"
    USED_BYTES = "USED_BYTES"
    USED_BYTES_ON_TIERS = "USED_BYTES_ON_TIERS"


CAPACITY_FIELDS: frozenset[WorkerInfoField] = frozenset(WorkerInfoField)
"""Fields the capacity report needs for every worker."""


@dataclass(frozen=True)
class WorkerSelector:
    """
    Which workers to fetch and which fields to fetch for them.

    Attributes:
        range: Worker scope (all, live, lost, or an explicit address set).
        addresses: Host names or IP addresses. Only used when range is
            SPECIFIED.
        fields: Worker info fields requested from the master.
    """

    range: WorkerRange = WorkerRange.ALL
    addresses: frozenset[str] = frozenset()
    fields: frozenset[WorkerInfoField] = CAPACITY_FIELDS

    @classmethod
    def defaults(cls) -> "WorkerSelector":
        """Selector for all workers with every capacity field."""
        return cls()

    @property
    def scope_name(self) -> str:
        """Lower-cased range name for display."""
        return self.range.value.lower()


@dataclass(frozen=True)
class WorkerRecord:
    """
    Storage statistics reported by a single worker.

    Values are taken as-is from the master; used bytes above capacity or
    negative numbers are not rejected.

    Attributes:
        host: Worker host name.
        last_contact_sec: Seconds since the master last heard from the worker.
        capacity_bytes: Total capacity across all tiers.
        used_bytes: Used bytes across all tiers.
        capacity_bytes_on_tiers: Capacity per tier, in the order reported.
        used_bytes_on_tiers: Used bytes per tier, in the order reported.
    """

    host: str
    last_contact_sec: int
    capacity_bytes: int
    used_bytes: int
    capacity_bytes_on_tiers: dict[TierName, int] = field(default_factory=dict)
    used_bytes_on_tiers: dict[TierName, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ReportRow:
    """
    One worker's entry in the per-worker table.

    Attributes:
        host: Worker host name.
        last_contact_sec: Heartbeat age in seconds.
        capacity_bytes: Worker total capacity.
        used_bytes: Worker used bytes.
        capacity_on_tiers: Capacity for each display tier, in display order.
        used_on_tiers: Used bytes for each display tier, in display order.
        used_percentage: Pre-rendered suffix such as " (50%)", or "" when
            the worker reports zero capacity.
    """

    host: str
    last_contact_sec: int
    capacity_bytes: int
    used_bytes: int
    capacity_on_tiers: tuple[int, ...]
    used_on_tiers: tuple[int, ...]
    used_percentage: str = ""


@dataclass(frozen=True)
class AggregateState:
    """
    Cluster-wide totals built by one collector run.

    Tier dicts keep the order in which tiers were first encountered.

    Attributes:
        total_capacity_bytes: Sum of capacity_bytes over all workers.
        total_used_bytes: Sum of used_bytes over all workers.
        capacity_bytes_on_tiers: Per-tier capacity sums.
        used_bytes_on_tiers: Per-tier used sums.
    """

    total_capacity_bytes: int = 0
    total_used_bytes: int = 0
    capacity_bytes_on_tiers: dict[TierName, int] = field(default_factory=dict)
    used_bytes_on_tiers: dict[TierName, int] = field(default_factory=dict)

    @property
    def used_percentage(self) -> int | None:
        """Truncated used percentage, or None when total capacity is zero."""
        return percentage(self.total_used_bytes, self.total_capacity_bytes)

    @property
    def free_percentage(self) -> int | None:
        """100 minus used_percentage, or None when total capacity is zero."""
        used = self.used_percentage
        if used is None:
            return None
        return 100 - used


@dataclass(frozen=True)
class CollectResult:
    """Output of the collector: sorted rows plus cluster totals."""

    rows: tuple[ReportRow, ...]
    totals: AggregateState
