"""
Worker capacity collection.

collect() turns the worker records returned by the master into the rows
of the per-worker table and the cluster-wide totals used by the summary.
Nothing is kept between calls; every run builds fresh state.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from capacity_report.format import percentage
from capacity_report.types import (
    AggregateState,
    CollectResult,
    ReportRow,
    TierName,
    WorkerRecord,
    WorkerSelector,
)

logger = logging.getLogger(__name__)

# Tiers shown as columns in the per-worker table
DISPLAY_TIERS: tuple[TierName, ...] = ("MEM", "SSD", "HDD")


def _accumulate(sums: dict[TierName, int], on_tiers: Mapping[TierName, int]) -> None:
    """Add each tier value into sums, creating tiers on first sight."""
    for tier, value in on_tiers.items():
        sums[tier] = sums.get(tier, 0) + value


def _used_percentage_suffix(used_bytes: int, capacity_bytes: int) -> str:
    used = percentage(used_bytes, capacity_bytes)
    if used is None:
        return ""
    return f" ({used}%)"


def build_row(
    record: WorkerRecord, display_tiers: Sequence[TierName] = DISPLAY_TIERS
) -> ReportRow:
    """
    Build the table row for one worker.

    Tiers the worker does not report show as 0 in their column.
    """
    return ReportRow(
        host=record.host,
        last_contact_sec=record.last_contact_sec,
        capacity_bytes=record.capacity_bytes,
        used_bytes=record.used_bytes,
        capacity_on_tiers=tuple(
            record.capacity_bytes_on_tiers.get(tier, 0) for tier in display_tiers
        ),
        used_on_tiers=tuple(
            record.used_bytes_on_tiers.get(tier, 0) for tier in display_tiers
        ),
        used_percentage=_used_percentage_suffix(
            record.used_bytes, record.capacity_bytes
        ),
    )


def collect(
    records: Iterable[WorkerRecord],
    selector: WorkerSelector | None = None,
    display_tiers: Sequence[TierName] = DISPLAY_TIERS,
) -> CollectResult:
    """
    Sort workers by heartbeat age and accumulate cluster totals.

    Rows are ordered by last_contact_sec ascending; workers with equal
    heartbeat keep their input order. Every worker counts toward the totals,
    including workers with zero capacity. Tier sums include every tier name
    seen in any worker, not just the display tiers; a tier missing from a
    worker simply contributes nothing.

    Args:
        records: Worker records from the master. May be empty.
        selector: Selector the records were fetched with. Only used for
            logging.
        display_tiers: Tiers rendered as per-worker columns.

    Returns:
        CollectResult with the sorted rows and the aggregate totals. An empty
        input yields no rows and zero totals with empty tier maps.
    """
    workers = sorted(records, key=lambda record: record.last_contact_sec)

    total_capacity = 0
    total_used = 0
    capacity_on_tiers: dict[TierName, int] = {}
    used_on_tiers: dict[TierName, int] = {}
    rows: list[ReportRow] = []

    for record in workers:
        total_capacity += record.capacity_bytes
        total_used += record.used_bytes
        _accumulate(capacity_on_tiers, record.capacity_bytes_on_tiers)
        _accumulate(used_on_tiers, record.used_bytes_on_tiers)
        rows.append(build_row(record, display_tiers))

    scope = selector.scope_name if selector is not None else "unknown"
    logger.debug(
        f"Collected {len(rows)} {scope} workers, tiers: {list(capacity_on_tiers)}"
    )

    return CollectResult(
        rows=tuple(rows),
        totals=AggregateState(
            total_capacity_bytes=total_capacity,
            total_used_bytes=total_used,
            capacity_bytes_on_tiers=capacity_on_tiers,
            used_bytes_on_tiers=used_on_tiers,
        ),
    )
