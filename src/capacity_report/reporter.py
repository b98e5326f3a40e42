"""
Capacity report rendering.

render() formats the collector output as plain text: an indented
cluster summary followed by a fixed-width per-worker table. Tiers are
listed in the order first seen while walking the heartbeat-sorted rows.
The summary looks like:

    Capacity information for all workers:
        Total Capacity: 300B
            Tier: MEM  Size: 100B
            Tier: SSD  Size: 200B
        Used Capacity: 150B
            Tier: MEM  Size: 50B
            Tier: SSD  Size: 100B
        Used Percentage: 50%
        Free Percentage: 50%
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from capacity_report.collector import DISPLAY_TIERS
from capacity_report.format import get_size_from_bytes
from capacity_report.types import (
    AggregateState,
    ReportRow,
    TierName,
    WorkerSelector,
)

INDENT_SIZE = 4

# Column widths: worker name, last heartbeat, storage label, total, then tiers
_LEADING_WIDTHS = (16, 16, 13, 16)
_TIER_WIDTH = 13


@dataclass
class ReportWriter:
    """
    Line buffer for hierarchical report text.

    Each call states its own depth; the writer keeps no indentation cursor.
    """

    indent_size: int = INDENT_SIZE
    lines: list[str] = field(default_factory=list)

    def line(self, text: str, depth: int = 0) -> None:
        """Append text indented by depth levels."""
        self.lines.append(" " * (depth * self.indent_size) + text)

    def raw(self, text: str) -> None:
        """Append text without indentation."""
        self.lines.append(text)

    def text(self) -> str:
        """Return all lines joined with newlines."""
        return "\n".join(self.lines)


def format_worker_line(*columns: str) -> str:
    """Left-align columns to the table widths, one tier column per extra value."""
    widths = _LEADING_WIDTHS + (_TIER_WIDTH,) * (len(columns) - len(_LEADING_WIDTHS))
    return " ".join(f"{column:<{width}}" for column, width in zip(columns, widths))


def _write_tiers(
    writer: ReportWriter, on_tiers: Mapping[TierName, int], depth: int
) -> None:
    for tier, value in on_tiers.items():
        writer.line(f"Tier: {tier}  Size: {get_size_from_bytes(value)}", depth)


def write_summary(
    writer: ReportWriter, totals: AggregateState, selector: WorkerSelector
) -> None:
    """
    Write the cluster-wide summary block.

    Percentage lines are omitted entirely when total capacity is zero.
    """
    writer.line(f"Capacity information for {selector.scope_name} workers: ", 0)

    writer.line(
        f"Total Capacity: {get_size_from_bytes(totals.total_capacity_bytes)}", 1
    )
    _write_tiers(writer, totals.capacity_bytes_on_tiers, 2)

    writer.line(f"Used Capacity: {get_size_from_bytes(totals.total_used_bytes)}", 1)
    _write_tiers(writer, totals.used_bytes_on_tiers, 2)

    used = totals.used_percentage
    if used is not None:
        writer.line(f"Used Percentage: {used}%", 1)
        writer.line(f"Free Percentage: {totals.free_percentage}%", 1)


def write_worker_table(
    writer: ReportWriter,
    rows: Sequence[ReportRow],
    display_tiers: Sequence[TierName] = DISPLAY_TIERS,
) -> None:
    """
    Write the per-worker table, two lines per worker.

    Nothing is written for an empty row sequence, not even the header.
    """
    if not rows:
        return

    writer.raw("")
    writer.raw(
        format_worker_line(
            "Worker Name", "Last Heartbeat", "Storage", "Total", *display_tiers
        )
    )
    for row in rows:
        writer.raw(
            format_worker_line(
                row.host,
                str(row.last_contact_sec),
                "Capacity",
                get_size_from_bytes(row.capacity_bytes),
                *(get_size_from_bytes(value) for value in row.capacity_on_tiers),
            )
        )
        writer.raw(
            format_worker_line(
                "",
                "",
                "Used",
                get_size_from_bytes(row.used_bytes) + row.used_percentage,
                *(get_size_from_bytes(value) for value in row.used_on_tiers),
            )
        )


def render(
    rows: Sequence[ReportRow],
    totals: AggregateState,
    selector: WorkerSelector,
    display_tiers: Sequence[TierName] = DISPLAY_TIERS,
) -> str:
    """
    Render the full capacity report.

    Args:
        rows: Sorted per-worker rows from collect().
        totals: Cluster totals from collect().
        selector: Selector the report was built for; names the scope.
        display_tiers: Tier column names. Must match the tiers the rows
            were built with.

    Returns:
        Report text without a trailing newline.
    """
    writer = ReportWriter()
    write_summary(writer, totals, selector)
    write_worker_table(writer, rows, display_tiers)
    return writer.text()
