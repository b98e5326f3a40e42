"""
Tests for the capacity report command.

These tests verify CapacityCommand correctly:
- Writes the full report in a single write
- Never fetches when the filters are invalid
- Propagates fetch failures without writing a partial report
- Produces identical output when run twice
"""

import io

import httpx
import pytest

from capacity_report.capacity import CapacityCommand, WorkerReportSource, get_usage
from capacity_report.exceptions import InvalidArgumentError
from capacity_report.types import WorkerRange, WorkerRecord, WorkerSelector


class StaticSource:
    """In-memory worker source that records every selector it is asked for."""

    def __init__(self, records: list[WorkerRecord]):
        self.records = records
        self.selectors: list[WorkerSelector] = []

    def get_worker_report(self, selector: WorkerSelector) -> list[WorkerRecord]:
        self.selectors.append(selector)
        return list(self.records)


class FailingSource:
    """Worker source whose master is unreachable."""

    def get_worker_report(self, selector: WorkerSelector) -> list[WorkerRecord]:
        raise httpx.ConnectError("Connection refused")


class CountingStream(io.StringIO):
    """StringIO that counts write() calls."""

    def __init__(self):
        super().__init__()
        self.writes = 0

    def write(self, s: str) -> int:
        self.writes += 1
        return super().write(s)


@pytest.fixture
def two_workers():
    return [
        WorkerRecord("worker-1", 5, 100, 50, {"MEM": 100}, {"MEM": 50}),
        WorkerRecord("worker-2", 1, 200, 100, {"SSD": 200}, {"SSD": 100}),
    ]


class TestCapacityCommand:
    def test_source_protocol(self, two_workers):
        assert isinstance(StaticSource(two_workers), WorkerReportSource)

    def test_run_writes_report_once(self, two_workers):
        stream = CountingStream()
        command = CapacityCommand(StaticSource(two_workers), stream)

        assert command.run() == 0

        output = stream.getvalue()
        assert stream.writes == 1
        assert output.startswith("Capacity information for all workers: \n")
        assert "    Used Percentage: 50%\n" in output
        assert output.endswith("\n")

    def test_run_passes_selector(self, two_workers):
        source = StaticSource(two_workers)
        stream = io.StringIO()

        CapacityCommand(source, stream).run(live=True)

        assert source.selectors[0].range == WorkerRange.LIVE
        assert "Capacity information for live workers" in stream.getvalue()

    def test_workers_filter(self, two_workers):
        source = StaticSource(two_workers)

        CapacityCommand(source, io.StringIO()).run(workers="worker-1,worker-2")

        assert source.selectors[0].range == WorkerRange.SPECIFIED
        assert source.selectors[0].addresses == frozenset({"worker-1", "worker-2"})

    def test_too_many_filters_never_fetches(self, two_workers):
        source = StaticSource(two_workers)
        stream = io.StringIO()

        with pytest.raises(InvalidArgumentError):
            CapacityCommand(source, stream).run(live=True, lost=True)

        assert source.selectors == []
        assert stream.getvalue() == ""

    def test_fetch_failure_propagates_without_output(self):
        stream = io.StringIO()

        with pytest.raises(httpx.ConnectError):
            CapacityCommand(FailingSource(), stream).run()

        assert stream.getvalue() == ""

    def test_empty_cluster(self):
        stream = io.StringIO()

        CapacityCommand(StaticSource([]), stream).run()

        assert stream.getvalue() == (
            "Capacity information for all workers: \n"
            "    Total Capacity: 0B\n"
            "    Used Capacity: 0B\n"
        )

    def test_zero_capacity_worker(self):
        stream = io.StringIO()

        CapacityCommand(StaticSource([WorkerRecord("w", 0, 0, 0)]), stream).run()

        output = stream.getvalue()
        assert "Percentage" not in output
        assert "%" not in output

    def test_repeated_runs_identical(self, two_workers):
        command = CapacityCommand(StaticSource(two_workers), io.StringIO())

        first = command.build_report(WorkerSelector.defaults())
        second = command.build_report(WorkerSelector.defaults())

        assert first == second

    def test_extended_display_tiers(self):
        stream = io.StringIO()
        records = [WorkerRecord("w", 0, 64, 8, {"NVME": 64}, {"NVME": 8})]

        CapacityCommand(
            StaticSource(records), stream, display_tiers=("MEM", "NVME")
        ).run()

        header = next(
            line for line in stream.getvalue().split("\n") if "Worker Name" in line
        )
        assert header.split()[-2:] == ["MEM", "NVME"]


def test_usage_lists_filters():
    usage = get_usage()

    assert "--live" in usage
    assert "--lost" in usage
    assert "--workers <worker_names>" in usage
