"""
Pydantic response types for the master worker report API.

These models validate the JSON returned by the master. Internal types
(WorkerRecord etc.) are dataclasses in capacity_report.types.

The master uses camelCase field names; models expose snake_case attributes
with aliases.
"""

from pydantic import BaseModel, ConfigDict, Field

from capacity_report.types import WorkerRecord


class WorkerAddressResponse(BaseModel):
    """Network address of a worker."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    host: str
    rpc_port: int = Field(default=0, alias="rpcPort")


class WorkerInfoResponse(BaseModel):
    """
    Single worker entry from the worker report endpoint.

    Example:
    {
        "address": {"host": "worker-1", "rpcPort": 29999},
        "lastContactSec": 3,
        "capacityBytes": 1073741824,
        "usedBytes": 536870912,
        "capacityBytesOnTiers": {"MEM": 1073741824},
        "usedBytesOnTiers": {"MEM": 536870912}
    }
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    address: WorkerAddressResponse
    last_contact_sec: int = Field(default=0, alias="lastContactSec")
    capacity_bytes: int = Field(default=0, alias="capacityBytes")
    used_bytes: int = Field(default=0, alias="usedBytes")
    capacity_bytes_on_tiers: dict[str, int] = Field(
        default_factory=dict, alias="capacityBytesOnTiers"
    )
    used_bytes_on_tiers: dict[str, int] = Field(
        default_factory=dict, alias="usedBytesOnTiers"
    )

    def to_record(self) -> WorkerRecord:
        """Convert to the internal WorkerRecord, keeping tier order."""
        return WorkerRecord(
            host=self.address.host,
            last_contact_sec=self.last_contact_sec,
            capacity_bytes=self.capacity_bytes,
            used_bytes=self.used_bytes,
            capacity_bytes_on_tiers=dict(self.capacity_bytes_on_tiers),
            used_bytes_on_tiers=dict(self.used_bytes_on_tiers),
        )


class WorkerReportResponse(BaseModel):
    """Response from GET /api/v1/master/worker_report."""

    workers: list[WorkerInfoResponse] = Field(default_factory=list)
