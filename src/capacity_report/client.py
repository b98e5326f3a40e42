"""
Master API client for worker capacity information.

MasterClient receives an injected httpx.Client with base_url set to the
master. Requests fail loudly: HTTP errors raise httpx.HTTPStatusError,
transport errors raise httpx.TransportError, malformed bodies raise
pydantic.ValidationError. Nothing is retried.
"""

import logging
from dataclasses import dataclass

import httpx

from capacity_report.api_types import WorkerReportResponse
from capacity_report.types import WorkerRange, WorkerRecord, WorkerSelector

logger = logging.getLogger(__name__)

WORKER_REPORT_PATH = "/api/v1/master/worker_report"


def selector_params(selector: WorkerSelector) -> dict[str, str]:
    """Query parameters describing a selector."""
    params = {
        "range": selector.range.value,
        "fields": ",".join(sorted(f.value for f in selector.fields)),
    }
    if selector.range == WorkerRange.SPECIFIED:
        params["addresses"] = ",".join(sorted(selector.addresses))
    return params


@dataclass
class MasterClient:
    """
    Master API client with injected httpx client.

    Attributes:
        http: Pre-configured httpx.Client with base_url set to the master.

    Example:
        with httpx.Client(base_url="http://master:19999") as http:
            client = MasterClient(http=http)
            workers = client.get_worker_report(WorkerSelector.defaults())
    """

    http: httpx.Client

    def get_worker_report(self, selector: WorkerSelector) -> list[WorkerRecord]:
        """
        Get capacity information for the selected workers.

        Calls GET /api/v1/master/worker_report and converts each worker entry
        to a WorkerRecord, preserving the order returned by the master.

        Args:
            selector: Which workers and fields to request.

        Returns:
            List of WorkerRecord, possibly empty.

        Raises:
            httpx.HTTPStatusError: On HTTP errors (4xx, 5xx responses).
            httpx.TransportError: When the master cannot be reached.
            pydantic.ValidationError: On malformed response data, including
                bodies that are not JSON.
        """
        params = selector_params(selector)
        logger.debug(f"Requesting worker report with {params}")

        response = self.http.get(WORKER_REPORT_PATH, params=params)
        response.raise_for_status()

        data = WorkerReportResponse.model_validate_json(response.content)
        logger.debug(f"Master returned {len(data.workers)} workers")

        return [worker.to_record() for worker in data.workers]
