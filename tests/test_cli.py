"""
Tests for the fsadmin CLI.

These tests verify `fsadmin report capacity`:
- Prints the report fetched from the master
- Exits 0 for --help without contacting the master
- Exits 1 on conflicting filters before contacting the master
- Exits 1 without a partial report when the master fails
"""

import httpx
import pytest
from httpx import Request, Response
from typer.testing import CliRunner

from capacity_report.cli.main import app
from capacity_report.client import WORKER_REPORT_PATH
from capacity_report.config import ClientConfig

runner = CliRunner()


@pytest.fixture
def master(monkeypatch):
    """
    Replace the master with an in-process handler.

    Returns a dict whose 'status_code' and 'json' keys control the response,
    and whose 'requests' list records what the CLI sent.
    """
    state = {
        "status_code": 200,
        "json": {
            "workers": [
                {
                    "address": {"host": "worker-0"},
                    "lastContactSec": 1,
                    "capacityBytes": 100,
                    "usedBytes": 25,
                    "capacityBytesOnTiers": {"MEM": 100},
                    "usedBytesOnTiers": {"MEM": 25},
                }
            ]
        },
        "requests": [],
    }

    def handler(request: Request) -> Response:
        state["requests"].append(request)
        if request.url.path != WORKER_REPORT_PATH:
            return Response(status_code=404, request=request)
        if "text" in state:
            return Response(
                status_code=state["status_code"], text=state["text"], request=request
            )
        return Response(status_code=state["status_code"], json=state["json"], request=request)

    def create_http_client(self):
        return httpx.Client(
            base_url=self.master_endpoint, transport=httpx.MockTransport(handler)
        )

    monkeypatch.setattr(ClientConfig, "create_http_client", create_http_client)
    return state


class TestReportCapacity:
    def test_prints_report(self, master):
        result = runner.invoke(app, ["report", "capacity"])

        assert result.exit_code == 0
        assert "Capacity information for all workers:" in result.output
        assert "Used Percentage: 25%" in result.output
        assert "worker-0" in result.output
        assert master["requests"][0].url.params["range"] == "ALL"

    def test_lost_filter(self, master):
        result = runner.invoke(app, ["report", "capacity", "--lost"])

        assert result.exit_code == 0
        assert "Capacity information for lost workers:" in result.output
        assert master["requests"][0].url.params["range"] == "LOST"

    def test_workers_filter(self, master):
        result = runner.invoke(app, ["report", "capacity", "--workers", "b,a"])

        assert result.exit_code == 0
        params = master["requests"][0].url.params
        assert params["range"] == "SPECIFIED"
        assert params["addresses"] == "a,b"

    def test_master_from_env(self, master):
        result = runner.invoke(
            app, ["report", "capacity"], env={"MASTER_ENDPOINT": "http://other:19999"}
        )

        assert result.exit_code == 0
        assert master["requests"][0].url.host == "other"

    def test_help_does_not_fetch(self, master):
        result = runner.invoke(app, ["report", "capacity", "--help"])

        assert result.exit_code == 0
        assert "--live" in result.output
        assert master["requests"] == []

    def test_conflicting_filters_exit_before_fetch(self, master):
        result = runner.invoke(app, ["report", "capacity", "--live", "--lost"])

        assert result.exit_code == 1
        assert "Too many arguments passed in." in result.output
        assert master["requests"] == []

    def test_master_error_exits_without_report(self, master):
        master["status_code"] = 500
        master["json"] = {"error": "boom"}

        result = runner.invoke(app, ["report", "capacity"])

        assert result.exit_code == 1
        assert "failed to fetch worker report" in result.output
        assert "Capacity information" not in result.output

    def test_malformed_response_exits(self, master):
        master["json"] = {"workers": [{"capacityBytes": 1}]}

        result = runner.invoke(app, ["report", "capacity"])

        assert result.exit_code == 1
        assert "malformed worker report" in result.output

    def test_non_json_response_exits(self, master):
        """An HTML page from a proxy in front of the master is reported, not raised."""
        master["text"] = "<html>proxy</html>"

        result = runner.invoke(app, ["report", "capacity"])

        assert result.exit_code == 1
        assert "malformed worker report" in result.output
        assert "Capacity information" not in result.output
