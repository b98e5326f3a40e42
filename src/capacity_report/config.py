"""
Connection settings for the master worker report API.

The CLI fills ClientConfig from its options, which fall back to the
MASTER_ENDPOINT and MASTER_TIMEOUT environment variables.
"""

from dataclasses import dataclass

import httpx

DEFAULT_MASTER_ENDPOINT = "http://localhost:19999"
DEFAULT_TIMEOUT_S = 30.0


@dataclass
class ClientConfig:
    """
    Where and how to reach the master.

    Attributes:
        master_endpoint: Base URL of the master web API.
        timeout_s: Request timeout in seconds.
    """

    master_endpoint: str = DEFAULT_MASTER_ENDPOINT
    timeout_s: float = DEFAULT_TIMEOUT_S

    def create_http_client(self) -> httpx.Client:
        """Build an httpx client with base_url set to the master."""
        return httpx.Client(base_url=self.master_endpoint, timeout=self.timeout_s)
