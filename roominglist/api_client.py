"""
Client for the rooming list HTTP listing endpoint.

Used to check what the UI renders against what the server returns,
in particular the default sort order. Transport errors and HTTP error
statuses propagate to the caller as ``requests`` exceptions.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from roominglist.config import HarnessConfig
from roominglist.errors import ApiContractError

logger = logging.getLogger(__name__)

LISTING_PATH = "/api/rooming-lists"


class RoomingListApiClient:
    """
    Read-only client for ``GET /api/rooming-lists``.

    Attributes:
        base_url: Root URL of the API.
        timeout: Per-request timeout in seconds.
        session: requests session used for every call.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = HarnessConfig.API_TIMEOUT_S,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: type[HarnessConfig] = HarnessConfig) -> "RoomingListApiClient":
        return cls(config.API_URL, timeout=config.API_TIMEOUT_S)

    def list_rooming_lists(
        self,
        sort_by: str = "rfpName",
        sort_order: str = "ASC",
        **params: Any,
    ) -> list[dict[str, Any]]:
        """
        Fetch rooming list records.

        Args:
            sort_by: Field to sort by.
            sort_order: ASC or DESC.
            **params: Extra query parameters (for example ``status``).

        Returns:
            Records in the order the server returned them.

        Raises:
            requests.HTTPError: The server answered with an error status.
            ApiContractError: The body is not an array of records with rfpName.
        """
        query = {"sortBy": sort_by, "sortOrder": sort_order, **params}
        url = f"{self.base_url}{LISTING_PATH}"
        logger.info("GET %s %s", url, query)

        response = self.session.get(url, params=query, timeout=self.timeout)
        response.raise_for_status()
        records = response.json()

        if not isinstance(records, list):
            raise ApiContractError(f"Expected a JSON array from {url}, got {type(records).__name__}")
        for index, record in enumerate(records):
            if not isinstance(record, dict) or "rfpName" not in record:
                raise ApiContractError(f"Record {index} from {url} has no 'rfpName'")
        return records

    def rfp_names(self, sort_by: str = "rfpName", sort_order: str = "ASC", **params: Any) -> list[str]:
        """RFP names in server order."""
        return [record["rfpName"] for record in self.list_rooming_lists(sort_by, sort_order, **params)]

    def is_healthy(self) -> bool:
        """True when the health endpoint answers 200."""
        try:
            response = self.session.get(f"{self.base_url}/api/health", timeout=self.timeout)
        except requests.RequestException:
            return False
        return response.status_code == 200
