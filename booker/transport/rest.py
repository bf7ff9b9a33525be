"""REST transport implementation."""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import Config
from ..exceptions import TransportException
from .interface import TransportInterface, TransportResponse

logger = logging.getLogger(__name__)


class RestTransport(TransportInterface):
    """REST transport for Booker.

    Status codes are returned as-is; only failures to complete the exchange
    raise ``TransportException``.
    """

    def __init__(self, config: Config, client: Optional[httpx.Client] = None):
        self.config = config
        base_url = config.get("baseUrl", "")
        self.base_url = base_url.rstrip("/")
        self.timeout = config.get("callTimeoutMs", 10000) / 1000
        # Create a persistent httpx client for connection pooling
        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _headers(self) -> Dict[str, str]:
        """Build request headers."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Correlation-Id": self.config.get("correlationId", ""),
        }

        token = self.config.get("token")
        if token:
            headers["Authorization"] = token

        cookie = self.config.get("cookie")
        if cookie:
            headers["Cookie"] = cookie

        return headers

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.debug("%s %s failed: %s", method, path, e)
            raise TransportException.from_http(e)
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    def booking_list_ids(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
    ) -> TransportResponse:
        """List booking ids."""
        filters = {
            "firstname": first_name,
            "lastname": last_name,
            "checkin": check_in,
            "checkout": check_out,
        }
        params = {key: value for key, value in filters.items() if value is not None}
        response = self._send("GET", "/booking", params=params)
        return TransportResponse(response.status_code, response.content)

    def booking_get(self, booking_id: int) -> TransportResponse:
        """Get booking detail."""
        response = self._send("GET", f"/booking/{booking_id}")
        return TransportResponse(response.status_code, response.content)

    def booking_create(self, payload: Dict[str, Any]) -> TransportResponse:
        """Create booking."""
        response = self._send("POST", "/booking", json=payload)
        return TransportResponse(response.status_code, response.content)

    def booking_update(self, booking_id: int, payload: Dict[str, Any]) -> TransportResponse:
        """Replace booking detail."""
        response = self._send("PUT", f"/booking/{booking_id}", json=payload)
        return TransportResponse(response.status_code, response.content)

    def booking_delete(self, booking_id: int) -> int:
        """Delete booking."""
        return self._send("DELETE", f"/booking/{booking_id}").status_code
