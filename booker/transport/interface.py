"""Transport interface for Booker."""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..exceptions import TransportException


class TransportResponse:
    """Status code and raw body of one exchange.

    The body is decoded lazily by ``payload()`` so that callers interested
    only in the status code never depend on it being valid JSON.
    """

    def __init__(self, status_code: int, content: bytes = b""):
        self.status_code = status_code
        self.content = content

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def payload(self, expected_type: Optional[type] = None) -> Optional[Any]:
        """Decoded JSON body, or None for a non-2xx status or an empty body.

        With ``expected_type``, a body of any other JSON type is a malformed
        response and raises ``TransportException``.
        """
        if not self.is_success or not self.content.strip():
            return None
        try:
            body = json.loads(self.content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TransportException.from_decode(e, self.status_code)
        if expected_type is not None and not isinstance(body, expected_type):
            raise TransportException.malformed(
                f"expected a JSON {expected_type.__name__}, got {type(body).__name__}",
                self.status_code,
            )
        return body

    def __repr__(self) -> str:
        return f"TransportResponse(status_code={self.status_code}, content={self.content!r})"


class TransportInterface(ABC):
    """Interface for transport implementations."""

    @abstractmethod
    def booking_list_ids(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
    ) -> TransportResponse:
        """List booking ids, filtered by the non-None arguments."""
        pass

    @abstractmethod
    def booking_get(self, booking_id: int) -> TransportResponse:
        """Get booking detail."""
        pass

    @abstractmethod
    def booking_create(self, payload: Dict[str, Any]) -> TransportResponse:
        """Create booking."""
        pass

    @abstractmethod
    def booking_update(self, booking_id: int, payload: Dict[str, Any]) -> TransportResponse:
        """Replace booking detail."""
        pass

    @abstractmethod
    def booking_delete(self, booking_id: int) -> int:
        """Delete booking, returning the status code."""
        pass

    def close(self) -> None:
        """Release transport resources."""
