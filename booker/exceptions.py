"""Exceptions for Booker."""

from typing import Optional

import httpx


class TransportException(Exception):
    """Raised when an exchange with the booking service cannot complete.

    A remote rejection (a non-2xx status code) is not a transport fault and
    never raises this; it is reported through the status code instead.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code

    @classmethod
    def from_http(cls, error: Exception) -> "TransportException":
        """Create exception from an httpx error."""
        status_code = None
        message = str(error) or error.__class__.__name__

        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code

        return cls(message, status_code, error.__class__.__name__)

    @classmethod
    def from_decode(cls, error: ValueError, status_code: int) -> "TransportException":
        """Create exception for a response body that is not valid JSON."""
        return cls.malformed(str(error), status_code)

    @classmethod
    def malformed(cls, reason: str, status_code: int) -> "TransportException":
        """Create exception for a response body that cannot be read as expected."""
        return cls(f"Malformed JSON response: {reason}", status_code, "MalformedResponse")
