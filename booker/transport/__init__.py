"""Transport layer for Booker."""

from .interface import TransportInterface, TransportResponse
from .rest import RestTransport

__all__ = ["TransportInterface", "TransportResponse", "RestTransport"]
