"""Booker: Python client for a restful booking service."""

from .client import BookerClient
from .clients.booking import BookingClient
from .config import Config
from .dto import BookingDates, BookingDetail, BookingId, BookingRecord
from .exceptions import TransportException
from .outcome import Outcome, classify

__version__ = "1.0.0"
__all__ = [
    "BookerClient",
    "BookingClient",
    "Config",
    "BookingDates",
    "BookingDetail",
    "BookingId",
    "BookingRecord",
    "TransportException",
    "Outcome",
    "classify",
]
