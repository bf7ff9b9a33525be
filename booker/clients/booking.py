"""Booking client."""

import logging
from typing import Any, Callable, List, Optional, TypeVar, Union

from ..dto import BookingDetail, BookingId, BookingRecord
from ..exceptions import TransportException
from ..outcome import log_response_code
from ..transport.interface import TransportInterface, TransportResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _decode(response: TransportResponse, expected_type: type, factory: Callable[[Any], T]) -> Optional[T]:
    """Build a DTO from the response body; a wrongly shaped body is a transport fault."""
    body = response.payload(expected_type)
    if body is None:
        return None
    try:
        return factory(body)
    except ValueError as e:
        raise TransportException.malformed(str(e), response.status_code) from e


class BookingClient:
    """Client for booking operations.

    Every method performs exactly one call on the transport. Remote
    rejections are logged and surface as a ``None`` result; transport
    faults, including bodies of the wrong shape, propagate as
    ``TransportException``.
    """

    def __init__(self, transport: TransportInterface):
        self.transport = transport

    def list_booking_ids(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        check_in_date: Optional[str] = None,
        check_out_date: Optional[str] = None,
    ) -> Optional[List[BookingId]]:
        """List booking ids.

        Called without arguments, every booking id is returned. Any of the
        filters may be given; dates use the ``YYYY-MM-DD`` format.
        """
        logger.info("Getting available booking list from service")
        response = self.transport.booking_list_ids(
            first_name, last_name, check_in_date, check_out_date
        )
        log_response_code(response.status_code)
        return _decode(response, list, lambda body: [BookingId.from_dict(item) for item in body])

    def get_booking_detail(self, booking_id: Union[int, BookingId]) -> Optional[BookingDetail]:
        """Get booking detail by plain id or ``BookingId``."""
        if not isinstance(booking_id, BookingId):
            booking_id = BookingId(booking_id)
        logger.info("Getting booking detail for the booking with id of %s.", booking_id.booking_id)
        response = self.transport.booking_get(booking_id.booking_id)
        log_response_code(response.status_code)
        return _decode(response, dict, BookingDetail.from_dict)

    def create_booking(self, detail: BookingDetail) -> Optional[BookingRecord]:
        """Create booking."""
        logger.info("Setting a booking for the name of %s %s.", detail.first_name, detail.last_name)
        response = self.transport.booking_create(detail.to_dict())
        log_response_code(response.status_code)
        if response.status_code == 200:
            logger.info("Booking has been created.")
        return _decode(response, dict, BookingRecord.from_dict)

    def update_booking(self, record: BookingRecord) -> Optional[BookingDetail]:
        """Replace the detail of an existing booking, returning the stored state."""
        logger.info("Updating booking for booking id of %s", record.booking_id)
        response = self.transport.booking_update(record.booking_id, record.booking.to_dict())
        log_response_code(response.status_code)
        return _decode(response, dict, BookingDetail.from_dict)

    def delete_booking(self, booking_id: int) -> bool:
        """Delete booking. True only when the service answers 201."""
        # The booking service answers a successful DELETE with 201 Created.
        logger.info("Removing the booking with booking id of %s", booking_id)
        return self.transport.booking_delete(booking_id) == 201

    def get_response_code_of_booking_get_request(self, booking_id: int) -> int:
        """Status code of a booking get request; the body is not decoded."""
        status_code = self.transport.booking_get(booking_id).status_code
        log_response_code(status_code)
        return status_code
