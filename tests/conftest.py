import json

import pytest

from booker.config import Config
from booker.dto import BookingDates, BookingDetail
from booker.transport.interface import TransportInterface, TransportResponse

BASE_URL = "https://booker.test"


class FakeTransport(TransportInterface):
    """In-memory booking service that records every call."""

    def __init__(self):
        self.bookings = {}
        self.next_id = 1
        self.calls = []
        # status overrides, keyed by operation name
        self.codes = {}
        self.closed = False

    def add(self, detail: dict) -> int:
        booking_id = self.next_id
        self.next_id += 1
        self.bookings[booking_id] = dict(detail)
        return booking_id

    def _response(self, op, default_code, body=None):
        code = self.codes.get(op, default_code)
        content = json.dumps(body).encode() if body is not None else b""
        return TransportResponse(code, content)

    def booking_list_ids(self, first_name=None, last_name=None, check_in=None, check_out=None):
        self.calls.append(("list", (first_name, last_name, check_in, check_out)))
        ids = [
            {"bookingid": booking_id}
            for booking_id, detail in self.bookings.items()
            if (first_name is None or detail["firstname"] == first_name)
            and (last_name is None or detail["lastname"] == last_name)
            and (check_in is None or detail["bookingdates"]["checkin"] >= check_in)
            and (check_out is None or detail["bookingdates"]["checkout"] >= check_out)
        ]
        return self._response("list", 200, ids)

    def booking_get(self, booking_id):
        self.calls.append(("get", booking_id))
        if booking_id not in self.bookings:
            return TransportResponse(self.codes.get("get", 404), b"Not Found")
        return self._response("get", 200, self.bookings[booking_id])

    def booking_create(self, payload):
        self.calls.append(("create", payload))
        booking_id = self.add(payload)
        return self._response("create", 200, {"bookingid": booking_id, "booking": payload})

    def booking_update(self, booking_id, payload):
        self.calls.append(("update", (booking_id, payload)))
        if booking_id not in self.bookings:
            return TransportResponse(self.codes.get("update", 405), b"Method Not Allowed")
        self.bookings[booking_id] = dict(payload)
        return self._response("update", 200, payload)

    def booking_delete(self, booking_id):
        self.calls.append(("delete", booking_id))
        if booking_id not in self.bookings:
            return self.codes.get("delete", 405)
        del self.bookings[booking_id]
        return self.codes.get("delete", 201)

    def close(self):
        self.closed = True


@pytest.fixture
def config():
    return Config.for_rest({"baseUrl": BASE_URL, "correlationId": "test-correlation"})


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def detail():
    return BookingDetail(
        first_name="Jim",
        last_name="Brown",
        total_price=111,
        deposit_paid=True,
        booking_dates=BookingDates("2018-01-01", "2019-01-01"),
        additional_needs="Breakfast",
    )
