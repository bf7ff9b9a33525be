"""Tests for the booking DTOs."""

import dataclasses

import pytest

from booker.dto import BookingDates, BookingDetail, BookingId, BookingRecord

WIRE_DETAIL = {
    "firstname": "Jim",
    "lastname": "Brown",
    "totalprice": 111,
    "depositpaid": True,
    "bookingdates": {"checkin": "2018-01-01", "checkout": "2019-01-01"},
    "additionalneeds": "Breakfast",
}


def test_detail_to_dict(detail):
    assert detail.to_dict() == WIRE_DETAIL


def test_detail_from_dict(detail):
    assert BookingDetail.from_dict(WIRE_DETAIL) == detail


def test_additional_needs_omitted_when_absent(detail):
    data = detail.replace(additional_needs=None).to_dict()
    assert "additionalneeds" not in data


def test_additional_needs_missing_on_wire():
    data = {k: v for k, v in WIRE_DETAIL.items() if k != "additionalneeds"}
    assert BookingDetail.from_dict(data).additional_needs is None


def test_dates_passed_through_unvalidated():
    dates = BookingDates.from_dict({"checkin": "not-a-date", "checkout": "2019-13-45"})
    assert dates.to_dict() == {"checkin": "not-a-date", "checkout": "2019-13-45"}


def test_float_price_kept():
    data = dict(WIRE_DETAIL, totalprice=99.5)
    assert BookingDetail.from_dict(data).total_price == 99.5


def test_dtos_are_immutable(detail):
    with pytest.raises(dataclasses.FrozenInstanceError):
        detail.first_name = "Other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        BookingId(1).booking_id = 2


def test_replace_builds_new_value(detail):
    changed = detail.replace(total_price=5)
    assert changed.total_price == 5
    assert detail.total_price == 111


def test_booking_id_wire():
    assert BookingId.from_dict({"bookingid": 7}) == BookingId(7)
    assert BookingId(7).to_dict() == {"bookingid": 7}


def test_record_from_dict(detail):
    record = BookingRecord.from_dict({"bookingid": 3, "booking": WIRE_DETAIL})
    assert record.booking_id == 3
    assert record.id == BookingId(3)
    assert record.booking == detail
    assert record.to_dict() == {"bookingid": 3, "booking": WIRE_DETAIL}


def test_record_with_booking(detail):
    record = BookingRecord(3, detail)
    other = detail.replace(last_name="White")
    assert record.with_booking(other) == BookingRecord(3, other)
    assert record.booking == detail


@pytest.mark.parametrize(
    "factory, data",
    [
        (BookingId.from_dict, 5),
        (BookingDetail.from_dict, ["Jim"]),
        (BookingDetail.from_dict, dict(WIRE_DETAIL, bookingdates="2018-01-01")),
        (BookingRecord.from_dict, {"bookingid": 1, "booking": "Jim"}),
    ],
)
def test_from_dict_rejects_non_objects(factory, data):
    with pytest.raises(ValueError, match="must be a JSON object"):
        factory(data)
