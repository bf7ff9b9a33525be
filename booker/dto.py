"""Data Transfer Objects for Booker."""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Union


def _require_dict(data: Any, name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class BookingDates:
    """Stay dates as ISO ``YYYY-MM-DD`` strings, passed through unvalidated."""

    check_in: str
    check_out: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookingDates":
        """Create from API response dictionary."""
        data = _require_dict(data, "BookingDates")
        return cls(check_in=data.get("checkin"), check_out=data.get("checkout"))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API request."""
        return {"checkin": self.check_in, "checkout": self.check_out}


@dataclass(frozen=True)
class BookingDetail:
    """Full attributes of one booking."""

    first_name: str
    last_name: str
    total_price: Union[int, float]
    deposit_paid: bool
    booking_dates: BookingDates
    additional_needs: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookingDetail":
        """Create from API response dictionary."""
        data = _require_dict(data, "BookingDetail")
        return cls(
            first_name=data.get("firstname"),
            last_name=data.get("lastname"),
            total_price=data.get("totalprice"),
            deposit_paid=data.get("depositpaid"),
            booking_dates=BookingDates.from_dict(data.get("bookingdates") or {}),
            additional_needs=data.get("additionalneeds"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API request."""
        result = {
            "firstname": self.first_name,
            "lastname": self.last_name,
            "totalprice": self.total_price,
            "depositpaid": self.deposit_paid,
            "bookingdates": self.booking_dates.to_dict(),
        }
        if self.additional_needs is not None:
            result["additionalneeds"] = self.additional_needs
        return result

    def replace(self, **changes: Any) -> "BookingDetail":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


@dataclass(frozen=True)
class BookingId:
    """Identifier of a booking, assigned by the service."""

    booking_id: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookingId":
        """Create from API response dictionary."""
        data = _require_dict(data, "BookingId")
        return cls(booking_id=data.get("bookingid"))

    def to_dict(self) -> Dict[str, Any]:
        return {"bookingid": self.booking_id}


@dataclass(frozen=True)
class BookingRecord:
    """A booking id paired with its detail, as returned on creation."""

    booking_id: int
    booking: BookingDetail

    @property
    def id(self) -> BookingId:
        return BookingId(self.booking_id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookingRecord":
        """Create from API response dictionary."""
        data = _require_dict(data, "BookingRecord")
        return cls(
            booking_id=data.get("bookingid"),
            booking=BookingDetail.from_dict(data.get("booking") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"bookingid": self.booking_id, "booking": self.booking.to_dict()}

    def with_booking(self, booking: BookingDetail) -> "BookingRecord":
        """Return a record for the same id carrying a different detail."""
        return replace(self, booking=booking)
