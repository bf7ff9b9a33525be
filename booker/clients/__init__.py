"""Client modules for Booker."""

from .booking import BookingClient

__all__ = ["BookingClient"]
