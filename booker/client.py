"""Main client for Booker."""

from typing import Optional

from .config import Config
from .clients.booking import BookingClient
from .transport.interface import TransportInterface
from .transport.rest import RestTransport


class BookerClient:
    """Main client for Booker."""

    def __init__(self, config: Config, transport: Optional[TransportInterface] = None):
        self.config = config
        self.transport: TransportInterface = transport or RestTransport(config)
        self.booking = BookingClient(self.transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources."""
        self.close()

    def close(self):
        """Close the client and cleanup resources."""
        self.transport.close()

    def get_booking(self) -> BookingClient:
        """Get booking client."""
        return self.booking

    def get_transport(self) -> TransportInterface:
        """Get transport instance."""
        return self.transport
