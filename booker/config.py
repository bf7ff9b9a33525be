"""Configuration for Booker."""

import os
import secrets
from typing import Mapping, Optional


class Config:
    """Configuration class for Booker."""

    def __init__(self, data: dict):
        defaults = {
            "baseUrl": "",
            "token": "",
            "cookie": "",
            "callTimeoutMs": 10000,
            "correlationId": f"python-sdk-{secrets.token_hex(6)}",
        }
        defaults.update(data)
        self.data = defaults

    @classmethod
    def for_rest(cls, data: dict) -> "Config":
        """Create configuration for the REST transport."""
        if not data.get("baseUrl") or not str(data.get("baseUrl", "")).strip():
            raise ValueError("baseUrl is required for REST configuration")
        if "callTimeoutMs" in data and data["callTimeoutMs"] < 1000:
            raise ValueError("callTimeoutMs must be at least 1000ms")
        return cls(data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Create configuration from BOOKER_* environment variables."""
        env = os.environ if environ is None else environ
        data = {
            "baseUrl": env.get("BOOKER_BASE_URL", ""),
            "token": env.get("BOOKER_TOKEN", ""),
            "cookie": env.get("BOOKER_COOKIE", ""),
        }
        timeout = env.get("BOOKER_CALL_TIMEOUT_MS")
        if timeout:
            try:
                data["callTimeoutMs"] = int(timeout)
            except ValueError:
                raise ValueError("BOOKER_CALL_TIMEOUT_MS must be an integer") from None
        return cls.for_rest(data)

    def get(self, key: str, default=None):
        """Get configuration value."""
        return self.data.get(key, default)

    def with_correlation_id(self, correlation_id: str) -> "Config":
        """Create a new config with updated correlation ID."""
        new_data = self.data.copy()
        new_data["correlationId"] = correlation_id
        return Config(new_data)
