"""Client configuration."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class MapsClientConfig:
    """Runtime configuration for the maps client.

    Either ``api_key`` or the ``client_id`` and ``signing_secret`` pair (Maps
    for Work credentials) must be set. A ``signing_secret`` next to an API key
    signs requests to endpoints that accept signatures. ``base_url`` replaces
    the host of every endpoint when set, which points the client at a proxy
    or a local test server.
    """

    api_key: str = field(default="", repr=False)
    client_id: str = ""
    signing_secret: str = field(default="", repr=False)

    base_url: str | None = None
    user_agent: str = "maps-api-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)

    @property
    def has_work_credentials(self) -> bool:
        return bool(self.client_id and self.signing_secret)

    def validate(self) -> None:
        if not self.api_key and not self.has_work_credentials:
            raise ValueError("maps: API Key or Maps for Work credentials missing")
        if self.signing_secret:
            try:
                base64.urlsafe_b64decode(self.signing_secret.encode("ascii"))
            except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
                raise ValueError("maps: signing secret is not valid urlsafe base64") from exc
        if self.base_url is not None and not self.base_url:
            raise ValueError("base_url must not be empty")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "MapsClientConfig",
]
