"""Relay error types."""

from typing import Optional


class RelayError(Exception):
    """Base class for relay failures."""


class ConfigError(RelayError):
    """Required configuration is missing."""


class FetchFailed(RelayError):
    """An attachment download failed (non-2xx status or transport error)."""

    def __init__(self, url: str, status: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status = status
        self.reason = reason
        detail = f"HTTP {status}" if status is not None else (reason or "transport error")
        super().__init__(f"fetch failed for {url}: {detail}")


class WebhookError(RelayError):
    """A webhook POST could not be delivered."""

    def __init__(self, url: str, status: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status = status
        self.reason = reason
        detail = f"HTTP {status}" if status is not None else (reason or "transport error")
        super().__init__(f"webhook delivery to {url} failed: {detail}")


class ChannelNotFound(RelayError):
    """The target channel does not exist or is not a standard text channel."""

    def __init__(self, channel_id: str):
        self.channel_id = channel_id
        super().__init__(f"Invalid channel: {channel_id}")


class MissingField(RelayError):
    """A required request field is absent or blank."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} is required")
