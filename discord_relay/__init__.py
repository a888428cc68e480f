"""Discord relay — forwards Discord messages and files to an automation webhook and back."""

from discord_relay.config import CONFIG, AppConfig, __version__
from discord_relay.errors import (
    ChannelNotFound,
    ConfigError,
    FetchFailed,
    MissingField,
    RelayError,
    WebhookError,
)

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "ChannelNotFound",
    "ConfigError",
    "FetchFailed",
    "MissingField",
    "RelayError",
    "WebhookError",
]
