"""Configuration loaded from the environment."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

from discord_relay.errors import ConfigError

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


CONFIG = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": _env_int("PORT", 3000),
    "discord_token": os.getenv("DISCORD_TOKEN", ""),
    # Primary automation endpoint (files + commands)
    "n8n_webhook_url": os.getenv("N8N_WEBHOOK_URL", ""),
    # Optional secondary endpoint that receives a JSON summary of every message
    "webhook_url": os.getenv("WEBHOOK_URL", ""),
    "command_prefix": os.getenv("COMMAND_PREFIX") or "!",
    "attachment_concurrency": max(1, _env_int("ATTACHMENT_CONCURRENCY", 3)),
    "http_timeout_seconds": _env_float("HTTP_TIMEOUT_SECONDS", 30.0),
}


@dataclass
class AppConfig:
    """Typed view over CONFIG."""

    host: str = "0.0.0.0"
    port: int = 3000
    discord_token: str = ""
    n8n_webhook_url: str = ""
    webhook_url: str = ""
    command_prefix: str = "!"
    attachment_concurrency: int = 3
    http_timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            host=CONFIG["host"],
            port=CONFIG["port"],
            discord_token=CONFIG["discord_token"],
            n8n_webhook_url=CONFIG["n8n_webhook_url"],
            webhook_url=CONFIG["webhook_url"],
            command_prefix=CONFIG["command_prefix"],
            attachment_concurrency=CONFIG["attachment_concurrency"],
            http_timeout_seconds=CONFIG["http_timeout_seconds"],
        )

    def missing(self) -> List[str]:
        names = []
        if not self.discord_token:
            names.append("DISCORD_TOKEN")
        if not self.n8n_webhook_url:
            names.append("N8N_WEBHOOK_URL")
        return names

    def validate(self) -> None:
        missing = self.missing()
        if missing:
            raise ConfigError(
                f"Missing {' or '.join(missing)} in environment variables."
            )

    @property
    def forwarding_enabled(self) -> bool:
        return bool(self.webhook_url)
