"""Automation webhook transport using aiohttp."""

import sys
from typing import Any, Dict, Optional

import aiohttp

from discord_relay.config import CONFIG
from discord_relay.domain.models import OutboundEnvelope
from discord_relay.domain.packager import ENVELOPE_FIELDS
from discord_relay.errors import FetchFailed
from discord_relay.ports.outbound import WebhookResult


def _log(msg: str):
    print(msg, file=sys.stderr)


def envelope_to_form(envelope: OutboundEnvelope) -> aiohttp.FormData:
    """Render an envelope as multipart form data: the file part, then metadata."""
    form = aiohttp.FormData()
    form.add_field(
        "file",
        envelope.file,
        filename=envelope.filename,
        content_type=envelope.content_type,
    )
    for name in ENVELOPE_FIELDS:
        if name in envelope.fields:
            form.add_field(name, envelope.fields[name])
    return form


class WebhookClient:
    """Downloads attachments and POSTs to the automation webhooks.

    A session is opened per call; no retries. Non-2xx webhook responses are
    returned as a WebhookResult for the caller to judge, transport errors
    propagate as aiohttp exceptions.
    """

    def __init__(self, timeout_seconds: Optional[float] = None):
        if timeout_seconds is None:
            timeout_seconds = CONFIG["http_timeout_seconds"]
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_attachment(self, url: str) -> bytes:
        """Download a file. Raises FetchFailed on non-2xx or transport errors."""
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url) as resp:
                    if resp.status >= 400:
                        raise FetchFailed(url, status=resp.status)
                    return await resp.read()
        except FetchFailed:
            raise
        except Exception as e:
            raise FetchFailed(url, reason=str(e)) from e

    async def post_form(self, url: str, envelope: OutboundEnvelope) -> WebhookResult:
        form = envelope_to_form(envelope)
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            async with session.post(url, data=form) as resp:
                body = (await resp.read()).decode("utf-8", errors="replace")
                if resp.status >= 400:
                    _log(f"[webhook] {url} answered HTTP {resp.status}")
                return WebhookResult(status=resp.status, body=body)

    async def post_json(self, url: str, payload: Dict[str, Any]) -> WebhookResult:
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            async with session.post(url, json=payload) as resp:
                body = (await resp.read()).decode("utf-8", errors="replace")
                if resp.status >= 400:
                    _log(f"[webhook] {url} answered HTTP {resp.status}")
                return WebhookResult(status=resp.status, body=body)
