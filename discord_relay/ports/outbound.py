"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, runtime_checkable

from discord_relay.ports.inbound import FilePart

if TYPE_CHECKING:
    from discord_relay.domain.models import OutboundEnvelope


@dataclass
class WebhookResult:
    """Outcome of a webhook POST that reached the server."""

    status: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@runtime_checkable
class WebhookPort(Protocol):
    """Interface for the automation endpoint transport."""

    async def fetch_attachment(self, url: str) -> bytes: ...

    async def post_form(self, url: str, envelope: "OutboundEnvelope") -> WebhookResult: ...

    async def post_json(self, url: str, payload: Dict[str, Any]) -> WebhookResult: ...


@runtime_checkable
class FeedbackPort(Protocol):
    """Interface for signalling outcomes back into the originating channel."""

    async def react(self, emoji: str) -> None: ...

    async def reply(self, text: str) -> None: ...


@runtime_checkable
class ChatPort(Protocol):
    """Interface for publishing into the chat platform."""

    async def fetch_text_channel(self, channel_id: str) -> Optional[Any]: ...

    async def user_exists(self, user_id: str) -> bool: ...

    async def send(
        self,
        channel: Any,
        content: Optional[str],
        files: List[FilePart],
    ) -> None: ...
