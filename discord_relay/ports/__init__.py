"""Port interfaces (Hexagonal Architecture)."""

from discord_relay.ports.inbound import AttachmentRef, ChatMessage, DeliveryRequest, FilePart
from discord_relay.ports.outbound import ChatPort, FeedbackPort, WebhookPort, WebhookResult

__all__ = [
    "AttachmentRef",
    "ChatMessage",
    "DeliveryRequest",
    "FilePart",
    "ChatPort",
    "FeedbackPort",
    "WebhookPort",
    "WebhookResult",
]
