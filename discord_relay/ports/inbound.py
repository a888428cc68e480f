"""Inbound ports — platform-agnostic representations of incoming traffic."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class AttachmentRef:
    """A file attached to a chat message, not yet downloaded."""

    url: str
    filename: str
    content_type: Optional[str] = None
    size: int = 0


@dataclass
class ChatMessage:
    """Discord-agnostic message representation."""

    content: str
    channel_id: str
    message_id: str
    author_name: str
    author_id: str
    is_bot: bool = False
    is_self: bool = False
    attachments: List[AttachmentRef] = field(default_factory=list)


@dataclass
class FilePart:
    """A file uploaded through the HTTP surface."""

    filename: str
    data: bytes
    content_type: Optional[str] = None


@dataclass
class DeliveryRequest:
    """Content pushed by the automation side for publishing into a channel."""

    channel_id: Optional[str]
    content: Optional[str] = None
    mention_user_id: Optional[str] = None
    files: List[FilePart] = field(default_factory=list)
