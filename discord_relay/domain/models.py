"""Domain data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. 2026-01-01T12:00:00.000Z"""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class OutboundEnvelope:
    """Multipart payload for one attachment: a binary part plus scalar metadata."""

    file: bytes
    filename: str
    content_type: str
    fields: Dict[str, str] = field(default_factory=dict)


@dataclass
class CommandInvocation:
    """A prefixed chat command split into name and payload."""

    name: str
    payload: str
    author: str = ""
    channel_id: str = ""
    user_id: str = ""
    timestamp: str = ""


class MessageSummary(BaseModel):
    type: str = "message"
    author: str
    content: str
    channelId: str
    attachments: List[str] = []


class CommandPayload(BaseModel):
    type: str = "discord_command"
    command: str
    payload: str
    author: str
    channelId: str
    userId: str
    timestamp: str
