"""Outbound packaging — pure Python, no framework dependencies."""

from datetime import datetime
from typing import Optional

from discord_relay.domain.models import (
    DEFAULT_CONTENT_TYPE,
    MessageSummary,
    OutboundEnvelope,
    iso_timestamp,
)
from discord_relay.ports.inbound import AttachmentRef, ChatMessage

# Scalar form fields, in the order they are appended after the file part
ENVELOPE_FIELDS = (
    "discord_user",
    "user_id",
    "channel_id",
    "message_id",
    "filename",
    "file_size",
    "uploaded_at",
)


def build_attachment_envelope(
    attachment: AttachmentRef,
    data: bytes,
    message: ChatMessage,
    uploaded_at: Optional[datetime] = None,
) -> OutboundEnvelope:
    """Wrap a downloaded attachment and its message metadata for the webhook."""
    return OutboundEnvelope(
        file=data,
        filename=attachment.filename,
        content_type=attachment.content_type or DEFAULT_CONTENT_TYPE,
        fields={
            "discord_user": message.author_name,
            "user_id": message.author_id,
            "channel_id": message.channel_id,
            "message_id": message.message_id,
            "filename": attachment.filename,
            "file_size": str(attachment.size),
            "uploaded_at": iso_timestamp(uploaded_at),
        },
    )


def build_message_summary(message: ChatMessage) -> MessageSummary:
    return MessageSummary(
        author=message.author_name,
        content=message.content,
        channelId=message.channel_id,
        attachments=[a.url for a in message.attachments],
    )
