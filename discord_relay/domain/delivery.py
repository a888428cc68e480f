"""Delivery of automation output back into a chat channel."""

import sys
from typing import Optional

from discord_relay.errors import ChannelNotFound, MissingField
from discord_relay.ports.inbound import DeliveryRequest
from discord_relay.ports.outbound import ChatPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def mention_marker(user_id: str) -> str:
    return f"<@{user_id}>"


def invalid_user_marker(user_id: str) -> str:
    return f"[invalid user: {user_id}]"


def compose_content(content: Optional[str], marker: Optional[str] = None) -> Optional[str]:
    """Prefix content with a mention (or invalid-user) marker.

    >>> compose_content("hi", "<@1>")
    '<@1> hi'
    """
    if not marker:
        return content or None
    if not content:
        return marker
    return f"{marker} {content}"


class DeliveryService:
    """Publishes a DeliveryRequest through a ChatPort.

    Raises MissingField before touching the chat platform when the channel id
    is absent, and ChannelNotFound when it does not name a text channel.
    Transport errors from the ChatPort propagate to the caller.
    """

    def __init__(self, chat: ChatPort):
        self._chat = chat

    async def deliver(self, request: DeliveryRequest) -> Optional[str]:
        """Send the request and return the text that was posted."""
        channel_id = (request.channel_id or "").strip()
        if not channel_id:
            raise MissingField("channelId")

        channel = await self._chat.fetch_text_channel(channel_id)
        if channel is None:
            raise ChannelNotFound(channel_id)

        marker = None
        if request.mention_user_id:
            marker = await self._resolve_mention(request.mention_user_id.strip())

        content = compose_content(request.content, marker)
        await self._chat.send(channel, content, request.files)
        _log(f"[send] delivered to channel {channel_id} ({len(request.files)} file(s))")
        return content

    async def _resolve_mention(self, user_id: str) -> str:
        try:
            exists = await self._chat.user_exists(user_id)
        except Exception as e:
            _log(f"[send] user lookup failed for {user_id}: {e}")
            exists = False
        if exists:
            return mention_marker(user_id)
        _log(f"[send] invalid mention target {user_id}")
        return invalid_user_marker(user_id)
