"""Discord adapter — bridges discord.Client to MessageRelay and DeliveryService.

RelayBot converts discord.Message to ChatMessage and delegates to
MessageRelay. DiscordChatAdapter is the ChatPort used by the HTTP surface to
publish back into Discord through the same client connection.
"""

import io
import sys
from typing import List, Optional

import discord

from discord_relay.domain.relay import MessageRelay
from discord_relay.ports.inbound import AttachmentRef, ChatMessage, FilePart


def _log(msg: str):
    print(msg, file=sys.stderr)


_SNOWFLAKE_MAX = 2**64


def _snowflake(value: str) -> Optional[int]:
    try:
        snowflake = int(str(value).strip())
    except ValueError:
        return None
    if not 0 < snowflake < _SNOWFLAKE_MAX:
        return None
    return snowflake


def _is_unknown(e: discord.HTTPException) -> bool:
    # Discord answers 400 for ids it cannot parse as snowflakes.
    return isinstance(e, discord.NotFound) or e.status == 400


class DiscordFeedbackAdapter:
    """FeedbackPort bound to a single discord.Message."""

    def __init__(self, message: discord.Message):
        self._message = message

    async def react(self, emoji: str) -> None:
        await self._message.add_reaction(emoji)

    async def reply(self, text: str) -> None:
        await self._message.reply(text)


class DiscordChatAdapter:
    """ChatPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def fetch_text_channel(self, channel_id: str) -> Optional[discord.TextChannel]:
        """Resolve a standard guild text channel; None for unknown or other kinds."""
        snowflake = _snowflake(channel_id)
        if snowflake is None:
            return None
        channel = self._client.get_channel(snowflake)
        if channel is None:
            try:
                channel = await self._client.fetch_channel(snowflake)
            except discord.HTTPException as e:
                if _is_unknown(e):
                    return None
                raise
        if getattr(channel, "type", None) != discord.ChannelType.text:
            return None
        return channel

    async def user_exists(self, user_id: str) -> bool:
        snowflake = _snowflake(user_id)
        if snowflake is None:
            return False
        if self._client.get_user(snowflake) is not None:
            return True
        try:
            await self._client.fetch_user(snowflake)
        except discord.HTTPException as e:
            if _is_unknown(e):
                return False
            raise
        return True

    async def send(
        self,
        channel: discord.TextChannel,
        content: Optional[str],
        files: List[FilePart],
    ) -> None:
        attachments = [
            discord.File(io.BytesIO(f.data), filename=f.filename) for f in files
        ]
        await channel.send(content=content, files=attachments or None)


def to_chat_message(message: discord.Message, own_user: Optional[discord.ClientUser]) -> ChatMessage:
    """Convert a Discord message to platform-agnostic ChatMessage."""
    return ChatMessage(
        content=message.content or "",
        channel_id=str(message.channel.id),
        message_id=str(message.id),
        author_name=message.author.name,
        author_id=str(message.author.id),
        is_bot=bool(message.author.bot),
        is_self=own_user is not None and message.author.id == own_user.id,
        attachments=[
            AttachmentRef(
                url=a.url,
                filename=a.filename,
                content_type=a.content_type,
                size=a.size,
            )
            for a in message.attachments
        ],
    )


class RelayBot(discord.Client):
    """Discord client that hands every new message to MessageRelay."""

    def __init__(self, relay: MessageRelay, **discord_kwargs):
        intents = discord.Intents.default()
        intents.guilds = True
        intents.guild_messages = True
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self.relay = relay

    async def on_ready(self):
        _log(f"[bot] logged in as {self.user}")

    async def on_message(self, message: discord.Message):
        # Guard: self.user can be None before on_ready fires
        if not self.user or message.author == self.user:
            return

        incoming = to_chat_message(message, self.user)
        await self.relay.handle(incoming, DiscordFeedbackAdapter(message))
