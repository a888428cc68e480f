"""Discord adapters."""

from discord_relay.adapters.discord.adapter import (
    DiscordChatAdapter,
    DiscordFeedbackAdapter,
    RelayBot,
    to_chat_message,
)

__all__ = ["DiscordChatAdapter", "DiscordFeedbackAdapter", "RelayBot", "to_chat_message"]
