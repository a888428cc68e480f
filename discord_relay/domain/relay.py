"""Message relay — forwards chat messages and their attachments to the webhooks.

Platform-agnostic: the Discord adapter converts discord.Message into
ChatMessage and supplies a FeedbackPort bound to the originating message.
"""

import asyncio
import sys
from typing import List

from discord_relay.domain.commands import CommandDispatcher
from discord_relay.domain.packager import build_attachment_envelope, build_message_summary
from discord_relay.errors import WebhookError
from discord_relay.ports.inbound import AttachmentRef, ChatMessage
from discord_relay.ports.outbound import FeedbackPort, WebhookPort

SUCCESS_MARKER = "✅"
FAILURE_MARKER = "❌"
FORWARD_FAILURE_MARKER = "⚠️"


def _log(msg: str):
    print(msg, file=sys.stderr)


class MessageRelay:
    """Entry point for every new chat message.

    Steps, each isolated from the others' failures:
    1. skip messages from the relay itself or any other bot
    2. forward each attachment to the primary webhook as multipart form data
    3. forward a JSON summary to the secondary webhook, when configured
    4. hand prefixed messages to the CommandDispatcher
    """

    def __init__(
        self,
        webhook: WebhookPort,
        primary_url: str,
        secondary_url: str = "",
        prefix: str = "!",
        attachment_concurrency: int = 3,
    ):
        self._webhook = webhook
        self.primary_url = primary_url
        self.secondary_url = secondary_url
        self.prefix = prefix
        self.attachment_concurrency = max(1, attachment_concurrency)
        self.commands = CommandDispatcher(webhook, primary_url, prefix=prefix)

    @staticmethod
    def should_relay(message: ChatMessage) -> bool:
        return not (message.is_self or message.is_bot)

    async def handle(self, message: ChatMessage, feedback: FeedbackPort) -> None:
        if not self.should_relay(message):
            return

        if message.attachments:
            await self.forward_attachments(message, feedback)

        if self.secondary_url:
            await self.forward_summary(message, feedback)

        if message.content.startswith(self.prefix):
            await self.commands.dispatch(message, feedback)

    async def forward_attachments(
        self, message: ChatMessage, feedback: FeedbackPort
    ) -> List[bool]:
        """Forward every attachment; returns per-attachment success in input order."""
        semaphore = asyncio.Semaphore(self.attachment_concurrency)

        async def _bounded(attachment: AttachmentRef) -> bool:
            async with semaphore:
                return await self.forward_attachment(attachment, message, feedback)

        return list(await asyncio.gather(*[_bounded(a) for a in message.attachments]))

    async def forward_attachment(
        self,
        attachment: AttachmentRef,
        message: ChatMessage,
        feedback: FeedbackPort,
    ) -> bool:
        try:
            data = await self._webhook.fetch_attachment(attachment.url)
            envelope = build_attachment_envelope(attachment, data, message)
            result = await self._webhook.post_form(self.primary_url, envelope)
            if not result.ok:
                raise WebhookError(self.primary_url, status=result.status)
        except Exception as e:
            _log(f"[relay] failed to forward file {attachment.filename}: {e}")
            await self._mark(feedback, FAILURE_MARKER)
            return False

        _log(f"[relay] sent file to n8n: {attachment.filename}")
        await self._mark(feedback, SUCCESS_MARKER)
        return True

    async def forward_summary(self, message: ChatMessage, feedback: FeedbackPort) -> bool:
        summary = build_message_summary(message)
        try:
            result = await self._webhook.post_json(self.secondary_url, summary.model_dump())
            if not result.ok:
                raise WebhookError(self.secondary_url, status=result.status)
        except Exception as e:
            _log(f"[relay] error forwarding message: {e}")
            await self._mark(feedback, FORWARD_FAILURE_MARKER)
            return False

        _log("[relay] message forwarded to webhook")
        return True

    @staticmethod
    async def _mark(feedback: FeedbackPort, emoji: str) -> bool:
        try:
            await feedback.react(emoji)
            return True
        except Exception as e:
            _log(f"[relay] reaction {emoji} failed: {e}")
            return False
