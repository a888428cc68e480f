"""Prefixed chat commands forwarded to the automation endpoint."""

import sys
from typing import Any, Dict, Optional

from discord_relay.domain.models import CommandInvocation, CommandPayload, iso_timestamp
from discord_relay.ports.inbound import ChatMessage
from discord_relay.ports.outbound import FeedbackPort, WebhookPort

RUN_COMMAND = "run"

REPLY_SENT = "Command executed and sent to n8n! Check the workflow for results."
REPLY_REJECTED = "Error sending command to n8n. Try again later."
REPLY_UNREACHABLE = "Failed to connect to n8n. Please check the setup."


def _log(msg: str):
    print(msg, file=sys.stderr)


def missing_payload_reply(prefix: str) -> str:
    return f"Please provide a payload for the command, e.g., {prefix}{RUN_COMMAND} your data here"


def parse_command(content: str, prefix: str) -> Optional[CommandInvocation]:
    """Split ``<prefix><name> <payload...>`` into a CommandInvocation.

    Returns None when the text does not start with the prefix. The name is
    lowercased; the payload is the remaining tokens joined by single spaces.
    """
    if not prefix or not content.startswith(prefix):
        return None
    tokens = content[len(prefix):].split()
    if not tokens:
        return CommandInvocation(name="", payload="")
    return CommandInvocation(name=tokens[0].lower(), payload=" ".join(tokens[1:]))


def build_command_payload(invocation: CommandInvocation) -> Dict[str, Any]:
    return CommandPayload(
        command=invocation.name,
        payload=invocation.payload,
        author=invocation.author,
        channelId=invocation.channel_id,
        userId=invocation.user_id,
        timestamp=invocation.timestamp,
    ).model_dump()


class CommandDispatcher:
    """Turns ``!run <payload>`` messages into JSON commands for the webhook.

    Unknown command names are ignored without a reply.
    """

    def __init__(self, webhook: WebhookPort, webhook_url: str, prefix: str = "!"):
        self._webhook = webhook
        self._webhook_url = webhook_url
        self.prefix = prefix

    async def dispatch(self, message: ChatMessage, feedback: FeedbackPort) -> bool:
        """Handle a prefixed message. Returns True when a command was sent."""
        invocation = parse_command(message.content, self.prefix)
        if invocation is None or invocation.name != RUN_COMMAND:
            return False

        if not invocation.payload:
            await _safe_reply(feedback, missing_payload_reply(self.prefix))
            return False

        invocation.author = message.author_name
        invocation.channel_id = message.channel_id
        invocation.user_id = message.author_id
        invocation.timestamp = iso_timestamp()

        try:
            result = await self._webhook.post_json(
                self._webhook_url, build_command_payload(invocation)
            )
        except Exception as e:
            _log(f"[command] error sending command to n8n: {e}")
            await _safe_reply(feedback, REPLY_UNREACHABLE)
            return False

        if result.ok:
            _log("[command] command sent to n8n successfully")
            await _safe_reply(feedback, REPLY_SENT)
            return True

        _log(f"[command] n8n responded with error: {result.status}")
        await _safe_reply(feedback, REPLY_REJECTED)
        return False


async def _safe_reply(feedback: FeedbackPort, text: str) -> None:
    try:
        await feedback.reply(text)
    except Exception as e:
        _log(f"[command] reply failed: {e}")
