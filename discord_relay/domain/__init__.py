"""Domain layer — relay policy, independent of Discord and HTTP frameworks."""

from discord_relay.domain.models import CommandInvocation, OutboundEnvelope, iso_timestamp
from discord_relay.domain.packager import build_attachment_envelope, build_message_summary
from discord_relay.domain.commands import CommandDispatcher, parse_command
from discord_relay.domain.relay import MessageRelay
from discord_relay.domain.delivery import DeliveryService

__all__ = [
    "CommandInvocation",
    "OutboundEnvelope",
    "iso_timestamp",
    "build_attachment_envelope",
    "build_message_summary",
    "CommandDispatcher",
    "parse_command",
    "MessageRelay",
    "DeliveryService",
]
