"""Tests for domain/packager.py — pure Python, no network."""

from datetime import datetime, timezone

from discord_relay.domain.models import DEFAULT_CONTENT_TYPE, iso_timestamp
from discord_relay.domain.packager import (
    ENVELOPE_FIELDS,
    build_attachment_envelope,
    build_message_summary,
)
from discord_relay.ports.inbound import AttachmentRef, ChatMessage

FIXED = datetime(2026, 3, 4, 5, 6, 7, 891000, tzinfo=timezone.utc)


def _message(**kwargs) -> ChatMessage:
    defaults = dict(
        content="look at this",
        channel_id="200",
        message_id="300",
        author_name="alice",
        author_id="100",
    )
    defaults.update(kwargs)
    return ChatMessage(**defaults)


class TestIsoTimestamp:
    def test_format(self):
        assert iso_timestamp(FIXED) == "2026-03-04T05:06:07.891Z"

    def test_naive_treated_as_utc(self):
        assert iso_timestamp(datetime(2026, 1, 1)) == "2026-01-01T00:00:00.000Z"


class TestAttachmentEnvelope:
    def test_fields(self):
        att = AttachmentRef(url="https://cdn/a.png", filename="a.png", content_type="image/png", size=42)
        env = build_attachment_envelope(att, b"\x89PNG", _message(), uploaded_at=FIXED)

        assert env.file == b"\x89PNG"
        assert env.filename == "a.png"
        assert env.content_type == "image/png"
        assert env.fields == {
            "discord_user": "alice",
            "user_id": "100",
            "channel_id": "200",
            "message_id": "300",
            "filename": "a.png",
            "file_size": "42",
            "uploaded_at": "2026-03-04T05:06:07.891Z",
        }

    def test_every_envelope_field_is_populated(self):
        att = AttachmentRef(url="u", filename="f.bin", size=1)
        env = build_attachment_envelope(att, b"x", _message())
        assert set(env.fields) == set(ENVELOPE_FIELDS)
        assert all(env.fields[name] for name in ("discord_user", "user_id", "channel_id", "message_id"))

    def test_missing_content_type_defaults(self):
        att = AttachmentRef(url="u", filename="f.bin", content_type=None, size=1)
        env = build_attachment_envelope(att, b"x", _message())
        assert env.content_type == DEFAULT_CONTENT_TYPE


class TestMessageSummary:
    def test_shape(self):
        msg = _message(attachments=[
            AttachmentRef(url="https://cdn/1", filename="1"),
            AttachmentRef(url="https://cdn/2", filename="2"),
        ])
        assert build_message_summary(msg).model_dump() == {
            "type": "message",
            "author": "alice",
            "content": "look at this",
            "channelId": "200",
            "attachments": ["https://cdn/1", "https://cdn/2"],
        }

    def test_no_attachments(self):
        assert build_message_summary(_message()).attachments == []
