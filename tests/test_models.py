"""Unit tests for transcript messages."""
from datetime import timezone

import pytest

from wastebot.models import Message, Sender


class TestMessage:
    """Tests for Message."""

    def test_factories(self):
        assert Message.from_user("hi").sender is Sender.USER
        assert Message.from_bot("hello").sender is Sender.BOT

    def test_ids_are_unique_and_ordered(self):
        first = Message.from_user("a")
        second = Message.from_bot("b")

        assert second.id > first.id

    def test_timestamp_is_utc(self):
        assert Message.from_user("a").timestamp.tzinfo is timezone.utc

    def test_is_immutable(self):
        message = Message.from_user("a")

        with pytest.raises(AttributeError):
            message.content = "b"  # type: ignore

    def test_to_dict(self):
        message = Message.from_bot("line one\nline two")
        data = message.to_dict()

        assert data["id"] == message.id
        assert data["content"] == "line one\nline two"
        assert data["sender"] == "bot"
        assert data["timestamp"] == message.timestamp.isoformat()

    def test_sender_values(self):
        assert Sender.USER == "user"
        assert Sender.BOT == "bot"
