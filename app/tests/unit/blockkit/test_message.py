"""Unit tests for the Message payload."""

import json

import pytest

from blockkit import Actions, Divider, Header, Message, Section
from blockkit.errors import MaxArraySize


@pytest.mark.unit
class TestMessage:
    """Test suite for Message."""

    def test_to_json(self):
        header = Header.builder().text("Hello").build().or_raise()

        message = Message.builder().text("Hello").block(header).build().or_raise()

        assert message.to_json() == (
            '{"text":"Hello","blocks":'
            '[{"type":"header","text":{"type":"plain_text","text":"Hello"}}]}'
        )

    def test_empty_message_is_valid(self):
        assert Message.builder().build().or_raise().to_dict() == {}

    def test_response_fields(self):
        message = (
            Message.builder()
            .text("Updated")
            .response_type("in_channel")
            .replace_original(True)
            .thread_ts("1700000000.000100")
            .build()
            .or_raise()
        )

        assert json.loads(message.to_json()) == {
            "text": "Updated",
            "response_type": "in_channel",
            "replace_original": True,
            "thread_ts": "1700000000.000100",
        }

    def test_too_many_blocks(self):
        divider = Divider.builder().build().or_raise()
        builder = Message.builder()
        for _ in range(51):
            builder = builder.block(divider)

        result = builder.build()

        assert result.errors.object == "Message"
        assert result.errors.field("blocks") == (MaxArraySize(50),)

    def test_mixed_blocks(self, make_button):
        actions = Actions.builder().element(make_button()).build().or_raise()
        section = Section.builder().text("*hi*").build().or_raise()

        message = Message.builder().block(section).block(actions).build().or_raise()

        assert [b["type"] for b in message.to_dict()["blocks"]] == ["section", "actions"]
