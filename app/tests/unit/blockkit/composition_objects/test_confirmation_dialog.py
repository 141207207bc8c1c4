"""Unit tests for ConfirmationDialog."""

import pytest

from blockkit import ConfirmationDialog
from blockkit.errors import MaxTextLength


@pytest.fixture
def dialog_builder():
    return (
        ConfirmationDialog.builder()
        .title("Are you sure?")
        .text("Wouldn't you prefer a good game of chess?")
        .confirm("Do it")
        .deny("Stop, I've changed my mind!")
    )


@pytest.mark.unit
class TestConfirmationDialog:
    """Test suite for ConfirmationDialog."""

    def test_serialize(self, dialog_builder):
        dialog = dialog_builder.build().or_raise()

        assert dialog.to_dict() == {
            "title": {"type": "plain_text", "text": "Are you sure?"},
            "text": {
                "type": "plain_text",
                "text": "Wouldn't you prefer a good game of chess?",
            },
            "confirm": {"type": "plain_text", "text": "Do it"},
            "deny": {"type": "plain_text", "text": "Stop, I've changed my mind!"},
        }

    def test_danger_style(self, dialog_builder):
        dialog = dialog_builder.danger().build().or_raise()

        assert dialog.to_dict()["style"] == "danger"

    def test_primary_style(self, dialog_builder):
        dialog = dialog_builder.primary().build().or_raise()

        assert dialog.style == "primary"

    def test_length_limits(self, dialog_builder):
        result = (
            dialog_builder.title("t" * 101)
            .text("x" * 301)
            .confirm("c" * 31)
            .deny("d" * 31)
            .build()
        )

        errors = result.errors
        assert errors.field("title") == (MaxTextLength(100),)
        assert errors.field("text") == (MaxTextLength(300),)
        assert errors.field("confirm") == (MaxTextLength(30),)
        assert errors.field("deny") == (MaxTextLength(30),)
