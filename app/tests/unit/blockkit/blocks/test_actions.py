"""Unit tests for the Actions block."""

import pytest

from blockkit import Actions, DatePicker
from blockkit.errors import MaxArraySize, MaxTextLength, Required


@pytest.mark.unit
class TestActions:
    """Test suite for Actions."""

    def test_serialize(self, make_button):
        picker = DatePicker.builder().action_id("date").build().or_raise()

        actions = (
            Actions.builder()
            .block_id("actions-1")
            .element(make_button())
            .element(picker)
            .build()
            .or_raise()
        )

        assert actions.to_dict() == {
            "type": "actions",
            "elements": [
                {
                    "type": "button",
                    "text": {"type": "plain_text", "text": "Click Me"},
                    "value": "click_me_123",
                    "action_id": "button-0",
                },
                {"type": "datepicker", "action_id": "date"},
            ],
            "block_id": "actions-1",
        }

    def test_elements_are_required(self):
        result = Actions.builder().build()

        assert result.errors.object == "Actions"
        assert result.errors.field("elements") == (Required(),)

    def test_twenty_five_elements_allowed(self, make_button):
        builder = Actions.builder()
        for i in range(25):
            builder = builder.element(make_button(action_id=f"button-{i}"))

        assert builder.build().is_success

    def test_twenty_six_elements_rejected(self, make_button):
        builder = Actions.builder()
        for i in range(26):
            builder = builder.element(make_button(action_id=f"button-{i}"))

        result = builder.build()

        assert result.errors.field("elements") == (MaxArraySize(25),)

    def test_block_id_boundary(self, make_button):
        ok = Actions.builder().element(make_button()).block_id("a" * 255).build()
        too_long = Actions.builder().element(make_button()).block_id("a" * 256).build()

        assert ok.is_success
        assert too_long.errors.field("block_id") == (MaxTextLength(255),)
