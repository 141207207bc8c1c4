"""Shared fixtures for blockkit tests."""

import pytest

from blockkit import (
    Button,
    Opt,
    OptGroup,
    PlainText,
    RichTextSection,
    RichTextText,
)


@pytest.fixture
def make_plain_text():
    """Factory for creating PlainText instances."""

    def _make(text="Hello", emoji=None):
        return PlainText(text=text, emoji=emoji)

    return _make


@pytest.fixture
def make_button():
    """Factory for creating built Button instances."""

    def _make(text="Click Me", action_id="button-0", value="click_me_123"):
        return (
            Button.builder()
            .text(text)
            .action_id(action_id)
            .value(value)
            .build()
            .or_raise()
        )

    return _make


@pytest.fixture
def make_opt():
    """Factory for creating built Opt instances."""

    def _make(text="Option", value="option-0"):
        return Opt.builder().text(text).value(value).build().or_raise()

    return _make


@pytest.fixture
def make_opt_group(make_opt):
    """Factory for creating built OptGroup instances."""

    def _make(label="Group", count=2):
        builder = OptGroup.builder().label(label)
        for i in range(count):
            builder = builder.option(make_opt(f"Option {i}", f"option-{i}"))
        return builder.build().or_raise()

    return _make


@pytest.fixture
def make_rich_text_section():
    """Factory for creating a rich text section holding one text element."""

    def _make(text="Hello there"):
        element = RichTextText.builder().text(text).build().or_raise()
        return RichTextSection.builder().element(element).build().or_raise()

    return _make
