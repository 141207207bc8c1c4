"""Unit tests for Opt and OptGroup.

Tests cover:
- Option building, conversion and serialization
- Option group limits
- Where options may carry a url or markdown text
"""

import pytest

from blockkit import (
    Checkboxes,
    MrkdwnText,
    MultiStaticSelect,
    Opt,
    OptGroup,
    OverflowMenu,
    PlainText,
    RadioButtonGroup,
    StaticSelect,
)
from blockkit.composition_objects.option import (
    MRKDWN_NOT_ALLOWED,
    URL_NOT_ALLOWED,
    restricted_option_errors,
)
from blockkit.errors import MaxArraySize, MaxTextLength, Required


@pytest.mark.unit
class TestOpt:
    """Test suite for Opt."""

    def test_str_text_becomes_plain_text(self):
        opt = Opt.builder().text("Maru").value("maru").build().or_raise()

        assert opt.text == PlainText(text="Maru")
        assert opt.to_dict() == {
            "text": {"type": "plain_text", "text": "Maru"},
            "value": "maru",
        }

    def test_accepts_mrkdwn_text(self):
        text = MrkdwnText(text="*Maru*")

        opt = Opt.builder().text(text).value("maru").build().or_raise()

        assert opt.to_dict()["text"] == {"type": "mrkdwn", "text": "*Maru*"}

    def test_text_and_value_are_required(self):
        result = Opt.builder().build()

        assert result.errors.object == "Opt"
        assert result.errors.field("text") == (Required(),)
        assert result.errors.field("value") == (Required(),)

    def test_length_limits(self):
        result = (
            Opt.builder()
            .text("t" * 76)
            .value("v" * 151)
            .description("d" * 76)
            .url("u" * 3001)
            .build()
        )

        errors = result.errors
        assert errors.field("text") == (MaxTextLength(75),)
        assert errors.field("value") == (MaxTextLength(150),)
        assert errors.field("description") == (MaxTextLength(75),)
        assert errors.field("url") == (MaxTextLength(3000),)

    def test_description_and_url_serialize(self):
        opt = (
            Opt.builder()
            .text("Docs")
            .value("docs")
            .description("Read the docs")
            .url("https://example.com")
            .build()
            .or_raise()
        )

        assert opt.to_dict() == {
            "text": {"type": "plain_text", "text": "Docs"},
            "value": "docs",
            "description": {"type": "plain_text", "text": "Read the docs"},
            "url": "https://example.com",
        }


@pytest.mark.unit
class TestOptGroup:
    """Test suite for OptGroup."""

    def test_build(self, make_opt_group):
        group = make_opt_group(label="Cats", count=2)

        data = group.to_dict()
        assert data["label"] == {"type": "plain_text", "text": "Cats"}
        assert [o["value"] for o in data["options"]] == ["option-0", "option-1"]

    def test_label_and_options_are_required(self):
        result = OptGroup.builder().build()

        assert set(result.errors.fields()) == {"label", "options"}

    def test_too_many_options(self, make_opt):
        builder = OptGroup.builder().label("Many")
        opt = make_opt()
        for _ in range(101):
            builder = builder.option(opt)

        result = builder.build()

        assert result.errors.field("options") == (MaxArraySize(100),)

    def test_rejects_options_with_url(self):
        linked = (
            Opt.builder()
            .text("Docs")
            .value("docs")
            .url("https://example.com")
            .build()
            .or_raise()
        )

        result = OptGroup.builder().label("Links").option(linked).build()

        assert result.errors.across_fields() == (URL_NOT_ALLOWED,)


@pytest.mark.unit
class TestRestrictedOptions:
    """Test suite for url and markdown restrictions on options."""

    @pytest.fixture
    def linked_opt(self):
        return (
            Opt.builder()
            .text("Docs")
            .value("docs")
            .url("https://example.com")
            .build()
            .or_raise()
        )

    @pytest.fixture
    def mrkdwn_opt(self):
        return (
            Opt.builder()
            .text(MrkdwnText(text="*Maru*"))
            .value("maru")
            .build()
            .or_raise()
        )

    def test_plain_options_pass_everywhere(self, make_opt):
        assert restricted_option_errors([make_opt()], make_opt()) == []

    def test_one_error_per_restriction(self, linked_opt, mrkdwn_opt):
        errors = restricted_option_errors([linked_opt, linked_opt, mrkdwn_opt])

        assert errors == [URL_NOT_ALLOWED, MRKDWN_NOT_ALLOWED]

    def test_skips_none_and_non_options(self):
        assert restricted_option_errors(None, ["x", 1]) == []

    def test_overflow_menu_accepts_url(self, linked_opt):
        result = OverflowMenu.builder().option(linked_opt).build()

        assert result.is_success

    def test_overflow_menu_rejects_mrkdwn(self, mrkdwn_opt):
        result = OverflowMenu.builder().option(mrkdwn_opt).build()

        assert result.errors.across_fields() == (MRKDWN_NOT_ALLOWED,)

    def test_checkboxes_accept_mrkdwn(self, mrkdwn_opt):
        result = Checkboxes.builder().option(mrkdwn_opt).build()

        assert result.is_success

    def test_checkboxes_reject_url(self, linked_opt):
        result = Checkboxes.builder().option(linked_opt).build()

        assert result.errors.across_fields() == (URL_NOT_ALLOWED,)

    def test_radio_buttons_check_initial_option(self, make_opt, linked_opt):
        result = (
            RadioButtonGroup.builder()
            .option(make_opt())
            .initial_option(linked_opt)
            .build()
        )

        assert result.errors.across_fields() == (URL_NOT_ALLOWED,)

    def test_static_select_rejects_url_and_mrkdwn(self, linked_opt, mrkdwn_opt):
        result = StaticSelect.builder().option(linked_opt).option(mrkdwn_opt).build()

        assert result.errors.across_fields() == (URL_NOT_ALLOWED, MRKDWN_NOT_ALLOWED)

    def test_multi_static_select_checks_initial_options(self, make_opt, mrkdwn_opt):
        result = (
            MultiStaticSelect.builder()
            .option(make_opt())
            .initial_option(mrkdwn_opt)
            .build()
        )

        assert result.errors.across_fields() == (MRKDWN_NOT_ALLOWED,)
