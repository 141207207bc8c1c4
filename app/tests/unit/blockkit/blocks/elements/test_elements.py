"""Unit tests for interactive elements other than buttons and menus.

Tests cover:
- Checkboxes, radio buttons and overflow menus
- Date, datetime and time pickers
- Text-like inputs and the file input
- Image element, feedback buttons, icon and workflow buttons
"""

import pytest

from blockkit import (
    Checkboxes,
    DatePicker,
    DatetimePicker,
    DispatchActionConfiguration,
    EmailInput,
    FeedbackButton,
    FeedbackButtons,
    FileInput,
    FileType,
    Icon,
    IconButton,
    InputParameter,
    NumberInput,
    OverflowMenu,
    PlainTextInput,
    RadioButtonGroup,
    RichTextInput,
    SlackFile,
    TimePicker,
    Trigger,
    TriggerAction,
    UrlInput,
    Workflow,
    WorkflowButton,
)
from blockkit.blocks.elements import Image
from blockkit.errors import (
    EitherRequired,
    ExclusiveField,
    InvalidFormat,
    MaxArraySize,
    MaxIntegerValue,
    MinIntegerValue,
    Required,
)


@pytest.mark.unit
class TestOptionElements:
    """Test suite for checkboxes, radio buttons and overflow menus."""

    def test_checkboxes(self, make_opt):
        opt = make_opt("Check", "check")

        checkboxes = (
            Checkboxes.builder()
            .action_id("boxes")
            .option(opt)
            .initial_option(opt)
            .build()
            .or_raise()
        )

        data = checkboxes.to_dict()
        assert data["type"] == "checkboxes"
        assert data["initial_options"] == data["options"]

    def test_checkboxes_limit(self, make_opt):
        builder = Checkboxes.builder()
        for i in range(11):
            builder = builder.option(make_opt(value=str(i)))

        assert builder.build().errors.field("options") == (MaxArraySize(10),)

    def test_radio_buttons(self, make_opt):
        radio = RadioButtonGroup.builder().option(make_opt()).build().or_raise()

        assert radio.to_dict()["type"] == "radio_buttons"

    def test_radio_buttons_require_options(self):
        result = RadioButtonGroup.builder().build()

        assert result.errors.field("options") == (Required(),)

    def test_overflow_menu(self, make_opt):
        menu = OverflowMenu.builder().option(make_opt()).build().or_raise()

        assert menu.to_dict()["type"] == "overflow"

    def test_overflow_menu_limit(self, make_opt):
        builder = OverflowMenu.builder()
        for i in range(6):
            builder = builder.option(make_opt(value=str(i)))

        assert builder.build().errors.field("options") == (MaxArraySize(5),)


@pytest.mark.unit
class TestPickers:
    """Test suite for date, datetime and time pickers."""

    def test_date_picker(self):
        picker = (
            DatePicker.builder()
            .action_id("date")
            .initial_date("1990-04-28")
            .placeholder("Select a date")
            .build()
            .or_raise()
        )

        assert picker.to_dict() == {
            "type": "datepicker",
            "action_id": "date",
            "initial_date": "1990-04-28",
            "placeholder": {"type": "plain_text", "text": "Select a date"},
        }

    def test_date_picker_rejects_bad_date(self):
        result = DatePicker.builder().initial_date("1990-02-30").build()

        assert result.errors.field("initial_date") == (InvalidFormat("YYYY-MM-DD"),)

    def test_datetime_picker(self):
        picker = DatetimePicker.builder().initial_date_time(1628633820).build().or_raise()

        assert picker.to_dict() == {
            "type": "datetimepicker",
            "initial_date_time": 1628633820,
        }

    def test_datetime_picker_rejects_short_timestamp(self):
        result = DatetimePicker.builder().initial_date_time(162863382).build()

        assert result.errors.field("initial_date_time") == (InvalidFormat("10 digits"),)

    def test_time_picker(self):
        picker = (
            TimePicker.builder()
            .initial_time("11:40")
            .timezone("America/Los_Angeles")
            .build()
            .or_raise()
        )

        assert picker.to_dict() == {
            "type": "timepicker",
            "initial_time": "11:40",
            "timezone": "America/Los_Angeles",
        }

    def test_time_picker_rejects_bad_time(self):
        result = TimePicker.builder().initial_time("25:00").build()

        assert result.errors.field("initial_time") == (
            InvalidFormat("24-hour format HH:mm"),
        )


@pytest.mark.unit
class TestInputs:
    """Test suite for input elements."""

    def test_email_and_url_inputs(self):
        email = EmailInput.builder().action_id("email").build().or_raise()
        url = UrlInput.builder().action_id("url").build().or_raise()

        assert email.to_dict() == {"type": "email_text_input", "action_id": "email"}
        assert url.to_dict() == {"type": "url_text_input", "action_id": "url"}

    def test_input_with_dispatch_config(self):
        config = (
            DispatchActionConfiguration.builder()
            .trigger_action(TriggerAction.ON_CHARACTER_ENTERED)
            .build()
            .or_raise()
        )

        email = EmailInput.builder().dispatch_action_config(config).build().or_raise()

        assert email.to_dict()["dispatch_action_config"] == {
            "trigger_actions_on": ["on_character_entered"]
        }

    def test_number_input_requires_decimal_flag(self):
        result = NumberInput.builder().build()

        assert result.errors.field("is_decimal_allowed") == (Required(),)

    def test_number_input(self):
        number = (
            NumberInput.builder()
            .is_decimal_allowed(False)
            .min_value("1")
            .max_value("10")
            .build()
            .or_raise()
        )

        assert number.to_dict() == {
            "type": "number_input",
            "is_decimal_allowed": False,
            "min_value": "1",
            "max_value": "10",
        }

    def test_plain_text_input_length_bounds(self):
        builder = PlainTextInput.builder().min_length(-1).max_length(3001)

        assert builder.field_errors() == {
            "min_length": (MinIntegerValue(0),),
            "max_length": (MaxIntegerValue(3000),),
        }

    def test_plain_text_input(self):
        text_input = PlainTextInput.builder().multiline(True).min_length(0).build()

        assert text_input.or_raise().to_dict() == {
            "type": "plain_text_input",
            "multiline": True,
            "min_length": 0,
        }

    def test_rich_text_input_requires_action_id(self):
        result = RichTextInput.builder().build()

        assert result.errors.field("action_id") == (Required(),)

    def test_file_input(self):
        file_input = (
            FileInput.builder()
            .filetype(FileType.PDF)
            .filetype(FileType.PNG)
            .max_files(3)
            .build()
            .or_raise()
        )

        assert file_input.to_dict() == {
            "type": "file_input",
            "filetypes": ["pdf", "png"],
            "max_files": 3,
        }

    def test_file_input_max_files_bounds(self):
        assert FileInput.builder().max_files(0).field_errors() == {
            "max_files": (MinIntegerValue(1),)
        }
        assert FileInput.builder().max_files(11).field_errors() == {
            "max_files": (MaxIntegerValue(10),)
        }


@pytest.mark.unit
class TestImageElement:
    """Test suite for the image element."""

    def test_image_url(self):
        image = (
            Image.builder()
            .alt_text("A cat")
            .image_url("https://example.com/cat.png")
            .build()
            .or_raise()
        )

        assert image.to_dict() == {
            "type": "image",
            "alt_text": "A cat",
            "image_url": "https://example.com/cat.png",
        }

    def test_slack_file(self):
        slack_file = SlackFile.builder().id("F123").build().or_raise()

        image = Image.builder().alt_text("A cat").slack_file(slack_file).build()

        assert image.or_raise().to_dict()["slack_file"] == {"id": "F123"}

    def test_requires_one_image_source(self):
        result = Image.builder().alt_text("A cat").build()

        assert result.errors.across_fields() == (
            EitherRequired("image_url", "slack_file"),
        )

    def test_rejects_two_image_sources(self):
        slack_file = SlackFile.builder().id("F123").build().or_raise()

        result = (
            Image.builder()
            .alt_text("A cat")
            .image_url("https://example.com/cat.png")
            .slack_file(slack_file)
            .build()
        )

        assert result.errors.across_fields() == (
            ExclusiveField("image_url", "slack_file"),
        )


@pytest.mark.unit
class TestContextActionElements:
    """Test suite for feedback and icon buttons."""

    def test_feedback_buttons(self):
        positive = FeedbackButton.builder().text("Good").value("good").build().or_raise()
        negative = FeedbackButton.builder().text("Bad").value("bad").build().or_raise()

        buttons = (
            FeedbackButtons.builder()
            .action_id("feedback")
            .positive_button(positive)
            .negative_button(negative)
            .build()
            .or_raise()
        )

        data = buttons.to_dict()
        assert data["type"] == "feedback_buttons"
        assert data["positive_button"] == {
            "text": {"type": "plain_text", "text": "Good"},
            "value": "good",
        }

    def test_feedback_buttons_require_both_buttons(self):
        result = FeedbackButtons.builder().build()

        assert set(result.errors.fields()) == {"positive_button", "negative_button"}

    def test_icon_button(self):
        button = (
            IconButton.builder()
            .icon(Icon.TRASH)
            .text("Delete")
            .visible_to_user_id("U123")
            .build()
            .or_raise()
        )

        assert button.to_dict() == {
            "type": "icon_button",
            "icon": "trash",
            "text": {"type": "plain_text", "text": "Delete"},
            "visible_to_user_ids": ["U123"],
        }


@pytest.mark.unit
class TestWorkflowButton:
    """Test suite for WorkflowButton."""

    @pytest.fixture
    def workflow(self):
        parameter = InputParameter.builder().name("a").value("b").build().or_raise()
        trigger = (
            Trigger.builder()
            .url("https://slack.com/shortcuts/Ft0123ABC456/321")
            .customizable_input_parameter(parameter)
            .build()
            .or_raise()
        )
        return Workflow.builder().trigger(trigger).build().or_raise()

    def test_build(self, workflow):
        button = (
            WorkflowButton.builder()
            .text("Run Workflow")
            .action_id("workflowbutton123")
            .workflow(workflow)
            .primary()
            .build()
            .or_raise()
        )

        data = button.to_dict()
        assert data["type"] == "workflow_button"
        assert data["style"] == "primary"
        assert data["workflow"]["trigger"]["customizable_input_parameters"] == [
            {"name": "a", "value": "b"}
        ]

    def test_required_fields(self):
        result = WorkflowButton.builder().build()

        assert set(result.errors.fields()) == {"text", "action_id", "workflow"}
