from typing import Annotated, Literal, Optional, Union

from blockkit.blocks.elements import (
    ChannelsSelect,
    Checkboxes,
    ConversationsSelect,
    DatePicker,
    DatetimePicker,
    EmailInput,
    ExternalSelect,
    FileInput,
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiStaticSelect,
    MultiUsersSelect,
    NumberInput,
    PlainTextInput,
    RadioButtonGroup,
    RichTextInput,
    StaticSelect,
    TimePicker,
    UrlInput,
    UsersSelect,
)
from blockkit.composition_objects import PlainText
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators

InputElement = Union[
    Checkboxes,
    DatePicker,
    DatetimePicker,
    EmailInput,
    FileInput,
    MultiStaticSelect,
    MultiExternalSelect,
    MultiUsersSelect,
    MultiConversationsSelect,
    MultiChannelsSelect,
    NumberInput,
    PlainTextInput,
    RadioButtonGroup,
    RichTextInput,
    StaticSelect,
    ExternalSelect,
    UsersSelect,
    ConversationsSelect,
    ChannelsSelect,
    TimePicker,
    UrlInput,
]


class Input(BlockKitModel):
    """Labelled input element, used in modals and messages."""

    type: Literal["input"] = "input"
    label: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_2000,
            convert=PlainText.from_str,
        ),
    ] = None
    element: Annotated[Optional[InputElement], builder_field(validators.required)] = None
    dispatch_action: Optional[bool] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    hint: Annotated[
        Optional[PlainText],
        builder_field(validators.text_object.max_2000, convert=PlainText.from_str),
    ] = None
    optional: Optional[bool] = None
