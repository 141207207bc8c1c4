from typing import Annotated, List, Literal, Optional, Union

from blockkit.blocks.elements import (
    Button,
    ChannelsSelect,
    Checkboxes,
    ConversationsSelect,
    DatePicker,
    ExternalSelect,
    Image,
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiStaticSelect,
    MultiUsersSelect,
    OverflowMenu,
    RadioButtonGroup,
    StaticSelect,
    TimePicker,
    UsersSelect,
    WorkflowButton,
)
from blockkit.composition_objects import MrkdwnText, TextObject
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.errors import ValidationErrorKind

Accessory = Union[
    Button,
    Checkboxes,
    DatePicker,
    Image,
    MultiStaticSelect,
    MultiExternalSelect,
    MultiUsersSelect,
    MultiConversationsSelect,
    MultiChannelsSelect,
    OverflowMenu,
    RadioButtonGroup,
    StaticSelect,
    ExternalSelect,
    UsersSelect,
    ConversationsSelect,
    ChannelsSelect,
    TimePicker,
    WorkflowButton,
]


class Section(BlockKitModel):
    """Text block with optional fields and an accessory element.

    Needs ``text`` or ``fields``. A str given for either becomes markdown
    text.

    Example:
        >>> section = (
        ...     Section.builder()
        ...     .text("A message *with some bold text*")
        ...     .field("*Type:*\\nComputer (laptop)")
        ...     .field("*When:*\\nSubmitted Aug 10")
        ...     .build()
        ...     .or_raise()
        ... )
    """

    type: Literal["section"] = "section"
    text: Annotated[
        Optional[TextObject],
        builder_field(
            validators.text_object.min_1,
            validators.text_object.max_3000,
            convert=MrkdwnText.from_str,
        ),
    ] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    fields: Annotated[
        Optional[List[TextObject]],
        builder_field(
            validators.lists.max_item_10,
            validators.lists.each_text_max_2000,
            push_item="field",
            convert=MrkdwnText.from_str,
        ),
    ] = None
    accessory: Optional[Accessory] = None
    expand: Optional[bool] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        error = validators.fields.either_required(self, "text", "fields")
        return [error] if error else []
