from typing import Annotated, List, Literal, Optional, Union

from blockkit.blocks.elements import (
    Button,
    ChannelsSelect,
    Checkboxes,
    ConversationsSelect,
    DatePicker,
    DatetimePicker,
    ExternalSelect,
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
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators

ActionsElement = Union[
    Button,
    Checkboxes,
    DatePicker,
    DatetimePicker,
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


class Actions(BlockKitModel):
    """Block holding up to 25 interactive elements.

    Example:
        >>> button = Button.builder().text("Click Me").build().or_raise()
        >>> Actions.builder().element(button).build().is_success
        True
    """

    type: Literal["actions"] = "actions"
    elements: Annotated[
        Optional[List[ActionsElement]],
        builder_field(
            validators.required,
            validators.lists.max_item_25,
            push_item="element",
        ),
    ] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
