"""Interactive and display elements placed inside blocks."""

from blockkit.blocks.elements.button import Button
from blockkit.blocks.elements.checkboxes import Checkboxes
from blockkit.blocks.elements.feedback_buttons import FeedbackButton, FeedbackButtons
from blockkit.blocks.elements.icon_button import IconButton
from blockkit.blocks.elements.image import Image
from blockkit.blocks.elements.inputs import (
    EmailInput,
    FileInput,
    NumberInput,
    PlainTextInput,
    RichTextInput,
    UrlInput,
)
from blockkit.blocks.elements.multi_select_menus import (
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiStaticSelect,
    MultiUsersSelect,
)
from blockkit.blocks.elements.overflow_menu import OverflowMenu
from blockkit.blocks.elements.pickers import DatePicker, DatetimePicker, TimePicker
from blockkit.blocks.elements.radio_button_group import RadioButtonGroup
from blockkit.blocks.elements.select_menus import (
    ChannelsSelect,
    ConversationsSelect,
    ExternalSelect,
    StaticSelect,
    UsersSelect,
)
from blockkit.blocks.elements.types import FileType, Icon
from blockkit.blocks.elements.workflow_button import WorkflowButton

__all__ = [
    "Button",
    "ChannelsSelect",
    "Checkboxes",
    "ConversationsSelect",
    "DatePicker",
    "DatetimePicker",
    "EmailInput",
    "ExternalSelect",
    "FeedbackButton",
    "FeedbackButtons",
    "FileInput",
    "FileType",
    "Icon",
    "IconButton",
    "Image",
    "MultiChannelsSelect",
    "MultiConversationsSelect",
    "MultiExternalSelect",
    "MultiStaticSelect",
    "MultiUsersSelect",
    "NumberInput",
    "OverflowMenu",
    "PlainTextInput",
    "RadioButtonGroup",
    "RichTextInput",
    "StaticSelect",
    "TimePicker",
    "UrlInput",
    "UsersSelect",
    "WorkflowButton",
]
