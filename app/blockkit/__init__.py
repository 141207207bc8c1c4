"""blockkit: build and validate Slack Block Kit payloads.

Every entity exposes ``Entity.builder()``. Builders collect field values,
validate them, and ``build()`` returns a BuildResult holding either the
entity or a field-indexed ValidationErrors report.

Example:
    from blockkit import Button

    result = (
        Button.builder()
        .action_id("button-0")
        .text("Click Me")
        .value("click_me_123")
        .build()
    )
    if result.is_success:
        payload = result.data.to_dict()
    else:
        print(result.errors.field("text"))

The element and block both called ``Image`` live in
``blockkit.blocks.elements`` and ``blockkit.blocks``.
"""

from blockkit.blocks import (
    Accessory,
    Actions,
    ActionsElement,
    Block,
    ColumnAlignment,
    ColumnSetting,
    Context,
    ContextActions,
    ContextActionsElement,
    ContextElement,
    Divider,
    File,
    FileSource,
    Header,
    Input,
    InputElement,
    Markdown,
    RawText,
    Section,
    Table,
    TableCell,
    TableRow,
    Video,
)
from blockkit.blocks.elements import (
    Button,
    ChannelsSelect,
    Checkboxes,
    ConversationsSelect,
    DatePicker,
    DatetimePicker,
    EmailInput,
    ExternalSelect,
    FeedbackButton,
    FeedbackButtons,
    FileInput,
    FileType,
    Icon,
    IconButton,
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiStaticSelect,
    MultiUsersSelect,
    NumberInput,
    OverflowMenu,
    PlainTextInput,
    RadioButtonGroup,
    RichTextInput,
    StaticSelect,
    TimePicker,
    UrlInput,
    UsersSelect,
    WorkflowButton,
)
from blockkit.composition_objects import (
    ConfirmationDialog,
    Conversation,
    ConversationFilter,
    DispatchActionConfiguration,
    InputParameter,
    MrkdwnText,
    Opt,
    OptGroup,
    PlainText,
    SlackFile,
    TextObject,
    Trigger,
    TriggerAction,
    Workflow,
    mrkdwn,
    plain_text,
)
from blockkit.core import BlockKitModel, BuildResult, BuildStatus
from blockkit.errors import (
    BlockKitError,
    BuilderDefinitionError,
    EitherRequired,
    EmptyArray,
    ExclusiveField,
    InvalidFormat,
    InvalidValue,
    MaxArraySize,
    MaxIntegerValue,
    MaxTextLength,
    MinIntegerValue,
    MinTextLength,
    NoFieldProvided,
    Required,
    ValidationError,
    ValidationErrorKind,
    ValidationErrors,
)
from blockkit.message import Message
from blockkit.rich_text import (
    BroadcastRange,
    ListStyle,
    MentionStyle,
    RichText,
    RichTextBroadcast,
    RichTextChannel,
    RichTextColor,
    RichTextDate,
    RichTextEmoji,
    RichTextLink,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    RichTextText,
    RichTextUser,
    RichTextUserGroup,
    TextStyle,
)

__version__ = "0.1.0"

__all__ = [
    "Accessory",
    "Actions",
    "ActionsElement",
    "Block",
    "BlockKitError",
    "BlockKitModel",
    "BroadcastRange",
    "BuildResult",
    "BuildStatus",
    "BuilderDefinitionError",
    "Button",
    "ChannelsSelect",
    "Checkboxes",
    "ColumnAlignment",
    "ColumnSetting",
    "ConfirmationDialog",
    "Context",
    "ContextActions",
    "ContextActionsElement",
    "ContextElement",
    "Conversation",
    "ConversationFilter",
    "ConversationsSelect",
    "DatePicker",
    "DatetimePicker",
    "DispatchActionConfiguration",
    "Divider",
    "EitherRequired",
    "EmailInput",
    "EmptyArray",
    "ExclusiveField",
    "ExternalSelect",
    "FeedbackButton",
    "FeedbackButtons",
    "File",
    "FileInput",
    "FileSource",
    "FileType",
    "Header",
    "Icon",
    "IconButton",
    "Input",
    "InputElement",
    "InputParameter",
    "InvalidFormat",
    "InvalidValue",
    "ListStyle",
    "Markdown",
    "MaxArraySize",
    "MaxIntegerValue",
    "MaxTextLength",
    "MentionStyle",
    "Message",
    "MinIntegerValue",
    "MinTextLength",
    "MrkdwnText",
    "MultiChannelsSelect",
    "MultiConversationsSelect",
    "MultiExternalSelect",
    "MultiStaticSelect",
    "MultiUsersSelect",
    "NoFieldProvided",
    "NumberInput",
    "Opt",
    "OptGroup",
    "OverflowMenu",
    "PlainText",
    "PlainTextInput",
    "RadioButtonGroup",
    "RawText",
    "Required",
    "RichText",
    "RichTextBroadcast",
    "RichTextChannel",
    "RichTextColor",
    "RichTextDate",
    "RichTextEmoji",
    "RichTextInput",
    "RichTextLink",
    "RichTextList",
    "RichTextPreformatted",
    "RichTextQuote",
    "RichTextSection",
    "RichTextText",
    "RichTextUser",
    "RichTextUserGroup",
    "Section",
    "SlackFile",
    "StaticSelect",
    "Table",
    "TableCell",
    "TableRow",
    "TextObject",
    "TextStyle",
    "TimePicker",
    "Trigger",
    "TriggerAction",
    "UrlInput",
    "UsersSelect",
    "ValidationError",
    "ValidationErrorKind",
    "ValidationErrors",
    "Video",
    "Workflow",
    "WorkflowButton",
    "mrkdwn",
    "plain_text",
]
