"""Inline rich text elements.

These are the leaves of a rich text tree: pieces of text, links, emoji,
mentions and dates placed inside sections, quotes and preformatted
blocks.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.rich_text.styles import MentionStyle, TextStyle


class BroadcastRange(str, Enum):
    HERE = "here"
    CHANNEL = "channel"
    EVERYONE = "everyone"


class RichTextBroadcast(BlockKitModel):
    """@here, @channel or @everyone mention."""

    type: Literal["broadcast"] = "broadcast"
    range: Annotated[Optional[BroadcastRange], builder_field(validators.required)] = None


class RichTextChannel(BlockKitModel):
    type: Literal["channel"] = "channel"
    channel_id: Annotated[Optional[str], builder_field(validators.required)] = None
    style: Optional[MentionStyle] = None


class RichTextColor(BlockKitModel):
    """Hex color rendered with a swatch, e.g. "#F405B3"."""

    type: Literal["color"] = "color"
    value: Annotated[Optional[str], builder_field(validators.required)] = None


class RichTextDate(BlockKitModel):
    """Date rendered in the reader's timezone.

    ``format`` uses Slack date tokens such as ``{date_long}``; ``fallback``
    is shown by clients that cannot render the date.
    """

    type: Literal["date"] = "date"
    timestamp: Annotated[Optional[int], builder_field(validators.required)] = None
    format: Annotated[Optional[str], builder_field(validators.required)] = None
    url: Optional[str] = None
    fallback: Optional[str] = None


class RichTextEmoji(BlockKitModel):
    type: Literal["emoji"] = "emoji"
    name: Annotated[Optional[str], builder_field(validators.required)] = None
    unicode: Optional[str] = None


class RichTextLink(BlockKitModel):
    type: Literal["link"] = "link"
    url: Annotated[Optional[str], builder_field(validators.required)] = None
    text: Optional[str] = None
    unsafe: Optional[bool] = None
    style: Optional[TextStyle] = None


class RichTextText(BlockKitModel):
    type: Literal["text"] = "text"
    text: Annotated[Optional[str], builder_field(validators.required)] = None
    style: Optional[TextStyle] = None


class RichTextUser(BlockKitModel):
    type: Literal["user"] = "user"
    user_id: Annotated[Optional[str], builder_field(validators.required)] = None
    style: Optional[MentionStyle] = None


class RichTextUserGroup(BlockKitModel):
    type: Literal["usergroup"] = "usergroup"
    usergroup_id: Annotated[Optional[str], builder_field(validators.required)] = None
    style: Optional[MentionStyle] = None


RichTextElementType = Union[
    RichTextBroadcast,
    RichTextChannel,
    RichTextColor,
    RichTextDate,
    RichTextEmoji,
    RichTextLink,
    RichTextText,
    RichTextUser,
    RichTextUserGroup,
]
