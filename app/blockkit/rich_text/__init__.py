"""Rich text: the rich text block, its containers and inline elements."""

from blockkit.rich_text.block import RichText
from blockkit.rich_text.containers import (
    ListStyle,
    RichTextBlockElement,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
)
from blockkit.rich_text.elements import (
    BroadcastRange,
    RichTextBroadcast,
    RichTextChannel,
    RichTextColor,
    RichTextDate,
    RichTextElementType,
    RichTextEmoji,
    RichTextLink,
    RichTextText,
    RichTextUser,
    RichTextUserGroup,
)
from blockkit.rich_text.styles import MentionStyle, TextStyle

__all__ = [
    "BroadcastRange",
    "ListStyle",
    "MentionStyle",
    "RichText",
    "RichTextBlockElement",
    "RichTextBroadcast",
    "RichTextChannel",
    "RichTextColor",
    "RichTextDate",
    "RichTextElementType",
    "RichTextEmoji",
    "RichTextLink",
    "RichTextList",
    "RichTextPreformatted",
    "RichTextQuote",
    "RichTextSection",
    "RichTextText",
    "RichTextUser",
    "RichTextUserGroup",
    "TextStyle",
]
