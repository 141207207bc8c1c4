"""Rich text containers: sections, lists, quotes and preformatted blocks."""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.rich_text.elements import RichTextElementType


class ListStyle(str, Enum):
    BULLET = "bullet"
    ORDERED = "ordered"


class RichTextSection(BlockKitModel):
    """Run of inline elements."""

    type: Literal["rich_text_section"] = "rich_text_section"
    elements: Annotated[
        Optional[List[RichTextElementType]],
        builder_field(validators.required, push_item="element"),
    ] = None


class RichTextList(BlockKitModel):
    """Bulleted or ordered list whose items are rich text sections.

    ``indent`` nests the list, ``offset`` shifts the numbering of ordered
    lists and ``border`` draws a left border (0 or 1).
    """

    type: Literal["rich_text_list"] = "rich_text_list"
    style: Annotated[Optional[ListStyle], builder_field(validators.required)] = None
    elements: Annotated[
        Optional[List[RichTextSection]],
        builder_field(validators.required, push_item="element"),
    ] = None
    indent: Optional[int] = None
    offset: Optional[int] = None
    border: Optional[int] = None


class RichTextPreformatted(BlockKitModel):
    """Code block."""

    type: Literal["rich_text_preformatted"] = "rich_text_preformatted"
    elements: Annotated[
        Optional[List[RichTextElementType]],
        builder_field(validators.required, push_item="element"),
    ] = None
    border: Optional[int] = None


class RichTextQuote(BlockKitModel):
    type: Literal["rich_text_quote"] = "rich_text_quote"
    elements: Annotated[
        Optional[List[RichTextElementType]],
        builder_field(validators.required, push_item="element"),
    ] = None
    border: Optional[int] = None


RichTextBlockElement = Union[
    RichTextSection,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
]
