from typing import Annotated, List, Literal, Optional

from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.rich_text.containers import RichTextBlockElement


class RichText(BlockKitModel):
    """Rich text block; also the value of rich text inputs.

    Example:
        >>> section = RichTextSection.builder().element(
        ...     RichTextText.builder().text("Hello there").build().or_raise()
        ... ).build().or_raise()
        >>> RichText.builder().block_id("rt-0").element(section).build().or_raise().to_dict()
        {'type': 'rich_text', 'elements': [{'type': 'rich_text_section', 'elements': [{'type': 'text', 'text': 'Hello there'}]}], 'block_id': 'rt-0'}
    """

    type: Literal["rich_text"] = "rich_text"
    elements: Annotated[
        Optional[List[RichTextBlockElement]],
        builder_field(validators.required, push_item="element"),
    ] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
