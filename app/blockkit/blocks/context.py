from typing import Annotated, List, Literal, Optional, Union

from blockkit.blocks.elements import Image
from blockkit.composition_objects import MrkdwnText, PlainText
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators

ContextElement = Union[Image, PlainText, MrkdwnText]


class Context(BlockKitModel):
    """Block of small images and text; a str element becomes markdown text."""

    type: Literal["context"] = "context"
    elements: Annotated[
        Optional[List[ContextElement]],
        builder_field(
            validators.required,
            validators.lists.max_item_10,
            push_item="element",
            convert=MrkdwnText.from_str,
        ),
    ] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
