from typing import Annotated, List, Literal, Optional, Union

from blockkit.blocks.elements import FeedbackButtons, IconButton
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators

ContextActionsElement = Union[FeedbackButtons, IconButton]


class ContextActions(BlockKitModel):
    """Block of contextual actions: feedback buttons and icon buttons."""

    type: Literal["context_actions"] = "context_actions"
    elements: Annotated[
        Optional[List[ContextActionsElement]],
        builder_field(
            validators.required,
            validators.lists.max_item_5,
            push_item="element",
        ),
    ] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
