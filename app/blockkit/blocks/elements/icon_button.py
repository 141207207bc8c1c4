from typing import Annotated, List, Literal, Optional

from blockkit.blocks.elements.types import Icon
from blockkit.composition_objects import ConfirmationDialog, PlainText
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class IconButton(BlockKitModel):
    """Button showing an icon, used in context actions blocks."""

    type: Literal["icon_button"] = "icon_button"
    icon: Annotated[Optional[Icon], builder_field(validators.required)] = None
    text: Annotated[
        Optional[PlainText],
        builder_field(validators.required, convert=PlainText.from_str),
    ] = None
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    value: Annotated[Optional[str], builder_field(validators.text.max_2000)] = None
    confirm: Optional[ConfirmationDialog] = None
    accessibility_label: Annotated[
        Optional[str], builder_field(validators.text.max_75)
    ] = None
    visible_to_user_ids: Annotated[
        Optional[List[str]], builder_field(push_item="visible_to_user_id")
    ] = None
