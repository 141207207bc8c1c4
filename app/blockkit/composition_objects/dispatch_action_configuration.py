from typing import Annotated, List, Optional

from blockkit.composition_objects.types import TriggerAction
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class DispatchActionConfiguration(BlockKitModel):
    """When a plain-text input dispatches a block_actions payload."""

    trigger_actions_on: Annotated[
        Optional[List[TriggerAction]],
        builder_field(validators.lists.not_empty, push_item="trigger_action"),
    ] = None
