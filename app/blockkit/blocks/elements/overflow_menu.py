from typing import Annotated, List, Literal, Optional

from blockkit.composition_objects import (
    ConfirmationDialog,
    Opt,
    restricted_option_errors,
)
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.errors import ValidationErrorKind


class OverflowMenu(BlockKitModel):
    """Menu of up to five options; options here may carry a ``url``."""

    type: Literal["overflow"] = "overflow"
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    options: Annotated[
        Optional[List[Opt]],
        builder_field(
            validators.required,
            validators.lists.max_item_5,
            push_item="option",
        ),
    ] = None
    confirm: Optional[ConfirmationDialog] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        return restricted_option_errors(self.options, allow_url=True)
