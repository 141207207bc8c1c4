from typing import Annotated, List, Literal, Optional

from blockkit.composition_objects import (
    ConfirmationDialog,
    Opt,
    restricted_option_errors,
)
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.errors import ValidationErrorKind


class Checkboxes(BlockKitModel):
    """Checkbox group; options may use plain or markdown text."""

    type: Literal["checkboxes"] = "checkboxes"
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    options: Annotated[
        Optional[List[Opt]],
        builder_field(
            validators.required,
            validators.lists.max_item_10,
            push_item="option",
        ),
    ] = None
    initial_options: Annotated[
        Optional[List[Opt]], builder_field(push_item="initial_option")
    ] = None
    confirm: Optional[ConfirmationDialog] = None
    focus_on_load: Optional[bool] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        return restricted_option_errors(
            self.options, self.initial_options, allow_mrkdwn=True
        )
