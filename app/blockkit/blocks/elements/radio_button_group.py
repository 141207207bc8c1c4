from typing import Annotated, List, Literal, Optional

from blockkit.composition_objects import (
    ConfirmationDialog,
    Opt,
    restricted_option_errors,
)
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.errors import ValidationErrorKind


class RadioButtonGroup(BlockKitModel):
    type: Literal["radio_buttons"] = "radio_buttons"
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    options: Annotated[
        Optional[List[Opt]],
        builder_field(
            validators.required,
            validators.lists.max_item_10,
            push_item="option",
        ),
    ] = None
    initial_option: Optional[Opt] = None
    confirm: Optional[ConfirmationDialog] = None
    focus_on_load: Optional[bool] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        return restricted_option_errors(
            self.options, self.initial_option, allow_mrkdwn=True
        )
