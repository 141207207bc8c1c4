from typing import Annotated, List, Optional

from blockkit.composition_objects.types import Conversation
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.errors import ValidationErrorKind


class ConversationFilter(BlockKitModel):
    """Filter for the conversation list of conversation select menus.

    At least one of the fields must be provided.
    """

    include: Annotated[
        Optional[List[Conversation]],
        builder_field(validators.lists.not_empty, push_item="conversation"),
    ] = None
    exclude_external_shared_channels: Optional[bool] = None
    exclude_bot_users: Optional[bool] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        error = validators.fields.at_least_one(
            self, "include", "exclude_external_shared_channels", "exclude_bot_users"
        )
        return [error] if error else []
