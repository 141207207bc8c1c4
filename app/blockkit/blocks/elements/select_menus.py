"""Single-select menus.

All menus share ``action_id``, ``confirm``, ``focus_on_load`` and
``placeholder``; each kind adds the fields of its data source.
"""

from typing import Annotated, List, Literal, Optional

from blockkit.composition_objects import (
    ConfirmationDialog,
    ConversationFilter,
    Opt,
    OptGroup,
    PlainText,
    restricted_option_errors,
)
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.errors import ValidationErrorKind


class SelectMenu(BlockKitModel):
    """Fields common to every select menu, single and multi."""

    type: str
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    confirm: Optional[ConfirmationDialog] = None
    focus_on_load: Optional[bool] = None
    placeholder: Annotated[
        Optional[PlainText],
        builder_field(validators.text_object.max_150, convert=PlainText.from_str),
    ] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        return restricted_option_errors(
            getattr(self, "options", None),
            getattr(self, "initial_option", None),
            getattr(self, "initial_options", None),
        )


class StaticOptionsMenu(SelectMenu):
    """Menu over a static list of options or option groups (exactly one)."""

    options: Annotated[
        Optional[List[Opt]],
        builder_field(validators.lists.max_item_100, push_item="option"),
    ] = None
    option_groups: Annotated[
        Optional[List[OptGroup]],
        builder_field(validators.lists.max_item_100, push_item="option_group"),
    ] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        errors = super().validate_across_fields()
        error = validators.fields.one_of(self, "options", "option_groups")
        return [error, *errors] if error else errors


class StaticSelect(StaticOptionsMenu):
    type: Literal["static_select"] = "static_select"
    initial_option: Optional[Opt] = None


class ExternalSelect(SelectMenu):
    """Menu whose options are loaded from the app's options load URL."""

    type: Literal["external_select"] = "external_select"
    min_query_length: Optional[int] = None
    initial_option: Optional[Opt] = None


class UsersSelect(SelectMenu):
    type: Literal["users_select"] = "users_select"
    initial_user: Optional[str] = None


class ConversationsSelect(SelectMenu):
    type: Literal["conversations_select"] = "conversations_select"
    initial_conversation: Optional[str] = None
    default_to_current_conversation: Optional[bool] = None
    response_url_enabled: Optional[bool] = None
    filter: Optional[ConversationFilter] = None


class ChannelsSelect(SelectMenu):
    """Menu over public channels."""

    type: Literal["channels_select"] = "channels_select"
    initial_channel: Optional[str] = None
    response_url_enabled: Optional[bool] = None
