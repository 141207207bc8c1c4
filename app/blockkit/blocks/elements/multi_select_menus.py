"""Multi-select menus.

Same data sources as the single-select menus, with list-valued initial
selections and an optional ``max_selected_items`` (at least 1).
"""

from typing import Annotated, List, Literal, Optional

from blockkit.blocks.elements.select_menus import SelectMenu, StaticOptionsMenu
from blockkit.composition_objects import ConversationFilter, Opt
from blockkit.core import builder_field
from blockkit.core import validators

_max_selected_items = builder_field(validators.integer.min_1)


class MultiStaticSelect(StaticOptionsMenu):
    type: Literal["multi_static_select"] = "multi_static_select"
    initial_options: Annotated[
        Optional[List[Opt]], builder_field(push_item="initial_option")
    ] = None
    max_selected_items: Annotated[Optional[int], _max_selected_items] = None


class MultiExternalSelect(SelectMenu):
    type: Literal["multi_external_select"] = "multi_external_select"
    min_query_length: Optional[int] = None
    initial_options: Annotated[
        Optional[List[Opt]], builder_field(push_item="initial_option")
    ] = None
    max_selected_items: Annotated[Optional[int], _max_selected_items] = None


class MultiUsersSelect(SelectMenu):
    type: Literal["multi_users_select"] = "multi_users_select"
    initial_users: Annotated[
        Optional[List[str]], builder_field(push_item="initial_user")
    ] = None
    max_selected_items: Annotated[Optional[int], _max_selected_items] = None


class MultiConversationsSelect(SelectMenu):
    type: Literal["multi_conversations_select"] = "multi_conversations_select"
    initial_conversations: Annotated[
        Optional[List[str]], builder_field(push_item="initial_conversation")
    ] = None
    default_to_current_conversation: Optional[bool] = None
    max_selected_items: Annotated[Optional[int], _max_selected_items] = None
    filter: Optional[ConversationFilter] = None


class MultiChannelsSelect(SelectMenu):
    type: Literal["multi_channels_select"] = "multi_channels_select"
    initial_channels: Annotated[
        Optional[List[str]], builder_field(push_item="initial_channel")
    ] = None
    max_selected_items: Annotated[Optional[int], _max_selected_items] = None
