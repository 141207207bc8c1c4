"""Text-like input elements, used inside input blocks."""

from typing import Annotated, List, Literal, Optional

from blockkit.blocks.elements.types import FileType
from blockkit.composition_objects import DispatchActionConfiguration, PlainText
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.rich_text import RichText

_placeholder = builder_field(validators.text_object.max_150, convert=PlainText.from_str)
_action_id = builder_field(validators.text.max_255)


class EmailInput(BlockKitModel):
    type: Literal["email_text_input"] = "email_text_input"
    action_id: Annotated[Optional[str], _action_id] = None
    initial_value: Optional[str] = None
    dispatch_action_config: Optional[DispatchActionConfiguration] = None
    focus_on_load: Optional[bool] = None
    placeholder: Annotated[Optional[PlainText], _placeholder] = None


class UrlInput(BlockKitModel):
    type: Literal["url_text_input"] = "url_text_input"
    action_id: Annotated[Optional[str], _action_id] = None
    initial_value: Optional[str] = None
    dispatch_action_config: Optional[DispatchActionConfiguration] = None
    focus_on_load: Optional[bool] = None
    placeholder: Annotated[Optional[PlainText], _placeholder] = None


class NumberInput(BlockKitModel):
    """Number input; values travel as strings on the wire."""

    type: Literal["number_input"] = "number_input"
    is_decimal_allowed: Annotated[
        Optional[bool], builder_field(validators.required)
    ] = None
    action_id: Annotated[Optional[str], _action_id] = None
    initial_value: Optional[str] = None
    min_value: Optional[str] = None
    max_value: Optional[str] = None
    dispatch_action_config: Optional[DispatchActionConfiguration] = None
    focus_on_load: Optional[bool] = None
    placeholder: Annotated[Optional[PlainText], _placeholder] = None


class PlainTextInput(BlockKitModel):
    type: Literal["plain_text_input"] = "plain_text_input"
    action_id: Annotated[Optional[str], _action_id] = None
    initial_value: Optional[str] = None
    multiline: Optional[bool] = None
    min_length: Annotated[
        Optional[int],
        builder_field(validators.integer.min_0, validators.integer.max_3000),
    ] = None
    max_length: Annotated[
        Optional[int],
        builder_field(validators.integer.min_1, validators.integer.max_3000),
    ] = None
    dispatch_action_config: Optional[DispatchActionConfiguration] = None
    focus_on_load: Optional[bool] = None
    placeholder: Annotated[Optional[PlainText], _placeholder] = None


class RichTextInput(BlockKitModel):
    """Rich text input; ``initial_value`` is a rich text block."""

    type: Literal["rich_text_input"] = "rich_text_input"
    action_id: Annotated[
        Optional[str], builder_field(validators.required, validators.text.max_255)
    ] = None
    initial_value: Optional[RichText] = None
    dispatch_action_config: Optional[DispatchActionConfiguration] = None
    focus_on_load: Optional[bool] = None
    placeholder: Annotated[Optional[PlainText], _placeholder] = None


class FileInput(BlockKitModel):
    """File upload input; accepts at most ``max_files`` files (1 to 10)."""

    type: Literal["file_input"] = "file_input"
    action_id: Annotated[Optional[str], _action_id] = None
    filetypes: Annotated[
        Optional[List[FileType]], builder_field(push_item="filetype")
    ] = None
    max_files: Annotated[
        Optional[int],
        builder_field(validators.integer.min_1, validators.integer.max_10),
    ] = None
