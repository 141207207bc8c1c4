"""Date, datetime and time pickers."""

from typing import Annotated, Literal, Optional

from blockkit.composition_objects import ConfirmationDialog, PlainText
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class DatePicker(BlockKitModel):
    """Calendar date picker; ``initial_date`` is ``YYYY-MM-DD``."""

    type: Literal["datepicker"] = "datepicker"
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    initial_date: Annotated[
        Optional[str], builder_field(validators.text.date_format)
    ] = None
    confirm: Optional[ConfirmationDialog] = None
    focus_on_load: Optional[bool] = None
    placeholder: Annotated[
        Optional[PlainText],
        builder_field(validators.text_object.max_150, convert=PlainText.from_str),
    ] = None


class DatetimePicker(BlockKitModel):
    """Date and time picker; ``initial_date_time`` is a Unix timestamp in seconds."""

    type: Literal["datetimepicker"] = "datetimepicker"
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    initial_date_time: Annotated[
        Optional[int], builder_field(validators.integer.ten_digits)
    ] = None
    confirm: Optional[ConfirmationDialog] = None
    focus_on_load: Optional[bool] = None


class TimePicker(BlockKitModel):
    """Time picker; ``initial_time`` is ``HH:mm`` in 24-hour format."""

    type: Literal["timepicker"] = "timepicker"
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    initial_time: Annotated[
        Optional[str], builder_field(validators.text.time_format)
    ] = None
    confirm: Optional[ConfirmationDialog] = None
    focus_on_load: Optional[bool] = None
    placeholder: Annotated[
        Optional[PlainText],
        builder_field(validators.text_object.max_150, convert=PlainText.from_str),
    ] = None
    timezone: Optional[str] = None
