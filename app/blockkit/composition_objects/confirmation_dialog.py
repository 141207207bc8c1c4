from typing import Annotated, ClassVar, Optional, Tuple

from blockkit.composition_objects.text import PlainText
from blockkit.composition_objects.types import Style, StyleBuilderMixin
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class ConfirmationDialog(BlockKitModel):
    """Dialog asking the user to confirm an interactive action.

    Example:
        >>> dialog = (
        ...     ConfirmationDialog.builder()
        ...     .title("Are you sure?")
        ...     .text("Wouldn't you prefer a good game of chess?")
        ...     .confirm("Do it")
        ...     .deny("Stop, I've changed my mind!")
        ...     .danger()
        ...     .build()
        ...     .or_raise()
        ... )
    """

    builder_mixins: ClassVar[Tuple[type, ...]] = (StyleBuilderMixin,)

    title: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_100,
            convert=PlainText.from_str,
        ),
    ] = None
    text: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_300,
            convert=PlainText.from_str,
        ),
    ] = None
    confirm: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_30,
            convert=PlainText.from_str,
        ),
    ] = None
    deny: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_30,
            convert=PlainText.from_str,
        ),
    ] = None
    style: Annotated[Optional[Style], builder_field(private=True)] = None
