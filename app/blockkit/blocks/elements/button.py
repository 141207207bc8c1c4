from typing import Annotated, ClassVar, Literal, Optional, Tuple

from blockkit.composition_objects import ConfirmationDialog, PlainText, Style, StyleBuilderMixin
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class Button(BlockKitModel):
    """Interactive button element.

    Example:
        >>> button = (
        ...     Button.builder()
        ...     .action_id("button-0")
        ...     .text("Click Me")
        ...     .value("click_me_123")
        ...     .primary()
        ...     .build()
        ...     .or_raise()
        ... )
        >>> button.to_dict()["style"]
        'primary'
    """

    builder_mixins: ClassVar[Tuple[type, ...]] = (StyleBuilderMixin,)

    type: Literal["button"] = "button"
    text: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_75,
            convert=PlainText.from_str,
        ),
    ] = None
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    url: Annotated[Optional[str], builder_field(validators.text.max_3000)] = None
    value: Annotated[Optional[str], builder_field(validators.text.max_2000)] = None
    style: Annotated[Optional[Style], builder_field(private=True)] = None
    confirm: Optional[ConfirmationDialog] = None
    accessibility_label: Annotated[
        Optional[str], builder_field(validators.text.max_75)
    ] = None
