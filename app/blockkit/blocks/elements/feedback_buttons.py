from typing import Annotated, Literal, Optional

from blockkit.composition_objects import PlainText
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class FeedbackButton(BlockKitModel):
    """One of the two buttons of a feedback buttons element."""

    text: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_75,
            convert=PlainText.from_str,
        ),
    ] = None
    value: Annotated[
        Optional[str], builder_field(validators.required, validators.text.max_2000)
    ] = None
    accessibility_label: Annotated[
        Optional[str], builder_field(validators.text.max_75)
    ] = None


class FeedbackButtons(BlockKitModel):
    """Positive/negative feedback pair, used in context actions blocks."""

    type: Literal["feedback_buttons"] = "feedback_buttons"
    action_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    positive_button: Annotated[
        Optional[FeedbackButton], builder_field(validators.required)
    ] = None
    negative_button: Annotated[
        Optional[FeedbackButton], builder_field(validators.required)
    ] = None
