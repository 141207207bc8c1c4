from typing import Annotated, ClassVar, Literal, Optional, Tuple

from blockkit.composition_objects import (
    PlainText,
    Style,
    StyleBuilderMixin,
    Workflow,
)
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class WorkflowButton(BlockKitModel):
    """Button that runs a workflow through its link trigger."""

    builder_mixins: ClassVar[Tuple[type, ...]] = (StyleBuilderMixin,)

    type: Literal["workflow_button"] = "workflow_button"
    text: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_75,
            convert=PlainText.from_str,
        ),
    ] = None
    action_id: Annotated[
        Optional[str], builder_field(validators.required, validators.text.max_255)
    ] = None
    workflow: Annotated[Optional[Workflow], builder_field(validators.required)] = None
    style: Annotated[Optional[Style], builder_field(private=True)] = None
    accessibility_label: Annotated[
        Optional[str], builder_field(validators.text.max_75)
    ] = None
