"""Workflow trigger composition objects, used by workflow buttons."""

from typing import Annotated, Any, List, Optional

from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class InputParameter(BlockKitModel):
    """Customizable input parameter passed to a workflow trigger.

    ``value`` may be any JSON value.
    """

    name: Annotated[Optional[str], builder_field(validators.required)] = None
    value: Annotated[Optional[Any], builder_field(validators.required)] = None


class Trigger(BlockKitModel):
    """Workflow trigger reference."""

    url: Annotated[Optional[str], builder_field(validators.required)] = None
    customizable_input_parameters: Annotated[
        Optional[List[InputParameter]],
        builder_field(push_item="customizable_input_parameter"),
    ] = None


class Workflow(BlockKitModel):
    """Workflow object holding the trigger a workflow button runs."""

    trigger: Annotated[Optional[Trigger], builder_field(validators.required)] = None
