from typing import Annotated, Literal, Optional

from blockkit.composition_objects import PlainText
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class Header(BlockKitModel):
    """Large bold heading.

    Example:
        >>> Header.builder().text("Budget Performance").build().or_raise().to_dict()
        {'type': 'header', 'text': {'type': 'plain_text', 'text': 'Budget Performance'}}
    """

    type: Literal["header"] = "header"
    text: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_150,
            convert=PlainText.from_str,
        ),
    ] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
