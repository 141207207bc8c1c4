from typing import Annotated, Literal, Optional

from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class Markdown(BlockKitModel):
    """Block of standard markdown, as produced by AI apps."""

    type: Literal["markdown"] = "markdown"
    text: Annotated[
        Optional[str], builder_field(validators.required, validators.text.max_12000)
    ] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
