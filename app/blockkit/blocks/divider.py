from typing import Annotated, Literal, Optional

from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class Divider(BlockKitModel):
    type: Literal["divider"] = "divider"
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
