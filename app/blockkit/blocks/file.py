from enum import Enum
from typing import Annotated, Literal, Optional

from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class FileSource(str, Enum):
    REMOTE = "remote"


class File(BlockKitModel):
    """Remote file block. Only valid in messages fetched back from Slack."""

    type: Literal["file"] = "file"
    external_id: Annotated[Optional[str], builder_field(validators.required)] = None
    source: Annotated[Optional[FileSource], builder_field(validators.required)] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
