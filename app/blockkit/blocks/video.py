from typing import Annotated, Literal, Optional

from blockkit.composition_objects import PlainText
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class Video(BlockKitModel):
    """Embedded video block."""

    type: Literal["video"] = "video"
    alt_text: Annotated[Optional[str], builder_field(validators.required)] = None
    author_name: Annotated[Optional[str], builder_field(validators.text.max_50)] = None
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    description: Annotated[
        Optional[PlainText],
        builder_field(validators.text_object.max_200, convert=PlainText.from_str),
    ] = None
    provider_icon_url: Optional[str] = None
    provider_name: Optional[str] = None
    title: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_200,
            convert=PlainText.from_str,
        ),
    ] = None
    title_url: Optional[str] = None
    thumbnail_url: Annotated[Optional[str], builder_field(validators.required)] = None
    video_url: Annotated[Optional[str], builder_field(validators.required)] = None
