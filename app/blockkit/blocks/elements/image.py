from typing import Annotated, List, Literal, Optional

from blockkit.composition_objects import SlackFile
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.errors import ValidationErrorKind


class Image(BlockKitModel):
    """Image element, placed in section accessories and context blocks.

    The image comes from exactly one of ``image_url`` or ``slack_file``.
    """

    type: Literal["image"] = "image"
    alt_text: Annotated[Optional[str], builder_field(validators.required)] = None
    image_url: Annotated[Optional[str], builder_field(validators.text.max_3000)] = None
    slack_file: Optional[SlackFile] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        error = validators.fields.one_of(self, "image_url", "slack_file")
        return [error] if error else []
