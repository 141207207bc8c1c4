from typing import List, Optional

from blockkit.core import BlockKitModel
from blockkit.core import validators
from blockkit.errors import ValidationErrorKind


class SlackFile(BlockKitModel):
    """Reference to a file hosted on Slack, by id or by url (exactly one)."""

    id: Optional[str] = None
    url: Optional[str] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        error = validators.fields.one_of(self, "id", "url")
        return [error] if error else []
