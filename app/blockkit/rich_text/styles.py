"""Style objects for rich text elements."""

from typing import Optional

from blockkit.core import BlockKitModel


class TextStyle(BlockKitModel):
    """Style of text and link elements."""

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    strike: Optional[bool] = None
    code: Optional[bool] = None


class MentionStyle(BlockKitModel):
    """Style of channel, user and usergroup mentions."""

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    strike: Optional[bool] = None
    highlight: Optional[bool] = None
    client_highlight: Optional[bool] = None
    unlink: Optional[bool] = None
