"""Message payload: the top-level object posted to Slack."""

from typing import Annotated, List, Optional

from blockkit.blocks import Block
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators


class Message(BlockKitModel):
    """Message with up to 50 blocks.

    ``text`` is the notification fallback when ``blocks`` are present.
    ``response_type``, ``replace_original`` and ``delete_original`` apply
    to responses sent through a response_url.

    Example:
        >>> header = Header.builder().text("Hello").build().or_raise()
        >>> message = Message.builder().text("Hello").block(header).build().or_raise()
        >>> message.to_json()
        '{"text":"Hello","blocks":[{"type":"header","text":{"type":"plain_text","text":"Hello"}}]}'
    """

    text: Optional[str] = None
    blocks: Annotated[
        Optional[List[Block]],
        builder_field(validators.lists.max_item_50, push_item="block"),
    ] = None
    thread_ts: Optional[str] = None
    mrkdwn: Optional[bool] = None
    response_type: Optional[str] = None
    replace_original: Optional[bool] = None
    delete_original: Optional[bool] = None
    reply_broadcast: Optional[bool] = None
