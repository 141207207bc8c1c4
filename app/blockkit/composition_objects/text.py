"""Text composition objects.

PlainText and MrkdwnText are the two text objects accepted across Block
Kit. Fields that accept either one are typed with the ``TextObject``
union.
"""

from typing import Annotated, Any, Literal, Optional, Union

from blockkit.core import BlockKitModel, BuildResult, builder_field
from blockkit.core import validators


class PlainText(BlockKitModel):
    """Plain text object.

    Example:
        >>> PlainText.builder().text("Hello").emoji(True).build().data.to_json()
        '{"type":"plain_text","text":"Hello","emoji":true}'
    """

    type: Literal["plain_text"] = "plain_text"
    text: Annotated[
        Optional[str],
        builder_field(validators.required, validators.text.min_1, validators.text.max_3000),
    ] = None
    emoji: Optional[bool] = None

    @classmethod
    def from_str(cls, value: Any) -> Any:
        """Wrap a str into a PlainText; other values pass through."""
        if isinstance(value, str):
            return cls(text=value)
        return value


class MrkdwnText(BlockKitModel):
    """Markdown text object."""

    type: Literal["mrkdwn"] = "mrkdwn"
    text: Annotated[
        Optional[str],
        builder_field(validators.required, validators.text.min_1, validators.text.max_3000),
    ] = None
    verbatim: Optional[bool] = None

    @classmethod
    def from_str(cls, value: Any) -> Any:
        """Wrap a str into a MrkdwnText; other values pass through."""
        if isinstance(value, str):
            return cls(text=value)
        return value


TextObject = Union[PlainText, MrkdwnText]


def _format(fmt: str, args: tuple, kwargs: dict) -> str:
    if args or kwargs:
        return fmt.format(*args, **kwargs)
    return fmt


def plain_text(fmt: str, *args: Any, **kwargs: Any) -> BuildResult:
    """Build a PlainText, formatting ``fmt`` like ``str.format``.

    Example:
        >>> plain_text("Hello, {}!", "World").data.text
        'Hello, World!'
    """
    return PlainText.builder().text(_format(fmt, args, kwargs)).build()


def mrkdwn(fmt: str, *args: Any, **kwargs: Any) -> BuildResult:
    """Build a MrkdwnText, formatting ``fmt`` like ``str.format``."""
    return MrkdwnText.builder().text(_format(fmt, args, kwargs)).build()
