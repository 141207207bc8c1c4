"""Option and option group composition objects."""

from typing import Annotated, Any, List, Optional

from blockkit.composition_objects.text import MrkdwnText, PlainText, TextObject
from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.errors import InvalidValue, ValidationErrorKind

URL_NOT_ALLOWED = InvalidValue("option url is only allowed in overflow menus")
MRKDWN_NOT_ALLOWED = InvalidValue(
    "option mrkdwn text is only allowed in checkboxes and radio buttons"
)


class Opt(BlockKitModel):
    """A single selectable item in menus, checkboxes and radio buttons.

    ``text`` accepts a plain str, which becomes a PlainText. Markdown text
    is only allowed in checkboxes and radio buttons, and ``url`` only in
    overflow menus. The containers report other uses with
    ``restricted_option_errors``.

    Example:
        >>> opt = Opt.builder().text("Maru").value("maru").build().data
        >>> opt.to_dict()
        {'text': {'type': 'plain_text', 'text': 'Maru'}, 'value': 'maru'}
    """

    text: Annotated[
        Optional[TextObject],
        builder_field(
            validators.required,
            validators.text_object.max_75,
            convert=PlainText.from_str,
        ),
    ] = None
    value: Annotated[
        Optional[str],
        builder_field(validators.required, validators.text.max_150),
    ] = None
    description: Annotated[
        Optional[TextObject],
        builder_field(validators.text_object.max_75, convert=PlainText.from_str),
    ] = None
    url: Annotated[Optional[str], builder_field(validators.text.max_3000)] = None


class OptGroup(BlockKitModel):
    """A labelled group of options for select menus."""

    label: Annotated[
        Optional[PlainText],
        builder_field(
            validators.required,
            validators.text_object.max_75,
            convert=PlainText.from_str,
        ),
    ] = None
    options: Annotated[
        Optional[List[Opt]],
        builder_field(
            validators.required,
            validators.lists.max_item_100,
            push_item="option",
        ),
    ] = None

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        return restricted_option_errors(self.options)


def _iter_options(sources):
    for source in sources:
        items = source if isinstance(source, list) else [source]
        for item in items:
            if isinstance(item, Opt):
                yield item


def restricted_option_errors(
    *sources: Any, allow_url: bool = False, allow_mrkdwn: bool = False
) -> List[ValidationErrorKind]:
    """Report options using a ``url`` or markdown text where not allowed.

    Args:
        *sources: Option lists or single options; None and other values
            are skipped
        allow_url: True for overflow menus
        allow_mrkdwn: True for checkboxes and radio buttons

    Returns:
        At most one error per restriction, however many options break it
    """
    has_url = has_mrkdwn = False
    for opt in _iter_options(sources):
        has_url = has_url or opt.url is not None
        has_mrkdwn = has_mrkdwn or any(
            isinstance(text, MrkdwnText) for text in (opt.text, opt.description)
        )

    errors: List[ValidationErrorKind] = []
    if has_url and not allow_url:
        errors.append(URL_NOT_ALLOWED)
    if has_mrkdwn and not allow_mrkdwn:
        errors.append(MRKDWN_NOT_ALLOWED)
    return errors
