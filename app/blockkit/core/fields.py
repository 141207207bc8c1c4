"""Builder field declarations.

Entities attach builder behaviour to their pydantic fields through
``Annotated`` metadata:

    class Header(BlockKitModel):
        type: Literal["header"] = "header"
        text: Annotated[
            Optional[PlainText],
            builder_field(required, text_object.max_150, convert=PlainText.from_str),
        ] = None

Fields without a ``builder_field`` marker still get setters and getters,
just without validators.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from blockkit.core.value import Validator


@dataclass(frozen=True)
class BuilderField:
    """Builder behaviour for one entity field.

    Attributes:
        validators: Validators run, in order, whenever the field is set
        push_item: Name of the builder method appending one item, for
            list fields
        convert: Callable turning a convenience input (e.g. a str) into
            the field type; applied per item for list fields
        private: Generate ``_set_x`` / ``_x`` instead of ``set_x`` / ``x``
    """

    validators: Tuple[Validator, ...] = ()
    push_item: Optional[str] = None
    convert: Optional[Callable[[Any], Any]] = None
    private: bool = False


def builder_field(
    *validators: Validator,
    push_item: Optional[str] = None,
    convert: Optional[Callable[[Any], Any]] = None,
    private: bool = False,
) -> BuilderField:
    return BuilderField(
        validators=tuple(validators),
        push_item=push_item,
        convert=convert,
        private=private,
    )
