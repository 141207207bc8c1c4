"""Table block: rows of raw text or rich text cells."""

from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import model_serializer

from blockkit.core import BlockKitModel, builder_field
from blockkit.core import validators
from blockkit.rich_text import RichText


class RawText(BlockKitModel):
    """Plain string table cell."""

    type: Literal["raw_text"] = "raw_text"
    text: Annotated[Optional[str], builder_field(validators.required)] = None

    @classmethod
    def from_str(cls, value: Any) -> Any:
        """Wrap a str into a RawText cell; other values pass through."""
        if isinstance(value, str):
            return cls(text=value)
        return value


TableCell = Union[RawText, RichText]


class TableRow(BlockKitModel):
    """Row of up to 20 cells; serializes as a bare JSON array of its cells.

    Example:
        >>> row = TableRow.builder().cell("Data 1A").cell("Data 2A").build().or_raise()
        >>> row.to_dict()
        [{'type': 'raw_text', 'text': 'Data 1A'}, {'type': 'raw_text', 'text': 'Data 2A'}]
    """

    cells: Annotated[
        Optional[List[TableCell]],
        builder_field(
            validators.required,
            validators.lists.max_item_20,
            push_item="cell",
            convert=RawText.from_str,
        ),
    ] = None

    @model_serializer(mode="wrap")
    def serialize_cells(self, handler):
        return handler(self).get("cells", [])


class ColumnAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ColumnSetting(BlockKitModel):
    align: Optional[ColumnAlignment] = None
    is_wrapped: Optional[bool] = None


class Table(BlockKitModel):
    """Table block of up to 100 rows and 20 column settings."""

    type: Literal["table"] = "table"
    block_id: Annotated[Optional[str], builder_field(validators.text.max_255)] = None
    rows: Annotated[
        Optional[List[TableRow]],
        builder_field(
            validators.required,
            validators.lists.max_item_100,
            push_item="row",
        ),
    ] = None
    column_settings: Annotated[
        Optional[List[ColumnSetting]],
        builder_field(validators.lists.max_item_20, push_item="column_setting"),
    ] = None
