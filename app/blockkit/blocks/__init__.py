"""Layout blocks and the ``Block`` slot accepting any of them."""

from typing import Union

from blockkit.blocks.actions import Actions, ActionsElement
from blockkit.blocks.context import Context, ContextElement
from blockkit.blocks.context_actions import ContextActions, ContextActionsElement
from blockkit.blocks.divider import Divider
from blockkit.blocks.file import File, FileSource
from blockkit.blocks.header import Header
from blockkit.blocks.image import Image
from blockkit.blocks.input import Input, InputElement
from blockkit.blocks.markdown import Markdown
from blockkit.blocks.section import Accessory, Section
from blockkit.blocks.table import (
    ColumnAlignment,
    ColumnSetting,
    RawText,
    Table,
    TableCell,
    TableRow,
)
from blockkit.blocks.video import Video
from blockkit.rich_text import RichText

Block = Union[
    Actions,
    Context,
    ContextActions,
    Divider,
    File,
    Header,
    Image,
    Input,
    Markdown,
    RichText,
    Section,
    Table,
    Video,
]

__all__ = [
    "Accessory",
    "Actions",
    "ActionsElement",
    "Block",
    "ColumnAlignment",
    "ColumnSetting",
    "Context",
    "ContextActions",
    "ContextActionsElement",
    "ContextElement",
    "Divider",
    "File",
    "FileSource",
    "Header",
    "Image",
    "Input",
    "InputElement",
    "Markdown",
    "RawText",
    "RichText",
    "Section",
    "Table",
    "TableCell",
    "TableRow",
    "Video",
]
