"""Unit tests for the Table block.

Tests cover:
- Rows serialized as bare arrays of cells
- Raw text and rich text cells
- Row, cell and column setting limits
"""

import pytest

from blockkit import (
    ColumnAlignment,
    ColumnSetting,
    RawText,
    RichText,
    Table,
    TableRow,
)
from blockkit.errors import MaxArraySize, Required


@pytest.fixture
def make_row():
    def _make(*cells):
        builder = TableRow.builder()
        for cell in cells:
            builder = builder.cell(cell)
        return builder.build().or_raise()

    return _make


@pytest.mark.unit
class TestTableRow:
    """Test suite for TableRow."""

    def test_row_serializes_as_array(self, make_row):
        row = make_row("Data 1A", "Data 2A")

        assert row.to_dict() == [
            {"type": "raw_text", "text": "Data 1A"},
            {"type": "raw_text", "text": "Data 2A"},
        ]

    def test_str_cell_becomes_raw_text(self, make_row):
        row = make_row("plain")

        assert row.cells == [RawText(text="plain")]

    def test_rich_text_cell(self, make_row, make_rich_text_section):
        rich = RichText.builder().element(make_rich_text_section("bold")).build().or_raise()

        row = make_row(rich)

        assert row.to_dict()[0]["type"] == "rich_text"

    def test_cells_are_required(self):
        result = TableRow.builder().build()

        assert result.errors.field("cells") == (Required(),)

    def test_too_many_cells(self):
        builder = TableRow.builder()
        for i in range(21):
            builder = builder.cell(str(i))

        assert builder.build().errors.field("cells") == (MaxArraySize(20),)


@pytest.mark.unit
class TestTable:
    """Test suite for Table."""

    def test_serialize(self, make_row):
        setting = (
            ColumnSetting.builder()
            .align(ColumnAlignment.RIGHT)
            .is_wrapped(True)
            .build()
            .or_raise()
        )

        table = (
            Table.builder()
            .row(make_row("Header A", "Header B"))
            .row(make_row("Data 1A", "Data 1B"))
            .column_setting(setting)
            .build()
            .or_raise()
        )

        assert table.to_dict() == {
            "type": "table",
            "rows": [
                [
                    {"type": "raw_text", "text": "Header A"},
                    {"type": "raw_text", "text": "Header B"},
                ],
                [
                    {"type": "raw_text", "text": "Data 1A"},
                    {"type": "raw_text", "text": "Data 1B"},
                ],
            ],
            "column_settings": [{"align": "right", "is_wrapped": True}],
        }

    def test_json_has_bare_row_arrays(self, make_row):
        table = Table.builder().row(make_row("x")).build().or_raise()

        assert table.to_json() == '{"type":"table","rows":[[{"type":"raw_text","text":"x"}]]}'

    def test_rows_are_required(self):
        result = Table.builder().build()

        assert result.errors.field("rows") == (Required(),)

    def test_too_many_rows(self, make_row):
        row = make_row("x")
        builder = Table.builder()
        for _ in range(101):
            builder = builder.row(row)

        assert builder.build().errors.field("rows") == (MaxArraySize(100),)

    def test_too_many_column_settings(self, make_row):
        builder = Table.builder().row(make_row("x"))
        for _ in range(21):
            builder = builder.column_setting(ColumnSetting())

        assert builder.build().errors.field("column_settings") == (MaxArraySize(20),)
