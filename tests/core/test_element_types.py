# File: tests/core/test_element_types.py
"""Tests for ElementType and the common element record."""

import pytest

from src.canvas_table.core.element import DrawingElement, random_id
from src.canvas_table.core.element_types import ElementType
from src.canvas_table.table.table_element import TableElement


class TestElementType:

    def test_values(self):
        assert ElementType.TABLE.value == "table"
        assert ElementType.RECTANGLE.value == "rectangle"

    def test_str(self):
        assert str(ElementType.TABLE) == "table"

    def test_from_string_valid(self):
        assert ElementType.from_string("table") == ElementType.TABLE
        assert ElementType.from_string("TABLE") == ElementType.TABLE

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Unknown element type"):
            ElementType.from_string("hexagon")


class TestDrawingElement:

    def test_center(self):
        element = DrawingElement(x=10, y=20, width=100, height=40)
        assert element.center == (60, 40)

    def test_snapshot_is_independent(self):
        table = TableElement(width=300, height=120)
        copy = table.snapshot()
        table.cells[0][0] = "x"
        assert copy.cells[0][0] == ""

    def test_random_ids_differ(self):
        assert random_id() != random_id()


class TestTableElement:

    def test_type_and_roundness_forced(self):
        table = TableElement(
            type=ElementType.RECTANGLE, roundness={"type": 3}, width=10, height=10
        )
        assert table.type is ElementType.TABLE
        assert table.roundness is None

    def test_default_cells(self):
        table = TableElement(rows=2, columns=4, width=400, height=80)
        assert table.cells == [[""] * 4, [""] * 4]
        assert table.cell_width == 100
        assert table.cell_height == 40
