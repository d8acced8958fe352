# File: tests/table/test_cell_grid.py
"""Tests for cell text and grid reshape operations."""

import pytest

from src.canvas_table.core.exceptions import (
    CellIndexError,
    DegenerateTableError,
    LockedElementError,
)
from src.canvas_table.table.cell_grid import (
    get_cell_text,
    reshape_cells,
    set_cell_text,
    set_table_dimensions,
)
from src.canvas_table.table.table_element import validate_table
from src.canvas_table.table.table_factory import create_table


@pytest.fixture
def filled_table():
    """3x3 table where cell (r, c) holds "r,c"."""
    table = create_table(3, 3)
    for r in range(3):
        for c in range(3):
            set_cell_text(table, r, c, f"{r},{c}")
    return table


class TestCellText:

    def test_set_and_get(self):
        table = create_table(2, 3)
        set_cell_text(table, 1, 2, "total")
        assert get_cell_text(table, 1, 2) == "total"
        assert table.cells[1][2] == "total"
        assert table.cells[0][2] == ""

    def test_set_bumps_version(self):
        table = create_table(2, 2)
        version = table.version
        set_cell_text(table, 0, 0, "a")
        assert table.version == version + 1

    def test_set_leaves_snapshot_alone(self):
        table = create_table(2, 2)
        snapshot = table.snapshot()
        set_cell_text(table, 0, 1, "changed")
        assert snapshot.cells[0][1] == ""

    @pytest.mark.parametrize("row,col", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_range(self, row, col):
        table = create_table(2, 2)
        with pytest.raises(CellIndexError):
            set_cell_text(table, row, col, "x")
        with pytest.raises(IndexError):
            get_cell_text(table, row, col)

    def test_locked(self):
        table = create_table(2, 2, locked=True)
        with pytest.raises(LockedElementError):
            set_cell_text(table, 0, 0, "x")

    def test_through_scene(self, scene):
        table = scene.add_element(create_table(2, 2))
        seen = []
        scene.on_change(lambda element, updates: seen.append(element.id))
        set_cell_text(table, 1, 1, "x", scene=scene)
        assert seen == [table.id]


class TestReshape:
    """Reshaping keeps text by index, truncates and pads with empty strings."""

    def test_grow_pads(self, filled_table):
        set_table_dimensions(filled_table, 4, 5)
        assert (filled_table.rows, filled_table.columns) == (4, 5)
        assert filled_table.cells[2][2] == "2,2"
        assert filled_table.cells[0][4] == ""
        assert filled_table.cells[3] == ["", "", "", "", ""]
        validate_table(filled_table)

    def test_shrink_truncates(self, filled_table):
        set_table_dimensions(filled_table, 2, 1)
        assert filled_table.cells == [["0,0"], ["1,0"]]

    def test_size_unchanged(self, filled_table):
        width, height = filled_table.width, filled_table.height
        set_table_dimensions(filled_table, 6, 6)
        assert (filled_table.width, filled_table.height) == (width, height)
        assert filled_table.cell_width == pytest.approx(width / 6)

    def test_invalid_dimensions_default(self, filled_table):
        set_table_dimensions(filled_table, 0, "x")
        assert (filled_table.rows, filled_table.columns) == (3, 3)
        assert filled_table.cells[1][1] == "1,1"

    def test_locked(self, filled_table):
        filled_table.locked = True
        with pytest.raises(LockedElementError):
            set_table_dimensions(filled_table, 2, 2)

    def test_reshape_helper_copies(self):
        cells = [["a", "b"]]
        reshaped = reshape_cells(cells, 1, 2)
        reshaped[0][0] = "z"
        assert cells == [["a", "b"]]


class TestValidateTable:

    def test_mismatched_cells(self):
        table = create_table(2, 2)
        table.cells.append(["", ""])
        with pytest.raises(DegenerateTableError):
            validate_table(table)

    def test_ragged_row(self):
        table = create_table(2, 2)
        table.cells[1] = [""]
        with pytest.raises(DegenerateTableError, match="row 1"):
            validate_table(table)

    def test_negative_height(self):
        table = create_table(2, 2)
        table.height = -1
        with pytest.raises(ValueError):
            validate_table(table)
