# File: src/canvas_table/table/__init__.py
"""
Table element module.

Creates rows x columns grids of text cells, maps scene points to cells for
any rotation, and rescales tables without changing their grid.
"""

from .table_element import (
    TableElement,
    CellRef,
    EditingTableModel,
    make_cells,
    is_table_element,
    validate_table,
)
from .table_factory import TableOverrides, create_table, normalize_dimension
from .cell_hit_test import (
    hit_test_cell,
    is_point_inside_table,
    get_cell_bounds,
    get_cell_center,
    scene_to_local,
    local_to_scene,
)
from .table_resize import (
    HandleDirection,
    resize_table,
    get_resize_anchor,
    constrain_aspect_ratio,
)
from .cell_grid import (
    get_cell_text,
    set_cell_text,
    set_table_dimensions,
    reshape_cells,
)

__all__ = [
    "TableElement",
    "CellRef",
    "EditingTableModel",
    "make_cells",
    "is_table_element",
    "validate_table",
    "TableOverrides",
    "create_table",
    "normalize_dimension",
    "hit_test_cell",
    "is_point_inside_table",
    "get_cell_bounds",
    "get_cell_center",
    "scene_to_local",
    "local_to_scene",
    "HandleDirection",
    "resize_table",
    "get_resize_anchor",
    "constrain_aspect_ratio",
    "get_cell_text",
    "set_cell_text",
    "set_table_dimensions",
    "reshape_cells",
]
