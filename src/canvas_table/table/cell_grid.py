# File: src/canvas_table/table/cell_grid.py
"""
Cell text and grid-shape operations for tables.

Reshape policy: changing rows/columns keeps the text of every cell whose
(row, col) still exists, drops cells beyond the new bounds and pads new cells
with empty strings. Width and height are left alone, so existing cells shrink
or grow to share the same element bounds.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..core.exceptions import CellIndexError, LockedElementError
from ..scene.scene_store import apply_updates
from .table_element import TableElement, validate_table
from .table_factory import normalize_dimension

logger = logging.getLogger(__name__)


def _apply(element: TableElement, updates: dict, scene: Optional[Any]) -> None:
    if scene is not None:
        scene.mutate_element(element, updates)
    else:
        apply_updates(element, updates)


def get_cell_text(element: TableElement, row: int, col: int) -> str:
    if not element.contains_cell(row, col):
        raise CellIndexError(row, col, element.rows, element.columns)
    return element.cells[row][col]


def set_cell_text(
    element: TableElement,
    row: int,
    col: int,
    text: str,
    scene: Optional[Any] = None,
) -> None:
    """Replace the text of one cell.

    The cell grid is copied rather than edited in place so that snapshots
    sharing the old grid are unaffected.

    Raises:
        CellIndexError: If (row, col) is outside the grid.
        LockedElementError: If the table is locked.
    """
    if element.locked:
        raise LockedElementError(element.id)
    if not element.contains_cell(row, col):
        raise CellIndexError(row, col, element.rows, element.columns)

    cells = [list(r) for r in element.cells]
    cells[row][col] = text
    _apply(element, {"cells": cells}, scene)


def reshape_cells(cells: List[List[str]], rows: int, columns: int) -> List[List[str]]:
    """Return a rows x columns copy of ``cells``, preserving text by index."""
    reshaped = []
    for r in range(rows):
        source = cells[r] if r < len(cells) else []
        reshaped.append([
            source[c] if c < len(source) else "" for c in range(columns)
        ])
    return reshaped


def set_table_dimensions(
    element: TableElement,
    rows: Any,
    columns: Any,
    scene: Optional[Any] = None,
) -> None:
    """Change the grid shape of a table.

    Invalid counts are corrected the same way as at creation.

    Raises:
        LockedElementError: If the table is locked.
    """
    if element.locked:
        raise LockedElementError(element.id)
    rows = normalize_dimension(rows)
    columns = normalize_dimension(columns)

    dropped = sum(
        1
        for r, row in enumerate(element.cells)
        for c, text in enumerate(row)
        if text and (r >= rows or c >= columns)
    )
    if dropped:
        logger.info(
            "Reshaping table %s to %dx%d drops %d non-empty cells",
            element.id, rows, columns, dropped,
        )

    _apply(
        element,
        {
            "rows": rows,
            "columns": columns,
            "cells": reshape_cells(element.cells, rows, columns),
        },
        scene,
    )
    validate_table(element)
