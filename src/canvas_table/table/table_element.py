# File: src/canvas_table/table/table_element.py
"""
Table element data model.

A TableElement is the TABLE variant of DrawingElement: a rectilinear
rows x columns grid of text cells. Cell sizes are never stored; they are
derived from the current width/height so a resize stretches the grid
instead of reflowing it.

The EditingTableModel is the transient record naming the cell currently
targeted for text editing. It is produced by the hit-test and held in
application state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from ..core.element import DrawingElement
from ..core.element_types import ElementType
from ..core.exceptions import DegenerateTableError


def make_cells(rows: int, columns: int) -> List[List[str]]:
    """Return a rows x columns grid of empty strings."""
    return [["" for _ in range(columns)] for _ in range(rows)]


@dataclass
class TableElement(DrawingElement):
    """A grid of text cells drawn as a single canvas element.

    Attributes:
        rows: Number of grid rows (>= 1).
        columns: Number of grid columns (>= 1).
        cells: ``rows`` lists of ``columns`` strings; ``cells[r][c]`` is
            the text of cell (r, c).
    """
    type: ElementType = ElementType.TABLE
    rows: int = 3
    columns: int = 3
    cells: List[List[str]] = field(default_factory=list)

    def __post_init__(self):
        # Tables are strictly rectilinear
        self.type = ElementType.TABLE
        self.roundness = None
        if not self.cells:
            self.cells = make_cells(self.rows, self.columns)

    @property
    def cell_width(self) -> float:
        """Width of one column at the current element width."""
        return self.width / self.columns

    @property
    def cell_height(self) -> float:
        """Height of one row at the current element height."""
        return self.height / self.rows

    def contains_cell(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns


def is_table_element(element: Optional[DrawingElement]) -> bool:
    """True if ``element`` is a table."""
    return element is not None and element.type is ElementType.TABLE


def validate_table(element: TableElement) -> None:
    """Check the grid invariants of a table.

    Args:
        element: Table to check.

    Raises:
        DegenerateTableError: If rows/columns are below 1, the size is not
            positive, or the cell grid does not match rows x columns.
    """
    if element.rows < 1 or element.columns < 1:
        raise DegenerateTableError(
            f"Table {element.id} has {element.rows}x{element.columns} grid"
        )
    if not (element.width > 0 and element.height > 0):
        raise DegenerateTableError(
            f"Table {element.id} has non-positive size "
            f"{element.width}x{element.height}"
        )
    if len(element.cells) != element.rows:
        raise DegenerateTableError(
            f"Table {element.id} has {len(element.cells)} cell rows, "
            f"expected {element.rows}"
        )
    for index, row in enumerate(element.cells):
        if len(row) != element.columns:
            raise DegenerateTableError(
                f"Table {element.id} row {index} has {len(row)} cells, "
                f"expected {element.columns}"
            )


@dataclass(frozen=True)
class CellRef:
    """Grid address of a single cell."""
    row: int
    col: int


@dataclass(frozen=True)
class EditingTableModel:
    """The element and cell currently targeted for text editing."""
    element_id: str
    cell: CellRef

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to ``{"element_id": ..., "cell": {"row": ..., "col": ...}}``."""
        return asdict(self)
