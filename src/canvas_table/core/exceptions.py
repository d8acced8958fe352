# File: src/canvas_table/core/exceptions.py
"""
Exception types raised by the canvas table core.

Invalid user input (bad rows/columns, clicks outside the grid, clicks on a
locked table) is corrected or answered with ``None``. The exceptions here
cover contract violations by callers.
"""


class CanvasTableError(Exception):
    """Base class for all canvas table errors."""


class DegenerateTableError(CanvasTableError, ValueError):
    """Raised when a table's grid invariants no longer hold.

    Cell sizes are undefined for zero rows/columns or a non-positive
    width/height, so geometry operations refuse to run.
    """


class CellIndexError(CanvasTableError, IndexError):
    """Raised when a (row, col) pair does not address a cell of the table."""

    def __init__(self, row: int, col: int, rows: int, columns: int):
        self.row = row
        self.col = col
        super().__init__(
            f"Cell ({row}, {col}) is outside a {rows}x{columns} table"
        )


class LockedElementError(CanvasTableError):
    """Raised when a mutating operation targets a locked element."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        super().__init__(f"Element {element_id} is locked")


class ElementNotFoundError(CanvasTableError, KeyError):
    """Raised when an element id is not present in the scene."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        super().__init__(element_id)

    def __str__(self) -> str:
        return f"Element not found: {self.element_id}"
