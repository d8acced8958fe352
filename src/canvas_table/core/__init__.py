# File: src/canvas_table/core/__init__.py
"""
Core abstractions shared by all drawing elements.

This module provides:
- The element kind tag (ElementType)
- The common element record (DrawingElement) and id/seed generation
- The exception hierarchy
"""

from .element_types import ElementType

from .element import (
    DrawingElement,
    random_id,
    random_integer,
)

from .exceptions import (
    CanvasTableError,
    DegenerateTableError,
    CellIndexError,
    LockedElementError,
    ElementNotFoundError,
)

__all__ = [
    "ElementType",
    "DrawingElement",
    "random_id",
    "random_integer",
    "CanvasTableError",
    "DegenerateTableError",
    "CellIndexError",
    "LockedElementError",
    "ElementNotFoundError",
]
