# File: src/canvas_table/core/element_types.py
"""
Drawing element type definitions.

Every element on the canvas carries the same capability record (position,
style, lifecycle) plus a kind tag. The tag selects the kind-specific fields
and behavior, e.g. tables add a rows x columns grid of text cells.
"""

from enum import Enum


class ElementType(Enum):
    """
    Shape kinds that can live in a scene.

    Attributes:
        RECTANGLE: Plain rectangle
        DIAMOND: Rhombus inscribed in the element bounds
        ELLIPSE: Ellipse inscribed in the element bounds
        TEXT: Free-standing text
        TABLE: Rectilinear grid of text cells
    """
    RECTANGLE = "rectangle"
    DIAMOND = "diamond"
    ELLIPSE = "ellipse"
    TEXT = "text"
    TABLE = "table"

    def __str__(self) -> str:
        """Return the string value for display."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "ElementType":
        """
        Create ElementType from string value.

        Args:
            value: String value (e.g., "table", "rectangle")

        Returns:
            Corresponding ElementType enum member

        Raises:
            ValueError: If value doesn't match any element type
        """
        value_lower = value.lower()
        for member in cls:
            if member.value == value_lower:
                return member
        raise ValueError(
            f"Unknown element type: {value}. "
            f"Valid types: {[m.value for m in cls]}"
        )
