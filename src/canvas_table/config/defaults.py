# File: src/canvas_table/config/defaults.py

"""
Default values for drawing elements and tables.

This module holds the shared style defaults every new element starts from,
the default table geometry, and the sizing policy that resize gestures are
floored by. All lengths are in scene units.
"""

from enum import Enum
from dataclasses import dataclass, asdict
from typing import Dict, Any


class FillStyle(Enum):
    """Valid fill styles for element backgrounds."""

    HACHURE = "hachure"
    CROSS_HATCH = "cross-hatch"
    SOLID = "solid"
    ZIGZAG = "zigzag"


class StrokeStyle(Enum):
    """Valid stroke styles for element outlines."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


@dataclass(frozen=True)
class StyleDefaults:
    """
    Style record applied to new elements unless overridden.

    Attributes:
        stroke_color: Outline color as a CSS color string
        background_color: Fill color as a CSS color string
        fill_style: One of the FillStyle values
        stroke_width: Outline width in scene units
        stroke_style: One of the StrokeStyle values
        roughness: Hand-drawn jitter level (0 = architect, 2 = cartoonist)
        opacity: 0-100
        locked: Whether new elements start locked
    """

    stroke_color: str = "#1e1e1e"
    background_color: str = "transparent"
    fill_style: str = FillStyle.SOLID.value
    stroke_width: float = 2
    stroke_style: str = StrokeStyle.SOLID.value
    roughness: int = 1
    opacity: int = 100
    locked: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return the defaults as a plain dict of element field values."""
        return asdict(self)


@dataclass(frozen=True)
class TableDefaults:
    """
    Geometry defaults for new tables.

    Attributes:
        dimension: Row/column count used when the requested one is invalid
        cell_width: Width of one column in scene units
        cell_height: Height of one row in scene units
    """

    dimension: int = 3
    cell_width: float = 100
    cell_height: float = 40

    def default_width(self, columns: int) -> float:
        return columns * self.cell_width

    def default_height(self, rows: int) -> float:
        return rows * self.cell_height


@dataclass(frozen=True)
class SizingPolicy:
    """
    Minimum element size enforced while resizing.

    Attributes:
        min_width: Smallest width a resize may produce
        min_height: Smallest height a resize may produce
    """

    min_width: float = 1.0
    min_height: float = 1.0

    def clamp(self, width: float, height: float) -> tuple:
        """Floor a (width, height) pair to the policy minimums."""
        return max(width, self.min_width), max(height, self.min_height)

    def clamp_keeping_ratio(
        self, width: float, height: float, orig_width: float, orig_height: float
    ) -> tuple:
        """Scale both axes up together until both minimums are met.

        A collapsed axis (0) has no ratio left, so the original size is
        scaled instead.
        """
        if width <= 0 or height <= 0:
            width, height = orig_width, orig_height
            factor = max(self.min_width / width, self.min_height / height)
        else:
            factor = max(self.min_width / width, self.min_height / height, 1.0)
        return width * factor, height * factor


DEFAULT_ELEMENT_PROPS = StyleDefaults()
TABLE_DEFAULTS = TableDefaults()
DEFAULT_SIZING_POLICY = SizingPolicy()
