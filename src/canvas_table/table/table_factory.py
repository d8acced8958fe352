# File: src/canvas_table/table/table_factory.py
"""
Table creation with fully resolved defaults.

Invalid row/column counts are corrected rather than rejected: anything that
is not a positive integer becomes the default dimension (3). Width and height
default to a fixed 100 x 40 unit cell, and style fields come from the shared
element style defaults unless overridden.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config.defaults import (
    DEFAULT_ELEMENT_PROPS,
    TABLE_DEFAULTS,
    StyleDefaults,
    TableDefaults,
)
from .table_element import TableElement, make_cells

logger = logging.getLogger(__name__)


def normalize_dimension(value: Any, default: int = TABLE_DEFAULTS.dimension) -> int:
    """Coerce a requested row/column count to a positive integer.

    Integers, integral floats and integer strings (``"4"``) are accepted.
    Anything else, including bools, NaN and values <= 0, yields ``default``.

    Args:
        value: Requested count.
        default: Fallback count.

    Returns:
        A positive integer.
    """
    count: Optional[int] = None
    if isinstance(value, bool):
        count = None
    elif isinstance(value, int):
        count = value
    elif isinstance(value, Real):
        if math.isfinite(value) and float(value).is_integer():
            count = int(value)
    elif isinstance(value, str):
        try:
            count = int(value.strip())
        except ValueError:
            count = None

    if count is None or count <= 0:
        logger.debug("Invalid table dimension %r, using %d", value, default)
        return default
    return count


def _positive_or_none(value: Any) -> Optional[float]:
    """Return ``value`` as a positive finite float, or None."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        return None
    return value


class TableOverrides(BaseModel):
    """Optional overrides accepted by create_table.

    Dimension fields are corrected in ``before`` validators so that bad
    counts and sizes fall back to defaults instead of failing validation.
    Style fields left as None are filled from the style defaults.
    """
    model_config = ConfigDict(extra="forbid")

    rows: int = TABLE_DEFAULTS.dimension
    columns: int = TABLE_DEFAULTS.dimension
    x: float = 0.0
    y: float = 0.0
    width: Optional[float] = None
    height: Optional[float] = None
    angle: float = 0.0

    id: Optional[str] = None
    seed: Optional[int] = None
    stroke_color: Optional[str] = None
    background_color: Optional[str] = None
    fill_style: Optional[str] = None
    stroke_width: Optional[float] = Field(default=None, gt=0)
    stroke_style: Optional[str] = None
    roughness: Optional[int] = Field(default=None, ge=0)
    opacity: Optional[int] = Field(default=None, ge=0, le=100)
    locked: Optional[bool] = None

    @field_validator("rows", "columns", mode="before")
    @classmethod
    def correct_dimension(cls, v: Any) -> int:
        return normalize_dimension(v)

    @field_validator("width", "height", mode="before")
    @classmethod
    def drop_invalid_size(cls, v: Any) -> Optional[float]:
        """Non-positive or non-numeric sizes fall back to the cell defaults."""
        return _positive_or_none(v)


def create_table(
    rows: Any = None,
    columns: Any = None,
    *,
    style_defaults: StyleDefaults = DEFAULT_ELEMENT_PROPS,
    table_defaults: TableDefaults = TABLE_DEFAULTS,
    **overrides: Any,
) -> TableElement:
    """Create a table element with every field resolved.

    Args:
        rows: Requested row count; invalid values become 3.
        columns: Requested column count; invalid values become 3.
        style_defaults: Style record used for fields not overridden.
        table_defaults: Unit cell size used for width/height defaults.
        **overrides: Any TableOverrides field (x, y, width, height, angle,
            style fields, locked, id, seed).

    Returns:
        A new TableElement whose cells are all empty strings.

    Raises:
        pydantic.ValidationError: For unknown override names or malformed
            style values.
    """
    options = TableOverrides(rows=rows, columns=columns, **overrides)

    width = options.width
    if width is None:
        width = table_defaults.default_width(options.columns)
    height = options.height
    if height is None:
        height = table_defaults.default_height(options.rows)

    style = style_defaults.to_dict()
    for name in style:
        value = getattr(options, name)
        if value is not None:
            style[name] = value

    extra = {}
    if options.id is not None:
        extra["id"] = options.id
    if options.seed is not None:
        extra["seed"] = options.seed

    table = TableElement(
        x=options.x,
        y=options.y,
        width=width,
        height=height,
        angle=options.angle,
        rows=options.rows,
        columns=options.columns,
        cells=make_cells(options.rows, options.columns),
        roundness=None,
        **style,
        **extra,
    )
    logger.debug(
        "Created table %s: %dx%d at (%s, %s) size %sx%s",
        table.id, table.rows, table.columns,
        table.x, table.y, table.width, table.height,
    )
    return table
