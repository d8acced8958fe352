# File: src/canvas_table/table/table_resize.py
"""
Resize adapter for table elements.

Rescales a table under an active resize gesture. Only x, y, width and height
change; rows, columns and cell text are never touched, so cells stretch with
the element and consumers re-derive ``width / columns`` and
``height / rows`` from the current size.

The handle being dragged decides which point of the original element stays
fixed (the anchor). The anchor is held fixed in scene space, rotation
included, so a rotated table grows away from the anchor along its own axes.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from ..config.defaults import DEFAULT_SIZING_POLICY, SizingPolicy
from ..core.element import DrawingElement
from ..core.exceptions import LockedElementError
from ..scene.scene_store import apply_updates
from ..utils.geometry import Point, vector_rotate_rads
from .table_element import TableElement, is_table_element, validate_table

logger = logging.getLogger(__name__)


class HandleDirection(Enum):
    """Compass-point resize handles."""

    N = "n"
    S = "s"
    E = "e"
    W = "w"
    NE = "ne"
    NW = "nw"
    SE = "se"
    SW = "sw"

    @property
    def is_edge(self) -> bool:
        return len(self.value) == 1

    @classmethod
    def from_value(cls, value: Any) -> "HandleDirection":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown handle direction: {value}. "
                f"Valid directions: {[m.value for m in cls]}"
            ) from None


# Anchors as fractions of the element's unrotated width/height
ANCHORS: Dict[str, Tuple[float, float]] = {
    "top-left": (0.0, 0.0),
    "top-right": (1.0, 0.0),
    "bottom-left": (0.0, 1.0),
    "bottom-right": (1.0, 1.0),
    "north-side": (0.5, 0.0),
    "south-side": (0.5, 1.0),
    "west-side": (0.0, 0.5),
    "east-side": (1.0, 0.5),
    "center": (0.5, 0.5),
}

_ASPECT_ANCHORS = {
    HandleDirection.N: "south-side",
    HandleDirection.E: "west-side",
    HandleDirection.S: "north-side",
    HandleDirection.W: "east-side",
    HandleDirection.NE: "bottom-left",
    HandleDirection.NW: "bottom-right",
    HandleDirection.SE: "top-left",
    HandleDirection.SW: "top-right",
}


def get_resize_anchor(
    handle: HandleDirection,
    maintain_aspect_ratio: bool,
    resize_from_center: bool,
) -> str:
    """Name of the point that stays fixed while dragging ``handle``."""
    if resize_from_center:
        return "center"
    if maintain_aspect_ratio:
        return _ASPECT_ANCHORS[handle]
    if handle in (HandleDirection.E, HandleDirection.SE, HandleDirection.S):
        return "top-left"
    if handle in (HandleDirection.N, HandleDirection.NW, HandleDirection.W):
        return "bottom-right"
    if handle is HandleDirection.NE:
        return "bottom-left"
    return "top-right"


def constrain_aspect_ratio(
    new_width: float,
    new_height: float,
    orig_width: float,
    orig_height: float,
    handle: HandleDirection,
) -> Tuple[float, float]:
    """Rescale a proposed size to the original width:height ratio.

    Edge handles drive one axis and the other follows it. Corner handles keep
    the scale factor furthest from 1 (growing or shrinking), so the dimension
    that moved less is the one rescaled.
    """
    width_ratio = abs(new_width) / orig_width
    height_ratio = abs(new_height) / orig_height

    if handle.is_edge:
        if handle in (HandleDirection.E, HandleDirection.W):
            return abs(new_width), orig_height * width_ratio
        return orig_width * height_ratio, abs(new_height)

    if abs(width_ratio - 1) >= abs(height_ratio - 1):
        ratio = width_ratio
    else:
        ratio = height_ratio
    return orig_width * ratio, orig_height * ratio


def get_resized_origin(
    orig_element: DrawingElement,
    new_width: float,
    new_height: float,
    anchor: str,
) -> Point:
    """Top-left corner that keeps ``anchor`` fixed on the canvas.

    The anchor's offset from the center scales with the size change; rotating
    that change by the element angle moves the center so the anchor's scene
    position is unchanged.
    """
    ax, ay = ANCHORS[anchor]
    prev_width = orig_element.width
    prev_height = orig_element.height

    shift = vector_rotate_rads(
        Point((ax - 0.5) * (prev_width - new_width),
              (ay - 0.5) * (prev_height - new_height)),
        orig_element.angle,
    )
    cx, cy = orig_element.center
    return Point(cx + shift.x - new_width / 2.0, cy + shift.y - new_height / 2.0)


def resize_table(
    new_width: float,
    new_height: float,
    element: TableElement,
    orig_element: TableElement,
    original_elements: Mapping[str, DrawingElement],
    handle_direction: Any,
    *,
    maintain_aspect_ratio: bool = False,
    resize_from_center: bool = False,
    scene: Optional[Any] = None,
    sizing: SizingPolicy = DEFAULT_SIZING_POLICY,
) -> None:
    """Apply a resize gesture to a table.

    Args:
        new_width: Proposed width from the pointer position. Negative values
            (dragging past the anchor) are taken as magnitudes.
        new_height: Proposed height.
        element: Table being resized; mutated in place.
        orig_element: Snapshot of ``element`` taken when the gesture began.
        original_elements: Pre-gesture snapshots of the whole selection,
            keyed by id.
        handle_direction: One of n, s, e, w, ne, nw, se, sw.
        maintain_aspect_ratio: Keep the original width:height ratio.
        resize_from_center: Keep the center fixed instead of the handle's
            opposite edge/corner.
        scene: Optional SceneStore; when given the update is applied through
            ``scene.mutate_element`` so listeners are notified.
        sizing: Minimum size policy.

    Raises:
        ValueError: If the element is not a table, the snapshot belongs to a
            different element, or the handle direction is unknown.
        LockedElementError: If the table is locked.
        DegenerateTableError: If the snapshot violates the grid invariants.
    """
    if not is_table_element(element):
        raise ValueError(f"resize_table expects a table element, got {element.type}")
    if orig_element.id != element.id:
        raise ValueError(
            f"Snapshot {orig_element.id} does not belong to element {element.id}"
        )
    if element.locked:
        raise LockedElementError(element.id)
    validate_table(orig_element)

    handle = HandleDirection.from_value(handle_direction)
    if element.id not in original_elements:
        logger.warning(
            "Table %s resized without a selection snapshot entry", element.id
        )

    width, height = abs(new_width), abs(new_height)
    if maintain_aspect_ratio:
        width, height = constrain_aspect_ratio(
            width, height, orig_element.width, orig_element.height, handle
        )
        width, height = sizing.clamp_keeping_ratio(
            width, height, orig_element.width, orig_element.height
        )
    else:
        width, height = sizing.clamp(width, height)

    anchor = get_resize_anchor(handle, maintain_aspect_ratio, resize_from_center)
    origin = get_resized_origin(orig_element, width, height, anchor)

    updates = {"x": origin.x, "y": origin.y, "width": width, "height": height}
    logger.debug(
        "Resizing table %s via %s (anchor %s): %sx%s -> %sx%s",
        element.id, handle.value, anchor,
        orig_element.width, orig_element.height, width, height,
    )
    if scene is not None:
        scene.mutate_element(element, updates)
    else:
        apply_updates(element, updates)
