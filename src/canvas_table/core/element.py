# File: src/canvas_table/core/element.py
"""
Common capability record shared by every drawing element.

Each shape kind is a dataclass deriving from DrawingElement and tagged with
an ElementType. The base carries position, style and lifecycle fields; id and
seed generation live here too so every kind draws them the same way.
"""

from __future__ import annotations

import copy
import random
import uuid
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from .element_types import ElementType

# Seeds and nonces are drawn from the positive 31-bit range
_MAX_SEED = 2 ** 31 - 1


def random_id() -> str:
    """Return a new unique element id."""
    return uuid.uuid4().hex


def random_integer() -> int:
    """Return a random integer suitable for seeds and version nonces."""
    return random.randint(1, _MAX_SEED)


@dataclass
class DrawingElement:
    """Base record for all scene elements.

    Attributes:
        id: Unique element identifier.
        type: Shape kind tag.
        x: Left edge of the unrotated bounds in scene coordinates.
        y: Top edge of the unrotated bounds in scene coordinates.
        width: Unrotated width.
        height: Unrotated height.
        angle: Clockwise rotation about the element center, in radians.
        stroke_color, background_color, fill_style, stroke_width,
        stroke_style, roughness, opacity: Style attributes.
        roundness: Corner rounding descriptor, None for sharp corners.
        seed: Stable random seed used by the renderer.
        version: Incremented on every mutation.
        version_nonce: Random value regenerated on every mutation.
        is_deleted: Soft-delete flag.
        locked: Locked elements ignore editing interactions.
    """
    id: str = field(default_factory=random_id)
    type: ElementType = ElementType.RECTANGLE
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    angle: float = 0.0
    stroke_color: str = "#1e1e1e"
    background_color: str = "transparent"
    fill_style: str = "solid"
    stroke_width: float = 2
    stroke_style: str = "solid"
    roughness: int = 1
    opacity: int = 100
    roundness: Optional[Dict[str, Any]] = None
    seed: int = field(default_factory=random_integer)
    version: int = 1
    version_nonce: int = field(default_factory=random_integer)
    is_deleted: bool = False
    locked: bool = False

    @property
    def center(self) -> tuple:
        """Center of the element bounds, which is also its rotation pivot."""
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def bump_version(self) -> None:
        """Mark the element as changed."""
        self.version += 1
        self.version_nonce = random_integer()

    def snapshot(self) -> "DrawingElement":
        """Return an independent deep copy, e.g. the pre-gesture state."""
        return copy.deepcopy(self)

    @classmethod
    def field_names(cls) -> set:
        return {f.name for f in fields(cls)}
