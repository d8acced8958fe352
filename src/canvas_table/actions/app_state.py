# File: src/canvas_table/actions/app_state.py
"""
Application state consumed and produced by table actions.

Holds the "current item" style the user picked in the toolbar, the active
tool, the selection and the cell being edited. Actions return a new AppState
rather than mutating the one they were given.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from ..config.defaults import DEFAULT_ELEMENT_PROPS
from ..core.element import DrawingElement
from ..table.table_element import EditingTableModel


@dataclass(frozen=True)
class AppState:
    """Snapshot of interaction state.

    Attributes:
        current_item_*: Style applied to newly created elements.
        active_tool: Name of the selected toolbar tool.
        selected_element_ids: Ids of selected elements.
        editing_table_model: Cell targeted for text editing, if any.
    """
    current_item_stroke_color: str = DEFAULT_ELEMENT_PROPS.stroke_color
    current_item_background_color: str = DEFAULT_ELEMENT_PROPS.background_color
    current_item_fill_style: str = DEFAULT_ELEMENT_PROPS.fill_style
    current_item_stroke_width: float = DEFAULT_ELEMENT_PROPS.stroke_width
    current_item_stroke_style: str = DEFAULT_ELEMENT_PROPS.stroke_style
    current_item_roughness: int = DEFAULT_ELEMENT_PROPS.roughness
    current_item_opacity: int = DEFAULT_ELEMENT_PROPS.opacity
    active_tool: str = "selection"
    selected_element_ids: frozenset = field(default_factory=frozenset)
    editing_table_model: Optional[EditingTableModel] = None

    def current_item_style(self) -> Dict[str, Any]:
        """Element style fields taken from the current item settings."""
        return {
            "stroke_color": self.current_item_stroke_color,
            "background_color": self.current_item_background_color,
            "fill_style": self.current_item_fill_style,
            "stroke_width": self.current_item_stroke_width,
            "stroke_style": self.current_item_stroke_style,
            "roughness": self.current_item_roughness,
            "opacity": self.current_item_opacity,
        }

    def update(self, **changes: Any) -> "AppState":
        return replace(self, **changes)


@dataclass
class ActionResult:
    """Outcome of an action: new elements, next app state, undo capture flag."""
    elements: List[DrawingElement]
    app_state: AppState
    capture_update: bool = True
