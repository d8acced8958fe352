# File: src/canvas_table/actions/editing.py
"""
Cell text editing flow.

A double-click hit-tests the table and stores the resulting editing model in
app state; committing writes the edited text to that cell and clears the
model. Cancelling or deselecting clears it without writing.
"""

from __future__ import annotations

import logging

from ..core.element import DrawingElement
from ..scene.scene_store import SceneStore
from ..table.cell_grid import set_cell_text
from ..table.cell_hit_test import hit_test_cell
from ..table.table_element import is_table_element
from .app_state import AppState

logger = logging.getLogger(__name__)


def begin_cell_edit(
    app_state: AppState,
    element: DrawingElement,
    scene_x: float,
    scene_y: float,
) -> AppState:
    """Target the cell under a scene point for editing.

    Non-table elements, locked tables and points outside the grid clear
    any previous editing model.
    """
    model = None
    if is_table_element(element):
        model = hit_test_cell(element, scene_x, scene_y)
    if model is not None:
        logger.debug(
            "Editing table %s cell (%d, %d)",
            model.element_id, model.cell.row, model.cell.col,
        )
    return app_state.update(editing_table_model=model)


def commit_cell_edit(app_state: AppState, scene: SceneStore, text: str) -> AppState:
    """Write ``text`` into the cell being edited and end the edit.

    Returns:
        App state with the editing model cleared. A state with no editing
        model is returned unchanged.

    Raises:
        ElementNotFoundError: If the edited table is no longer in the scene.
    """
    model = app_state.editing_table_model
    if model is None:
        return app_state

    table = scene.get_element(model.element_id)
    if table.is_deleted:
        logger.warning("Dropping edit for deleted table %s", table.id)
    else:
        set_cell_text(table, model.cell.row, model.cell.col, text, scene=scene)
    return app_state.update(editing_table_model=None)


def cancel_cell_edit(app_state: AppState) -> AppState:
    return app_state.update(editing_table_model=None)


def clear_selection(app_state: AppState) -> AppState:
    """Deselect everything; an in-progress cell edit is discarded."""
    return app_state.update(
        selected_element_ids=frozenset(), editing_table_model=None
    )
