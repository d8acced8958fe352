# File: src/canvas_table/actions/action_table.py
"""
Toolbar action that inserts a new table.

The dimension prompt and the viewport-to-scene conversion belong to the UI;
this action receives already-parsed row/column counts and the scene point to
center the table on.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config.defaults import TABLE_DEFAULTS
from ..scene.scene_store import SceneStore
from ..table.table_factory import create_table, normalize_dimension
from .app_state import ActionResult, AppState

logger = logging.getLogger(__name__)

ACTION_NAME = "table"


def action_insert_table(
    app_state: AppState,
    scene: SceneStore,
    center_x: float,
    center_y: float,
    rows: Any = TABLE_DEFAULTS.dimension,
    columns: Any = TABLE_DEFAULTS.dimension,
) -> ActionResult:
    """Create a table centered on a scene point and select it.

    Args:
        app_state: Current state; its current item style is applied.
        scene: Scene the table is added to.
        center_x: Scene X-coordinate of the table center.
        center_y: Scene Y-coordinate of the table center.
        rows: Requested rows; invalid values become 3.
        columns: Requested columns; invalid values become 3.

    Returns:
        ActionResult with the new table, the table tool active and the
        table as the only selected element.
    """
    rows = normalize_dimension(rows)
    columns = normalize_dimension(columns)
    width = TABLE_DEFAULTS.default_width(columns)
    height = TABLE_DEFAULTS.default_height(rows)

    table = create_table(
        rows,
        columns,
        x=center_x - width / 2.0,
        y=center_y - height / 2.0,
        width=width,
        height=height,
        locked=False,
        **app_state.current_item_style(),
    )
    scene.add_element(table)
    logger.info("Inserted %dx%d table %s", rows, columns, table.id)

    next_state = app_state.update(
        active_tool=ACTION_NAME,
        selected_element_ids=frozenset({table.id}),
        editing_table_model=None,
    )
    return ActionResult(elements=[table], app_state=next_state, capture_update=True)


def is_table_tool_active(app_state: AppState) -> bool:
    return app_state.active_tool == ACTION_NAME
