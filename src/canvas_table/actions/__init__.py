# File: src/canvas_table/actions/__init__.py
"""
User-facing table actions: insertion and cell text editing.
"""

from .app_state import AppState, ActionResult
from .action_table import ACTION_NAME, action_insert_table, is_table_tool_active
from .editing import (
    begin_cell_edit,
    commit_cell_edit,
    cancel_cell_edit,
    clear_selection,
)

__all__ = [
    "AppState",
    "ActionResult",
    "ACTION_NAME",
    "action_insert_table",
    "is_table_tool_active",
    "begin_cell_edit",
    "commit_cell_edit",
    "cancel_cell_edit",
    "clear_selection",
]
