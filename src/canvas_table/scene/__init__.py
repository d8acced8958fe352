# File: src/canvas_table/scene/__init__.py
"""
Scene element store.

Holds elements keyed by id, applies patches and notifies listeners.
"""

from .scene_store import SceneStore, ChangeCallback, apply_updates

__all__ = [
    "SceneStore",
    "ChangeCallback",
    "apply_updates",
]
