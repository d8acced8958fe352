# File: src/canvas_table/scene/scene_store.py
"""
Element store for a scene.

Elements are kept in insertion order and keyed by id. All changes go through
mutate_element so that versions are bumped and change listeners notified;
nothing in the library relies on observing in-place attribute writes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..core.element import DrawingElement
from ..core.exceptions import ElementNotFoundError

logger = logging.getLogger(__name__)

# Listener signature: (element, applied_updates). Updates is empty for adds.
ChangeCallback = Callable[[DrawingElement, Dict[str, Any]], None]


def apply_updates(element: DrawingElement, updates: Dict[str, Any]) -> bool:
    """Write ``updates`` onto ``element`` and bump its version if anything changed.

    Args:
        element: Element to patch in place.
        updates: Field name -> new value.

    Returns:
        True if at least one field changed.

    Raises:
        AttributeError: If an update names a field the element does not have.
    """
    known = element.field_names()
    changed = False
    for name, value in updates.items():
        if name not in known:
            raise AttributeError(
                f"{type(element).__name__} has no field '{name}'"
            )
        if getattr(element, name) != value:
            setattr(element, name, value)
            changed = True
    if changed:
        element.bump_version()
    return changed


class SceneStore:
    """In-memory element store with change notification."""

    def __init__(self, elements: Optional[List[DrawingElement]] = None):
        self._elements: Dict[str, DrawingElement] = {}
        self._callbacks: List[ChangeCallback] = []
        for element in elements or []:
            self.add_element(element)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[DrawingElement]:
        return iter(list(self._elements.values()))

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._elements

    def on_change(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that unregisters the listener.
        """
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def _notify(self, element: DrawingElement, updates: Dict[str, Any]) -> None:
        for callback in list(self._callbacks):
            callback(element, updates)

    def add_element(self, element: DrawingElement) -> DrawingElement:
        if element.id in self._elements:
            raise ValueError(f"Duplicate element id: {element.id}")
        self._elements[element.id] = element
        logger.debug("Added %s element %s", element.type, element.id)
        self._notify(element, {})
        return element

    def get_element(self, element_id: str) -> DrawingElement:
        try:
            return self._elements[element_id]
        except KeyError:
            raise ElementNotFoundError(element_id) from None

    def get_elements_including_deleted(self) -> List[DrawingElement]:
        return list(self._elements.values())

    def get_non_deleted_elements(self) -> List[DrawingElement]:
        return [e for e in self._elements.values() if not e.is_deleted]

    def get_non_deleted_elements_map(self) -> Dict[str, DrawingElement]:
        return {e.id: e for e in self._elements.values() if not e.is_deleted}

    def mutate_element(self, element: DrawingElement, updates: Dict[str, Any]) -> bool:
        """Patch an element of this scene and notify listeners.

        Args:
            element: Element to patch; must belong to this scene.
            updates: Field name -> new value.

        Returns:
            True if the element changed.

        Raises:
            ElementNotFoundError: If the element is not in the scene.
        """
        if self._elements.get(element.id) is not element:
            raise ElementNotFoundError(element.id)
        changed = apply_updates(element, updates)
        if changed:
            self._notify(element, dict(updates))
        return changed

    def patch_element(self, element_id: str, **updates: Any) -> DrawingElement:
        """Patch an element by id."""
        element = self.get_element(element_id)
        self.mutate_element(element, updates)
        return element

    def delete_element(self, element_id: str) -> DrawingElement:
        """Soft-delete an element; it stays retrievable by id."""
        element = self.get_element(element_id)
        self.mutate_element(element, {"is_deleted": True})
        logger.debug("Deleted element %s", element_id)
        return element

    def snapshot_elements(self, element_ids: List[str]) -> Dict[str, DrawingElement]:
        """Deep copies of the given elements keyed by id (pre-gesture state)."""
        return {
            element_id: self.get_element(element_id).snapshot()
            for element_id in element_ids
        }
