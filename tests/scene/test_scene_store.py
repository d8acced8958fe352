# File: tests/scene/test_scene_store.py
"""Tests for the scene element store."""

import pytest

from src.canvas_table.core.element import DrawingElement
from src.canvas_table.core.exceptions import ElementNotFoundError
from src.canvas_table.scene.scene_store import SceneStore, apply_updates
from src.canvas_table.table.table_factory import create_table


class TestSceneStore:

    def test_add_and_get(self, scene):
        table = create_table(2, 2)
        scene.add_element(table)
        assert scene.get_element(table.id) is table
        assert table.id in scene
        assert len(scene) == 1

    def test_initial_elements(self):
        a, b = create_table(1, 1), DrawingElement(width=10, height=10)
        store = SceneStore([a, b])
        assert [e.id for e in store] == [a.id, b.id]

    def test_missing_element(self, scene):
        with pytest.raises(ElementNotFoundError, match="missing"):
            scene.get_element("missing")
        with pytest.raises(KeyError):
            scene.get_element("missing")

    def test_duplicate_id(self, scene):
        table = create_table(2, 2)
        scene.add_element(table)
        with pytest.raises(ValueError, match="Duplicate"):
            scene.add_element(table)

    def test_mutate_notifies(self, scene):
        table = scene.add_element(create_table(2, 2))
        seen = []
        scene.on_change(lambda element, updates: seen.append((element.id, updates)))

        assert scene.mutate_element(table, {"x": 40})
        assert table.x == 40
        assert seen == [(table.id, {"x": 40})]

    def test_noop_mutation_is_silent(self, scene):
        table = scene.add_element(create_table(2, 2, x=5))
        version = table.version
        seen = []
        scene.on_change(lambda element, updates: seen.append(updates))
        assert not scene.mutate_element(table, {"x": 5})
        assert seen == []
        assert table.version == version

    def test_unsubscribe(self, scene):
        table = scene.add_element(create_table(2, 2))
        seen = []
        unsubscribe = scene.on_change(lambda element, updates: seen.append(updates))
        unsubscribe()
        scene.patch_element(table.id, y=12)
        assert seen == []
        assert table.y == 12

    def test_mutate_foreign_element(self, scene):
        with pytest.raises(ElementNotFoundError):
            scene.mutate_element(create_table(2, 2), {"x": 1})

    def test_unknown_field(self, scene):
        table = scene.add_element(create_table(2, 2))
        with pytest.raises(AttributeError, match="no field"):
            scene.mutate_element(table, {"colour": "red"})

    def test_delete_is_soft(self, scene):
        table = scene.add_element(create_table(2, 2))
        other = scene.add_element(create_table(1, 1))
        scene.delete_element(table.id)
        assert table.is_deleted
        assert scene.get_element(table.id) is table
        assert scene.get_non_deleted_elements() == [other]
        assert list(scene.get_non_deleted_elements_map()) == [other.id]
        assert len(scene.get_elements_including_deleted()) == 2

    def test_snapshot_elements_are_copies(self, scene):
        table = scene.add_element(create_table(2, 2))
        snapshots = scene.snapshot_elements([table.id])
        table.cells[0][0] = "changed"
        assert snapshots[table.id].cells[0][0] == ""
        assert snapshots[table.id].id == table.id


class TestApplyUpdates:

    def test_bumps_version_on_change(self):
        element = DrawingElement(width=10, height=10)
        version = element.version
        assert apply_updates(element, {"width": 20})
        assert element.version == version + 1
        assert element.width == 20
