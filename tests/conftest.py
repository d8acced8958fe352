# tests/conftest.py
import sys
import os
import math

# Add project root to path so tests can import src.canvas_table
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from src.canvas_table.scene.scene_store import SceneStore
from src.canvas_table.table.table_factory import create_table


@pytest.fixture
def table_3x3():
    """300x150 table at (100, 100): cells are 100 wide, 50 tall."""
    return create_table(3, 3, x=100, y=100, width=300, height=150, angle=0)


@pytest.fixture
def rotated_2x2():
    """200x100 table at (100, 100) rotated a quarter turn about (200, 150)."""
    return create_table(
        2, 2, x=100, y=100, width=200, height=100, angle=math.pi / 2
    )


@pytest.fixture
def scene():
    return SceneStore()
