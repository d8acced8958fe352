# File: src/canvas_table/config/__init__.py

"""
Configuration package for canvas tables.
Provides the shared element style defaults, table geometry defaults and the
resize sizing policy.
"""

from .defaults import (
    FillStyle,
    StrokeStyle,
    StyleDefaults,
    TableDefaults,
    SizingPolicy,
    DEFAULT_ELEMENT_PROPS,
    TABLE_DEFAULTS,
    DEFAULT_SIZING_POLICY,
)

__all__ = [
    "FillStyle",
    "StrokeStyle",
    "StyleDefaults",
    "TableDefaults",
    "SizingPolicy",
    "DEFAULT_ELEMENT_PROPS",
    "TABLE_DEFAULTS",
    "DEFAULT_SIZING_POLICY",
]
