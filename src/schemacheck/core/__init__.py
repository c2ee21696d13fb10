"""Schema-independent helpers over nested mappings."""

from .merge import merge_positionally, merge_trees, merge_with_arrays
from .props import (
    FlatProperty,
    all_props,
    diff_props,
    filter_props,
    flatten_props,
    set_props,
)
from .shapes import is_empty, is_mapping, is_nil, is_sequence

__all__ = [
    # Merge
    "merge_trees",
    "merge_with_arrays",
    "merge_positionally",
    # Tree walks
    "FlatProperty",
    "all_props",
    "diff_props",
    "filter_props",
    "flatten_props",
    "set_props",
    # Shapes
    "is_empty",
    "is_mapping",
    "is_nil",
    "is_sequence",
]
