"""Shape checks shared by the tree helpers and the engine."""

from collections.abc import Mapping
from typing import Any


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    # strings and bytes are values, not sequences of values
    return isinstance(value, (list, tuple))


def is_nil(value: Any) -> bool:
    return value is None


def is_empty(value: Any) -> bool:
    """True for None, the empty string, and empty mappings or sequences."""
    if value is None:
        return True
    if isinstance(value, str) or is_mapping(value) or is_sequence(value):
        return len(value) == 0
    return False
