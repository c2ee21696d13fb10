"""Wrappers deciding how a predicate treats missing values."""

from typing import Any, Callable

from ...core.shapes import is_nil
from ...errors import ConfigurationError

Predicate = Callable[[Any], bool]


def is_required(predicate: Predicate) -> Predicate:
    """
    Fail on None or the empty string, otherwise defer to ``predicate``.

    Empty lists and mappings count as present: ``is_required(is_array)([])``
    holds.
    """
    if predicate is None:
        raise ConfigurationError("No predicate provided.")

    def check(value: Any) -> bool:
        if is_nil(value) or value == "":
            return False
        return bool(predicate(value))

    return check


def is_optional(predicate: Predicate) -> Predicate:
    """Pass on None, otherwise defer to ``predicate``."""
    if predicate is None:
        raise ConfigurationError("No predicate provided.")

    def check(value: Any) -> bool:
        if is_nil(value):
            return True
        return bool(predicate(value))

    return check
