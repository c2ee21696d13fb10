"""
Generic recursive helpers over nested mappings.

A "leaf" is any value that is not a non-empty mapping. Sequences are leaves:
message lists and raw arrays are never walked into.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..errors import ConfigurationError
from .shapes import is_empty, is_mapping


@dataclass(frozen=True)
class FlatProperty:
    """One leaf of a flattened tree."""

    path: str
    value: Any


def diff_props(reference: Mapping, candidate: Mapping) -> Dict[Any, Any]:
    """
    Return the keys of ``candidate`` that ``reference`` does not have.

    Keys present in both are recursed into only when both values are
    mappings; a nested difference is kept only if it is non-empty. Values are
    never compared, so a key whose type differs between the two is not
    reported.

    Args:
        reference: The tree of known keys (typically a schema skeleton)
        candidate: The tree to check (typically raw input)

    Returns:
        A new mapping holding only the additional keys and their values
    """
    if reference is None:
        raise ConfigurationError("No first object specified.")
    if not is_mapping(reference):
        raise ConfigurationError("First value is not a valid object.")
    if candidate is None:
        raise ConfigurationError("No second object specified.")
    if not is_mapping(candidate):
        raise ConfigurationError("Second value is not a valid object.")

    properties: Dict[Any, Any] = {}

    for key, value in candidate.items():
        if key not in reference:
            properties[key] = value
            continue

        if is_mapping(reference[key]) and is_mapping(value):
            nested = diff_props(reference[key], value)
            if not is_empty(nested):
                properties[key] = nested

    return properties


def filter_props(predicate: Callable[[Any], bool]) -> Callable[[Mapping], Dict]:
    """
    Build a pruning function keeping only leaves that satisfy ``predicate``.

    Branches whose filtered result is empty are dropped from their parent.
    """
    if predicate is None:
        raise ConfigurationError("No predicate specified.")
    if not callable(predicate):
        raise ConfigurationError("Predicate is not a function.")

    def prune(tree: Mapping) -> Dict[Any, Any]:
        if tree is None:
            raise ConfigurationError("No object specified.")
        if not is_mapping(tree):
            raise ConfigurationError("Value is not a valid object.")

        result: Dict[Any, Any] = {}
        for key, value in tree.items():
            if is_mapping(value):
                nested = prune(value)
                if not is_empty(nested):
                    result[key] = nested
                continue

            if predicate(value):
                result[key] = value

        return result

    return prune


def all_props(predicate: Callable[[Any], bool]) -> Callable[[Mapping], bool]:
    """Build a check that every leaf of a tree satisfies ``predicate``."""
    if predicate is None:
        raise ConfigurationError("No predicate specified.")
    if not callable(predicate):
        raise ConfigurationError("Predicate is not a function.")

    def check(tree: Mapping) -> bool:
        if tree is None:
            raise ConfigurationError("No object specified.")
        if not is_mapping(tree):
            raise ConfigurationError("Value is not a valid object.")

        return all(
            check(value) if is_mapping(value) else bool(predicate(value))
            for value in tree.values()
        )

    return check


def flatten_props(
    tree: Mapping,
    path: Optional[str] = None,
    result: Optional[List[FlatProperty]] = None,
) -> List[FlatProperty]:
    """
    Flatten a nested mapping into dot-joined paths.

    {"foo": {"bar": "value"}} -> [FlatProperty(path="foo.bar", value="value")]
    """
    if tree is None:
        raise ConfigurationError("No object specified.")
    if not is_mapping(tree):
        raise ConfigurationError("Value is not a valid object.")

    if result is None:
        result = []

    for key, value in tree.items():
        key_path = f"{path}.{key}" if path else str(key)
        if is_mapping(value) and value:
            flatten_props(value, key_path, result)
            continue

        result.append(FlatProperty(path=key_path, value=value))

    return result


def set_props(value_or_fn: Any) -> Callable[[Mapping], Dict]:
    """
    Build a function that rebuilds a tree with every leaf replaced.

    ``value_or_fn`` is either a constant or a callable receiving the leaf key.
    An empty mapping is treated as a leaf.
    """
    stamp = value_or_fn if callable(value_or_fn) else (lambda key: value_or_fn)

    def rebuild(tree: Mapping) -> Dict[Any, Any]:
        if tree is None:
            raise ConfigurationError("No object specified.")
        if not is_mapping(tree):
            raise ConfigurationError("Value is not a valid object.")

        result: Dict[Any, Any] = {}
        for key, value in tree.items():
            if is_mapping(value) and value:
                result[key] = rebuild(value)
            else:
                result[key] = stamp(key)

        return result

    return rebuild
